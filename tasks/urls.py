# tasks/urls.py
from django.urls import path

from .views import MyTasksView, TaskDetailView, TaskCreateView, TaskUpdateView, TaskDeleteView

app_name = "tasks"

urlpatterns = [
    path("", MyTasksView.as_view(), name="list"),
    path("new/", TaskCreateView.as_view(), name="create"),
    path("<int:pk>/", TaskDetailView.as_view(), name="detail"),
    path("<int:pk>/edit/", TaskUpdateView.as_view(), name="edit"),
    path("<int:pk>/delete/", TaskDeleteView.as_view(), name="delete"),
]
