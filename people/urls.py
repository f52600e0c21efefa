# people/urls.py
from django.urls import path

from .views import (
    PersonListView, PersonOverviewView, PersonCreateView, PersonUpdateView,
    OneOnOneListView, OneOnOneCreateView,
)

app_name = "people"

urlpatterns = [
    path("", PersonListView.as_view(), name="list"),
    path("new/", PersonCreateView.as_view(), name="create"),
    path("<int:pk>/", PersonOverviewView.as_view(), name="overview"),
    path("<int:pk>/edit/", PersonUpdateView.as_view(), name="edit"),

    path("oneonones/", OneOnOneListView.as_view(), name="one_on_one_list"),
    path("oneonones/new/", OneOnOneCreateView.as_view(), name="one_on_one_create"),
]
