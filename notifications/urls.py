# notifications/urls.py
from django.urls import path

from .views import NotificationListView, NotificationMarkAllReadView, NotificationRespondView

app_name = "notifications"

urlpatterns = [
    path("", NotificationListView.as_view(), name="list"),
    path("read-all/", NotificationMarkAllReadView.as_view(), name="read_all"),
    path("<int:pk>/read/", NotificationRespondView.as_view(action="read"), name="read"),
    path("<int:pk>/dismiss/", NotificationRespondView.as_view(action="dismiss"), name="dismiss"),
]
