"""
URL configuration for mpath project.
"""
# mpath/urls.py
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include

urlpatterns = [
    path("", include(("base.urls", "base"), namespace="base")),
    path("people/", include(("people.urls", "people"), namespace="people")),
    path("tasks/", include(("tasks.urls", "tasks"), namespace="tasks")),
    path("feedback/", include(("feedback.urls", "feedback"), namespace="feedback")),
    path("notifications/", include(("notifications.urls", "notifications"), namespace="notifications")),

    path("accounts/login/", auth_views.LoginView.as_view(), name="login"),
    path("accounts/logout/", auth_views.LogoutView.as_view(), name="logout"),

    # لوحة الإدارة
    path("admin/", admin.site.urls),
]
