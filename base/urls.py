# base/urls.py
from django.urls import path

from .views import HomeView, OrganizationCreateView, MemberListView

app_name = "base"

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("organization/new/", OrganizationCreateView.as_view(), name="organization_create"),
    path("organization/members/", MemberListView.as_view(), name="member_list"),
]
