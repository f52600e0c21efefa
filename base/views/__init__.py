# base/views/__init__.py
from .dashboard import HomeView
from .organization_views import OrganizationCreateView, MemberListView

__all__ = ["HomeView", "OrganizationCreateView", "MemberListView"]
