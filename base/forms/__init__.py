# base/forms/__init__.py
from .organization_forms import OrganizationCreateForm, MemberRoleForm

__all__ = ["OrganizationCreateForm", "MemberRoleForm"]
