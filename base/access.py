# file: base/access.py
"""
Role helpers shared by every app.

The role of a user is the role of their membership in the user's current
organization (``user.organization``). A user with an organization but no
membership row is treated as a plain ``USER``.
"""

from __future__ import annotations
from typing import Optional

from django.apps import apps

from .models import OrganizationMember

Role = OrganizationMember.Role


# ============================================================
# Helper functions
# ============================================================

def get_user_role(user) -> Optional[str]:
    if not user or not getattr(user, "is_authenticated", False):
        return None
    if not user.organization_id:
        return None
    role = (
        OrganizationMember.objects
        .filter(user_id=user.pk, organization_id=user.organization_id)
        .values_list("role", flat=True)
        .first()
    )
    return role or Role.USER


def get_role_in_organization(user, organization_id) -> Optional[str]:
    """الدور في مؤسسة محددة (None إن لم يكن عضوًا)."""
    if not user or not organization_id:
        return None
    return (
        OrganizationMember.objects
        .filter(user_id=user.pk, organization_id=organization_id)
        .values_list("role", flat=True)
        .first()
    )


def is_admin(user) -> bool:
    return get_user_role(user) == Role.ADMIN


def is_owner(user) -> bool:
    """Owners have admin rights and are the billable user."""
    return get_user_role(user) == Role.OWNER


def is_admin_or_owner(user) -> bool:
    return get_user_role(user) in (Role.ADMIN, Role.OWNER)


def is_plain_user(user) -> bool:
    return get_user_role(user) == Role.USER


def is_admin_or_owner_in_organization(user, organization_id) -> bool:
    return get_role_in_organization(user, organization_id) in (Role.ADMIN, Role.OWNER)


def can_access_organization(user, organization_id) -> bool:
    if not user or not getattr(user, "is_authenticated", False):
        return False
    if not organization_id:
        return False
    return user.organization_id == organization_id


def get_person(user):
    """
    Retrieve the Person record linked to this user inside the user's
    current organization.
    """
    if not user or not getattr(user, "is_authenticated", False):
        return None
    if not user.organization_id:
        return None
    Person = apps.get_model("people", "Person")
    return (
        Person.all_objects
        .filter(user_id=user.pk, organization_id=user.organization_id)
        .first()
    )


def get_person_id(user):
    person = get_person(user)
    return person.pk if person else None
