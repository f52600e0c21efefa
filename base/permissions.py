# base/permissions.py
"""
Action permission registry.

Every app registers a check per action id ("task.edit", "report.access", ...)
with :func:`register`. Views and services ask a single question through
:func:`get_action_permission`; an action nobody registered is denied.

A check receives ``(user, obj_id)`` and returns a bool. ``obj_id`` is None
for list/create style actions.
"""

import logging
from typing import Callable, Dict, Optional

from .access import is_admin_or_owner, get_person_id

logger = logging.getLogger(__name__)

PermissionCheck = Callable[[object, Optional[int]], bool]

_REGISTRY: Dict[str, PermissionCheck] = {}


def register(*actions: str):
    def decorator(check: PermissionCheck) -> PermissionCheck:
        for action in actions:
            if action in _REGISTRY and _REGISTRY[action] is not check:
                raise ValueError(f"Permission action already registered: {action}")
            _REGISTRY[action] = check
        return check
    return decorator


def registered_actions():
    return sorted(_REGISTRY)


def get_action_permission(user, action: str, obj_id: Optional[int] = None) -> bool:
    check = _REGISTRY.get(action)
    if check is None:
        logger.error("Unknown action id given: %s", action)
        return False
    if not user or not getattr(user, "is_authenticated", False):
        return False
    return bool(check(user, obj_id))


# ============================================================
# Shared checks used by several apps
# ============================================================

def member_with_person_or_admin(user, obj_id=None) -> bool:
    """create-style actions: admins, or anyone linked to a person."""
    if not user.organization_id:
        return False
    return is_admin_or_owner(user) or get_person_id(user) is not None


def organization_member(user, obj_id=None) -> bool:
    return bool(user.organization_id)


def organization_admin(user, obj_id=None) -> bool:
    return bool(user.organization_id) and is_admin_or_owner(user)


# ============================================================
# Organization-wide actions
# ============================================================

register("initiative.create")(member_with_person_or_admin)
register("initiative.edit", "initiative.delete")(organization_admin)
register("initiative.view")(organization_member)

register("report.access")(organization_admin)
