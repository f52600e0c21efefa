# base/org_context.py
from __future__ import annotations
from typing import Optional
from contextvars import ContextVar

# -------------------------------------------------
# Context Vars (فعّالة لكل request/thread)
# -------------------------------------------------
_current_organization_id: ContextVar[Optional[int]] = ContextVar("current_organization_id", default=None)
_current_user_id: ContextVar[Optional[int]] = ContextVar("current_user_id", default=None)


def set_organization(organization_id: Optional[int]) -> None:
    """اضبط المؤسسة النشطة في السياق الحالي."""
    _current_organization_id.set(organization_id)


def clear_organization() -> None:
    """امسح قيم السياق (تُستدعى في نهاية الطلب داخل الميدلوير)."""
    _current_organization_id.set(None)
    _current_user_id.set(None)


def get_organization_id(request=None) -> Optional[int]:
    if request is not None and hasattr(request, "organization_id"):
        return request.organization_id
    return _current_organization_id.get()


def set_current_user_id(user_id: Optional[int]) -> None:
    _current_user_id.set(user_id)


def get_current_user_id() -> Optional[int]:
    return _current_user_id.get()


def bootstrap_from_request(request) -> None:
    """
    Resolve the active organization for this request.

    A user works inside exactly one organization at a time
    (``user.organization``). Anonymous users and users without an
    organization get an empty context, so scoped managers return
    unfiltered querysets and views must check ``request.organization_id``.
    """
    user = getattr(request, "user", None)
    if user is not None and getattr(user, "is_authenticated", False):
        set_organization(getattr(user, "organization_id", None))
        set_current_user_id(user.pk)
    else:
        set_organization(None)
        set_current_user_id(None)
