# notifications/services.py
import logging
import math
from datetime import timedelta
from typing import Optional

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import Prefetch
from django.utils import timezone

from base.models import User
from .access import handled_notification_ids, notification_access_q
from .models import Notification, NotificationResponse

logger = logging.getLogger(__name__)


# ============================================================
# Creation
# ============================================================

def create_notification(
    actor,
    *,
    title: str,
    message: str,
    type: str = Notification.Type.INFO,
    user: Optional[User] = None,
    organization_id=None,
    metadata: Optional[dict] = None,
) -> Notification:
    """
    Created on behalf of ``actor``. With ``user`` the notification is
    personal, without it the whole organization sees it. Neither may point
    outside the actor's organization.
    """
    if not actor or not actor.is_authenticated:
        raise PermissionDenied("Authentication required.")
    if not actor.organization_id:
        raise PermissionDenied("User must belong to an organization to create notifications.")
    if organization_id and organization_id != actor.organization_id:
        raise PermissionDenied("Cannot create notification for a different organization.")
    if user is not None and user.organization_id != actor.organization_id:
        raise PermissionDenied("Cannot create notification for a user in a different organization.")
    if type not in Notification.Type.values:
        raise ValidationError({"type": f"Unknown notification type: {type}"})

    notification = Notification.all_objects.create(
        organization_id=actor.organization_id,
        user=user,
        title=title,
        message=message,
        type=type,
        metadata=metadata or {},
    )
    logger.info("Notification %s created by user %s", notification.pk, actor.pk)
    return notification


def create_system_notification(
    *,
    organization_id,
    title: str,
    message: str,
    type: str = Notification.Type.INFO,
    user_id=None,
    metadata: Optional[dict] = None,
    deduplication_key: Optional[str] = None,
) -> Notification:
    """Background jobs and rules; no acting user."""
    notification = Notification.all_objects.create(
        organization_id=organization_id,
        user_id=user_id,
        title=title,
        message=message,
        type=type,
        metadata=metadata or {},
        deduplication_key=deduplication_key,
    )
    logger.debug("System notification %s (%s) for user %s", notification.pk, deduplication_key, user_id)
    return notification


def should_send_notification(user_id, organization_id, deduplication_key: str, hours: Optional[int] = None) -> bool:
    """لا تُكرر نفس الإشعار لنفس المستخدم خلال المدة المحددة."""
    if hours is None:
        hours = getattr(settings, "NOTIFICATION_DEDUP_HOURS", 24)
    since = timezone.now() - timedelta(hours=hours)
    return not Notification.all_objects.filter(
        user_id=user_id,
        organization_id=organization_id,
        deduplication_key=deduplication_key,
        created_at__gte=since,
    ).exists()


# ============================================================
# Reading
# ============================================================

def _require_organization(user):
    if not user or not user.is_authenticated:
        raise PermissionDenied("Authentication required.")
    if not user.organization_id:
        raise PermissionDenied("User must belong to an organization to view notifications.")


def _visible(user):
    """
    Visible notifications, newest first, each with ``.response`` set to the
    user's own response (or None).
    """
    qs = (
        Notification.all_objects
        .filter(notification_access_q(user))
        .prefetch_related(
            Prefetch(
                "responses",
                queryset=NotificationResponse.objects.filter(user_id=user.pk),
                to_attr="my_responses",
            )
        )
        .order_by("-created_at", "-id")
    )
    return qs


def _with_response(notifications):
    items = list(notifications)
    for n in items:
        n.response = n.my_responses[0] if n.my_responses else None
    return items


def get_user_notifications(user, limit: int = 10):
    _require_organization(user)
    return _with_response(_visible(user)[:limit])


def get_unread_notifications(user, limit: int = 5):
    _require_organization(user)
    qs = _visible(user).exclude(pk__in=handled_notification_ids(user))
    return _with_response(qs[:limit])


def get_unread_notification_count(user) -> int:
    if not user or not user.is_authenticated or not user.organization_id:
        return 0
    return (
        Notification.all_objects
        .filter(notification_access_q(user))
        .exclude(pk__in=handled_notification_ids(user))
        .count()
    )


def get_all_user_notifications(user, page: int = 1, limit: int = 20) -> dict:
    _require_organization(user)
    page = max(int(page), 1)
    limit = max(int(limit), 1)
    offset = (page - 1) * limit

    total = Notification.all_objects.filter(notification_access_q(user)).count()
    return {
        "notifications": _with_response(_visible(user)[offset:offset + limit]),
        "total_count": total,
        "total_pages": math.ceil(total / limit),
        "current_page": page,
    }


# ============================================================
# Responses
# ============================================================

def _get_accessible(user, notification_id) -> Notification:
    """Raises Notification.DoesNotExist when missing or not visible."""
    if not user or not user.is_authenticated:
        raise PermissionDenied("Authentication required.")
    return Notification.all_objects.filter(notification_access_q(user)).get(pk=notification_id)


@transaction.atomic
def _respond(user, notification_id, status: str) -> NotificationResponse:
    notification = _get_accessible(user, notification_id)
    now = timezone.now()
    defaults = {"status": status}
    if status == NotificationResponse.Status.READ:
        defaults["read_at"] = now
    elif status == NotificationResponse.Status.DISMISSED:
        defaults["dismissed_at"] = now

    response, _ = NotificationResponse.objects.update_or_create(
        notification=notification, user=user, defaults=defaults,
    )
    return response


def mark_notification_as_read(user, notification_id) -> NotificationResponse:
    return _respond(user, notification_id, NotificationResponse.Status.READ)


def mark_notification_as_dismissed(user, notification_id) -> NotificationResponse:
    return _respond(user, notification_id, NotificationResponse.Status.DISMISSED)


def mark_all_as_read(user) -> int:
    _require_organization(user)
    ids = list(
        Notification.all_objects
        .filter(notification_access_q(user))
        .exclude(pk__in=handled_notification_ids(user))
        .values_list("pk", flat=True)
    )
    for notification_id in ids:
        mark_notification_as_read(user, notification_id)
    return len(ids)
