# file: notifications/access.py

from django.db.models import Q

from .models import NotificationResponse


def notification_access_q(user) -> Q:
    """
    user = me  OR  (organization = my organization AND user IS NULL)

    Without an organization only the user-specific branch applies.
    """
    mine = Q(user_id=user.pk)
    if not user.organization_id:
        return mine
    return mine | Q(organization_id=user.organization_id, user__isnull=True)


def handled_notification_ids(user):
    """Ids (subquery) of notifications the user already read or dismissed."""
    return (
        NotificationResponse.objects
        .filter(
            user_id=user.pk,
            status__in=(NotificationResponse.Status.READ, NotificationResponse.Status.DISMISSED),
        )
        .values("notification_id")
    )
