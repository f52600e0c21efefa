from datetime import timedelta

import pytest
from django.core.exceptions import PermissionDenied
from django.utils import timezone

from notifications.access import notification_access_q
from notifications.models import Notification, NotificationResponse
from notifications.services import (
    create_notification,
    create_system_notification,
    get_all_user_notifications,
    get_unread_notification_count,
    get_unread_notifications,
    get_user_notifications,
    mark_all_as_read,
    mark_notification_as_dismissed,
    mark_notification_as_read,
    should_send_notification,
)
from tests.helpers import make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def inbox(org, other_org, alice_user, bob_user, outsider_user):
    """bob: one personal, one broadcast; noise for alice and globex."""
    return {
        "personal": create_system_notification(organization_id=org.pk, user_id=bob_user.pk, title="For Bob", message="hi"),
        "broadcast": create_system_notification(organization_id=org.pk, title="All hands", message="Friday"),
        "alice": create_system_notification(organization_id=org.pk, user_id=alice_user.pk, title="For Alice", message="hi"),
        "foreign": create_system_notification(organization_id=other_org.pk, title="Globex news", message="x"),
    }


class TestNotificationPredicate:
    def test_personal_and_broadcast(self, inbox, bob_user):
        visible = set(Notification.all_objects.filter(notification_access_q(bob_user)))
        assert visible == {inbox["personal"], inbox["broadcast"]}

    def test_other_organization_broadcast_hidden(self, inbox, outsider_user):
        visible = set(Notification.all_objects.filter(notification_access_q(outsider_user)))
        assert visible == {inbox["foreign"]}


class TestCreateNotification:
    def test_cross_organization_target_rejected(self, alice_user, outsider_user):
        with pytest.raises(PermissionDenied):
            create_notification(alice_user, title="x", message="y", user=outsider_user)

    def test_cross_organization_id_rejected(self, alice_user, other_org):
        with pytest.raises(PermissionDenied):
            create_notification(alice_user, title="x", message="y", organization_id=other_org.pk)

    def test_broadcast_in_own_organization(self, alice_user, org):
        notification = create_notification(alice_user, title="Hello", message="team")
        assert notification.organization_id == org.pk
        assert notification.is_broadcast


class TestReading:
    def test_user_notifications_newest_first(self, inbox, bob_user):
        items = get_user_notifications(bob_user)
        assert [n.title for n in items] == ["All hands", "For Bob"]
        assert all(n.response is None for n in items)

    def test_unread_count_and_read(self, inbox, bob_user):
        assert get_unread_notification_count(bob_user) == 2
        response = mark_notification_as_read(bob_user, inbox["broadcast"].pk)
        assert response.status == NotificationResponse.Status.READ
        assert response.read_at is not None
        assert get_unread_notification_count(bob_user) == 1
        assert [n.title for n in get_unread_notifications(bob_user)] == ["For Bob"]

    def test_read_state_is_per_user(self, inbox, bob_user, alice_user):
        mark_notification_as_read(bob_user, inbox["broadcast"].pk)
        assert get_unread_notification_count(alice_user) == 2

    def test_dismiss_upserts_response(self, inbox, bob_user):
        mark_notification_as_read(bob_user, inbox["personal"].pk)
        mark_notification_as_dismissed(bob_user, inbox["personal"].pk)
        responses = NotificationResponse.objects.filter(user=bob_user, notification=inbox["personal"])
        assert responses.count() == 1
        assert responses.get().status == NotificationResponse.Status.DISMISSED

    def test_inaccessible_notification(self, inbox, bob_user):
        with pytest.raises(Notification.DoesNotExist):
            mark_notification_as_read(bob_user, inbox["alice"].pk)
        with pytest.raises(Notification.DoesNotExist):
            mark_notification_as_dismissed(bob_user, inbox["foreign"].pk)

    def test_mark_all_as_read(self, inbox, bob_user):
        assert mark_all_as_read(bob_user) == 2
        assert get_unread_notification_count(bob_user) == 0

    def test_pagination(self, org, bob_user):
        for i in range(5):
            create_system_notification(organization_id=org.pk, user_id=bob_user.pk, title=f"n{i}", message="m")
        page = get_all_user_notifications(bob_user, page=2, limit=2)
        assert page["total_count"] == 5
        assert page["total_pages"] == 3
        assert page["current_page"] == 2
        assert [n.title for n in page["notifications"]] == ["n2", "n1"]

    def test_requires_organization(self, db):
        with pytest.raises(PermissionDenied):
            get_user_notifications(make_user("solo@example.test"))


class TestDeduplication:
    def test_recent_key_blocks(self, org, bob_user):
        create_system_notification(
            organization_id=org.pk, user_id=bob_user.pk, title="t", message="m", deduplication_key="k1",
        )
        assert not should_send_notification(bob_user.pk, org.pk, "k1")
        assert should_send_notification(bob_user.pk, org.pk, "k2")

    def test_old_key_allows(self, org, bob_user):
        notification = create_system_notification(
            organization_id=org.pk, user_id=bob_user.pk, title="t", message="m", deduplication_key="k1",
        )
        Notification.all_objects.filter(pk=notification.pk).update(created_at=timezone.now() - timedelta(hours=25))
        assert should_send_notification(bob_user.pk, org.pk, "k1")
