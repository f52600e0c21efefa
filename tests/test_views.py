import pytest
from django.urls import reverse

from feedback.models import FeedbackCampaign
from notifications.models import NotificationResponse
from notifications.services import create_system_notification
from tasks.models import Task
from tests.helpers import make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def login(client):
    def _login(user):
        client.force_login(user)
        return client
    return _login


# =============================================================================
# Person overview gate
# =============================================================================

class TestPersonOverview:
    def test_manager_sees_report(self, login, alice_user, carol):
        response = login(alice_user).get(reverse("people:overview", args=[carol.pk]))
        assert response.status_code == 200
        assert response.context["person"] == carol
        assert [p.name for p in response.context["manager_chain"]] == ["Bob", "Alice"]

    def test_self(self, login, carol_user, carol):
        assert login(carol_user).get(reverse("people:overview", args=[carol.pk])).status_code == 200

    def test_report_gets_403(self, login, carol_user, carol, alice):
        assert login(carol_user).get(reverse("people:overview", args=[alice.pk])).status_code == 403

    def test_unknown_person_404(self, login, carol_user, carol):
        assert login(carol_user).get(reverse("people:overview", args=[999999])).status_code == 404

    def test_other_organization_404(self, login, carol_user, outsider):
        assert login(carol_user).get(reverse("people:overview", args=[outsider.pk])).status_code == 404

    def test_user_without_person_redirected(self, login, admin_user, carol):
        response = login(admin_user).get(reverse("people:overview", args=[carol.pk]))
        assert response.status_code == 302
        assert response.url == reverse("people:list")

    def test_anonymous_redirected_to_login(self, client, carol):
        response = client.get(reverse("people:overview", args=[carol.pk]))
        assert response.status_code == 302
        assert response.url.startswith("/accounts/login/")


class TestPeopleList:
    def test_grouped(self, login, bob_user, carol, dave):
        response = login(bob_user).get(reverse("people:list"), {"group": "status"})
        assert response.status_code == 200
        assert response.context["grouping"] == "status"
        assert [g["label"] for g in response.context["groups"]] == ["Active"]

    def test_unknown_grouping_falls_back(self, login, bob_user, carol):
        response = login(bob_user).get(reverse("people:list"), {"group": "bogus"})
        assert response.context["grouping"] == "manager"

    def test_without_organization(self, login, db):
        response = login(make_user("new@example.test")).get(reverse("people:list"))
        assert response.status_code == 302
        assert response.url == reverse("base:organization_create")


class TestPersonEdit:
    def test_report_cannot_edit_manager(self, login, carol_user, bob):
        assert login(carol_user).get(reverse("people:edit", args=[bob.pk])).status_code == 403

    def test_report_cannot_edit_own_record(self, login, carol_user, carol, bob):
        response = login(carol_user).post(
            reverse("people:edit", args=[carol.pk]),
            {"name": "Carol", "email": carol.email, "manager": "", "status": "terminated"},
        )
        assert response.status_code == 403
        carol.refresh_from_db()
        assert carol.manager_id == bob.pk
        assert carol.status == "active"
        assert login(bob.user).get(reverse("people:overview", args=[carol.pk])).status_code == 200

    def test_manager_cannot_edit_report(self, login, bob_user, carol):
        assert login(bob_user).get(reverse("people:edit", args=[carol.pk])).status_code == 403

    def test_admin_edits_manager(self, login, admin_user, carol, alice):
        response = login(admin_user).post(
            reverse("people:edit", args=[carol.pk]),
            {"name": "Carol", "email": carol.email, "manager": alice.pk, "status": "active"},
        )
        assert response.status_code == 302
        carol.refresh_from_db()
        assert carol.manager_id == alice.pk

    def test_manager_edit_rejects_cycle(self, login, alice_user, alice, bob, carol):
        response = login(alice_user).post(
            reverse("people:edit", args=[alice.pk]),
            {"name": "Alice", "email": alice.email, "manager": carol.pk, "status": "active"},
        )
        assert response.status_code == 200
        assert "manager" in response.context["form"].errors


# =============================================================================
# Feedback campaigns
# =============================================================================

class TestCampaignPages:
    def test_manager_lists_own_campaigns(self, login, bob_user, alice_user, carol, org):
        mine = FeedbackCampaign.all_objects.create(
            organization=org, target_person=carol, user=bob_user, name="Q1",
            start_date="2026-01-01", end_date="2026-01-31",
        )
        FeedbackCampaign.all_objects.create(
            organization=org, target_person=carol, user=alice_user, name="Alice's",
            start_date="2026-01-01", end_date="2026-01-31",
        )
        response = login(bob_user).get(reverse("feedback:person_campaigns", args=[carol.pk]))
        assert response.status_code == 200
        assert list(response.context["campaigns"]) == [mine]

    def test_report_denied(self, login, carol_user, carol, bob):
        assert login(carol_user).get(reverse("feedback:person_campaigns", args=[bob.pk])).status_code == 403

    def test_create(self, login, bob_user, carol):
        response = login(bob_user).post(
            reverse("feedback:campaign_create", args=[carol.pk]),
            {
                "name": "Mid-year",
                "status": "draft",
                "start_date": "2026-06-01",
                "end_date": "2026-06-30",
                "invitees": "peer@acme.test\nPeer@acme.test, lead@acme.test",
            },
        )
        assert response.status_code == 302
        campaign = FeedbackCampaign.all_objects.get(name="Mid-year")
        assert campaign.user_id == bob_user.pk
        assert campaign.invitee_emails == ["peer@acme.test", "lead@acme.test"]


# =============================================================================
# Tasks
# =============================================================================

class TestTaskViews:
    @pytest.fixture
    def task(self, org, bob_user, carol):
        return Task.all_objects.create(organization=org, title="Ship it", created_by=bob_user, assignee=carol)

    def test_my_tasks(self, login, carol_user, task):
        response = login(carol_user).get(reverse("tasks:list"))
        assert list(response.context["tasks"]) == [task]

    def test_detail_forbidden_for_stranger(self, login, org, task):
        stranger = make_user("eve@acme.test", org)
        assert login(stranger).get(reverse("tasks:detail", args=[task.pk])).status_code == 403

    def test_detail_other_organization_404(self, login, outsider_user, task):
        assert login(outsider_user).get(reverse("tasks:detail", args=[task.pk])).status_code == 404

    def test_create_with_priority_marker(self, login, bob_user, bob):
        response = login(bob_user).post(
            reverse("tasks:create"),
            {"title": "Patch servers !p1", "status": "todo", "priority": "3"},
        )
        assert response.status_code == 302
        task = Task.all_objects.get(created_by=bob_user)
        assert task.title == "Patch servers"
        assert task.priority == 1


# =============================================================================
# Notifications
# =============================================================================

class TestNotificationViews:
    def test_list_and_read(self, login, org, bob_user):
        notification = create_system_notification(organization_id=org.pk, title="All hands", message="Friday")
        client = login(bob_user)
        assert client.get(reverse("notifications:list")).context["total_count"] == 1

        response = client.post(reverse("notifications:read", args=[notification.pk]), {"next": "https://evil.test/"})
        assert response.status_code == 302
        assert response.url == reverse("notifications:list")
        assert NotificationResponse.objects.get(user=bob_user).status == NotificationResponse.Status.READ

    def test_foreign_notification_404(self, login, other_org, bob_user):
        foreign = create_system_notification(organization_id=other_org.pk, title="x", message="y")
        assert login(bob_user).post(reverse("notifications:dismiss", args=[foreign.pk])).status_code == 404


# =============================================================================
# Organization onboarding
# =============================================================================

class TestOnboarding:
    def test_home_without_organization(self, login, db):
        response = login(make_user("fresh@example.test")).get(reverse("base:home"))
        assert response.status_code == 302
        assert response.url == reverse("base:organization_create")

    def test_create_organization(self, login, db):
        user = make_user("founder@example.test")
        response = login(user).post(reverse("base:organization_create"), {"name": "Initech", "slug": ""})
        assert response.status_code == 302
        user.refresh_from_db()
        assert user.organization.slug == "initech"

    def test_members_admin_only(self, login, bob_user, alice_user):
        assert login(bob_user).get(reverse("base:member_list")).status_code == 403
        assert login(alice_user).get(reverse("base:member_list")).status_code == 200
