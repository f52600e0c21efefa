import logging

import pytest

from base.access import (
    can_access_organization,
    get_person,
    get_user_role,
    is_admin,
    is_admin_or_owner,
    is_owner,
    is_plain_user,
)
from base.models import OrganizationMember, User
from base.permissions import get_action_permission, register, registered_actions

pytestmark = pytest.mark.django_db

Role = OrganizationMember.Role


class TestRoles:
    def test_owner(self, alice_user):
        assert get_user_role(alice_user) == Role.OWNER
        assert is_owner(alice_user)
        assert is_admin_or_owner(alice_user)
        assert not is_admin(alice_user)

    def test_admin(self, admin_user):
        assert is_admin(admin_user)
        assert is_admin_or_owner(admin_user)
        assert not is_plain_user(admin_user)

    def test_member_without_row_is_plain_user(self, org):
        user = User.objects.create_user(email="nobody@acme.test", password="x", organization=org)
        assert get_user_role(user) == Role.USER
        assert is_plain_user(user)

    def test_no_organization(self, db):
        user = User.objects.create_user(email="lonely@example.test", password="x")
        assert get_user_role(user) is None
        assert not is_admin_or_owner(user)

    def test_can_access_organization(self, bob_user, org, other_org):
        assert can_access_organization(bob_user, org.pk)
        assert not can_access_organization(bob_user, other_org.pk)
        assert not can_access_organization(bob_user, None)

    def test_get_person(self, bob, bob_user, admin_user):
        assert get_person(bob_user) == bob
        assert get_person(admin_user) is None


class TestActionRegistry:
    def test_known_actions_registered(self):
        actions = set(registered_actions())
        for action in (
            "task.create", "task.edit", "task.delete", "task.view",
            "initiative.create", "initiative.edit", "initiative.delete", "initiative.view",
            "oneonone.create", "oneonone.edit", "oneonone.delete", "oneonone.view",
            "feedback-campaign.create", "feedback-campaign.edit",
            "feedback-campaign.delete", "feedback-campaign.view",
            "report.access", "person.overview",
        ):
            assert action in actions

    def test_unknown_action_denied_and_logged(self, bob_user, caplog):
        with caplog.at_level(logging.ERROR, logger="base.permissions"):
            assert get_action_permission(bob_user, "rocket.launch") is False
        assert "rocket.launch" in caplog.text

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError):
            register("task.view")(lambda user, obj_id: True)

    def test_report_access_admins_only(self, alice_user, bob_user):
        assert get_action_permission(alice_user, "report.access")
        assert not get_action_permission(bob_user, "report.access")

    def test_create_needs_person_or_admin(self, bob, bob_user, admin_user, org):
        unlinked = User.objects.create_user(email="x@acme.test", password="x", organization=org)
        assert get_action_permission(bob_user, "task.create")
        assert get_action_permission(admin_user, "task.create")
        assert not get_action_permission(unlinked, "task.create")
