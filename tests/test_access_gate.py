import pytest
from django.core.exceptions import ValidationError

from base.permissions import get_action_permission
from people.access import can_access_person_overview, can_edit_person
from people.models import Person

pytestmark = pytest.mark.django_db


class TestPersonOverviewGate:
    def test_self(self, carol, carol_user):
        assert can_access_person_overview(carol_user, carol)

    def test_direct_and_indirect_managers(self, alice_user, bob_user, carol):
        assert can_access_person_overview(bob_user, carol)
        assert can_access_person_overview(alice_user, carol)

    def test_report_cannot_see_manager(self, carol_user, alice):
        assert not can_access_person_overview(carol_user, alice)

    def test_peer_without_relation(self, carol_user, dave):
        assert not can_access_person_overview(carol_user, dave)

    def test_admin_without_person_is_denied(self, admin_user, carol):
        assert not can_access_person_overview(admin_user, carol)

    def test_other_organization(self, outsider_user, carol):
        assert not can_access_person_overview(outsider_user, carol)

    def test_cycle_is_denied(self, alice, bob, carol_user, carol):
        Person.all_objects.filter(pk=alice.pk).update(manager=bob)
        assert not can_access_person_overview(carol_user, alice)

    def test_registered_action(self, bob_user, carol, alice):
        assert get_action_permission(bob_user, "person.overview", carol.pk)
        assert not get_action_permission(bob_user, "person.overview", alice.pk)
        assert not get_action_permission(bob_user, "person.overview", None)


class TestPersonEdit:
    def test_admin_can_edit_anyone(self, admin_user, dave):
        assert can_edit_person(admin_user, dave)

    def test_manager_cannot_edit_report(self, bob_user, carol):
        assert not can_edit_person(bob_user, carol)

    def test_self_edit_denied(self, carol_user, carol):
        assert not can_edit_person(carol_user, carol)

    def test_owner_can_edit(self, alice_user, carol):
        assert can_edit_person(alice_user, carol)

    def test_admin_of_other_organization(self, outsider_user, carol):
        assert not can_edit_person(outsider_user, carol)

    def test_report_cannot_edit_manager(self, carol_user, bob):
        assert not can_edit_person(carol_user, bob)


class TestPersonValidation:
    def test_self_management_rejected(self, alice):
        alice.manager = alice
        with pytest.raises(ValidationError) as exc:
            alice.full_clean()
        assert "manager" in exc.value.message_dict

    def test_cycle_rejected(self, alice, carol):
        alice.manager = carol
        with pytest.raises(ValidationError) as exc:
            alice.full_clean()
        assert "manager" in exc.value.message_dict

    def test_cross_organization_manager_rejected(self, dave, outsider):
        dave.manager = outsider
        with pytest.raises(ValidationError) as exc:
            dave.full_clean()
        assert "manager" in exc.value.message_dict

    def test_valid_move(self, carol, alice):
        carol.manager = alice
        carol.full_clean()
