from io import StringIO

import pytest
from django.core.exceptions import ValidationError
from django.core.management import call_command

from base.models import Organization, OrganizationMember, User
from base.org_context import clear_organization, set_organization
from base.services import add_member, create_organization
from people.models import Person
from tests.helpers import make_user
from tolerance.models import RuleException, ToleranceRule

pytestmark = pytest.mark.django_db


class TestCreateOrganization:
    def test_creator_becomes_owner(self):
        user = make_user("founder@example.test")
        org = create_organization(user=user, name="Initech")
        assert org.slug == "initech"
        assert user.organization_id == org.pk
        assert OrganizationMember.objects.get(user=user).role == OrganizationMember.Role.OWNER

    def test_requires_name(self):
        with pytest.raises(ValidationError):
            create_organization(user=make_user("a@example.test"), name="  ")

    def test_one_organization_per_user(self, alice_user):
        with pytest.raises(ValidationError):
            create_organization(user=alice_user, name="Side project")

    def test_slug_taken(self, org):
        with pytest.raises(ValidationError):
            create_organization(user=make_user("b@example.test"), name="Other", slug="acme")
        assert not Organization.objects.filter(name="Other").exists()


class TestAddMember:
    def test_upsert(self, org):
        user = make_user("new@example.test")
        add_member(organization=org, user=user, role=OrganizationMember.Role.ADMIN)
        add_member(organization=org, user=user, role=OrganizationMember.Role.USER)
        assert OrganizationMember.objects.get(user=user).role == OrganizationMember.Role.USER
        user.refresh_from_db()
        assert user.organization_id == org.pk

    def test_unknown_role(self, org):
        with pytest.raises(ValidationError):
            add_member(organization=org, user=make_user("c@example.test"), role="emperor")


class TestOrganizationScope:
    def test_scoped_manager_follows_context(self, org, other_org, alice, outsider):
        set_organization(org.pk)
        assert list(Person.objects.all()) == [alice]
        set_organization(other_org.pk)
        assert list(Person.objects.all()) == [outsider]
        clear_organization()
        assert Person.objects.count() == 2
        assert Person.all_objects.count() == 2

    def test_save_fills_organization_from_context(self, org):
        set_organization(org.pk)
        person = Person.objects.create(name="Frank", email="frank@acme.test")
        assert person.organization_id == org.pk


class TestCommands:
    def test_init_organization(self):
        out = StringIO()
        call_command("init_organization", "--email", "Boss@Example.test", "--organization", "Hooli", stdout=out)
        user = User.objects.get(email="boss@example.test")
        assert user.organization.name == "Hooli"
        assert "Hooli" in out.getvalue()

        # مرة ثانية لا تغيّر شيئًا
        call_command("init_organization", "--email", "boss@example.test", "--organization", "Hooli", stdout=StringIO())
        assert Organization.objects.count() == 1

    def test_run_cron_jobs(self, org):
        out = StringIO()
        call_command("run_cron_jobs", "--organization", "acme", stdout=out)
        assert "overdue-tasks-notification" in out.getvalue()
        assert "birthday-notification" in out.getvalue()

    def test_evaluate_tolerance_rules(self, org, alice, bob):
        ToleranceRule.all_objects.create(
            organization=org, name="1:1s", rule_type="one_on_one_frequency",
            config={"warning_threshold_days": 7, "urgent_threshold_days": 14},
        )
        out = StringIO()
        call_command("evaluate_tolerance_rules", stdout=out)
        assert RuleException.all_objects.count() == 1
        assert "1 new exceptions" in out.getvalue()
