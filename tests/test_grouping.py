import pytest

from people.grouping import GROUPING_OPTIONS, group_people
from people.models import JobRole, Person, Team

pytestmark = pytest.mark.django_db


@pytest.fixture
def directory(org, alice, bob, carol, dave):
    platform = Team.all_objects.create(organization=org, name="Platform")
    apps_team = Team.all_objects.create(organization=org, name="Apps")
    engineer = JobRole.all_objects.create(organization=org, title="Engineer")

    bob.team = platform
    bob.job_role = engineer
    bob.save()
    carol.team = apps_team
    carol.status = Person.Status.ON_LEAVE
    carol.save()
    dave.status = Person.Status.TERMINATED
    dave.save()
    return list(Person.all_objects.filter(organization=org).select_related("manager", "team", "job_role"))


def labels(groups):
    return [g["label"] for g in groups]


class TestGroupPeople:
    def test_options(self):
        assert GROUPING_OPTIONS == ("manager", "team", "status", "job_role", "none")

    def test_by_manager_empty_bucket_last(self, directory, alice, bob):
        groups = group_people(directory, "manager")
        assert labels(groups) == ["Alice", "Bob", "No Manager"]
        no_manager = groups[-1]
        assert [p.name for p in no_manager["people"]] == ["Alice", "Dave"]
        assert no_manager["count"] == 2
        assert no_manager["link"] is None
        assert groups[0]["link"] == f"/people/{alice.pk}/"

    def test_by_team(self, directory):
        groups = group_people(directory, "team")
        assert labels(groups) == ["Apps", "Platform", "No Team"]
        assert groups[-1]["count"] == 2

    def test_by_status_fixed_order(self, directory):
        groups = group_people(directory, "status")
        assert labels(groups) == ["Active", "On leave", "Terminated"]
        assert [p.name for p in groups[0]["people"]] == ["Alice", "Bob"]

    def test_by_job_role(self, directory):
        groups = group_people(directory, "job_role")
        assert labels(groups) == ["Engineer", "No Job Role"]

    def test_none(self, directory):
        groups = group_people(directory, "none")
        assert len(groups) == 1
        assert groups[0]["label"] == "All People"
        assert [p.name for p in groups[0]["people"]] == ["Alice", "Bob", "Carol", "Dave"]

    def test_none_empty(self):
        assert group_people([], "none") == []

    def test_unknown_option(self, directory):
        assert group_people(directory, "favourite_colour") == []
