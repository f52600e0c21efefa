import pytest
from guardian.shortcuts import assign_perm

from tasks.access import (
    can_delete_task,
    can_edit_task,
    can_view_task,
    task_access_q,
    visible_tasks_for,
)
from tasks.models import Initiative, Objective, Task
from tests.helpers import make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def bobs_task(org, bob_user, carol):
    return Task.all_objects.create(organization=org, title="Ship it", created_by=bob_user, assignee=carol)


@pytest.fixture
def foreign_task(other_org, outsider_user, outsider):
    return Task.all_objects.create(organization=other_org, title="Elsewhere", created_by=outsider_user, assignee=outsider)


class TestTaskPredicate:
    def test_creator_and_assignee(self, org, bobs_task, bob_user, carol_user, carol, bob):
        by_creator = Task.all_objects.filter(task_access_q(org.pk, bob_user.pk, bob.pk))
        by_assignee = Task.all_objects.filter(task_access_q(org.pk, carol_user.pk, carol.pk))
        assert list(by_creator) == [bobs_task]
        assert list(by_assignee) == [bobs_task]

    def test_without_person_only_creator_branch(self, org, bobs_task, carol_user, carol):
        assert not Task.all_objects.filter(task_access_q(org.pk, carol_user.pk, None)).exists()

    def test_organization_bound(self, other_org, bobs_task, bob_user, bob):
        assert not Task.all_objects.filter(task_access_q(other_org.pk, bob_user.pk, bob.pk)).exists()

    def test_visible_tasks_for(self, bobs_task, foreign_task, alice_user, carol_user, dave):
        assert list(visible_tasks_for(carol_user)) == [bobs_task]
        # المالك لا يرى المهمة عبر المسند بل عبر can_view_task
        assert list(visible_tasks_for(alice_user)) == []


class TestTaskPermissions:
    def test_creator_and_assignee_can_edit(self, bobs_task, bob_user, carol_user):
        assert can_edit_task(bob_user, bobs_task)
        assert can_view_task(carol_user, bobs_task)
        assert can_delete_task(carol_user, bobs_task)

    def test_owner_sees_everything_in_organization(self, bobs_task, alice_user, alice):
        assert can_view_task(alice_user, bobs_task)

    def test_stranger_denied(self, bobs_task, org, dave):
        stranger = make_user("eve@acme.test", org)
        assert not can_view_task(stranger, bobs_task)

    def test_object_permission_grant(self, bobs_task, org):
        reviewer = make_user("rita@acme.test", org)
        assign_perm("tasks.view_task", reviewer, bobs_task)
        assert can_view_task(reviewer, bobs_task)
        assert not can_edit_task(reviewer, bobs_task)

    def test_other_organization_denied(self, foreign_task, alice_user):
        assert not can_view_task(alice_user, foreign_task)

    def test_creator_gets_object_permissions(self, bobs_task, bob_user):
        assert bob_user.has_perm("tasks.change_task", bobs_task)
        assert bob_user.has_perm("tasks.delete_task", bobs_task)


class TestTaskModel:
    def test_completed_at_follows_status(self, bobs_task):
        bobs_task.status = Task.Status.DONE
        bobs_task.save()
        assert bobs_task.completed_at is not None
        bobs_task.status = Task.Status.DOING
        bobs_task.save()
        assert bobs_task.completed_at is None

    def test_objective_sets_initiative(self, org, bob_user):
        initiative = Initiative.all_objects.create(organization=org, title="Reliability")
        objective = Objective.objects.create(initiative=initiative, title="99.9% uptime")
        task = Task.all_objects.create(organization=org, title="Add alerts", created_by=bob_user, objective=objective)
        assert task.initiative_id == initiative.pk

    def test_default_priority_is_high(self, bobs_task):
        assert bobs_task.priority == 2
