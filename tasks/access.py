# file: tasks/access.py

"""
Task visibility.

A task is visible to a member of its organization when they created it or
it is assigned to their person. Admins and owners see every task of their
organization, and django-guardian grants (given to creators on save, or by
hand) open individual tasks to anyone else.
"""

from typing import Optional

from django.db.models import Q

from base.access import get_person_id, is_admin_or_owner
from base.permissions import register, member_with_person_or_admin, organization_member
from .models import Task


def task_access_q(organization_id, user_id, person_id: Optional[int] = None) -> Q:
    """
    organization = org AND (created_by = user OR assignee = person)

    Without a person only the creator branch applies.
    """
    visible = Q(created_by_id=user_id)
    if person_id is not None:
        visible |= Q(assignee_id=person_id)
    return Q(organization_id=organization_id) & visible


def visible_tasks_for(user):
    if not user or not user.is_authenticated or not user.organization_id:
        return Task.all_objects.none()
    return Task.all_objects.filter(task_access_q(user.organization_id, user.pk, get_person_id(user)))


def _matches_predicate(user, task: Task) -> bool:
    if task.organization_id != user.organization_id:
        return False
    if task.created_by_id == user.pk:
        return True
    person_id = get_person_id(user)
    return person_id is not None and task.assignee_id == person_id


def _can(user, task: Task, codename: str) -> bool:
    if not user or not user.is_authenticated or not user.organization_id:
        return False
    if task.organization_id != user.organization_id:
        return False
    if is_admin_or_owner(user):
        return True
    if _matches_predicate(user, task):
        return True
    return user.has_perm(f"tasks.{codename}", task)


def can_view_task(user, task: Task) -> bool:
    return _can(user, task, "view_task")


def can_edit_task(user, task: Task) -> bool:
    return _can(user, task, "change_task")


def can_delete_task(user, task: Task) -> bool:
    return _can(user, task, "delete_task")


# ============================================================
# Registered actions
# ============================================================

def _task_check(checker):
    def check(user, obj_id) -> bool:
        if not user.organization_id or not obj_id:
            return False
        task = Task.all_objects.filter(pk=obj_id).first()
        return task is not None and checker(user, task)
    return check


register("task.create")(member_with_person_or_admin)
register("task.view")(organization_member)
register("task.edit")(_task_check(can_edit_task))
register("task.delete")(_task_check(can_delete_task))
