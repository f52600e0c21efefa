# file: people/access.py

import logging

from django.db.models import Q

from base.access import get_person, is_admin_or_owner
from base.permissions import register, member_with_person_or_admin
from .hierarchy import HierarchyCycleError, is_manager_of, orm_manager_lookup
from .models import OneOnOne, Person

logger = logging.getLogger(__name__)


# ============================================================
#  Manager-or-self gate
# ============================================================

def is_manager_or_self(person_id, target_id, lookup=None) -> bool:
    lookup = lookup or orm_manager_lookup
    if person_id == target_id:
        # يرفع PersonNotFound إذا لم يوجد الشخص
        lookup(target_id)
        return True
    return is_manager_of(person_id, target_id, lookup=lookup)


def can_access_person_overview(user, person: Person) -> bool:
    """
    المستخدم نفسه أو أي مدير (مباشر/غير مباشر) للشخص.
    الأدمن لا يتجاوز هذه القاعدة.
    """
    if not user or not user.is_authenticated or not user.organization_id:
        return False
    if person.organization_id != user.organization_id:
        return False

    me = get_person(user)
    if not me:
        return False

    try:
        return is_manager_or_self(me.pk, person.pk)
    except HierarchyCycleError as exc:
        logger.error("Denying overview of person %s for user %s: %s", person.pk, user.pk, exc)
        return False


# ============================================================
#  Person edit
# ============================================================

def can_edit_person(user, person: Person) -> bool:
    """تعديل بيانات الشخص (بما فيها المدير والحالة) للأدمن والمالك فقط."""
    if not user or not user.is_authenticated:
        return False
    if person.organization_id != user.organization_id:
        return False
    return is_admin_or_owner(user)


# ============================================================
#  One on ones
# ============================================================

def one_on_one_access_q(organization_id, person_id) -> Q:
    """المشارك فقط (مدير أو تابع) ضمن المؤسسة."""
    return Q(organization_id=organization_id) & (Q(manager_id=person_id) | Q(report_id=person_id))


def _participant_in(user, obj_id) -> bool:
    if not user.organization_id:
        return False
    if is_admin_or_owner(user):
        return True
    me = get_person(user)
    if not me or not obj_id:
        return False
    return OneOnOne.all_objects.filter(one_on_one_access_q(user.organization_id, me.pk), pk=obj_id).exists()


register("oneonone.create")(member_with_person_or_admin)
register("oneonone.edit", "oneonone.delete", "oneonone.view")(_participant_in)


@register("person.overview")
def _person_overview(user, obj_id) -> bool:
    if not obj_id:
        return False
    person = Person.all_objects.filter(pk=obj_id).first()
    if person is None:
        return False
    return can_access_person_overview(user, person)
