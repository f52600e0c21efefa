# tolerance/signals.py
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from people.models import OneOnOne, Person
from .resolve import resolve_manager_span_exceptions, resolve_one_on_one_exceptions


@receiver(post_save, sender=OneOnOne, dispatch_uid="tolerance_one_on_one_saved")
def one_on_one_saved(sender, instance: OneOnOne, **kwargs):
    if instance.scheduled_at is None:
        return
    resolve_one_on_one_exceptions(instance.organization_id, instance.manager_id, instance.report_id)


@receiver(pre_save, sender=Person, dispatch_uid="tolerance_person_stash_manager")
def stash_previous_manager(sender, instance: Person, **kwargs):
    previous = None
    if instance.pk:
        previous = Person.all_objects.filter(pk=instance.pk).values_list("manager_id", "status").first()
    instance._previous_manager_state = previous


@receiver(post_save, sender=Person, dispatch_uid="tolerance_person_manager_changed")
def person_manager_changed(sender, instance: Person, created, **kwargs):
    previous = getattr(instance, "_previous_manager_state", None)
    if not previous:
        return
    previous_manager_id, previous_status = previous
    # تقل أعداد المدير السابق عند النقل أو عند إلغاء تفعيل التابع
    if previous_manager_id and (
        previous_manager_id != instance.manager_id or previous_status != instance.status
    ):
        resolve_manager_span_exceptions(instance.organization_id, previous_manager_id)


@receiver(post_delete, sender=Person, dispatch_uid="tolerance_person_deleted")
def person_deleted(sender, instance: Person, **kwargs):
    if instance.manager_id:
        resolve_manager_span_exceptions(instance.organization_id, instance.manager_id)
