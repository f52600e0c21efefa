# tasks/signals/ownership.py
from django.db.models.signals import post_save
from django.dispatch import receiver
from guardian.shortcuts import assign_perm

from tasks.models import Initiative, Task

# صلاحيات المنشئ على السجل عند الإنشاء


@receiver(post_save, sender=Task)
def grant_owner_perms_task(sender, instance, created, **kwargs):
    user = getattr(instance, "created_by", None)
    if created and user:
        assign_perm("tasks.view_task", user, instance)
        assign_perm("tasks.change_task", user, instance)
        assign_perm("tasks.delete_task", user, instance)


@receiver(post_save, sender=Initiative)
def grant_owner_perms_initiative(sender, instance, created, **kwargs):
    person = getattr(instance, "owner", None)
    user = getattr(person, "user", None) if person else None
    if created and user:
        assign_perm("tasks.view_initiative", user, instance)
        assign_perm("tasks.change_initiative", user, instance)
