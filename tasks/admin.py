# tasks/admin.py
from django.contrib import admin
from guardian.admin import GuardedModelAdminMixin

from base.admin_mixins import AppAdmin
from .models import Initiative, Objective, Task


class ObjectiveInline(admin.TabularInline):
    model = Objective
    extra = 0


@admin.register(Initiative)
class InitiativeAdmin(AppAdmin):
    list_display = ("title", "organization", "status", "owner")
    list_filter = ("organization", "status")
    search_fields = ("title",)
    inlines = [ObjectiveInline]


@admin.register(Task)
class TaskAdmin(GuardedModelAdminMixin, AppAdmin):
    list_display = ("title", "organization", "assignee", "status", "priority", "due_date")
    list_filter = ("organization", "status", "priority")
    search_fields = ("title", "description")
    autocomplete_fields = ("assignee", "created_by", "initiative")
    readonly_fields = ("completed_at",)
