# people/admin.py
from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import JobRole, OneOnOne, Person, Team


@admin.register(Person)
class PersonAdmin(AppAdmin):
    list_display = ("name", "email", "organization", "manager", "team", "status")
    list_filter = ("organization", "status", "employee_type")
    search_fields = ("name", "email")
    autocomplete_fields = ("manager", "user", "team", "job_role")


@admin.register(Team)
class TeamAdmin(AppAdmin):
    list_display = ("name", "organization", "parent")
    list_filter = ("organization",)
    search_fields = ("name",)


@admin.register(JobRole)
class JobRoleAdmin(AppAdmin):
    list_display = ("title", "level", "organization")
    list_filter = ("organization",)
    search_fields = ("title",)


@admin.register(OneOnOne)
class OneOnOneAdmin(AppAdmin):
    list_display = ("manager", "report", "scheduled_at", "organization")
    list_filter = ("organization",)
    autocomplete_fields = ("manager", "report")
