# base/admin.py
# ============================================================
# Django Admin: organization scope is relaxed inside admin
# ============================================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from base.admin_mixins import AppAdmin
from .models import Organization, OrganizationMember, User


class OrganizationMemberInline(admin.TabularInline):
    model = OrganizationMember
    extra = 0
    autocomplete_fields = ("user",)


@admin.register(Organization)
class OrganizationAdmin(AppAdmin):
    list_display = ("name", "slug", "active", "created_at")
    list_filter = ("active",)
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    inlines = [OrganizationMemberInline]


@admin.register(OrganizationMember)
class OrganizationMemberAdmin(AppAdmin):
    list_display = ("user", "organization", "role")
    list_filter = ("role", "organization")
    search_fields = ("user__email", "organization__name")
    autocomplete_fields = ("user", "organization")


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("email", "username", "organization", "is_staff", "is_active")
    list_filter = ("is_staff", "is_active", "organization")
    search_fields = ("email", "username", "first_name", "last_name")
    ordering = ("email",)
    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Organization", {"fields": ("organization",)}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "username", "password1", "password2", "organization"),
        }),
    )
