# tolerance/admin.py
from django.contrib import admin

from base.admin_mixins import AppAdmin
from .forms import ToleranceRuleForm
from .models import RuleException, ToleranceRule


@admin.register(ToleranceRule)
class ToleranceRuleAdmin(AppAdmin):
    form = ToleranceRuleForm
    fields = (
        "organization", "name", "description", "rule_type", "enabled",
        "max_reports", "max_direct_reports",
        "warning_threshold_days", "urgent_threshold_days", "only_full_time_employees",
    )
    list_display = ("name", "organization", "rule_type", "enabled")
    list_filter = ("organization", "rule_type", "enabled")
    search_fields = ("name",)


@admin.register(RuleException)
class RuleExceptionAdmin(AppAdmin):
    list_display = ("message", "organization", "rule", "severity", "status", "created_at")
    list_filter = ("organization", "severity", "status", "rule__rule_type")
    search_fields = ("message", "entity_id")
    raw_id_fields = ("rule", "notification")
    actions = ("acknowledge_selected", "ignore_selected")

    @admin.action(description="Acknowledge selected exceptions")
    def acknowledge_selected(self, request, queryset):
        for exception in queryset:
            exception.acknowledge()

    @admin.action(description="Ignore selected exceptions")
    def ignore_selected(self, request, queryset):
        for exception in queryset:
            exception.ignore()
