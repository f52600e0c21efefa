# tolerance/models.py
from django.db import models
from django.utils import timezone

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class ToleranceRule(OrganizationOwnedMixin, TimeStampedMixin):
    """
    قاعدة تنظيمية تُقيَّم دوريًا (حد أقصى للتابعين، تكرار الـ 1:1 ...).
    الإعدادات (config) تختلف حسب النوع وتُتحقق عبر نماذج Django في tolerance.forms.
    """

    class RuleType(models.TextChoices):
        MAX_REPORTS = "max_reports", "Maximum reports"
        MANAGER_SPAN = "manager_span", "Manager span of control"
        ONE_ON_ONE_FREQUENCY = "one_on_one_frequency", "One on one frequency"

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    rule_type = models.CharField(max_length=32, choices=RuleType.choices, db_index=True)
    enabled = models.BooleanField(default=True, db_index=True)
    config = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = "tolerance_rule"
        ordering = ("name",)

    def __str__(self):
        return self.name

    def clean(self):
        from .forms import validate_rule_config

        super().clean()
        self.config = validate_rule_config(self.rule_type, self.config)


class RuleException(OrganizationOwnedMixin, TimeStampedMixin):
    """مخالفة قاعدة لكيان محدد (شخص أو زوج 1:1)."""

    class Severity(models.TextChoices):
        WARNING = "warning", "Warning"
        URGENT = "urgent", "Urgent"

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        ACKNOWLEDGED = "acknowledged", "Acknowledged"
        IGNORED = "ignored", "Ignored"
        RESOLVED = "resolved", "Resolved"

    # مخالفة قائمة لا تُنشأ مرة أخرى لنفس الكيان
    OPEN_STATUSES = (Status.ACTIVE, Status.ACKNOWLEDGED, Status.IGNORED)

    rule = models.ForeignKey(ToleranceRule, on_delete=models.CASCADE, related_name="exceptions")
    severity = models.CharField(max_length=16, choices=Severity.choices, default=Severity.WARNING)
    entity_type = models.CharField(max_length=32)
    entity_id = models.CharField(max_length=64)
    message = models.TextField()
    metadata = models.JSONField(default=dict, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE, db_index=True)
    acknowledged_at = models.DateTimeField(null=True, blank=True)
    resolved_at = models.DateTimeField(null=True, blank=True)
    notification = models.ForeignKey(
        "notifications.Notification",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="rule_exceptions",
    )

    organization_dependent_relations = ("rule",)

    class Meta:
        db_table = "rule_exception"
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["rule", "entity_type", "entity_id"], name="rule_exc_entity_idx"),
        ]

    def __str__(self):
        return self.message

    def acknowledge(self):
        self.status = self.Status.ACKNOWLEDGED
        self.acknowledged_at = timezone.now()
        self.save(update_fields=["status", "acknowledged_at", "updated_at"])

    def ignore(self):
        self.status = self.Status.IGNORED
        self.save(update_fields=["status", "updated_at"])
