# notifications/models.py
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class Notification(OrganizationOwnedMixin, TimeStampedMixin):
    """
    إشعار داخل المؤسسة.
    - user محدد: إشعار خاص بالمستخدم
    - user فارغ: إشعار عام لكل أعضاء المؤسسة
    """

    class Type(models.TextChoices):
        INFO = "info", "Info"
        WARNING = "warning", "Warning"
        SUCCESS = "success", "Success"
        ERROR = "error", "Error"

    user = models.ForeignKey(
        "base.User",
        null=True,
        blank=True,
        on_delete=models.CASCADE,
        related_name="notifications",
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    type = models.CharField(max_length=16, choices=Type.choices, default=Type.INFO)
    metadata = models.JSONField(default=dict, blank=True)
    deduplication_key = models.CharField(max_length=512, blank=True, null=True, db_index=True)

    class Meta:
        db_table = "notification"
        ordering = ("-created_at",)
        indexes = [
            models.Index(fields=["organization", "user"], name="notification_org_user_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def is_broadcast(self) -> bool:
        return self.user_id is None


class NotificationResponse(TimeStampedMixin):
    """حالة الإشعار لكل مستخدم (مقروء / مُتجاهل)."""

    class Status(models.TextChoices):
        UNREAD = "unread", "Unread"
        READ = "read", "Read"
        DISMISSED = "dismissed", "Dismissed"

    notification = models.ForeignKey(Notification, on_delete=models.CASCADE, related_name="responses")
    user = models.ForeignKey("base.User", on_delete=models.CASCADE, related_name="notification_responses")
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.UNREAD)
    read_at = models.DateTimeField(null=True, blank=True)
    dismissed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "notification_response"
        constraints = [
            models.UniqueConstraint(fields=["notification", "user"], name="uniq_notification_response_user"),
        ]

    def __str__(self):
        return f"{self.notification_id}:{self.user_id} {self.status}"
