# base/models/membership.py
from django.db import models
from .mixins import TimeStampedMixin


class OrganizationMember(TimeStampedMixin):
    """دور المستخدم داخل مؤسسة معيّنة (OWNER / ADMIN / USER)."""

    class Role(models.TextChoices):
        OWNER = "OWNER", "Owner"
        ADMIN = "ADMIN", "Admin"
        USER = "USER", "User"

    user = models.ForeignKey("base.User", on_delete=models.CASCADE, related_name="memberships")
    organization = models.ForeignKey("base.Organization", on_delete=models.CASCADE, related_name="members")
    role = models.CharField(max_length=8, choices=Role.choices, default=Role.USER, db_index=True)

    class Meta:
        db_table = "organization_member"
        constraints = [
            models.UniqueConstraint(fields=["user", "organization"], name="uniq_member_user_org"),
        ]

    def __str__(self):
        return f"{self.user_id}@{self.organization_id} ({self.role})"
