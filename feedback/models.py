# feedback/models.py
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class FeedbackCampaign(OrganizationOwnedMixin, TimeStampedMixin):
    """حملة جمع ملاحظات عن شخص، يُنشئها مديره أو الشخص نفسه."""

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        ACTIVE = "active", "Active"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    target_person = models.ForeignKey(
        "people.Person",
        on_delete=models.CASCADE,
        related_name="feedback_campaigns",
    )
    user = models.ForeignKey(
        "base.User",
        on_delete=models.CASCADE,
        related_name="feedback_campaigns",
    )
    name = models.CharField(max_length=255)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT, db_index=True)
    start_date = models.DateField()
    end_date = models.DateField()
    invitee_emails = models.JSONField(default=list, blank=True)

    organization_dependent_relations = ("target_person",)

    class Meta:
        db_table = "feedback_campaign"
        ordering = ("-created_at",)

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({"end_date": "End date must be on or after the start date."})
        emails = []
        for email in self.invitee_emails or []:
            email = str(email).strip().lower()
            try:
                validate_email(email)
            except ValidationError:
                raise ValidationError({"invitee_emails": f"Invalid email: {email}"})
            if email not in emails:
                emails.append(email)
        self.invitee_emails = emails
