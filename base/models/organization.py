# base/models/organization.py
from django.db import models
from django.core.exceptions import ValidationError
from .mixins import TimeStampedMixin


class Organization(TimeStampedMixin):
    """
    Tenant boundary. Every person, task, notification and rule belongs to
    exactly one organization, and no query crosses it.
    """
    name = models.CharField(max_length=255, unique=True)
    slug = models.SlugField(max_length=64, unique=True)
    description = models.TextField(blank=True)
    active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = "organization"
        ordering = ("name",)

    def clean(self):
        super().clean()
        if self.slug:
            self.slug = self.slug.strip().lower()
        if not self.slug:
            raise ValidationError({"slug": "Slug is required."})

    def __str__(self):
        return self.name
