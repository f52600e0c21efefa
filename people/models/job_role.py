# people/models/job_role.py
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class JobRole(OrganizationOwnedMixin, TimeStampedMixin):
    title = models.CharField(max_length=255)
    level = models.CharField(max_length=64, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "job_role"
        ordering = ("title",)

    def __str__(self):
        return f"{self.title} ({self.level})" if self.level else self.title
