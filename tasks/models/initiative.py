# tasks/models/initiative.py
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class Initiative(OrganizationOwnedMixin, TimeStampedMixin):
    class Status(models.TextChoices):
        PLANNED = "planned", "Planned"
        IN_PROGRESS = "in_progress", "In progress"
        PAUSED = "paused", "Paused"
        DONE = "done", "Done"
        CANCELED = "canceled", "Canceled"

    title = models.CharField(max_length=255)
    summary = models.TextField(blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PLANNED, db_index=True)
    owner = models.ForeignKey(
        "people.Person",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="owned_initiatives",
    )

    organization_dependent_relations = ("owner",)

    class Meta:
        db_table = "initiative"
        ordering = ("title",)

    def __str__(self):
        return self.title


class Objective(TimeStampedMixin):
    """هدف قابل للقياس داخل مبادرة؛ المؤسسة موروثة من المبادرة."""
    initiative = models.ForeignKey(Initiative, on_delete=models.CASCADE, related_name="objectives")
    title = models.CharField(max_length=255)
    key_result = models.TextField(blank=True)
    sort_index = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "objective"
        ordering = ("initiative", "sort_index", "id")

    def __str__(self):
        return self.title

    @property
    def organization_id(self):
        return self.initiative.organization_id
