# people/models/team.py
from django.core.exceptions import ValidationError
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class Team(OrganizationOwnedMixin, TimeStampedMixin):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="children",
    )

    organization_dependent_relations = ("parent",)

    class Meta:
        db_table = "team"
        ordering = ("name",)
        constraints = [
            models.UniqueConstraint(fields=["organization", "name"], name="uniq_team_name_per_org"),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        super().clean()
        node = self.parent
        seen = set()
        while node:
            if (self.pk and node.pk == self.pk) or node.pk in seen:
                raise ValidationError({"parent": "Cyclic team hierarchy is not allowed."})
            seen.add(node.pk)
            node = node.parent
