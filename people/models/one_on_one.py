# people/models/one_on_one.py
from django.core.exceptions import ValidationError
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class OneOnOne(OrganizationOwnedMixin, TimeStampedMixin):
    """اجتماع فردي بين مدير وأحد تابعيه."""
    manager = models.ForeignKey(
        "people.Person",
        on_delete=models.CASCADE,
        related_name="one_on_ones_as_manager",
    )
    report = models.ForeignKey(
        "people.Person",
        on_delete=models.CASCADE,
        related_name="one_on_ones_as_report",
    )
    scheduled_at = models.DateTimeField(null=True, blank=True, db_index=True)
    notes = models.TextField(blank=True)

    organization_dependent_relations = ("manager", "report")

    class Meta:
        db_table = "one_on_one"
        ordering = ("-scheduled_at",)
        indexes = [
            models.Index(fields=["manager", "report"], name="one_on_one_manager_5c9a2e_idx"),
        ]

    def __str__(self):
        return f"1:1 {self.manager_id} ↔ {self.report_id}"

    def clean(self):
        super().clean()
        if self.manager_id and self.manager_id == self.report_id:
            raise ValidationError("A one on one needs two different people.")

    def involves(self, person_id) -> bool:
        return person_id in (self.manager_id, self.report_id)
