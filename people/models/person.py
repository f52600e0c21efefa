# people/models/person.py
from django.core.exceptions import ValidationError
from django.db import models

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin


class Person(OrganizationOwnedMixin, TimeStampedMixin):
    """
    A member of the organization chart. ``manager`` forms a forest: a person
    has at most one manager and the chain upward ends at a person with no
    manager.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"
        ON_LEAVE = "on_leave", "On leave"
        TERMINATED = "terminated", "Terminated"

    class EmployeeType(models.TextChoices):
        FULL_TIME = "FULL_TIME", "Full time"
        PART_TIME = "PART_TIME", "Part time"
        INTERN = "INTERN", "Intern"
        CONSULTANT = "CONSULTANT", "Consultant"

    name = models.CharField(max_length=255, db_index=True)
    email = models.EmailField(blank=True)

    # الحساب المرتبط (اختياري): شخص واحد لكل مستخدم
    user = models.OneToOneField(
        "base.User",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="person",
    )

    manager = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="reports",
    )

    team = models.ForeignKey(
        "people.Team",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="people",
    )

    job_role = models.ForeignKey(
        "people.JobRole",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="people",
    )

    status = models.CharField(max_length=16, choices=Status.choices, default=Status.ACTIVE, db_index=True)
    employee_type = models.CharField(max_length=16, choices=EmployeeType.choices, blank=True)

    birthday = models.DateField(null=True, blank=True)
    start_date = models.DateField(null=True, blank=True)

    organization_dependent_relations = ("manager", "team", "job_role")

    class Meta:
        db_table = "person"
        ordering = ("name",)
        indexes = [
            models.Index(fields=["organization", "status"], name="person_organiz_3b1f0c_idx"),
            models.Index(fields=["manager"], name="person_manager_7e2d41_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                name="person_manager_not_self",
                condition=~models.Q(pk=models.F("manager")),
            ),
        ]

    def __str__(self):
        return self.name

    def clean(self):
        """
        1) لا يدير الشخص نفسه.
        2) المدير من نفس المؤسسة (عبر organization_dependent_relations).
        3) لا حلقات في سلسلة الإدارة (manager ⟶ ... ⟶ self).
        4) المستخدم المرتبط ينتمي لنفس المؤسسة.
        """
        super().clean()

        if self.pk and self.manager_id and self.manager_id == self.pk:
            raise ValidationError({"manager": "A person cannot be their own manager."})

        node = self.manager
        seen = set()
        while node:
            if self.pk and node.pk == self.pk:
                raise ValidationError({"manager": "This assignment would create a management cycle."})
            if node.pk in seen:
                raise ValidationError({"manager": "The selected manager's chain is already cyclic."})
            seen.add(node.pk)
            node = node.manager

        if self.user_id and self.user.organization_id and self.user.organization_id != self.organization_id:
            raise ValidationError({"user": "Linked user belongs to a different organization."})

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.ACTIVE
