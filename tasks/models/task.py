# tasks/models/task.py
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from base.models.mixins import OrganizationOwnedMixin, TimeStampedMixin
from ..priority import TaskPriority, DEFAULT_TASK_PRIORITY


class Task(OrganizationOwnedMixin, TimeStampedMixin):

    class Status(models.TextChoices):
        TODO = "todo", "To do"
        DOING = "doing", "Doing"
        BLOCKED = "blocked", "Blocked"
        DONE = "done", "Done"
        DROPPED = "dropped", "Dropped"

    # لا تُعتبر متأخرة ولا مفتوحة
    CLOSED_STATUSES = (Status.DONE, Status.DROPPED)

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    assignee = models.ForeignKey(
        "people.Person",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="tasks",
    )
    created_by = models.ForeignKey(
        "base.User",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="created_tasks",
    )
    initiative = models.ForeignKey(
        "tasks.Initiative",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="tasks",
    )
    objective = models.ForeignKey(
        "tasks.Objective",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="tasks",
    )

    status = models.CharField(max_length=16, choices=Status.choices, default=Status.TODO, db_index=True)
    priority = models.PositiveSmallIntegerField(choices=TaskPriority.choices, default=DEFAULT_TASK_PRIORITY)
    due_date = models.DateTimeField(null=True, blank=True, db_index=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    organization_dependent_relations = ("assignee", "initiative", "objective")

    class Meta:
        db_table = "task"
        ordering = ("priority", "due_date", "-created_at")
        indexes = [
            models.Index(fields=["organization", "status"], name="task_organiz_8d4e21_idx"),
            models.Index(fields=["assignee", "status"], name="task_assigne_1a7f93_idx"),
        ]

    def __str__(self):
        return self.title

    def clean(self):
        super().clean()
        if self.objective_id and self.initiative_id and self.objective.initiative_id != self.initiative_id:
            raise ValidationError({"objective": "Objective belongs to a different initiative."})

    def save(self, *args, **kwargs):
        # الهدف يحدد المبادرة إن لم تُحدد
        if self.objective_id and not self.initiative_id:
            self.initiative_id = self.objective.initiative_id
        if self.status == self.Status.DONE and not self.completed_at:
            self.completed_at = timezone.now()
        elif self.status != self.Status.DONE:
            self.completed_at = None
        super().save(*args, **kwargs)

    @property
    def is_open(self) -> bool:
        return self.status not in self.CLOSED_STATUSES

    def is_overdue(self, now=None) -> bool:
        now = now or timezone.now()
        return bool(self.is_open and self.due_date and self.due_date < now)
