# notifications/jobs.py
"""
Daily notification jobs, run per organization by ``manage.py run_cron_jobs``.

Every job is deduplicated per user: the same notification (same
deduplication key) is not sent twice within ``NOTIFICATION_DEDUP_HOURS``.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta
from django.apps import apps
from django.utils import timezone

from .models import Notification
from .services import create_system_notification, should_send_notification

logger = logging.getLogger(__name__)


@dataclass
class JobResult:
    success: bool
    notifications_created: int = 0
    error: str = ""
    metadata: dict = field(default_factory=dict)


class CronJob:
    id: str = ""
    name: str = ""
    description: str = ""
    schedule: str = "0 9 * * *"

    def execute(self, organization_id, now: Optional[datetime] = None) -> JobResult:
        raise NotImplementedError

    def run(self, organization_id, now: Optional[datetime] = None) -> JobResult:
        if not organization_id:
            raise ValueError("Organization ID is required")
        try:
            return self.execute(organization_id, now=now)
        except Exception as exc:
            # وظيفة فاشلة لا توقف بقية الوظائف
            logger.exception("Job %s failed for organization %s", self.id, organization_id)
            return JobResult(success=False, error=str(exc))


# ============================================================
# Overdue tasks
# ============================================================

class OverdueTasksNotificationJob(CronJob):
    id = "overdue-tasks-notification"
    name = "Overdue Tasks Notification"
    description = "Notifies users about tasks that have passed their due dates"

    @staticmethod
    def deduplication_key(task_ids) -> str:
        return "overdue-tasks:" + "|".join(sorted(str(pk) for pk in task_ids))

    @staticmethod
    def build_message(tasks) -> tuple:
        if len(tasks) == 1:
            return "Overdue Task", f'Task "{tasks[0].title}" is overdue'
        return "Overdue Tasks", f"You have {len(tasks)} overdue task(s)"

    def execute(self, organization_id, now=None) -> JobResult:
        Task = apps.get_model("tasks", "Task")
        Person = apps.get_model("people", "Person")

        now = timezone.localtime(now or timezone.now())
        start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)

        overdue = (
            Task.all_objects
            .filter(
                organization_id=organization_id,
                due_date__lt=start_of_today,
                assignee__organization_id=organization_id,
                assignee__status=Person.Status.ACTIVE,
                assignee__user__isnull=False,
            )
            .exclude(status__in=Task.CLOSED_STATUSES)
            .select_related("assignee__user")
            .order_by("due_date")
        )

        by_user: Dict[int, List] = {}
        for task in overdue:
            by_user.setdefault(task.assignee.user_id, []).append(task)

        created = 0
        for user_id, tasks in by_user.items():
            key = self.deduplication_key(t.pk for t in tasks)
            if not should_send_notification(user_id, organization_id, key):
                continue
            title, message = self.build_message(tasks)
            create_system_notification(
                organization_id=organization_id,
                user_id=user_id,
                title=title,
                message=message,
                type=Notification.Type.WARNING,
                deduplication_key=key,
                metadata={
                    "overdue_task_ids": [t.pk for t in tasks],
                    "task_count": len(tasks),
                    "tasks": [
                        {"id": t.pk, "title": t.title, "due_date": t.due_date.isoformat()}
                        for t in tasks
                    ],
                },
            )
            created += 1

        logger.info(
            "Overdue tasks: %s users with overdue tasks, %s notifications in organization %s",
            len(by_user), created, organization_id,
        )
        return JobResult(
            success=True,
            notifications_created=created,
            metadata={"overdue_tasks_found": sum(len(t) for t in by_user.values()),
                      "users_with_overdue_tasks": len(by_user)},
        )


# ============================================================
# Birthdays
# ============================================================

def next_birthday(birthday: date, today: date) -> date:
    """أقرب تاريخ ميلاد قادم (اليوم يُحسب). 29 فبراير يصبح 28 في السنوات البسيطة."""
    upcoming = birthday + relativedelta(years=today.year - birthday.year)
    if upcoming < today:
        upcoming = birthday + relativedelta(years=today.year + 1 - birthday.year)
    return upcoming


class BirthdayNotificationJob(CronJob):
    id = "birthday-notification"
    name = "Birthday Notifications"
    description = "Notifies managers about upcoming birthdays of their direct reports"

    days_ahead = 7

    def upcoming_birthdays(self, reports, today: date) -> List[dict]:
        upcoming = []
        for report in reports:
            if not report.birthday:
                continue
            when = next_birthday(report.birthday, today)
            days_until = (when - today).days
            if days_until <= self.days_ahead:
                upcoming.append({"name": report.name, "birthday": when, "days_until": days_until})
        return upcoming

    @staticmethod
    def deduplication_key(upcoming) -> str:
        ordered = sorted(upcoming, key=lambda b: b["name"].lower())
        return "birthday:" + "|".join(f'{b["name"]}:{b["days_until"]}' for b in ordered)

    def build_message(self, upcoming) -> tuple:
        if len(upcoming) == 1:
            b = upcoming[0]
            if b["days_until"] == 0:
                return "Birthday Today!", f'{b["name"]} has a birthday today!'
            if b["days_until"] == 1:
                return "Birthday Tomorrow!", f'{b["name"]} has a birthday tomorrow!'
            return "Upcoming Birthday", (
                f'{b["name"]} has a birthday in {b["days_until"]} days ({b["birthday"].isoformat()})'
            )
        names = ", ".join(b["name"] for b in upcoming)
        if any(b["days_until"] == 0 for b in upcoming):
            return "Birthdays This Week!", f"Multiple team members have birthdays this week: {names}"
        return "Upcoming Birthdays", f"Multiple team members have birthdays in the next {self.days_ahead} days: {names}"

    def execute(self, organization_id, now=None) -> JobResult:
        Person = apps.get_model("people", "Person")
        today = timezone.localtime(now or timezone.now()).date()

        managers = (
            Person.all_objects
            .filter(
                organization_id=organization_id,
                user__isnull=False,
                reports__birthday__isnull=False,
            )
            .distinct()
            .select_related("user")
        )

        created = 0
        processed = 0
        for manager in managers:
            processed += 1
            reports = manager.reports.filter(birthday__isnull=False).exclude(status=Person.Status.TERMINATED)
            upcoming = self.upcoming_birthdays(reports, today)
            if not upcoming:
                continue
            key = self.deduplication_key(upcoming)
            if not should_send_notification(manager.user_id, organization_id, key):
                continue
            title, message = self.build_message(upcoming)
            create_system_notification(
                organization_id=organization_id,
                user_id=manager.user_id,
                title=title,
                message=message,
                type=Notification.Type.INFO,
                deduplication_key=key,
                metadata={
                    "upcoming_birthdays": [
                        {"name": b["name"], "birthday": b["birthday"].isoformat(), "days_until": b["days_until"]}
                        for b in upcoming
                    ],
                },
            )
            created += 1

        return JobResult(success=True, notifications_created=created, metadata={"managers_processed": processed})


JOBS = {job.id: job for job in (OverdueTasksNotificationJob(), BirthdayNotificationJob())}


def run_jobs(organization_id, job_ids=None, now=None) -> Dict[str, JobResult]:
    results = {}
    for job_id, job in JOBS.items():
        if job_ids and job_id not in job_ids:
            continue
        results[job_id] = job.run(organization_id, now=now)
    return results
