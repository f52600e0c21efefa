# notifications/management/commands/run_cron_jobs.py
from django.core.management.base import BaseCommand, CommandError

from base.models import Organization
from notifications.jobs import JOBS, run_jobs


class Command(BaseCommand):
    help = "Run the daily notification jobs (overdue tasks, birthdays) for every active organization."

    def add_arguments(self, parser):
        parser.add_argument("--organization", dest="organization",
                            help="Only run for the organization with this slug.")
        parser.add_argument("--job", dest="jobs", action="append", choices=sorted(JOBS),
                            help="Job id to run (repeatable). Defaults to all jobs.")

    def handle(self, *args, **options):
        qs = Organization.objects.filter(active=True)
        if options.get("organization"):
            qs = qs.filter(slug=options["organization"])
            if not qs.exists():
                raise CommandError(f"Organization '{options['organization']}' not found.")

        total = 0
        failures = 0
        for org in qs.order_by("id"):
            results = run_jobs(org.pk, job_ids=options.get("jobs"))
            for job_id, result in results.items():
                if result.success:
                    total += result.notifications_created
                    self.stdout.write(f"- [{org.slug}] {job_id}: {result.notifications_created} notifications")
                else:
                    failures += 1
                    self.stdout.write(self.style.ERROR(f"- [{org.slug}] {job_id}: {result.error}"))

        style = self.style.SUCCESS if not failures else self.style.WARNING
        self.stdout.write(style(f"Done: {total} notifications created, {failures} failed jobs."))
