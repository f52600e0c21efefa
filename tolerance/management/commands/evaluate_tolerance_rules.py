from django.core.management.base import BaseCommand, CommandError

from base.models import Organization
from tolerance.rules import evaluate_organization


class Command(BaseCommand):
    help = "Evaluate enabled tolerance rules and record new exceptions."

    def add_arguments(self, parser):
        parser.add_argument("--organization", dest="organization",
                            help="Only evaluate rules of the organization with this slug.")

    def handle(self, *args, **options):
        qs = Organization.objects.filter(active=True)
        if options.get("organization"):
            qs = qs.filter(slug=options["organization"])
            if not qs.exists():
                raise CommandError(f"Organization '{options['organization']}' not found.")

        total = 0
        for org in qs.order_by("id"):
            results = evaluate_organization(org.pk)
            created = sum(results.values())
            total += created
            self.stdout.write(f"- [{org.slug}] {len(results)} rules, {created} new exceptions")

        self.stdout.write(self.style.SUCCESS(f"Done: {total} exceptions created."))
