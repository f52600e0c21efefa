# base/management/commands/init_organization.py
from __future__ import annotations

from typing import Any
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.apps import apps

from base.models import Organization, User
from base.services import create_organization


class Command(BaseCommand):
    help = "Initialize an organization and its OWNER account (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--email", default="owner@example.com",
                            help="Owner email (also the login/USERNAME_FIELD).")
        parser.add_argument("--password", default="owner",
                            help="Owner password.")
        parser.add_argument("--organization", default="Your Organization",
                            help="Organization name to create/use.")
        parser.add_argument("--slug", default="",
                            help="Organization slug (defaults to the slugified name).")
        parser.add_argument("--superuser", action="store_true",
                            help="Create the owner as a Django superuser.")

    def _assert_auth_user_model(self):
        auth_user_model = settings.AUTH_USER_MODEL
        if auth_user_model.lower() != "base.user":
            raise CommandError(
                f"AUTH_USER_MODEL is '{auth_user_model}', expected 'base.User'. "
                "Set AUTH_USER_MODEL='base.User' in settings.py before first migrate."
            )
        if apps.get_model(auth_user_model) is not User:
            raise CommandError("AUTH_USER_MODEL points to a different class than base.models.user.User.")

    @transaction.atomic
    def handle(self, *args: Any, **options: Any):
        self._assert_auth_user_model()

        email = options["email"].strip().lower()
        org_name = options["organization"].strip()

        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            create = User.objects.create_superuser if options["superuser"] else User.objects.create_user
            user = create(email=email, password=options["password"])
            self.stdout.write(f"- created user {email}")
        else:
            self.stdout.write(f"- user {email} already exists")

        if user.organization_id:
            org = Organization.objects.get(pk=user.organization_id)
            self.stdout.write(self.style.WARNING(f"User already belongs to '{org.name}', nothing to do."))
            return

        try:
            org = create_organization(user=user, name=org_name, slug=options["slug"])
        except ValidationError as exc:
            raise CommandError("; ".join(exc.messages))

        self.stdout.write(self.style.SUCCESS(f"Organization '{org.name}' ({org.slug}) owned by {email}."))
