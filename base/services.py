# base/services.py
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils.text import slugify

from .models import Organization, OrganizationMember

logger = logging.getLogger(__name__)


@transaction.atomic
def create_organization(*, user, name: str, slug: str = "", description: str = "") -> Organization:
    """
    The official way to create a tenant.

    - creates the Organization
    - makes the creator its OWNER
    - switches the creator's current organization to it
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Organization name is required.")
    if user.organization_id:
        raise ValidationError("User already belongs to an organization.")

    slug = slugify(slug or name)
    if Organization.objects.filter(slug=slug).exists():
        raise ValidationError({"slug": "Slug already in use."})

    org = Organization(name=name, slug=slug, description=description)
    org.full_clean()
    org.save()

    OrganizationMember.objects.create(user=user, organization=org, role=OrganizationMember.Role.OWNER)
    user.organization = org
    user.save(update_fields=["organization"])

    logger.info("Organization %s created by user %s", org.slug, user.pk)
    return org


@transaction.atomic
def add_member(*, organization: Organization, user, role: str = OrganizationMember.Role.USER) -> OrganizationMember:
    """Upsert membership; also attaches the user to the organization if they have none."""
    if role not in OrganizationMember.Role.values:
        raise ValidationError({"role": f"Unknown role: {role}"})

    member, created = OrganizationMember.objects.update_or_create(
        user=user, organization=organization, defaults={"role": role},
    )
    if not user.organization_id:
        user.organization = organization
        user.save(update_fields=["organization"])

    logger.info(
        "Member %s %s in organization %s as %s",
        user.pk, "added" if created else "updated", organization.pk, role,
    )
    return member
