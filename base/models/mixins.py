# base/models/mixins.py
from django.core.exceptions import ValidationError
from django.db import models
from .managers import OrganizationScopeManager
from ..org_context import get_organization_id


class TimeStampedMixin(models.Model):
    """ختم إنشاء/تعديل مع فهارس."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class OrganizationOwnedMixin(models.Model):
    """
    أي موديل يرث منه سيحصل على:
    - حقل organization
    - مدير objects يقيّد الاستعلامات على المؤسسة النشطة
    - ضبط المؤسسة تلقائيًا من السياق عند الإنشاء إن لم تُحدد
    - فحص cross-organization للعلاقات المذكورة في organization_dependent_relations
    """
    organization = models.ForeignKey(
        "base.Organization",
        on_delete=models.CASCADE,
        related_name="%(app_label)s_%(class)s_set",
        db_index=True,
    )

    objects = OrganizationScopeManager()
    all_objects = models.Manager()

    # أسماء الحقول العلائقية التي يجب أن تطابق self.organization
    organization_dependent_relations: tuple[str, ...] = ()

    class Meta:
        abstract = True

    def clean(self):
        super().clean()
        for rel_name in getattr(self, "organization_dependent_relations", ()):
            rel = getattr(self, rel_name, None)
            if not rel:
                continue
            related_org_id = getattr(rel, "organization_id", None)
            if related_org_id and related_org_id != self.organization_id:
                raise ValidationError({rel_name: "Related record belongs to a different organization."})

    def save(self, *args, **kwargs):
        if not self.organization_id:
            oid = get_organization_id()
            if oid:
                self.organization_id = oid
        return super().save(*args, **kwargs)
