# base/models/managers.py
# مدير يقيّد الاستعلام افتراضيًا بـ organization_id = المؤسسة الحالية، ويتيح إلغاء التقييد عند الحاجة.
from django.db import models
from ..org_context import get_organization_id


class OrganizationScopeQuerySet(models.QuerySet):
    def _apply_organization_scope(self):
        oid = get_organization_id()
        if oid is None:
            return self
        has_org_field = any(f.name == "organization" for f in self.model._meta.get_fields())
        if has_org_field:
            return self.filter(organization_id=oid)
        return self

    def for_current_organization(self):
        return self._apply_organization_scope()

    def for_organization(self, organization_id):
        return self.filter(organization_id=organization_id)


class OrganizationScopeManager(models.Manager.from_queryset(OrganizationScopeQuerySet)):

    def get_queryset(self):
        qs = super().get_queryset()
        return qs._apply_organization_scope()

    # للوصول بدون أي تقييد (حذر!)
    def all_organizations(self):
        return super().get_queryset()
