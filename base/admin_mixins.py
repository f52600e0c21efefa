# base/admin_mixins.py
# ميكسنات عامة للأدمن يعاد استخدامها في كل التطبيقات
from typing import Any, Sequence
from django.contrib import admin


def _unscoped_manager(model: type) -> Any:
    # الأدمن يرى كل المؤسسات
    return getattr(model, "all_objects", model._base_manager)


class UnscopedAdminMixin:
    """
    Admin sees every row regardless of the active organization, including
    FK choices.
    """
    def get_queryset(self, request):
        return _unscoped_manager(self.model).all()

    def formfield_for_foreignkey(self, db_field, request, **kwargs):
        remote = db_field.remote_field.model
        kwargs.setdefault("queryset", _unscoped_manager(remote).all())
        return super().formfield_for_foreignkey(db_field, request, **kwargs)


class ReadonlyTimestampsMixin:
    TIMESTAMP_FIELDS: Sequence[str] = ("created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        ro = list(super().get_readonly_fields(request, obj) or [])
        names = {fld.name for fld in self.model._meta.get_fields()}
        return ro + [f for f in self.TIMESTAMP_FIELDS if f in names and f not in ro]


class AppAdmin(UnscopedAdminMixin, ReadonlyTimestampsMixin, admin.ModelAdmin):
    pass
