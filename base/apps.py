# base/apps.py
from django.apps import AppConfig


class BaseConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "base"
    verbose_name = "Base"

    def ready(self):
        # تسجيل صلاحيات الأفعال العامة (report.access ...)
        from . import permissions  # noqa: F401
