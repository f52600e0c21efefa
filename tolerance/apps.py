# tolerance/apps.py
from django.apps import AppConfig


class ToleranceConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tolerance"
    verbose_name = "Tolerance rules"

    def ready(self):
        from . import signals  # noqa: F401
