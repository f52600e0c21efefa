# people/apps.py
from django.apps import AppConfig


class PeopleConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "people"
    verbose_name = "People"

    def ready(self):
        # تسجيل صلاحيات person.overview و oneonone.*
        from . import access  # noqa: F401
