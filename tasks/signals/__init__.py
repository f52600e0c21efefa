# tasks/signals/__init__.py
from . import ownership  # noqa: F401
