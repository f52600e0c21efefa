# mpath/settings_test.py
# إعدادات الاختبارات: SQLite في الذاكرة بدل PostgreSQL.
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_ENGINE", "django.db.backends.sqlite3")
os.environ.setdefault("DB_NAME", ":memory:")

from .settings import *  # noqa: E402,F401,F403

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# caplog يلتقط السجلات من الجذر
for _logger in LOGGING["loggers"].values():  # noqa: F405
    _logger["propagate"] = True
