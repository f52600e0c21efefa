"""
Django settings for mpath project.
"""

# django-environ لقراءة القيم من .env
import environ
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent


# القيم الحساسة مثل SECRET_KEY و DB_PASSWORD بلا default.
env = environ.Env(
    DEBUG=(bool, False),
    DB_PORT=(int, 5432),
    LOG_LEVEL=(str, "INFO"),
    NOTIFICATION_DEDUP_HOURS=(int, 24),
)

environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

# ========== Debug ==========
DEBUG = env("DEBUG")
SECRET_KEY = env("SECRET_KEY")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

# ========== Database ==========
DATABASES = {
    "default": {
        "ENGINE": env("DB_ENGINE", default="django.db.backends.postgresql"),
        "NAME": env("DB_NAME"),
        "USER": env("DB_USER", default=""),
        "PASSWORD": env("DB_PASSWORD", default=""),
        "HOST": env("DB_HOST", default="localhost"),
        "PORT": env("DB_PORT"),
    }
}

SITE_URL = env("SITE_URL", default="http://127.0.0.1:8000")


# -------------------------------------------------
# Applications
#  ملاحظة: base قبل باقي التطبيقات لأنه يعرّف AUTH_USER_MODEL
# -------------------------------------------------
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Third-party
    "guardian",                 # Object-level permissions

    # Project apps
    "base.apps.BaseConfig",     # Organization / User / Membership
    "people.apps.PeopleConfig",
    "tasks.apps.TasksConfig",
    "feedback.apps.FeedbackConfig",
    "notifications.apps.NotificationsConfig",
    "tolerance.apps.ToleranceConfig",
]

# -------------------------------------------------
# Middleware
# -------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "base.middleware.OrganizationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# -------------------------------------------------
# URLs / WSGI
# -------------------------------------------------
ROOT_URLCONF = "mpath.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [os.path.join(BASE_DIR, "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "base.context_processors.organization",
            ],
        },
    },
]

WSGI_APPLICATION = "mpath.wsgi.application"


# -------------------------------------------------
# Auth
# -------------------------------------------------
AUTH_USER_MODEL = "base.User"

# Object-level permissions (django-guardian)
AUTHENTICATION_BACKENDS = (
    "django.contrib.auth.backends.ModelBackend",
    "guardian.backends.ObjectPermissionBackend",
)

# لا حاجة لمستخدم مجهول: كل الصفحات خلف تسجيل الدخول.
ANONYMOUS_USER_NAME = None

LOGIN_URL = "/accounts/login/"
LOGIN_REDIRECT_URL = "/"
LOGOUT_REDIRECT_URL = "/accounts/login/"

# -------------------------------------------------
# Password validation
# -------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# -------------------------------------------------
# I18N / TZ
# -------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# -------------------------------------------------
# Static
# -------------------------------------------------
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -------------------------------------------------
# Logging
# -------------------------------------------------
LOG_LEVEL = env("LOG_LEVEL")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "base": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "people": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "tasks": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "feedback": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "notifications": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "tolerance": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# -------------------------------------------------
# Notifications
# -------------------------------------------------
# لا تُرسل نفس الإشعار (بنفس مفتاح منع التكرار) خلال هذه المدة.
NOTIFICATION_DEDUP_HOURS = env("NOTIFICATION_DEDUP_HOURS")
