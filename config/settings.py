"""Django settings for the event registrar.

No database is used; all records live in text files under REGISTRAR["DATA_DIR"].
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "registrar-local-only")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("true", "1", "t")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "registrar.apps.RegistrarConfig",
]

DATABASES = {}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = os.getenv("REGISTRAR_TIME_ZONE", "UTC")

REGISTRAR = {
    "DATA_DIR": Path(os.getenv("REGISTRAR_DATA_DIR", BASE_DIR / "data")),
    "MAX_LOGIN_ATTEMPTS": int(os.getenv("REGISTRAR_MAX_LOGIN_ATTEMPTS", 3)),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "registrar": {
            "handlers": ["console"],
            "level": os.getenv("REGISTRAR_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
