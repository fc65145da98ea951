"""
FOS – Django Settings (Infrastructure Only)
============================================
Django serves as the HTTP host for the FOS operations core.
FOS architecture is the authority — Django does not dictate structure.

State lives in the in-process ApplicationStateStore, so no database
and no Django apps beyond the framework container are needed.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("FOS_SECRET_KEY", "fos-dev-key-replace-before-deployment")

DEBUG = os.environ.get("FOS_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS: list[str] = []

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# Snapshots are held in memory by the operations store.
DATABASES = {}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Operations rules ──────────────────────────────────────────
# Keys mirror core.config.rules.OperationsConfig.
FOS_OPERATIONS = {
    "invoice_due_days": int(os.environ.get("FOS_INVOICE_DUE_DAYS", "30")),
    "low_stock_threshold": int(os.environ.get("FOS_LOW_STOCK_THRESHOLD", "50")),
    "allow_multiple_open_check_ins": (
        os.environ.get("FOS_ALLOW_MULTIPLE_OPEN_CHECK_INS", "1") == "1"
    ),
    "currency_label": os.environ.get("FOS_CURRENCY_LABEL", "ETB"),
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "fos": {
            "handlers": ["console"],
            "level": os.environ.get("FOS_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
