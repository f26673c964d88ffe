"""Django settings for the presubmit bot."""

from __future__ import annotations

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "presubmit-bot-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "presubmit",
]

# The bot keeps no state between runs.
DATABASES: dict = {}

USE_TZ = True

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
        "presubmit": {
            "handlers": ["console"],
            "level": os.environ.get("PRESUBMIT_LOG_LEVEL", "INFO"),
        },
    },
}

# Owners whose e-mail address ends with one of these suffixes get their
# changes tested automatically.
PRESUBMIT_TRUSTED_EMAIL_SUFFIXES = ("@google.com",)

# Tests the dry-run workflow reports as runnable.
PRESUBMIT_TESTS = [
    name.strip() for name in os.environ.get("PRESUBMIT_TESTS", "").split(",") if name.strip()
]

PRESUBMIT_UNTRUSTED_MESSAGE = "Tell Freenode#fuchsia to kick the presubmit tests.\n"
