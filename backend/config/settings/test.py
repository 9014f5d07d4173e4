# config/settings/test.py
"""
Test environment settings.

This file is used exclusively for running tests.
"""

from .base import *

# Force test environment
ENVIRONMENT = "test"
os.environ["ENVIRONMENT"] = "test"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Console-only logging; tests never write log files
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "level": "WARNING",
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "DEBUG",
    },
}
