"""
Development settings – extends base settings with debug-friendly overrides.
"""
from decouple import config

from .base import *  # noqa: F401, F403

DEBUG = config("DEBUG", default=True, cast=bool)

# In development only: allow all hosts if DEBUG is True
if DEBUG:
    ALLOWED_HOSTS = ["*"]

# Disable HTTPS requirements in development
SECURE_SSL_REDIRECT = False

# Show detailed errors
LOGGING["root"]["level"] = "DEBUG"  # noqa: F405
