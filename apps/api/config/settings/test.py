# apps/api/config/settings/test.py
from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

PICKS_LEADERBOARD_LIMIT = None

LOGGING["root"]["level"] = "WARNING"
