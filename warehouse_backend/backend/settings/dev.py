# backend/settings/dev.py
"""
PATH: backend/settings/dev.py

LOCAL DEVELOPMENT SETTINGS

SQLite by default. SQLite ignores SELECT ... FOR UPDATE, so concurrent
production/sale requests are only serialized on Postgres; point
DATABASE_URL at a local Postgres to exercise locking.
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import LOGGING, env

DEBUG = True

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "testserver"])

CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=["http://localhost:5173"])
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=["http://localhost:5173"])
CORS_ALLOW_CREDENTIALS = True

# Ledger decisions are the interesting part while developing.
LOGGING["loggers"]["inventory"]["level"] = env("LOG_LEVEL", default="DEBUG").strip().upper()
