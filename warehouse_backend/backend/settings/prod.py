# backend/settings/prod.py
"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS

- DEBUG forced off, SECRET_KEY and ALLOWED_HOSTS required (fail closed)
- Postgres only: the inventory engine relies on SELECT ... FOR UPDATE row
  locks, which SQLite ignores
- WhiteNoise serves collected static files (admin + Swagger UI)
- CORS/CSRF origins explicit and https only
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, env  # explicit for Ruff (F405)

DEBUG = False

# ----------------------------
# SECRET KEY / HOSTS
# ----------------------------
_secret_key = (env("SECRET_KEY", default="") or "").strip()
if not _secret_key or _secret_key == "dev-insecure-change-me":
    raise ImproperlyConfigured("SECRET_KEY must be set to a strong value in production.")
SECRET_KEY = _secret_key

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS must be set in production.")

# ----------------------------
# DATABASE (Postgres only)
# ----------------------------
_database_url = (env("DATABASE_URL", default="") or "").strip()
if not _database_url.startswith(("postgres://", "postgresql://", "pgsql://")):
    raise ImproperlyConfigured(
        "DATABASE_URL must point at Postgres in production (row locks are required)."
    )

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ----------------------------
# STATIC FILES (WhiteNoise)
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))

MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ----------------------------
# PROXY / SSL
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)

SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

# ----------------------------
# COOKIES / HEADERS
# ----------------------------
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
CSRF_COOKIE_HTTPONLY = True

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# ----------------------------
# CORS / CSRF (explicit + https only)
# ----------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[])
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=[])

for _name, _origins in (
    ("CORS_ALLOWED_ORIGINS", CORS_ALLOWED_ORIGINS),
    ("CSRF_TRUSTED_ORIGINS", CSRF_TRUSTED_ORIGINS),
):
    if not _origins:
        raise ImproperlyConfigured(f"{_name} must be set in production.")
    if any(not o.startswith("https://") for o in _origins):
        raise ImproperlyConfigured(f"{_name} must be https:// in production.")

CORS_ALLOW_CREDENTIALS = False
