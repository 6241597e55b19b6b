"""
PATH: backend/settings/base.py

BASE SETTINGS (shared by dev + prod)

- Environment via django-environ (.env supported)
- JWT auth (SimpleJWT) + capability permissions
- Fixed warehouse codes used by the inventory engine
- Console logging for the domain apps
- Sentry (optional): error visibility in production
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import environ
from corsheaders.defaults import default_headers, default_methods

# -----------------------------------------
# BASE DIRECTORY
# -----------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# -----------------------------------------
# ENV (django-environ)
# -----------------------------------------
env = environ.Env(
    DEBUG=(bool, True),
    SECRET_KEY=(str, ""),
    TIME_ZONE=(str, "UTC"),
    ALLOWED_HOSTS=(list, ["localhost", "127.0.0.1"]),
    CORS_ALLOWED_ORIGINS=(list, ["http://localhost:5173"]),
    CSRF_TRUSTED_ORIGINS=(list, ["http://localhost:5173"]),
    DATABASE_URL=(str, f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
    ADMIN_PATH=(str, "admin/"),
    LOG_LEVEL=(str, "INFO"),
    JWT_ACCESS_MINUTES=(int, 60 * 24 * 7),
    # Fixed warehouses
    RAW_WAREHOUSE_CODE=(str, "RAW_WH"),
    CONTAINER_WAREHOUSE_CODE=(str, "GAL_WH"),
    FINISHED_WAREHOUSE_CODE=(str, "FG_WH"),
    # Sentry (optional; enable by setting SENTRY_DSN)
    SENTRY_DSN=(str, ""),
    SENTRY_ENVIRONMENT=(str, "development"),
    SENTRY_TRACES_SAMPLE_RATE=(float, 0.0),
    SENTRY_SEND_PII=(bool, False),
)

# -----------------------------------------
# LOAD .env
# -----------------------------------------
env_file_1 = BASE_DIR / ".env"
env_file_2 = BASE_DIR.parent / ".env"

if env_file_1.exists():
    env.read_env(str(env_file_1))
elif env_file_2.exists():
    env.read_env(str(env_file_2))

# -----------------------------------------
# CORE SECURITY
# -----------------------------------------
SECRET_KEY = (env("SECRET_KEY") or "dev-insecure-change-me").strip()
DEBUG = env.bool("DEBUG")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS")

# -----------------------------------------
# I18N / TZ
# -----------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = (env("TIME_ZONE") or "UTC").strip()
USE_I18N = True
USE_TZ = True

# -----------------------------------------
# AUTH USER MODEL (custom)
# -----------------------------------------
AUTH_USER_MODEL = "users.User"

# Staff passwords: same floor as seed_users
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
]

ADMIN_PATH = (env("ADMIN_PATH") or "admin/").strip()

# -----------------------------------------
# INSTALLED APPS
# -----------------------------------------
INSTALLED_APPS = [
    "corsheaders",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "rest_framework_simplejwt",
    "drf_spectacular",
    "users.apps.UsersConfig",
    "catalog.apps.CatalogConfig",
    "inventory.apps.InventoryConfig",
]

# -----------------------------------------
# MIDDLEWARE
# -----------------------------------------
MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "backend.urls"
WSGI_APPLICATION = "backend.wsgi.application"
APPEND_SLASH = True

# -----------------------------------------
# TEMPLATES (required for Django admin)
# -----------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [str(BASE_DIR / "templates")],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

# -----------------------------------------
# REST FRAMEWORK
# -----------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticated",),
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# -----------------------------------------
# SIMPLE JWT
# -----------------------------------------
SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=env.int("JWT_ACCESS_MINUTES")),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=14),
    "ROTATE_REFRESH_TOKENS": True,
}

# -----------------------------------------
# DATABASE
# -----------------------------------------
DATABASES = {
    "default": env.db("DATABASE_URL"),
}

# -----------------------------------------
# INVENTORY: FIXED WAREHOUSES
# -----------------------------------------
WAREHOUSE_CODES = {
    "raw": env("RAW_WAREHOUSE_CODE").strip(),
    "containers": env("CONTAINER_WAREHOUSE_CODE").strip(),
    "finished_goods": env("FINISHED_WAREHOUSE_CODE").strip(),
}

# -----------------------------------------
# LOGGING
# -----------------------------------------
LOG_LEVEL = (env("LOG_LEVEL") or "INFO").strip().upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "inventory": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "catalog": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "users": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}

# -----------------------------------------
# SENTRY (optional)
# -----------------------------------------
SENTRY_DSN = (env("SENTRY_DSN") or "").strip()
SENTRY_ENVIRONMENT = (env("SENTRY_ENVIRONMENT") or "development").strip()
SENTRY_TRACES_SAMPLE_RATE = float(env("SENTRY_TRACES_SAMPLE_RATE"))
SENTRY_SEND_PII = env.bool("SENTRY_SEND_PII")

if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=SENTRY_ENVIRONMENT,
        integrations=[DjangoIntegration()],
        traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=SENTRY_SEND_PII,
    )

# -----------------------------------------
# CORS / CSRF
# -----------------------------------------
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = list(default_methods)
CORS_ALLOW_HEADERS = list(default_headers)

CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS")

# -----------------------------------------
# STATIC FILES
# -----------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------
# SWAGGER
# -----------------------------------------
SPECTACULAR_SETTINGS = {
    "TITLE": "Warehouse Backend API",
    "DESCRIPTION": "Production, sales, purchases and stock for raw materials, containers and finished goods",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
}
