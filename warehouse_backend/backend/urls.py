# backend/urls.py
"""
PROJECT URLS

Everything the frontend talks to lives under /api/:
- /api/auth/...        login, current user, staff accounts
- /api/inventory/...   production, sales, purchases, stock summary, alerts
- /api/health/         liveness + "is the catalog seeded?" (AllowAny)

The admin path is configurable (ADMIN_PATH) to keep bot noise down.
"""

from __future__ import annotations

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import DatabaseError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenRefreshView

from catalog.models import Warehouse


@extend_schema(responses={200: dict})
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "name": "warehouse-backend",
            "auth": {
                "login": "/api/auth/login/",
                "me": "/api/auth/me/",
                "jwt_refresh": "/api/auth/jwt/refresh/",
            },
            "inventory": {
                "production": "/api/inventory/production/",
                "sales": "/api/inventory/sales/",
                "purchases": "/api/inventory/purchases/",
                "summary": "/api/inventory/summary/",
                "alerts": "/api/inventory/alerts/active/",
            },
            "docs": {"swagger": "/api/docs/", "schema": "/api/schema/"},
        }
    )


@extend_schema(responses={200: dict, 503: dict})
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    - db: a trivial query succeeds
    - catalog: the three fixed warehouses exist (seed_catalog has run)
    """
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
        expected = set(settings.WAREHOUSE_CODES.values())
        present = set(
            Warehouse.objects.filter(code__in=expected).values_list("code", flat=True)
        )
    except DatabaseError as e:
        return Response({"status": "degraded", "db": "down", "error": str(e)}, status=503)

    missing = sorted(expected - present)
    if missing:
        return Response(
            {"status": "degraded", "db": "ok", "catalog": "unseeded", "missing_warehouses": missing},
            status=503,
        )

    return Response({"status": "ok", "db": "ok", "catalog": "ok"})


ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"

api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("auth/jwt/refresh/", TokenRefreshView.as_view(), name="jwt-refresh"),
    path("auth/", include("users.urls")),
    path("inventory/", include("inventory.api.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
