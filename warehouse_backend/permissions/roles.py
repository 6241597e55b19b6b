# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS (STAFF JOB ROLES)
# =========================================================
ROLE_ADMIN = "admin"
ROLE_SALES = "sales"
ROLE_WAREHOUSE = "warehouse"
ROLE_SUPPLY = "supply"

STAFF_ROLES = {
    ROLE_ADMIN,
    ROLE_SALES,
    ROLE_WAREHOUSE,
    ROLE_SUPPLY,
}


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
# Views protect capabilities, not raw roles.
CAP_PRODUCTION_RUN = "production.run"
CAP_SALES_RECORD = "sales.record"
CAP_PURCHASES_RECORD = "purchases.record"
CAP_INVENTORY_VIEW = "inventory.view"
CAP_USERS_MANAGE = "users.manage"

ALL_CAPABILITIES = {
    CAP_PRODUCTION_RUN,
    CAP_SALES_RECORD,
    CAP_PURCHASES_RECORD,
    CAP_INVENTORY_VIEW,
    CAP_USERS_MANAGE,
}


# =========================================================
# ROLE → CAPABILITY MAP
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_ADMIN: {
        *ALL_CAPABILITIES,
    },
    ROLE_WAREHOUSE: {
        CAP_PRODUCTION_RUN,
        CAP_INVENTORY_VIEW,
    },
    ROLE_SALES: {
        CAP_SALES_RECORD,
        CAP_INVENTORY_VIEW,
    },
    ROLE_SUPPLY: {
        CAP_PURCHASES_RECORD,
        CAP_INVENTORY_VIEW,
    },
}


def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def capabilities_for(user) -> set[str]:
    return set(ROLE_CAPABILITIES.get(get_user_role(user), set()))


# =========================================================
# Capability Permissions
# =========================================================
class HasCapability(BasePermission):
    """
    Require a specific capability.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        required_capability = CAP_PRODUCTION_RUN
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_capability", None)
        if not required:
            # deny-by-default to avoid accidental open endpoints
            return False

        return required in capabilities_for(user)
