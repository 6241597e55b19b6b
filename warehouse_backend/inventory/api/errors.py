# inventory/api/errors.py

"""
Map inventory domain errors to HTTP responses.

- Catalog resolution failures       -> 404 (configuration defect)
- Lockstep breach (liquid stock)    -> 409 (consistency problem, not user error)
- Every other business rejection    -> 400
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response

from inventory.exceptions import CatalogError, DomainError, InsufficientLiquidStock

logger = logging.getLogger(__name__)


def status_for(exc: DomainError) -> int:
    if isinstance(exc, CatalogError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, InsufficientLiquidStock):
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def inventory_error_response(exc: DomainError) -> Response:
    code = status_for(exc)
    logger.info(
        "Inventory operation rejected",
        extra={"code": exc.code, "status": code, "details": exc.details},
    )
    return Response(exc.as_dict(), status=code)


def validation_error_response(exc: DjangoValidationError) -> Response:
    return Response(
        {"detail": "; ".join(exc.messages), "code": "invalid"},
        status=status.HTTP_400_BAD_REQUEST,
    )
