# inventory/api/views.py

"""
INVENTORY API

Thin HTTP layer over the inventory engine:
- serializers validate request shape
- services enforce business rules and atomicity
- domain errors are mapped to responses in inventory.api.errors
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from inventory.api.errors import inventory_error_response, validation_error_response
from inventory.api.serializers import (
    AlertBreachSerializer,
    ProductionRequestSerializer,
    ProductionResultSerializer,
    PurchaseRequestSerializer,
    PurchaseResultSerializer,
    SaleRequestSerializer,
    SaleResultSerializer,
    StockSummarySerializer,
)
from inventory.exceptions import DomainError
from inventory.services import (
    active_alerts,
    record_purchase,
    record_sale,
    run_production,
    stock_summary,
)
from permissions.roles import (
    CAP_INVENTORY_VIEW,
    CAP_PRODUCTION_RUN,
    CAP_PURCHASES_RECORD,
    CAP_SALES_RECORD,
    HasCapability,
)


class ProductionView(GenericAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_PRODUCTION_RUN
    serializer_class = ProductionRequestSerializer

    @extend_schema(
        tags=["inventory"],
        request=ProductionRequestSerializer,
        responses={201: ProductionResultSerializer},
    )
    def post(self, request):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            result = run_production(
                family_code=data["product_code"],
                container_size=data["gallon_size"],
                count=data["count"],
                user=request.user,
            )
        except DomainError as exc:
            return inventory_error_response(exc)
        except DjangoValidationError as exc:
            return validation_error_response(exc)

        return Response(
            ProductionResultSerializer(result).data, status=status.HTTP_201_CREATED
        )


class SaleView(GenericAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_SALES_RECORD
    serializer_class = SaleRequestSerializer

    @extend_schema(
        tags=["inventory"],
        request=SaleRequestSerializer,
        responses={201: SaleResultSerializer},
    )
    def post(self, request):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            result = record_sale(
                family_code=data["product_code"],
                container_size=data["gallon_size"],
                count=data["count"],
                user=request.user,
            )
        except DomainError as exc:
            return inventory_error_response(exc)
        except DjangoValidationError as exc:
            return validation_error_response(exc)

        return Response(
            SaleResultSerializer(result).data, status=status.HTTP_201_CREATED
        )


class PurchaseView(GenericAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_PURCHASES_RECORD
    serializer_class = PurchaseRequestSerializer

    @extend_schema(
        tags=["inventory"],
        request=PurchaseRequestSerializer,
        responses={201: PurchaseResultSerializer},
    )
    def post(self, request):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)

        items = [
            {"product_code": line["code"], "qty": line["qty"]}
            for line in s.validated_data["items"]
        ]

        try:
            result = record_purchase(items=items, user=request.user)
        except DomainError as exc:
            return inventory_error_response(exc)
        except DjangoValidationError as exc:
            return validation_error_response(exc)

        return Response(
            PurchaseResultSerializer(result).data, status=status.HTTP_201_CREATED
        )


class StockSummaryView(GenericAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_VIEW

    @extend_schema(tags=["inventory"], responses=StockSummarySerializer)
    def get(self, request):
        return Response(StockSummarySerializer(stock_summary()).data)


class ActiveAlertsView(GenericAPIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_INVENTORY_VIEW

    @extend_schema(tags=["inventory"], responses=AlertBreachSerializer(many=True))
    def get(self, request):
        breaches = [b.as_dict() for b in active_alerts()]
        return Response(AlertBreachSerializer(breaches, many=True).data)
