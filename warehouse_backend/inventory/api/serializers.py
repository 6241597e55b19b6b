# inventory/api/serializers.py

from decimal import Decimal

from rest_framework import serializers

from catalog.codes import CONTAINER_SIZES

QTY_FIELD = dict(max_digits=16, decimal_places=4, coerce_to_string=False)


# ---------------- REQUESTS ----------------
class ProductionRequestSerializer(serializers.Serializer):
    product_code = serializers.RegexField(r"^[A-Za-z0-9]+$", max_length=32)
    gallon_size = serializers.ChoiceField(choices=CONTAINER_SIZES)
    count = serializers.IntegerField(min_value=1)

    def validate_product_code(self, value):
        return value.strip().upper()


class SaleRequestSerializer(ProductionRequestSerializer):
    pass


class PurchaseItemSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    qty = serializers.DecimalField(min_value=Decimal("0.0001"), **QTY_FIELD)

    def validate_code(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value


class PurchaseRequestSerializer(serializers.Serializer):
    items = PurchaseItemSerializer(many=True, allow_empty=False)


# ---------------- RESULTS ----------------
class ConsumedSerializer(serializers.Serializer):
    raw_material = serializers.CharField()
    kg = serializers.DecimalField(**QTY_FIELD)


class SaleResultSerializer(serializers.Serializer):
    family_code = serializers.CharField()
    container_size = serializers.IntegerField()
    count = serializers.IntegerField()
    liters = serializers.IntegerField()


class ProductionResultSerializer(SaleResultSerializer):
    consumed = ConsumedSerializer(many=True)


class PurchaseLineResultSerializer(serializers.Serializer):
    product_code = serializers.CharField()
    warehouse_code = serializers.CharField()
    qty = serializers.DecimalField(**QTY_FIELD)


class PurchaseResultSerializer(serializers.Serializer):
    items = PurchaseLineResultSerializer(many=True)


class FamilyStockSerializer(serializers.Serializer):
    code = serializers.CharField()
    liters = serializers.DecimalField(**QTY_FIELD)
    pack = serializers.DictField(child=serializers.DecimalField(**QTY_FIELD))


class StockSummarySerializer(serializers.Serializer):
    raw_kg = serializers.DictField(child=serializers.DecimalField(**QTY_FIELD))
    gallons_empty = serializers.DictField(child=serializers.DecimalField(**QTY_FIELD))
    products = FamilyStockSerializer(many=True)


class AlertBreachSerializer(serializers.Serializer):
    warehouse_code = serializers.CharField()
    warehouse = serializers.CharField()
    product = serializers.CharField()
    current = serializers.DecimalField(**QTY_FIELD)
    min = serializers.DecimalField(**QTY_FIELD)
    unit = serializers.CharField()
