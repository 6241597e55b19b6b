import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("catalog", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="StockLedgerEntry",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("PRODUCTION", "Production"),
                            ("SALE", "Sale"),
                            ("PURCHASE", "Purchase"),
                        ],
                        max_length=20,
                    ),
                ),
                ("delta_qty", models.DecimalField(decimal_places=4, max_digits=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "actor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="stock_ledger_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="ledger_entries",
                        to="catalog.product",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="ledger_entries",
                        to="catalog.warehouse",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "stock ledger entries",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["created_at"], name="ledger_created_at_idx"),
                    models.Index(fields=["kind"], name="ledger_kind_idx"),
                    models.Index(
                        fields=["warehouse", "product", "created_at"],
                        name="ledger_wh_product_created_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="StockBalance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("qty", models.DecimalField(decimal_places=4, default=Decimal("0"), max_digits=16)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="balances",
                        to="catalog.product",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="balances",
                        to="catalog.warehouse",
                    ),
                ),
            ],
            options={
                "ordering": ["warehouse__code", "product__code"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("warehouse", "product"),
                        name="uniq_stock_balance_warehouse_product",
                    )
                ],
            },
        ),
    ]
