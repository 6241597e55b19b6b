import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Warehouse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(db_index=True, max_length=32, unique=True)),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(db_index=True, max_length=64, unique=True)),
                ("name", models.CharField(max_length=255)),
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("RAW_MATERIAL", "Raw Material"),
                            ("EMPTY_CONTAINER", "Empty Container"),
                            ("PACKAGED_PRODUCT", "Packaged Product"),
                            ("LIQUID_PRODUCT", "Liquid Product"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "unit",
                    models.CharField(
                        choices=[("kg", "Kilogram"), ("count", "Count"), ("liter", "Liter")],
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["code"],
                "indexes": [models.Index(fields=["kind"], name="catalog_product_kind_idx")],
            },
        ),
        migrations.CreateModel(
            name="Formula",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("family_code", models.CharField(db_index=True, max_length=32)),
                ("kg_per_liter", models.DecimalField(decimal_places=4, max_digits=10)),
                (
                    "raw_material",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="formulas",
                        to="catalog.product",
                    ),
                ),
            ],
            options={
                "ordering": ["family_code", "raw_material__code"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("family_code", "raw_material"),
                        name="uniq_formula_family_raw_material",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="AlertRule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("min_qty", models.DecimalField(decimal_places=4, max_digits=16)),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="alert_rules",
                        to="catalog.product",
                    ),
                ),
                (
                    "warehouse",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="alert_rules",
                        to="catalog.warehouse",
                    ),
                ),
            ],
            options={
                "ordering": ["warehouse__code", "product__code"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("warehouse", "product"),
                        name="uniq_alert_rule_warehouse_product",
                    )
                ],
            },
        ),
    ]
