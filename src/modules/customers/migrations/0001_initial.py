from decimal import Decimal

from django.db import migrations, models

import modules.customers.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CustomerModel",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=modules.customers.models.generate_customer_id,
                        editable=False,
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254, unique=True)),
                (
                    "available_credit",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0"), max_digits=14
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["available_credit"], name="customers_credit_idx"
                    )
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(available_credit__gte=0),
                        name="customers_credit_non_negative",
                    )
                ],
            },
        ),
    ]
