"""Customer persistence model for the Django repository backend.

Business rules backed by the schema:
- Email is unique across the whole table (unique index).
- ``available_credit`` can never be negative (check constraint).

Ids are UUIDv7 hex strings: time-ordered, so ``(created_at, id)`` gives a
stable insertion order used as the natural ordering of the table.
"""

from __future__ import annotations

from decimal import Decimal

import uuid6
from django.db import models

from modules.customers.constants import CREDIT_DECIMAL_PLACES, CREDIT_MAX_DIGITS


def generate_customer_id() -> str:
    """Return a fresh 32-character hex id."""
    return uuid6.uuid7().hex


class CustomerModel(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_customer_id,
        editable=False,
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    available_credit = models.DecimalField(
        max_digits=CREDIT_MAX_DIGITS,
        decimal_places=CREDIT_DECIMAL_PLACES,
        default=Decimal("0"),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "customers"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["available_credit"],
                name="customers_credit_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(available_credit__gte=0),
                name="customers_credit_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
