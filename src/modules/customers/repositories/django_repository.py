"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising for a missing customer; the Service Layer decides
how to translate absence into an API response.  Driver errors are not
caught here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Mapping, Optional

import structlog
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from modules.customers.constants import DATABASE_ID_LENGTH, SortOrder
from modules.customers.entities import Customer
from modules.customers.models import CustomerModel
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_NATURAL_ORDER = ("created_at", "id")


def _to_entity(record: CustomerModel) -> Customer:
    return Customer(
        id=record.id,
        name=record.name,
        email=record.email,
        available_credit=record.available_credit,
    )


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    id_length = DATABASE_ID_LENGTH

    @transaction.atomic
    def create(self, entity: Customer) -> Customer:
        """Insert a customer; the model assigns a UUIDv7 id when none is given."""
        record = CustomerModel(
            name=entity.name,
            email=entity.email,
            available_credit=entity.available_credit,
        )
        if entity.id:
            record.id = entity.id
        record.save(force_insert=True)
        record.refresh_from_db()
        logger.info("customer.saved", customer_id=record.id, backend="django")
        return _to_entity(record)

    def find_all(self) -> List[Customer]:
        return [_to_entity(r) for r in CustomerModel.objects.order_by(*_NATURAL_ORDER)]

    def find_by_id(self, id: str) -> Optional[Customer]:
        record = CustomerModel.objects.filter(id=id).first()
        return _to_entity(record) if record else None

    def find_by_email(self, email: str) -> Optional[Customer]:
        record = CustomerModel.objects.filter(email=email).first()
        return _to_entity(record) if record else None

    @transaction.atomic
    def update(self, id: str, fields: Mapping[str, Any]) -> Optional[Customer]:
        """Write only the supplied fields while holding a row lock.

        ``SELECT ... FOR UPDATE`` serialises concurrent updates of the same
        customer; fields not in ``fields`` are left as stored.
        """
        record = CustomerModel.objects.select_for_update().filter(id=id).first()
        if record is None:
            return None
        for field, value in fields.items():
            setattr(record, field, value)
        record.save(update_fields=[*fields, "updated_at"])
        record.refresh_from_db()
        return _to_entity(record)

    @transaction.atomic
    def delete(self, id: str) -> None:
        deleted, _ = CustomerModel.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted", customer_id=id, backend="django")

    def find_by_available_credit(self, order: SortOrder) -> List[Customer]:
        credit = "-available_credit" if order == SortOrder.DESC else "available_credit"
        queryset = CustomerModel.objects.order_by(credit, *_NATURAL_ORDER)
        return [_to_entity(r) for r in queryset]

    @transaction.atomic
    def increment_credit(self, id: str, amount: Decimal) -> Optional[Customer]:
        """Add ``amount`` in a single ``UPDATE`` statement (no read-modify-write)."""
        updated = CustomerModel.objects.filter(id=id).update(
            available_credit=F("available_credit") + amount,
            updated_at=timezone.now(),
        )
        if not updated:
            return None
        return self.find_by_id(id)

    def clear(self) -> None:
        CustomerModel.objects.all().delete()
