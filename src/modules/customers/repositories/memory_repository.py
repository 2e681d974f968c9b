"""In-memory implementation of the Customer repository.

Backed by an insertion-ordered ``dict`` (id -> Customer).  Stored
entities are never handed out directly: every read returns a copy, so a
caller mutating a result cannot change the store behind the repository's
back.  All operations are synchronous and never yield, which makes each
of them atomic with respect to the others.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

import structlog

from modules.customers.constants import MEMORY_ID_LENGTH, SortOrder
from modules.customers.entities import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits


class CustomerInMemoryRepository(ICustomerRepository):
    """Volatile Customer repository, cleared only by ``clear()``."""

    id_length = MEMORY_ID_LENGTH

    def __init__(self) -> None:
        self._customers: Dict[str, Customer] = {}

    def _generate_id(self) -> str:
        while True:
            candidate = "".join(
                secrets.choice(_ID_ALPHABET) for _ in range(self.id_length)
            )
            if candidate not in self._customers:
                return candidate

    def create(self, entity: Customer) -> Customer:
        """Store a copy of ``entity``, assigning an id when it has none."""
        stored = replace(entity, id=entity.id or self._generate_id())
        self._customers[stored.id] = stored
        logger.info("customer.saved", customer_id=stored.id, backend="memory")
        return replace(stored)

    def find_all(self) -> List[Customer]:
        return [replace(c) for c in self._customers.values()]

    def find_by_id(self, id: str) -> Optional[Customer]:
        customer = self._customers.get(id)
        return replace(customer) if customer else None

    def find_by_email(self, email: str) -> Optional[Customer]:
        for customer in self._customers.values():
            if customer.email == email:
                return replace(customer)
        return None

    def update(self, id: str, fields: Mapping[str, Any]) -> Optional[Customer]:
        """Merge ``fields`` into the stored record, keeping its position."""
        customer = self._customers.get(id)
        if customer is None:
            return None
        updated = replace(customer, **dict(fields))
        self._customers[id] = updated
        return replace(updated)

    def delete(self, id: str) -> None:
        self._customers.pop(id, None)

    def find_by_available_credit(self, order: SortOrder) -> List[Customer]:
        # sorted() is stable, also with reverse=True
        return sorted(
            self.find_all(),
            key=lambda c: c.available_credit,
            reverse=order == SortOrder.DESC,
        )

    def increment_credit(self, id: str, amount: Decimal) -> Optional[Customer]:
        customer = self._customers.get(id)
        if customer is None:
            return None
        updated = replace(
            customer, available_credit=customer.available_credit + amount
        )
        self._customers[id] = updated
        return replace(updated)

    def clear(self) -> None:
        self._customers.clear()
