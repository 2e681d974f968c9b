"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by the
uniqueness check, the credit ranking and the atomic credit increment.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import List, Optional

from modules.core.repositories.interfaces import IRepository
from modules.customers.constants import SortOrder
from modules.customers.entities import Customer


class ICustomerRepository(IRepository[Customer]):
    """Repository contract for the Customer entity.

    ``id_length`` is the fixed number of alphanumeric characters in the
    ids the backend generates; the validator rejects any other shape.
    """

    id_length: int

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address (exact match)."""

    @abstractmethod
    def find_by_available_credit(self, order: SortOrder) -> List[Customer]:
        """List customers ranked by credit; ties keep the natural order."""

    @abstractmethod
    def increment_credit(self, id: str, amount: Decimal) -> Optional[Customer]:
        """Atomically add ``amount`` to a customer's available credit."""
