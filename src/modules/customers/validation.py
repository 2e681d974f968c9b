"""Customer field and collection validation.

``CustomerValidator`` is built with the repository it checks against, so
uniqueness and existence checks never reach for a global store.  Every
check raises a specific ``CustomerError`` subclass instead of returning a
boolean; a check that returns normally has passed.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Any, Optional

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator

from modules.customers.constants import (
    CREDIT_DECIMAL_PLACES,
    CREDIT_QUANTUM,
    DEFAULT_SORT_ORDER,
    MAX_CREDIT,
    MIN_NAME_LENGTH,
    SortOrder,
)
from modules.customers.exceptions import (
    CreditLimitExceeded,
    CustomerNotFound,
    EmailAlreadyInUse,
    EmptyName,
    InvalidEmailFormat,
    InvalidSortOrder,
    InvalidType,
    NameTooShort,
    NegativeCreditAmount,
)

if TYPE_CHECKING:
    from modules.customers.entities import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

_email_validator = EmailValidator()


def is_number(value: Any) -> bool:
    """``True`` for finite ints, floats and Decimals (bools excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Real):
        return math.isfinite(value)
    return False


def to_decimal(value: Any) -> Decimal:
    """Convert a validated number to ``Decimal`` without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CustomerValidator:
    """Validation rules for customer fields, bound to one repository."""

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository
        self._id_pattern = re.compile(rf"[A-Za-z0-9]{{{repository.id_length}}}")

    # ------------------------------------------------------------------
    # Field checks
    # ------------------------------------------------------------------

    @staticmethod
    def validate_name(name: Any) -> None:
        if not isinstance(name, str):
            raise InvalidType("name", "string", name)
        stripped = name.strip()
        if not stripped:
            raise EmptyName()
        if len(stripped) < MIN_NAME_LENGTH:
            raise NameTooShort()

    @staticmethod
    def validate_email_format(email: Any) -> None:
        if not isinstance(email, str):
            raise InvalidType("email", "string", email)
        try:
            _email_validator(email)
        except ValidationError as exc:
            raise InvalidEmailFormat() from exc

    @classmethod
    def validate_amount(cls, value: Any, field: str = "amount") -> Decimal:
        """Check a credit value and return it as a ``Decimal``.

        Values must fit the stored credit precision: at most
        ``CREDIT_DECIMAL_PLACES`` decimals and no more than ``MAX_CREDIT``.
        """
        if not is_number(value):
            raise InvalidType(field, "number", value)
        if value < 0:
            raise NegativeCreditAmount()
        amount = to_decimal(value)
        cls.validate_credit_limit(amount)
        if amount != amount.quantize(CREDIT_QUANTUM):
            raise InvalidType(
                field, f"number with at most {CREDIT_DECIMAL_PLACES} decimal places", value
            )
        return amount

    @staticmethod
    def validate_credit_limit(total: Decimal) -> None:
        if total > MAX_CREDIT:
            raise CreditLimitExceeded()

    @staticmethod
    def validate_sort_order(order: Any = None) -> SortOrder:
        """Normalise ``order`` to a ``SortOrder``; omitted means descending."""
        if order is None:
            return DEFAULT_SORT_ORDER
        if not isinstance(order, str):
            raise InvalidSortOrder()
        try:
            return SortOrder(order.strip().lower())
        except ValueError as exc:
            raise InvalidSortOrder() from exc

    # ------------------------------------------------------------------
    # Repository-backed checks
    # ------------------------------------------------------------------

    def validate_customer_id(self, id: Any) -> None:
        """Check the id has the shape the active backend generates."""
        if not isinstance(id, str) or not self._id_pattern.fullmatch(id):
            raise InvalidType(
                "id",
                f"string containing exactly {self._repo.id_length} "
                "alphanumeric characters",
                id,
            )

    def validate_customer_exists(self, id: Any) -> Customer:
        """Check the id shape, then that a customer is stored under it.

        Returns the stored customer so callers do not look it up twice.
        """
        self.validate_customer_id(id)
        customer = self._repo.find_by_id(id)
        if customer is None:
            raise CustomerNotFound()
        return customer

    def validate_email_not_in_use(
        self, email: str, exclude_id: Optional[str] = None
    ) -> None:
        """Fail if another customer (not ``exclude_id``) holds ``email``."""
        existing = self._repo.find_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise EmailAlreadyInUse()
