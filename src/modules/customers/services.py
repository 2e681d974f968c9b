"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer entity, delegating
validation to ``CustomerValidator`` and persistence to the injected
``ICustomerRepository``.  The service never special-cases a backend and
performs no local recovery: every validation failure propagates to the
caller unchanged.

Business rules enforced here:
- Email is unique across all customers, also on update.
- Available credit is never negative (create, update, add credit).
- Partial update: omitted fields keep their stored value.
- Credit is added atomically by the repository (no lost updates).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerNotFound
from modules.customers.validation import CustomerValidator

if TYPE_CHECKING:
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP);
    the validator is built on the same repository unless one is supplied.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        validator: Optional[CustomerValidator] = None,
    ) -> None:
        self._repo = repository
        self._validator = validator or CustomerValidator(repository)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(
        self,
        name: Any,
        email: Any,
        available_credit: Any = None,
    ) -> Customer:
        """Create a customer after every field check has passed.

        ``available_credit`` defaults to 0 when omitted.

        Raises:
            InvalidType, EmptyName, NameTooShort: bad ``name``.
            InvalidType, InvalidEmailFormat: bad ``email``.
            EmailAlreadyInUse: ``email`` belongs to another customer.
            InvalidType, NegativeCreditAmount: bad ``available_credit``.
            CreditLimitExceeded: ``available_credit`` is above ``MAX_CREDIT``.
        """
        if available_credit is None:
            available_credit = 0

        self._validator.validate_name(name)
        self._validator.validate_email_format(email)
        self._validator.validate_email_not_in_use(email)
        credit = self._validator.validate_amount(
            available_credit, field="availableCredit"
        )

        customer = self._repo.create(
            Customer(
                name=name,
                email=email,
                available_credit=credit,
            )
        )
        logger.info("customer.created", customer_id=customer.id, email=email)
        return customer

    def update(
        self,
        id: Any,
        name: Any = None,
        email: Any = None,
        available_credit: Any = None,
    ) -> Customer:
        """Apply a partial update; ``None`` means "keep the stored value".

        The id is checked before any other field so an unknown customer is
        reported as such regardless of the payload.

        Raises:
            InvalidType, CustomerNotFound: bad or unknown ``id``.
            Any field error raised by ``create`` for the supplied fields.
        """
        self._validator.validate_customer_exists(id)
        log = logger.bind(customer_id=id)

        changes: Dict[str, Any] = {}
        if name is not None:
            self._validator.validate_name(name)
            changes["name"] = name
        if email is not None:
            self._validator.validate_email_format(email)
            self._validator.validate_email_not_in_use(email, exclude_id=id)
            changes["email"] = email
        if available_credit is not None:
            changes["available_credit"] = self._validator.validate_amount(
                available_credit, field="availableCredit"
            )

        customer = self._repo.update(id, changes)
        if customer is None:
            # Deleted between the existence check and the write.
            raise CustomerNotFound()
        log.info("customer.updated", fields=sorted(changes))
        return customer

    def delete(self, id: Any) -> None:
        """Remove a customer.

        Raises:
            InvalidType, CustomerNotFound: bad or unknown ``id``.
        """
        self._validator.validate_customer_exists(id)
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=id)

    def add_credit(self, id: Any, amount: Any) -> Customer:
        """Add a non-negative ``amount`` to the customer's available credit.

        The addition is delegated to ``increment_credit`` so two concurrent
        calls on the same customer both take effect.

        Raises:
            InvalidType, CustomerNotFound: bad or unknown ``id``.
            InvalidType, NegativeCreditAmount: bad ``amount``.
            CreditLimitExceeded: the new balance would not fit the store.
        """
        current = self._validator.validate_customer_exists(id)
        value = self._validator.validate_amount(amount)
        self._validator.validate_credit_limit(current.available_credit + value)

        customer = self._repo.increment_credit(id, value)
        if customer is None:
            raise CustomerNotFound()
        logger.info(
            "customer.credit_added",
            customer_id=id,
            amount=str(value),
            available_credit=str(customer.available_credit),
        )
        return customer

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> List[Customer]:
        """Return every customer; an empty list is a valid result."""
        return self._repo.find_all()

    def find_by_id(self, id: Any) -> Optional[Customer]:
        """Return the customer stored under ``id``, or ``None``.

        Raises:
            InvalidType: ``id`` does not have the backend's id shape.
        """
        self._validator.validate_customer_id(id)
        return self._repo.find_by_id(id)

    def sort_customers_by_credit(self, order: Any = None) -> List[Customer]:
        """Rank all customers by available credit (descending by default).

        Ordering is delegated to the repository; customers with equal
        credit keep its natural order.

        Raises:
            InvalidSortOrder: ``order`` is neither ``asc`` nor ``desc``.
        """
        sort_order = self._validator.validate_sort_order(order)
        return self._repo.find_by_available_credit(sort_order)
