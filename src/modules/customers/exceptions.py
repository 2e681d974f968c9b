"""Customer domain exceptions.

Raised by the validator and the Service Layer when business rules are
violated.  Every exception carries the HTTP status the API layer
(Views) answers with, so the mapping lives next to the failure kind:

=====================  ======
Exception              Status
=====================  ======
InvalidType            400
EmptyName              400
NameTooShort           400
InvalidEmailFormat     400
InvalidSortOrder       400
CreditLimitExceeded    400
EmailAlreadyInUse      409
CustomerNotFound       404
NegativeCreditAmount   452
=====================  ======

Anything that is not a ``CustomerError`` is an unexpected failure (500).
"""

from __future__ import annotations

from typing import Any

from rest_framework import status

from modules.customers.constants import HTTP_452_NEGATIVE_CREDIT, MAX_CREDIT


class CustomerError(Exception):
    """Base class for every customer business-rule violation."""

    code: str = "customer_error"
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Invalid customer request."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidType(CustomerError):
    """A field has the wrong type, or an id does not have the expected shape."""

    code = "invalid_type"

    def __init__(self, field: str, expected: str, received: Any) -> None:
        self.field = field
        self.expected = expected
        self.received = type(received).__name__
        super().__init__(
            f"Invalid type for property {field}: expected {expected}, "
            f"but received {self.received}."
        )


class EmptyName(CustomerError):
    code = "empty_name"
    default_message = "Name cannot be empty."


class NameTooShort(CustomerError):
    code = "name_too_short"
    default_message = "Name must be at least 3 characters long."


class InvalidEmailFormat(CustomerError):
    code = "invalid_email_format"
    default_message = "Invalid email format."


class InvalidSortOrder(CustomerError):
    code = "invalid_sort_order"
    default_message = "Invalid sort order. Use 'asc' or 'desc'."


class EmailAlreadyInUse(CustomerError):
    """Another customer already holds the requested email."""

    code = "email_already_in_use"
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email is already in use."


class CustomerNotFound(CustomerError):
    """The id is well-formed but no customer is stored under it."""

    code = "customer_not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Customer not found."


class CreditLimitExceeded(CustomerError):
    """Available credit would grow past what can be stored."""

    code = "credit_limit_exceeded"
    default_message = f"Available credit cannot exceed {MAX_CREDIT}."


class NegativeCreditAmount(CustomerError):
    """A credit amount or available credit below zero was supplied."""

    code = "negative_credit_amount"
    status_code = HTTP_452_NEGATIVE_CREDIT
    default_message = "Credit amount cannot be negative."
