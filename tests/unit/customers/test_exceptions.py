"""Unit tests for the customer exception taxonomy.

Every failure kind must stay a distinct class with its own status code,
so the HTTP mapping is exhaustive.
"""

from __future__ import annotations

import pytest

from modules.customers import exceptions
from modules.customers.exceptions import (
    CreditLimitExceeded,
    CustomerError,
    CustomerNotFound,
    EmailAlreadyInUse,
    EmptyName,
    InvalidEmailFormat,
    InvalidSortOrder,
    InvalidType,
    NameTooShort,
    NegativeCreditAmount,
)

pytestmark = pytest.mark.unit

EXPECTED_STATUS = {
    InvalidType: 400,
    EmptyName: 400,
    NameTooShort: 400,
    InvalidEmailFormat: 400,
    InvalidSortOrder: 400,
    CreditLimitExceeded: 400,
    EmailAlreadyInUse: 409,
    CustomerNotFound: 404,
    NegativeCreditAmount: 452,
}


def test_status_mapping_covers_every_exception():
    declared = {
        obj
        for obj in vars(exceptions).values()
        if isinstance(obj, type)
        and issubclass(obj, CustomerError)
        and obj is not CustomerError
    }
    assert declared == set(EXPECTED_STATUS)


@pytest.mark.parametrize(("exc_class", "status_code"), EXPECTED_STATUS.items())
def test_status_code(exc_class, status_code):
    assert exc_class.status_code == status_code


def test_codes_are_distinct():
    codes = [exc_class.code for exc_class in EXPECTED_STATUS]
    assert len(codes) == len(set(codes))


class TestInvalidType:
    def test_message_names_field_expected_and_received(self):
        exc = InvalidType(
            "id", "string containing exactly 9 alphanumeric characters", "a"
        )
        assert str(exc) == (
            "Invalid type for property id: expected string containing "
            "exactly 9 alphanumeric characters, but received str."
        )

    def test_keeps_structured_context(self):
        exc = InvalidType("amount", "number", "not-a-number")
        assert exc.field == "amount"
        assert exc.expected == "number"
        assert exc.received == "str"


class TestMessages:
    def test_customer_not_found(self):
        assert CustomerNotFound().message == "Customer not found."

    def test_credit_limit_exceeded(self):
        assert CreditLimitExceeded().message == "Available credit cannot exceed 999999999999.99."

    def test_invalid_sort_order(self):
        assert InvalidSortOrder().message == "Invalid sort order. Use 'asc' or 'desc'."

    def test_custom_message_overrides_default(self):
        assert str(EmptyName("Name is blank.")) == "Name is blank."
