"""Customer domain constants."""

from decimal import Decimal
from enum import StrEnum


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_SORT_ORDER = SortOrder.DESC

MIN_NAME_LENGTH = 3

# Non-standard status code kept for wire compatibility with existing clients.
HTTP_452_NEGATIVE_CREDIT = 452

MEMORY_ID_LENGTH = 9
DATABASE_ID_LENGTH = 32

# Credit precision shared by every backend (matches the database column).
CREDIT_MAX_DIGITS = 14
CREDIT_DECIMAL_PLACES = 2
CREDIT_QUANTUM = Decimal(1).scaleb(-CREDIT_DECIMAL_PLACES)
MAX_CREDIT = Decimal(10) ** (CREDIT_MAX_DIGITS - CREDIT_DECIMAL_PLACES) - CREDIT_QUANTUM
