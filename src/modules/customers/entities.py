"""Customer entity.

Plain data carrier shared by every repository backend.  It holds no
business behaviour: validation lives in ``validation.py`` and use-cases
in ``services.py``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Customer:
    """A customer record.

    ``id`` is ``None`` until the repository persists the entity and
    assigns one.
    """

    name: str
    email: str
    available_credit: Decimal = Decimal("0")
    id: Optional[str] = None
