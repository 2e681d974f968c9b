"""Customer DTOs for the API layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).  Input is deliberately *not* parsed here:
raw request values go straight to ``CustomerService`` so that type
errors surface as the domain's ``InvalidType`` instead of a generic
schema error.

- ``CustomerOutputDTO``: wire representation of a customer
  (``availableCredit`` in camelCase).
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from modules.customers.entities import Customer


class CustomerOutputDTO(BaseModel):
    """Immutable DTO for customer API responses."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    email: str
    available_credit: Decimal = Field(alias="availableCredit")

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a Customer entity."""
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            available_credit=customer.available_credit,
        )

    def to_response(self) -> Dict[str, Any]:
        """Serialise with wire names; credit is rendered as a JSON number."""
        data = self.model_dump(by_alias=True)
        credit = data["availableCredit"]
        if credit == credit.to_integral_value():
            data["availableCredit"] = int(credit)
        else:
            data["availableCredit"] = float(credit)
        return data
