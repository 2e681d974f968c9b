"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Raw request values are handed to the service untouched; domain
exceptions are translated into ``{"error": message}`` bodies using the
status each exception carries.  Any other exception is logged with its
traceback and answered with 500.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

import structlog
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CustomerOutputDTO
from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerError, CustomerNotFound
from modules.customers.repositories import get_customer_repository
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)


def _serialize(customer: Customer) -> dict:
    return CustomerOutputDTO.from_entity(customer).to_response()


def _serialize_many(customers: Iterable[Customer]) -> list:
    return [_serialize(c) for c in customers]


def _error(message: str, status_code: int) -> Response:
    return Response({"error": message}, status=status_code)


def _payload(request: Request) -> Mapping[str, Any]:
    """Request body fields; a JSON array or scalar body carries none."""
    data = request.data
    return data if isinstance(data, Mapping) else {}


class CustomerViewSet(ViewSet):
    """ViewSet for Customer operations.

    Uses ``CustomerService`` with the repository selected by the
    ``CUSTOMER_REPOSITORY_BACKEND`` setting (DIP).
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=get_customer_repository())

    def _run(
        self,
        action_description: str,
        operation: Callable[[], Any],
        render: Callable[[Any], Response],
    ) -> Response:
        """Call ``operation`` and translate its outcome into a response."""
        try:
            result = operation()
        except CustomerError as exc:
            logger.warning(
                "customer.request_rejected",
                code=exc.code,
                status_code=exc.status_code,
                error=exc.message,
            )
            return _error(exc.message, exc.status_code)
        except Exception as exc:
            logger.exception("customer.unexpected_error", action=action_description)
            return _error(
                f"An unknown error occurred {action_description}: {exc}",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return render(result)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers"""
        return self._run(
            "when retrieving customers",
            self._service.list,
            lambda customers: Response(_serialize_many(customers)),
        )

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}"""

        def render(customer: Customer | None) -> Response:
            if customer is None:
                return _error(CustomerNotFound().message, status.HTTP_404_NOT_FOUND)
            return Response(_serialize(customer))

        return self._run(
            "while retrieving the customer",
            lambda: self._service.find_by_id(pk),
            render,
        )

    @action(detail=False, methods=["get"], url_path="sortByCredit")
    def sort_by_credit(self, request: Request) -> Response:
        """GET /api/v1/customers/sortByCredit?order=asc|desc"""
        order = request.query_params.get("order")
        return self._run(
            "while sorting customers by credit",
            lambda: self._service.sort_customers_by_credit(order),
            lambda customers: Response(_serialize_many(customers)),
        )

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers"""
        data = _payload(request)
        return self._run(
            "when creating customer",
            lambda: self._service.create(
                name=data.get("name"),
                email=data.get("email"),
                available_credit=data.get("availableCredit"),
            ),
            lambda customer: Response(
                _serialize(customer), status=status.HTTP_201_CREATED
            ),
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/customers/{pk}"""
        data = _payload(request)
        return self._run(
            "when updating customer",
            lambda: self._service.update(
                pk,
                name=data.get("name"),
                email=data.get("email"),
                available_credit=data.get("availableCredit"),
            ),
            lambda customer: Response(_serialize(customer)),
        )

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}"""
        return self._run(
            "when deleting customer",
            lambda: self._service.delete(pk),
            lambda _: Response(status=status.HTTP_204_NO_CONTENT),
        )

    @action(detail=False, methods=["post"], url_path="credit")
    def add_credit(self, request: Request) -> Response:
        """POST /api/v1/customers/credit with ``{"id": ..., "amount": ...}``"""
        data = _payload(request)
        return self._run(
            "when adding credit",
            lambda: self._service.add_credit(data.get("id"), data.get("amount")),
            lambda customer: Response(_serialize(customer)),
        )
