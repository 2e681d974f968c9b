"""Customer repositories package.

``get_customer_repository`` picks the backend named by the
``CUSTOMER_REPOSITORY_BACKEND`` setting.  One instance is kept per
backend so the in-memory store survives across requests.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.repositories.memory_repository import CustomerInMemoryRepository

BACKENDS: Dict[str, Type[ICustomerRepository]] = {
    "memory": CustomerInMemoryRepository,
    "django": CustomerDjangoRepository,
}

_instances: Dict[str, ICustomerRepository] = {}


def get_customer_repository(backend: Optional[str] = None) -> ICustomerRepository:
    """Return the shared repository for ``backend`` (defaults to settings)."""
    name = backend or settings.CUSTOMER_REPOSITORY_BACKEND
    if name not in BACKENDS:
        raise ImproperlyConfigured(
            f"Unknown CUSTOMER_REPOSITORY_BACKEND {name!r}; "
            f"expected one of: {', '.join(BACKENDS)}."
        )
    if name not in _instances:
        _instances[name] = BACKENDS[name]()
    return _instances[name]


__all__ = [
    "BACKENDS",
    "CustomerDjangoRepository",
    "CustomerInMemoryRepository",
    "ICustomerRepository",
    "get_customer_repository",
]
