"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on a storage backend directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).  Look-ups return ``None`` for a
    missing entity instead of raising; callers decide what absence means.
    """

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity and return the stored version."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity in the backend's natural order."""

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def update(self, id: str, fields: Mapping[str, Any]) -> Optional[T]:
        """Merge ``fields`` into the stored entity and return it."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove an entity by ID."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entity (test isolation only)."""
