"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Brand``, ``Product``).  ``find_by_key`` looks an entity up by its
    unique natural key (name, or email for administrators).
    """

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every row, ordered by primary key."""

    @abstractmethod
    def search(self, keyword: str) -> List[T]:
        """Return rows whose searchable fields contain ``keyword``."""

    @abstractmethod
    def find_by_key(self, value: Any) -> Optional[T]:
        """Retrieve an entity by its unique natural key."""

    @abstractmethod
    def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: Any) -> None:
        """Remove an entity by ID. Absent IDs are ignored."""
