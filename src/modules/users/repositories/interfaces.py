"""Administrator and role repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import Role, User


class IUserRepository(IRepository["User"]):
    """Repository contract for administrators; the natural key is ``email``."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        """Retrieve an administrator by email address."""


class IRoleRepository(ABC):
    """Read-only access to the role reference data."""

    @abstractmethod
    def find_all(self) -> List[Role]:
        """Return every role, ordered by primary key."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Role]:
        """Retrieve a role by primary key."""
