"""Brand repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.brands.models import Brand


class IBrandRepository(IRepository["Brand"]):
    """Repository contract for brands; the natural key is ``name``."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Brand]:
        """Retrieve a brand by its exact name."""
