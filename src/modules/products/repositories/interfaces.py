"""Product repository interface.

Extends ``IRepository[Product]`` with the name look-up behind the
unique-name check.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by its exact name."""
