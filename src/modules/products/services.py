"""Product service layer (Use Cases).

Orchestrates the Product list/search, unique-name check, lookup and
persistence, delegating to the injected ``IProductRepository``.
Image validation lives in ``ProductImageService``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.services import CrudService
from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.models import Product  # noqa: F401


class ProductService(CrudService["Product"]):
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    entity_name = "product"
    key_field = "name"
    not_found = ProductNotFound
