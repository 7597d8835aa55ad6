"""Brand service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.brands.exceptions import BrandNotFound
from modules.core.services import CrudService

if TYPE_CHECKING:
    from modules.brands.models import Brand  # noqa: F401


class BrandService(CrudService["Brand"]):
    """Application service for brands.

    Also used by the product screens to populate the brand options.
    """

    entity_name = "brand"
    key_field = "name"
    not_found = BrandNotFound
