"""Category service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.categories.exceptions import CategoryNotFound
from modules.core.services import CrudService

if TYPE_CHECKING:
    from modules.categories.models import Category  # noqa: F401


class CategoryService(CrudService["Category"]):
    """Application service for categories.

    Also used by the product screens to populate the category options.
    """

    entity_name = "category"
    key_field = "name"
    not_found = CategoryNotFound
