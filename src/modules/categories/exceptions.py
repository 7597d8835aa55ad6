"""Category domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound


class CategoryNotFound(EntityNotFound):
    """The requested category does not exist."""


class CategoryAlreadyExists(EntityAlreadyExists):
    """Another category already uses this name."""
