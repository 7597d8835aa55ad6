"""Brand domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound


class BrandNotFound(EntityNotFound):
    """The requested brand does not exist."""


class BrandAlreadyExists(EntityAlreadyExists):
    """Another brand already uses this name."""
