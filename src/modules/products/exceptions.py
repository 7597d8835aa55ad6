"""Product domain exceptions.

Raised by the Service Layer (not found) and the repository (unique index
violation).  The views translate them into a 404 or a form error.
"""

from __future__ import annotations

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound


class ProductAlreadyExists(EntityAlreadyExists):
    """A product with the same name already exists."""


class ProductNotFound(EntityNotFound):
    """The requested product does not exist."""
