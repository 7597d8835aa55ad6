"""Administrator domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound


class UserAlreadyExists(EntityAlreadyExists):
    """Another administrator already uses this email address."""


class UserNotFound(EntityNotFound):
    """The requested administrator does not exist."""
