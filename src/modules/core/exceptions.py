"""Domain exception families shared by every module.

Each module subclasses these so the view layer can translate a whole
family at once (``EntityNotFound`` -> HTTP 404, ``EntityAlreadyExists``
-> duplicate form error) while still telling entities apart.
"""

from __future__ import annotations


class EntityNotFound(Exception):
    """No row exists for the requested primary key."""


class EntityAlreadyExists(Exception):
    """The store rejected a save because the natural key is already taken."""
