"""Administrator accounts and their roles.

- ``User.email`` is unique (UNIQUE INDEX; the service check is advisory).
- ``User.password`` only ever holds a Django password hash.
- ``Role`` is read-only reference data created by ``seed_data``.
"""

from __future__ import annotations

from typing import Iterable

from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from modules.core.models import BaseModel


class Role(models.Model):
    name = models.CharField(max_length=40, unique=True)
    description = models.CharField(max_length=150)

    class Meta:
        db_table = "roles"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.description


class User(BaseModel):
    email = models.EmailField(max_length=128, unique=True)
    password = models.CharField(max_length=128)
    name = models.CharField(max_length=64)
    enabled = models.BooleanField(default=True)
    roles = models.ManyToManyField(Role, related_name="users", db_table="users_roles")

    class Meta:
        db_table = "users"
        ordering = ["id"]
        verbose_name = "user"

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def set_password(self, raw_password: str) -> None:
        self.password = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        return check_password(raw_password, self.password)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def assign_roles(self, role_ids: Iterable[int]) -> None:
        """Queue the role set; the repository writes it once the row exists."""
        self._pending_role_ids = list(role_ids)

    @property
    def pending_role_ids(self) -> list[int] | None:
        return getattr(self, "_pending_role_ids", None)

    def clear_pending_roles(self) -> None:
        self.__dict__.pop("_pending_role_ids", None)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
