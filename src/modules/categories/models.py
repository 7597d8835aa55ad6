"""Category model.

``name`` carries a UNIQUE INDEX; the service-level ``check_unique`` is the
user-facing check and the index the final guard.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Category(BaseModel):
    name = models.CharField(max_length=128, unique=True)

    class Meta:
        db_table = "categories"
        ordering = ["id"]
        verbose_name = "category"
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
