"""Product model.

- ``name`` is unique (UNIQUE INDEX; the service check is advisory).
- Money fields are non-negative decimals.
- ``brand`` / ``category`` are PROTECT foreign keys: a brand or category
  still referenced by a product cannot be deleted.
- ``image`` is the storage name written by ``ProductImageService``.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.files.storage import default_storage
from django.core.validators import MinValueValidator
from django.db import models

from modules.brands.models import Brand
from modules.categories.models import Category
from modules.core.models import BaseModel


def _money_field() -> models.DecimalField:
    return models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0"))],
    )


class Product(BaseModel):
    name = models.CharField(max_length=256, unique=True)
    description = models.TextField(blank=True, default="")
    in_stock = models.PositiveIntegerField(default=0)
    image = models.CharField(max_length=255, blank=True, default="")
    price = _money_field()
    cost = _money_field()
    discount_price = _money_field()
    shipping_cost = _money_field()
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="products"
    )
    brand = models.ForeignKey(Brand, on_delete=models.PROTECT, related_name="products")

    class Meta:
        db_table = "products"
        ordering = ["id"]
        verbose_name = "product"

    @property
    def image_url(self) -> str:
        return default_storage.url(self.image) if self.image else ""

    def __str__(self) -> str:
        return self.name
