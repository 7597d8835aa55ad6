"""Django ORM implementation of the Product repository.

Brand and category are joined in every query so the list screen runs a
constant number of SQL statements.
"""

from __future__ import annotations

from typing import Optional

from django.db import models

from modules.core.repositories.django_repository import CrudDjangoRepository
from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(CrudDjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product
    key_field = "name"
    search_fields = ("name",)
    already_exists = ProductAlreadyExists

    def get_queryset(self) -> models.QuerySet:
        return super().get_queryset().select_related("brand", "category")

    def find_by_name(self, name: str) -> Optional[Product]:
        return self.find_by_key(name)
