"""Django ORM implementation of the Category repository."""

from __future__ import annotations

from typing import Optional

from modules.categories.exceptions import CategoryAlreadyExists
from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.core.repositories.django_repository import CrudDjangoRepository


class CategoryDjangoRepository(CrudDjangoRepository[Category], ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    model = Category
    key_field = "name"
    search_fields = ("name",)
    already_exists = CategoryAlreadyExists

    def find_by_name(self, name: str) -> Optional[Category]:
        return self.find_by_key(name)
