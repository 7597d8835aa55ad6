"""Django ORM implementation of the Brand repository."""

from __future__ import annotations

from typing import Optional

from modules.brands.exceptions import BrandAlreadyExists
from modules.brands.models import Brand
from modules.brands.repositories.interfaces import IBrandRepository
from modules.core.repositories.django_repository import CrudDjangoRepository


class BrandDjangoRepository(CrudDjangoRepository[Brand], IBrandRepository):
    """Concrete Brand repository backed by Django ORM."""

    model = Brand
    key_field = "name"
    search_fields = ("name",)
    already_exists = BrandAlreadyExists

    def find_by_name(self, name: str) -> Optional[Brand]:
        return self.find_by_key(name)
