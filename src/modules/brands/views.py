"""Brand administration screens."""

from __future__ import annotations

from modules.brands.dtos import BrandFormDTO
from modules.brands.models import Brand
from modules.brands.repositories.django_repository import BrandDjangoRepository
from modules.brands.services import BrandService
from modules.core.controllers import CrudController


class BrandController(CrudController):
    entity_plural = "brands"
    entity_singular = "brand"
    model = Brand
    dto_class = BrandFormDTO
    duplicate_message = "ブランド名が重複しています"

    def build_service(self) -> BrandService:
        return BrandService(repository=BrandDjangoRepository())
