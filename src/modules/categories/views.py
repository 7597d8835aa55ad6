"""Category administration screens."""

from __future__ import annotations

from modules.categories.dtos import CategoryFormDTO
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.services import CategoryService
from modules.core.controllers import CrudController


class CategoryController(CrudController):
    entity_plural = "categories"
    entity_singular = "category"
    model = Category
    dto_class = CategoryFormDTO
    duplicate_message = "カテゴリー名が重複しています"

    def build_service(self) -> CategoryService:
        return CategoryService(repository=CategoryDjangoRepository())
