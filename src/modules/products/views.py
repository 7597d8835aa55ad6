"""Product administration screens.

Besides the generic CRUD flow, the product forms list the brand and
category options and accept an image upload (form field ``file``), which
``ProductImageService`` validates before the product is persisted.

The ``image`` column only changes through an upload.  A new file is
stored right before the row is written and removed again if the write
fails; the file it replaces is removed once the write succeeded.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.http import HttpRequest

from modules.brands.exceptions import BrandNotFound
from modules.brands.repositories.django_repository import BrandDjangoRepository
from modules.brands.services import BrandService
from modules.categories.exceptions import CategoryNotFound
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.services import CategoryService
from modules.core.constants import INVALID_IMAGE_MESSAGE
from modules.core.controllers import CrudController, FormErrors
from modules.products.dtos import ProductFormDTO
from modules.products.image_service import ProductImageService
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

UNKNOWN_BRAND_MESSAGE = "選択されたブランドは存在しません"
UNKNOWN_CATEGORY_MESSAGE = "選択されたカテゴリーは存在しません"


class ProductController(CrudController):
    entity_plural = "products"
    entity_singular = "product"
    model = Product
    dto_class = ProductFormDTO
    duplicate_message = "商品名が重複しています"

    def __init__(self) -> None:
        super().__init__()
        self._brand_service = BrandService(repository=BrandDjangoRepository())
        self._category_service = CategoryService(
            repository=CategoryDjangoRepository()
        )
        self._image_service = ProductImageService()

    def build_service(self) -> ProductService:
        return ProductService(repository=ProductDjangoRepository())

    def form_context(self, entity: Product) -> Dict[str, Any]:
        return {
            "listBrands": self._brand_service.list_all(),
            "listCategories": self._category_service.list_all(),
        }

    def validate_references(self, entity: Product) -> FormErrors:
        errors: FormErrors = {}
        try:
            self._brand_service.get(entity.brand_id)
        except BrandNotFound:
            errors["brand_id"] = [UNKNOWN_BRAND_MESSAGE]
        try:
            self._category_service.get(entity.category_id)
        except CategoryNotFound:
            errors["category_id"] = [UNKNOWN_CATEGORY_MESSAGE]
        return errors

    def validate_upload(self, request: HttpRequest) -> Optional[str]:
        if not self._image_service.is_valid(request.FILES.get("file")):
            return INVALID_IMAGE_MESSAGE
        return None

    def save_entity(self, request: HttpRequest, entity: Product) -> Product:
        upload = request.FILES.get("file")
        if upload is None:
            return super().save_entity(request, entity)

        previous = entity.image
        entity.image = self._image_service.save(upload)
        try:
            saved = super().save_entity(request, entity)
        except Exception:
            self._image_service.delete(entity.image)
            entity.image = previous
            raise
        if previous:
            self._image_service.delete(previous)
        return saved
