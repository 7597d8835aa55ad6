"""Product image upload validation and storage."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Iterable, Optional

import structlog
from django.conf import settings
from django.core.files.storage import Storage, default_storage
from django.core.files.uploadedfile import UploadedFile

logger = structlog.get_logger(__name__)


class ProductImageService:
    """Checks and stores product images.

    ``is_valid(None)`` is ``True``: no upload means the product keeps its
    current image.  Otherwise the extension must be allowed and the size
    within ``PRODUCT_IMAGE_MAX_SIZE``.
    """

    upload_dir = "products"

    def __init__(
        self,
        storage: Optional[Storage] = None,
        max_size: Optional[int] = None,
        extensions: Optional[Iterable[str]] = None,
    ) -> None:
        self._storage = storage or default_storage
        self._max_size = (
            max_size if max_size is not None else settings.PRODUCT_IMAGE_MAX_SIZE
        )
        self._extensions = {
            ext.lower() for ext in (extensions or settings.PRODUCT_IMAGE_EXTENSIONS)
        }

    def is_valid(self, file: Optional[UploadedFile]) -> bool:
        if file is None:
            return True

        ext = Path(file.name or "").suffix.lower()
        if ext not in self._extensions:
            logger.warning("product_image.invalid_extension", extension=ext)
            return False
        if not file.size or file.size > self._max_size:
            logger.warning("product_image.invalid_size", size=file.size)
            return False
        return True

    def save(self, file: UploadedFile) -> str:
        """Store the upload under a random name and return the storage name."""
        ext = Path(file.name).suffix.lower()
        name = self._storage.save(f"{self.upload_dir}/{uuid.uuid4().hex}{ext}", file)
        logger.info("product_image.saved", image=name, size=file.size)
        return name

    def delete(self, name: str) -> None:
        """Remove a stored image; a missing file is not an error."""
        self._storage.delete(name)
        logger.info("product_image.deleted", image=name)
