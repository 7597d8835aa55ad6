"""Django ORM base implementation shared by the entity repositories.

Subclasses only declare the model, the natural-key field, the searchable
fields and the exception raised on a unique-index violation.  Look-ups
follow the Null Object pattern: a missing row is ``None``, never an
exception; the Service Layer decides what a missing entity means.
"""

from __future__ import annotations

from functools import reduce
from operator import or_
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, models, transaction

from modules.core.exceptions import EntityAlreadyExists
from modules.core.repositories.interfaces import IRepository

T = TypeVar("T", bound=models.Model)

logger = structlog.get_logger(__name__)


class CrudDjangoRepository(IRepository[T], Generic[T]):
    """Concrete repository backed by Django ORM."""

    model: Type[T]
    key_field: str = "name"
    search_fields: Sequence[str] = ("name",)
    already_exists: Type[EntityAlreadyExists] = EntityAlreadyExists

    @property
    def entity_name(self) -> str:
        return self.model._meta.model_name

    def get_queryset(self) -> models.QuerySet:
        return self.model.objects.all().order_by("pk")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[T]:
        return list(self.get_queryset())

    def search(self, keyword: str) -> List[T]:
        """Substring match on every field in ``search_fields`` (OR-ed).

        Case sensitivity follows the database's ``LIKE`` semantics.
        """
        condition = reduce(
            or_,
            (models.Q(**{f"{field}__contains": keyword}) for field in self.search_fields),
        )
        return list(self.get_queryset().filter(condition))

    def find_by_key(self, value: Any) -> Optional[T]:
        return self.get_queryset().filter(**{self.key_field: value}).first()

    def find_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self.get_queryset().filter(pk=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity.

        Raises:
            EntityAlreadyExists: if the natural key's unique index rejects
                the row (a concurrent writer won the race).
        """
        is_new = entity.pk is None
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            key = getattr(entity, self.key_field)
            clashes = self.model.objects.filter(**{self.key_field: key})
            if not is_new:
                clashes = clashes.exclude(pk=entity.pk)
            if not clashes.exists():
                raise
            logger.warning(f"{self.entity_name}.duplicate_key", key=str(key))
            raise self.already_exists(
                f"{self.model._meta.verbose_name} '{key}' already registered."
            ) from exc
        logger.info(
            f"{self.entity_name}.saved",
            **{f"{self.entity_name}_id": entity.pk},
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> None:
        deleted, _ = self.model.objects.filter(pk=id).delete()
        logger.info(f"{self.entity_name}.deleted", **{f"{self.entity_name}_id": id}, rows=deleted)
