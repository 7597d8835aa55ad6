"""Generic CRUD service layer.

``CrudService`` holds the contract every entity service follows:

- ``list_all(keyword)``: full scan when the keyword is ``None`` or empty,
  repository search otherwise.  No trimming, no pagination.
- ``check_unique(entity)``: ``True`` iff no row shares the natural key.
  The candidate's own row is **not** excluded, so an unchanged key on an
  edit reports a duplicate.
- ``get(id)``: the row, or the module's ``EntityNotFound`` subclass.
- ``save`` / ``delete``: straight delegation to the repository.

``check_unique`` followed by ``save`` is not atomic; the unique index on
the natural key is the final guard (see ``CrudDjangoRepository.save``).
"""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

import structlog

from modules.core.exceptions import EntityNotFound
from modules.core.repositories.interfaces import IRepository

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class CrudService(Generic[T]):
    """Application service shared by the entity modules.

    Receives an ``IRepository`` via constructor injection (DIP).
    """

    entity_name: str = "entity"
    key_field: str = "name"
    not_found: Type[EntityNotFound] = EntityNotFound

    def __init__(self, repository: IRepository[T]) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self, keyword: Optional[str] = None) -> List[T]:
        if not keyword:
            return self._repo.find_all()
        return self._repo.search(keyword)

    def check_unique(self, entity: T) -> bool:
        existing = self._repo.find_by_key(getattr(entity, self.key_field))
        if existing is not None:
            logger.info(f"{self.entity_name}.duplicate_{self.key_field}")
            return False
        return True

    def get(self, id: Any) -> T:
        """Retrieve a single entity by ID.

        Raises:
            EntityNotFound: the module's subclass, if the row does not exist.
        """
        entity = self._repo.find_by_id(id)
        if entity is None:
            logger.info(f"{self.entity_name}.not_found", **{f"{self.entity_name}_id": id})
            raise self.not_found(f"{self.entity_name.capitalize()} {id} not found.")
        return entity

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, entity: T) -> T:
        return self._repo.save(entity)

    def delete(self, id: Any) -> None:
        self._repo.delete(id)
