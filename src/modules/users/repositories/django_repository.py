"""Django ORM implementations of the administrator and role repositories."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import models, transaction

from modules.core.repositories.django_repository import CrudDjangoRepository
from modules.users.exceptions import UserAlreadyExists
from modules.users.models import Role, User
from modules.users.repositories.interfaces import IRoleRepository, IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(CrudDjangoRepository[User], IUserRepository):
    """Concrete administrator repository backed by Django ORM.

    Keyword search matches either the email or the display name.
    """

    model = User
    key_field = "email"
    search_fields = ("email", "name")
    already_exists = UserAlreadyExists

    def get_queryset(self) -> models.QuerySet:
        return super().get_queryset().prefetch_related("roles")

    def find_by_email(self, email: str) -> Optional[User]:
        return self.find_by_key(email)

    @transaction.atomic
    def save(self, entity: User) -> User:
        """Persist the administrator, then write any queued role set."""
        entity = super().save(entity)
        role_ids = entity.pending_role_ids
        if role_ids is not None:
            entity.roles.set(role_ids)
            entity.clear_pending_roles()
            logger.info("user.roles_updated", user_id=entity.pk, role_ids=role_ids)
        return entity


class RoleDjangoRepository(IRoleRepository):
    """Concrete role repository backed by Django ORM."""

    def find_all(self) -> List[Role]:
        return list(Role.objects.order_by("pk"))

    def find_by_id(self, id: int) -> Optional[Role]:
        try:
            return Role.objects.filter(pk=id).first()
        except (TypeError, ValueError):
            return None
