"""Administrator screens.

Passwords are hashed before the service sees the entity; on edit an empty
password field keeps the stored hash.  Roles come from the ``roles``
checkboxes.
"""

from __future__ import annotations

from typing import Any, Dict

from django.http import HttpRequest

from modules.core.controllers import CrudController, FormErrors
from modules.users.dtos import CreateUserDTO, UpdateUserDTO, UserFormDTO
from modules.users.models import User
from modules.users.repositories.django_repository import (
    RoleDjangoRepository,
    UserDjangoRepository,
)
from modules.users.services import RoleService, UserService


UNKNOWN_ROLE_MESSAGE = "選択されたロールは存在しません"


class UserController(CrudController):
    entity_plural = "users"
    entity_singular = "user"
    model = User
    dto_class = CreateUserDTO
    duplicate_message = "メールアドレスが重複しています"

    def __init__(self) -> None:
        super().__init__()
        self._role_service = RoleService(repository=RoleDjangoRepository())

    def build_service(self) -> UserService:
        return UserService(repository=UserDjangoRepository())

    def form_context(self, entity: User) -> Dict[str, Any]:
        if entity.pending_role_ids is not None:
            selected = entity.pending_role_ids
        elif entity.pk is not None:
            selected = [role.pk for role in entity.roles.all()]
        else:
            selected = []
        return {
            "listRoles": self._role_service.list_all(),
            "selectedRoleIds": selected,
        }

    def validate_references(self, entity: User) -> FormErrors:
        known = {role.pk for role in self._role_service.list_all()}
        if set(entity.pending_role_ids or ()) - known:
            return {"role_ids": [UNKNOWN_ROLE_MESSAGE]}
        return {}

    def build_dto(self, request: HttpRequest, entity: User) -> UserFormDTO:
        dto_class = CreateUserDTO if entity.pk is None else UpdateUserDTO
        return dto_class(
            email=request.POST.get("email", ""),
            password=request.POST.get("password", ""),
            name=request.POST.get("name", ""),
            enabled=request.POST.get("enabled") or False,
            role_ids=request.POST.getlist("roles"),
        )

    def apply_dto(self, dto: UserFormDTO, entity: User) -> User:
        entity.email = dto.email
        entity.name = dto.name
        entity.enabled = dto.enabled
        if dto.password:
            entity.set_password(dto.password)
        entity.assign_roles(dto.role_ids)
        return entity
