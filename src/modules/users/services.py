"""Administrator service layer.

Uniqueness is checked on ``email``.  ``RoleService`` only feeds the role
options of the administrator forms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from modules.core.services import CrudService
from modules.users.exceptions import UserNotFound

if TYPE_CHECKING:
    from modules.users.models import Role, User  # noqa: F401
    from modules.users.repositories.interfaces import IRoleRepository


class UserService(CrudService["User"]):
    entity_name = "user"
    key_field = "email"
    not_found = UserNotFound


class RoleService:
    def __init__(self, repository: IRoleRepository) -> None:
        self._repo = repository

    def list_all(self) -> List[Role]:
        return self._repo.find_all()
