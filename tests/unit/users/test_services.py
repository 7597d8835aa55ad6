"""Unit tests for UserService and RoleService."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.users.exceptions import UserNotFound
from modules.users.models import Role, User
from modules.users.services import RoleService, UserService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return UserService(repository=mock_repo)


class TestListAll:
    def test_none_returns_full_scan(self, service, mock_repo):
        users = [User(id=1), User(id=2)]
        mock_repo.find_all.return_value = users

        assert service.list_all(None) == users

    def test_empty_returns_full_scan(self, service, mock_repo):
        users = [User(id=1), User(id=2)]
        mock_repo.find_all.return_value = users

        assert service.list_all("") == users

    def test_keyword_returns_search_result(self, service, mock_repo):
        users = [User(id=1)]
        mock_repo.search.return_value = users

        assert service.list_all("user") == users
        mock_repo.search.assert_called_once_with("user")


class TestCheckUnique:
    def test_no_duplication(self, service, mock_repo):
        mock_repo.find_by_key.return_value = None

        assert service.check_unique(User(email="test@example.com")) is True
        mock_repo.find_by_key.assert_called_once_with("test@example.com")

    def test_duplicate(self, service, mock_repo):
        mock_repo.find_by_key.return_value = User(email="test@example.com")

        assert service.check_unique(User(email="test@example.com")) is False


class TestGet:
    def test_returns_user(self, service, mock_repo):
        user = User(id=1)
        mock_repo.find_by_id.return_value = user

        assert service.get(1) is user

    def test_missing_user_raises(self, service, mock_repo):
        mock_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFound):
            service.get(1000)


class TestRoleService:
    def test_list_all_returns_every_role(self):
        repo = MagicMock()
        roles = [Role(id=1, name="Admin", description="管理者")]
        repo.find_all.return_value = roles

        assert RoleService(repository=repo).list_all() == roles
