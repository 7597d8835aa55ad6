"""Unit tests for UserDjangoRepository and RoleDjangoRepository."""

from __future__ import annotations

import pytest

from modules.users.exceptions import UserAlreadyExists
from modules.users.models import User
from modules.users.repositories.django_repository import (
    RoleDjangoRepository,
    UserDjangoRepository,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return UserDjangoRepository()


def _make_user(email: str, name: str = "userA") -> User:
    user = User(email=email, name=name)
    user.set_password("password123")
    user.save()
    return user


class TestSearch:
    def test_matches_email(self, repo):
        user = _make_user("alice@example.com", name="Alice")
        _make_user("bob@test.org", name="Bob")

        assert repo.search("example") == [user]

    def test_matches_display_name(self, repo):
        _make_user("alice@example.com", name="Alice")
        bob = _make_user("bob@test.org", name="Bob")

        assert repo.search("Bo") == [bob]


class TestFindByEmail:
    def test_returns_user(self, repo):
        user = _make_user("test@example.com")

        assert repo.find_by_email("test@example.com") == user

    def test_returns_none(self, repo):
        assert repo.find_by_email("missing@example.com") is None


class TestSave:
    def test_writes_queued_roles(self, repo, admin_role, editor_role):
        user = User(email="new@example.com", name="New")
        user.set_password("password123")
        user.assign_roles([admin_role.id, editor_role.id])

        saved = repo.save(user)

        assert set(saved.roles.values_list("name", flat=True)) == {"Admin", "Editor"}
        assert saved.pending_role_ids is None

    def test_replaces_roles_on_update(self, repo, admin_user, editor_role):
        admin_user.assign_roles([editor_role.id])

        repo.save(admin_user)

        assert list(admin_user.roles.values_list("name", flat=True)) == ["Editor"]

    def test_keeps_roles_when_none_queued(self, repo, admin_user):
        admin_user.name = "renamed"

        repo.save(admin_user)

        assert admin_user.roles.count() == 1

    def test_duplicate_email_raises(self, repo, admin_user):
        duplicate = User(email=admin_user.email, name="Other", password="x")

        with pytest.raises(UserAlreadyExists):
            repo.save(duplicate)

    def test_password_is_stored_hashed(self, repo):
        user = User(email="hash@example.com", name="Hash")
        user.set_password("password123")

        repo.save(user)

        stored = User.objects.get(email="hash@example.com")
        assert stored.password != "password123"
        assert stored.check_password("password123")


class TestRoleRepository:
    def test_find_all_in_id_order(self, admin_role, editor_role):
        assert RoleDjangoRepository().find_all() == [admin_role, editor_role]

    def test_find_by_id(self, admin_role):
        repo = RoleDjangoRepository()

        assert repo.find_by_id(admin_role.id) == admin_role
        assert repo.find_by_id(1000) is None
