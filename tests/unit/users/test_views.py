"""Unit tests for the administrator screens with mocked services."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import patch

import pytest
from django.contrib.messages import get_messages

from modules.users.exceptions import UserAlreadyExists, UserNotFound
from modules.users.models import Role, User

pytestmark = pytest.mark.unit

ROLES = [
    Role(id=1, name="Admin", description="管理者"),
    Role(id=2, name="Editor", description="編集者"),
]

VALID_FORM = {
    "email": "test@example.com",
    "password": "password123",
    "name": "テスト",
    "enabled": "on",
    "roles": ["1", "2"],
}


@pytest.fixture()
def services():
    with patch("modules.users.views.UserService") as user_cls, patch(
        "modules.users.views.RoleService"
    ) as role_cls:
        user_cls.return_value.key_field = "email"
        role_cls.return_value.list_all.return_value = ROLES
        yield SimpleNamespace(user=user_cls.return_value, role=role_cls.return_value)


def _messages(response) -> list[str]:
    return [m.message for m in get_messages(response.wsgi_request)]


def _existing_user() -> User:
    user = User(id=1, email="test@example.com", name="テスト", enabled=True)
    user.set_password("password123")
    return user


class TestListUsers:
    def test_list(self, client, services):
        services.user.list_all.return_value = []

        response = client.get("/users")

        assert response.status_code == 200
        assert "users/users.html" in [t.name for t in response.templates]
        assert response.context["listUsers"] == []
        assert response.context["keyword"] is None

    def test_keyword_is_passed_through(self, client, services):
        services.user.list_all.return_value = []

        client.get("/users", {"keyword": "example"})

        services.user.list_all.assert_called_once_with("example")


class TestNewUser:
    def test_form_lists_roles(self, client, services):
        response = client.get("/users/new")

        assert response.status_code == 200
        assert "users/user_form.html" in [t.name for t in response.templates]
        assert response.context["listRoles"] == ROLES
        assert response.context["selectedRoleIds"] == []


class TestSaveUser:
    def test_success_hashes_password(self, client, services):
        services.user.check_unique.return_value = True

        response = client.post("/users/save", VALID_FORM)

        assert response.status_code == 302
        assert response.url == "/users"
        assert _messages(response) == ["登録に成功しました"]
        saved = services.user.save.call_args.args[0]
        assert saved.email == "test@example.com"
        assert saved.enabled is True
        assert saved.password != "password123"
        assert saved.check_password("password123")
        assert saved.pending_role_ids == [1, 2]

    def test_unchecked_enabled_means_disabled(self, client, services):
        services.user.check_unique.return_value = True
        form = {k: v for k, v in VALID_FORM.items() if k != "enabled"}

        client.post("/users/save", form)

        assert services.user.save.call_args.args[0].enabled is False

    def test_password_is_required_on_create(self, client, services):
        response = client.post("/users/save", {**VALID_FORM, "password": ""})

        assert response.status_code == 200
        assert "password" in response.context["errors"]
        services.user.save.assert_not_called()

    def test_at_least_one_role_is_required(self, client, services):
        form = {k: v for k, v in VALID_FORM.items() if k != "roles"}

        response = client.post("/users/save", form)

        assert response.status_code == 200
        assert "role_ids" in response.context["errors"]

    def test_duplicate_email(self, client, services):
        services.user.check_unique.return_value = False

        response = client.post("/users/save", VALID_FORM)

        assert response.status_code == 200
        assert response.context["errors"] == {"email": ["メールアドレスが重複しています"]}
        assert response.context["selectedRoleIds"] == [1, 2]
        services.user.save.assert_not_called()

    def test_unique_index_violation(self, client, services):
        services.user.check_unique.return_value = True
        services.user.save.side_effect = UserAlreadyExists("taken")

        response = client.post("/users/save", VALID_FORM)

        assert response.status_code == 200
        assert response.context["errors"] == {"email": ["メールアドレスが重複しています"]}

    def test_unknown_role_is_rejected(self, client, services):
        response = client.post("/users/save", {**VALID_FORM, "roles": ["1", "999"]})

        assert response.status_code == 200
        assert response.context["errors"] == {"role_ids": ["選択されたロールは存在しません"]}
        services.user.check_unique.assert_not_called()
        services.user.save.assert_not_called()

    def test_validator_messages_are_shown_without_prefix(self, client, services):
        response = client.post("/users/save", {**VALID_FORM, "name": ""})

        assert response.context["errors"]["name"] == ["名前を入力してください"]


class TestDetailUser:
    def test_missing_user_is_404(self, client, services):
        services.user.get.side_effect = UserNotFound("User 1000 not found.")

        assert client.get("/users/detail/1000").status_code == 404


class TestEditUser:
    def test_empty_password_keeps_hash(self, client, services):
        user = _existing_user()
        stored_hash = user.password
        services.user.get.return_value = user
        services.user.check_unique.return_value = True

        response = client.post("/users/edit/1", {**VALID_FORM, "password": ""})

        assert response.status_code == 302
        assert _messages(response) == ["更新に成功しました"]
        assert services.user.save.call_args.args[0].password == stored_hash

    def test_new_password_is_hashed(self, client, services):
        services.user.get.return_value = _existing_user()
        services.user.check_unique.return_value = True

        client.post("/users/edit/1", {**VALID_FORM, "password": "newpassword"})

        saved = services.user.save.call_args.args[0]
        assert saved.check_password("newpassword")

    def test_short_password_is_rejected(self, client, services):
        services.user.get.return_value = _existing_user()

        response = client.post("/users/edit/1", {**VALID_FORM, "password": "short"})

        assert response.status_code == 200
        assert "password" in response.context["errors"]


class TestDeleteUser:
    def test_redirects_with_message(self, client, services):
        response = client.get("/users/delete/1")

        assert response.status_code == 302
        assert response.url == "/users"
        assert _messages(response) == ["削除に成功しました"]
        services.user.delete.assert_called_once_with(1)
