"""Administrator form DTOs.

- ``CreateUserDTO``: new administrator, password required.
- ``UpdateUserDTO``: edit; an empty password keeps the stored hash.
"""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PASSWORD_MIN_LENGTH = 8


class UserFormDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: str = ""
    name: str
    enabled: bool = False
    role_ids: List[int]

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v) or len(v) > 128:
            raise ValueError("メールアドレスの形式が不正です")
        return v

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("名前を入力してください")
        if len(v) > 64:
            raise ValueError("名前は64文字以内で入力してください")
        return v

    @field_validator("role_ids")
    @classmethod
    def at_least_one_role(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("ロールを1つ以上選択してください")
        return v


class CreateUserDTO(UserFormDTO):
    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"パスワードは{PASSWORD_MIN_LENGTH}文字以上で入力してください"
            )
        return v


class UpdateUserDTO(UserFormDTO):
    @field_validator("password")
    @classmethod
    def password_empty_or_valid(cls, v: str) -> str:
        if v and len(v) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"パスワードは{PASSWORD_MIN_LENGTH}文字以上で入力してください"
            )
        return v
