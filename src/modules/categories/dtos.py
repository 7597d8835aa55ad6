"""Category form DTO."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CategoryFormDTO(BaseModel):
    """Immutable DTO for category create/edit submissions."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("カテゴリー名を入力してください")
        if len(v) > 128:
            raise ValueError("カテゴリー名は128文字以内で入力してください")
        return v
