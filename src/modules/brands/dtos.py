"""Brand form DTO."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class BrandFormDTO(BaseModel):
    """Immutable DTO for brand create/edit submissions."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("ブランド名を入力してください")
        if len(v) > 128:
            raise ValueError("ブランド名は128文字以内で入力してください")
        return v
