"""Product form DTO.

Framework-agnostic validation of the product form using Pydantic v2.
Values arrive as strings from ``request.POST``; Pydantic's lax mode
coerces them to ``int`` / ``Decimal``.  The DTO is immutable.

The bounds mirror the columns: money is ``DECIMAL(10, 2)`` and
``in_stock`` a signed 32-bit integer.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

MONEY_MAX_DIGITS = 10
MONEY_DECIMAL_PLACES = 2
MONEY_LIMIT = Decimal(10) ** (MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES)
IN_STOCK_MAX = 2147483647


class ProductFormDTO(BaseModel):
    """Immutable DTO for product create/edit submissions.

    Validates:
    - ``name`` is non-empty and at most 256 characters.
    - ``in_stock`` is between 0 and ``IN_STOCK_MAX``.
    - the four money fields are non-negative, below ``MONEY_LIMIT`` and
      carry at most two decimal places.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    in_stock: int = 0
    price: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")
    discount_price: Decimal = Decimal("0")
    shipping_cost: Decimal = Decimal("0")
    brand_id: int
    category_id: int

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("商品名を入力してください")
        if len(v) > 256:
            raise ValueError("商品名は256文字以内で入力してください")
        return v

    @field_validator("in_stock")
    @classmethod
    def stock_must_be_in_range(cls, v: int) -> int:
        if v < 0:
            raise ValueError("在庫数は0以上で入力してください")
        if v > IN_STOCK_MAX:
            raise ValueError(f"在庫数は{IN_STOCK_MAX}以下で入力してください")
        return v

    @field_validator("price", "cost", "discount_price", "shipping_cost")
    @classmethod
    def amount_must_be_in_range(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("金額は0以上で入力してください")
        if v >= MONEY_LIMIT:
            raise ValueError(f"金額は{MONEY_LIMIT - Decimal('0.01')}以下で入力してください")
        if v.normalize().as_tuple().exponent < -MONEY_DECIMAL_PLACES:
            raise ValueError("金額は小数点以下2桁までで入力してください")
        return v
