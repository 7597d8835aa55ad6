from __future__ import annotations

from decimal import Decimal

import pytest

from modules.brands.models import Brand
from modules.categories.models import Category
from modules.products.models import Product
from modules.users.models import Role, User


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def brand():
    return Brand.objects.create(name="brandA")


@pytest.fixture()
def category():
    return Category.objects.create(name="categoryA")


@pytest.fixture()
def product(brand, category):
    """A persisted Product instance."""
    return Product.objects.create(
        name="productA",
        description="description",
        in_stock=1,
        image="",
        price=Decimal("1000"),
        cost=Decimal("600"),
        discount_price=Decimal("900"),
        shipping_cost=Decimal("500"),
        brand=brand,
        category=category,
    )


@pytest.fixture()
def admin_role():
    return Role.objects.create(name="Admin", description="管理者")


@pytest.fixture()
def editor_role():
    return Role.objects.create(name="Editor", description="編集者")


@pytest.fixture()
def admin_user(admin_role):
    user = User(email="test@example.com", name="userA", enabled=True)
    user.set_password("password123")
    user.save()
    user.roles.set([admin_role])
    return user
