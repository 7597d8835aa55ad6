"""Unit tests for ProductService.

Covers:
- list_all: full scan vs. search delegation.
- check_unique: name look-up (no two products share a name).
- get: happy path, not found.
- save / delete: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.brands.models import Brand
from modules.categories.models import Category
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _make_product(**overrides) -> Product:
    defaults = {
        "id": 1,
        "name": "product",
        "description": "description",
        "in_stock": 1,
        "image": "image",
        "price": Decimal("1.0"),
        "cost": Decimal("1.0"),
        "discount_price": Decimal("1.0"),
        "shipping_cost": Decimal("1.0"),
        "brand": Brand(id=1, name="brandA"),
        "category": Category(id=1, name="categoryA"),
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# list_all
# ===========================================================================


class TestListAll:
    def test_none_returns_full_scan(self, service, mock_repo):
        products = [_make_product(), _make_product(id=2, name="product2")]
        mock_repo.find_all.return_value = products

        assert service.list_all(None) == products

    def test_empty_string_returns_full_scan(self, service, mock_repo):
        products = [_make_product()]
        mock_repo.find_all.return_value = products

        assert service.list_all("") == products
        mock_repo.search.assert_not_called()

    def test_keyword_returns_search_result(self, service, mock_repo):
        found = [_make_product()]
        mock_repo.find_all.return_value = [_make_product(), _make_product(id=2)]
        mock_repo.search.return_value = found

        assert service.list_all("product") == found
        mock_repo.search.assert_called_once_with("product")


# ===========================================================================
# check_unique
# ===========================================================================


class TestCheckUnique:
    def test_no_duplication(self, service, mock_repo):
        mock_repo.find_by_key.return_value = None

        assert service.check_unique(Product(name="product")) is True
        mock_repo.find_by_key.assert_called_once_with("product")

    def test_duplicate(self, service, mock_repo):
        mock_repo.find_by_key.return_value = _make_product(id=1, name="product")

        assert service.check_unique(Product(name="product")) is False


# ===========================================================================
# get
# ===========================================================================


class TestGet:
    def test_success(self, service, mock_repo):
        existing = _make_product()
        mock_repo.find_by_id.return_value = existing

        assert service.get(1) is existing

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFound, match="Product 1000 not found"):
            service.get(1000)


# ===========================================================================
# save / delete
# ===========================================================================


class TestCommands:
    def test_save_returns_repository_result(self, service, mock_repo):
        product = _make_product(id=None)
        mock_repo.save.return_value = _make_product(id=10)

        result = service.save(product)

        assert result.id == 10
        mock_repo.save.assert_called_once_with(product)

    def test_delete_delegates(self, service, mock_repo):
        service.delete(1)

        mock_repo.delete.assert_called_once_with(1)
