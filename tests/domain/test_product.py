"""Unit tests for the Product snapshot and stock updates."""

from dataclasses import FrozenInstanceError

import pytest

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.product import Product, StockUpdate
from orderflow.domain.model.value_objects import Money


def _product(quantity: int = 5) -> Product:
    return Product(id="P1", price=Money.of("10"), quantity=quantity)


class TestProduct:

    def test_out_of_stock_is_valid(self):
        assert _product(quantity=0).quantity == 0

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(quantity=-1)

    def test_has_stock_for(self):
        product = _product(quantity=5)
        assert product.has_stock_for(5)
        assert product.has_stock_for(1)
        assert not product.has_stock_for(6)

    def test_snapshot_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            _product().quantity = 1


class TestStockUpdate:

    def test_carries_expected_quantity(self):
        update = StockUpdate(product_id="P1", quantity=3, expected_quantity=5)
        assert update.expected_quantity - update.quantity == 2
