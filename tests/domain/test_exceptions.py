"""Unit tests for domain exception messages."""

from uuid import UUID

from orderflow.domain.exceptions import (
    InsufficientStock,
    ProductsNotFound,
    StaleStockError,
)

ID_A = UUID("7c9e6679-7425-40de-944b-e07fc1f90ae7")
ID_B = UUID("0b1e1f53-2c3d-4a8e-9f10-5d6c7b8a9e01")


class TestIdListMessages:

    def test_products_not_found_with_uuid_ids(self):
        exc = ProductsNotFound([ID_A, ID_B])
        assert str(exc) == f"Could not find product(s): {ID_A}, {ID_B}"
        assert exc.product_ids == [ID_A, ID_B]

    def test_insufficient_stock_with_uuid_ids(self):
        exc = InsufficientStock([ID_A])
        assert str(exc) == f"The quantity for product(s): {ID_A} is not available"

    def test_stale_stock_with_integer_ids(self):
        exc = StaleStockError([1, 2])
        assert str(exc) == "Stock changed concurrently for product(s): 1, 2"
