"""Product aggregate.

Products live independently of orders. Their price and stock are owned by
the product catalog; orders only read them and submit stock updates back.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow.domain.exceptions import ValidationError
from orderflow.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog, as seen at lookup time.

    Instances are snapshots: a later catalog change produces a new
    ``Product`` rather than mutating this one.
    """

    id: str
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValidationError(
                f"Stock quantity cannot be negative, got {self.quantity}"
            )

    def has_stock_for(self, requested: int) -> bool:
        return self.quantity >= requested


@dataclass(frozen=True)
class StockUpdate:
    """New stock level for one product.

    ``expected_quantity`` is the stock the new value was computed from.
    Catalogs compare it with the stored quantity before writing.
    """

    product_id: str
    quantity: int
    expected_quantity: int
