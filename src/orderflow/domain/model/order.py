"""Order aggregate.

An Order owns its line items. Once the order store has assigned identities
nothing about it changes: the line prices are the catalog prices captured
when the order was placed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from orderflow.domain.model.customer import Customer
from orderflow.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: str
    quantity: Quantity
    price: Money  # locked at order-creation time
    id: str | None = None

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass(frozen=True)
class OrderDraft:
    """An order that has been validated and priced but not yet stored."""

    customer: Customer
    lines: tuple[OrderLineItem, ...]


@dataclass(frozen=True)
class Order:
    """A persisted order.

    Built by the order store from an ``OrderDraft``; ``id`` and the line
    ids are assigned there.
    """

    id: str
    customer: Customer
    order_lines: tuple[OrderLineItem, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.order_lines:
            result = result + line.line_total
        return result
