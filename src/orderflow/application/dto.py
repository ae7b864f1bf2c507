"""Data Transfer Objects: plain containers that cross layer boundaries.

Requests arrive as DTOs so callers never have to build domain objects
themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: one requested product and how many units of it."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class CreateOrderRequest:
    """Input: who is ordering and what.

    Lines are kept as given; the same product may appear more than once.
    """

    customer_id: str
    lines: list[OrderLineSpec] = field(default_factory=list)
