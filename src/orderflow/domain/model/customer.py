"""Customer entity.

Customers are owned by the customer directory. Order creation only needs
to know that one exists.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: str
    name: str = ""
