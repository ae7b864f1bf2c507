"""Abstract lookup of customers.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live outside this package.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.customer import Customer


class CustomerDirectory(ABC):

    @abstractmethod
    def find_by_id(self, customer_id: str) -> Customer | None:
        """Return the customer with this id, or None if there is none."""
