"""Abstract product catalog: batch lookup and batch stock updates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.product import Product, StockUpdate


class ProductCatalog(ABC):

    @abstractmethod
    def find_all_by_id(self, product_ids: list[str]) -> list[Product]:
        """Return the products that exist among *product_ids*.

        Unknown ids are omitted. The result order is not guaranteed.
        """

    @abstractmethod
    def update_quantity(self, updates: list[StockUpdate]) -> None:
        """Write new stock levels as one atomic batch.

        Before writing, every entry's ``expected_quantity`` must equal the
        stored stock of its product. On any mismatch nothing is written and
        ``StaleStockError`` is raised. Entries for the same product are
        applied in order, so the last one wins.
        """
