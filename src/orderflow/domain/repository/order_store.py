"""Abstract store for Order aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderflow.domain.model.order import Order, OrderDraft


class OrderStore(ABC):

    @abstractmethod
    def create(self, draft: OrderDraft) -> Order:
        """Persist a new order.

        Assigns an id to the order and to each line item. The returned
        lines correspond one-to-one with ``draft.lines``.
        """
