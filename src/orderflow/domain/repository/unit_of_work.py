"""Abstract transactional boundary around the order and catalog stores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class UnitOfWork(ABC):

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Return a context manager spanning one order creation.

        Writes made by the order store and the product catalog inside the
        block are committed when it exits normally. If the block raises,
        every one of those writes is rolled back and the exception
        propagates.
        """
