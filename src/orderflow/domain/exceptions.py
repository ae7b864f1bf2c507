"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly and display user-friendly messages.

Failures that are *not* business rules (storage conflicts, broken collaborator
contracts) sit outside that hierarchy.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class CustomerNotFound(ValidationError):

    def __init__(self) -> None:
        super().__init__("Could not find any customer with the given id")


class NoProductsFound(ValidationError):

    def __init__(self) -> None:
        super().__init__("Could not find any products with the given ids")


class ProductsNotFound(ValidationError):
    """Some requested products are not in the catalog."""

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(
            f"Could not find product(s): {', '.join(map(str, self.product_ids))}"
        )


class InsufficientStock(ValidationError):
    """Some lines request more than the catalog has in stock."""

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(
            f"The quantity for product(s): {', '.join(map(str, self.product_ids))} "
            f"is not available"
        )


class StaleStockError(Exception):
    """Stock changed between the catalog read and the quantity update.

    Raised by ProductCatalog implementations when an update's expected
    quantity no longer matches the stored one. No entry of the batch is
    applied.
    """

    def __init__(self, product_ids: list[str]) -> None:
        self.product_ids = list(product_ids)
        super().__init__(
            f"Stock changed concurrently for product(s): {', '.join(map(str, self.product_ids))}"
        )


class InvariantViolation(Exception):
    """A collaborator broke its contract with the workflow."""
