"""Composition root: wires collaborator implementations to the use case.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The collaborators are
passed in by the caller; there is no global registry.
"""

from __future__ import annotations

from orderflow.application.create_order import CreateOrderHandler
from orderflow.domain.repository.customer_directory import CustomerDirectory
from orderflow.domain.repository.order_store import OrderStore
from orderflow.domain.repository.product_catalog import ProductCatalog
from orderflow.domain.repository.unit_of_work import UnitOfWork
from orderflow.infrastructure.config import Settings
from orderflow.infrastructure.logging_config import configure_logging


def create_order_handler(
    customer_directory: CustomerDirectory,
    product_catalog: ProductCatalog,
    order_store: OrderStore,
    unit_of_work: UnitOfWork,
    settings: Settings | None = None,
) -> CreateOrderHandler:
    configure_logging(settings or Settings.from_env())
    return CreateOrderHandler(
        customer_directory=customer_directory,
        product_catalog=product_catalog,
        order_store=order_store,
        unit_of_work=unit_of_work,
    )
