"""Application service: Create Order use case.

Orchestrates the flow between the three collaborators and the domain model.
This is the only place that coordinates customers, products and orders:
it validates a request, prices it from the catalog, stores the order and
writes the reduced stock back.
"""

from __future__ import annotations

import structlog

from orderflow.application.dto import CreateOrderRequest, OrderLineSpec
from orderflow.domain.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    InvariantViolation,
    NoProductsFound,
    ProductsNotFound,
    StaleStockError,
    ValidationError,
)
from orderflow.domain.model.customer import Customer
from orderflow.domain.model.order import Order, OrderDraft, OrderLineItem
from orderflow.domain.model.product import Product, StockUpdate
from orderflow.domain.model.value_objects import Quantity
from orderflow.domain.repository.customer_directory import CustomerDirectory
from orderflow.domain.repository.order_store import OrderStore
from orderflow.domain.repository.product_catalog import ProductCatalog
from orderflow.domain.repository.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        customer_directory: CustomerDirectory,
        product_catalog: ProductCatalog,
        order_store: OrderStore,
        unit_of_work: UnitOfWork,
    ) -> None:
        self._customer_directory = customer_directory
        self._product_catalog = product_catalog
        self._order_store = order_store
        self._unit_of_work = unit_of_work

    def handle(self, request: CreateOrderRequest) -> Order:
        """Create an order and debit the catalog stock.

        Steps:
        1. Check the customer exists.
        2. Look up every requested product (fail if any is unknown).
        3. Check each line against the stock seen in step 2.
        4. Build OrderLineItems with *current* prices (snapshot).
        5. Persist the order.
        6. Write back stock reduced by each persisted line.

        Validation (1-3) never mutates anything. Lines naming the same
        product are checked and debited independently against the same
        snapshot, so the last stock update for that product wins.

        Steps 2-6 run in one unit-of-work transaction. Stock updates carry
        the quantity they were computed from; a catalog that has moved on
        since step 2 rejects the batch with ``StaleStockError``, and the
        transaction discards the order stored in step 5.
        """
        log = logger.bind(customer_id=request.customer_id)
        log.info("order.creation_started", lines=len(request.lines))

        try:
            quantities = [Quantity(line.quantity) for line in request.lines]
            customer = self._find_customer(request.customer_id)
            with self._unit_of_work.transaction():
                products = self._find_products(request.lines)
                self._check_stock(request.lines, products)
                order = self._place_order(customer, request.lines, quantities, products, log)
        except ValidationError as exc:
            log.info("order.rejected", reason=type(exc).__name__, detail=str(exc))
            raise

        log.info("order.created", order_id=order.id, total=str(order.total))
        return order

    def _place_order(
        self,
        customer: Customer,
        lines: list[OrderLineSpec],
        quantities: list[Quantity],
        products: dict[str, Product],
        log,
    ) -> Order:
        priced_lines = tuple(
            OrderLineItem(
                product_id=line.product_id,
                quantity=quantity,
                price=self._snapshot(products, line.product_id).price,  # <-- price snapshot
            )
            for line, quantity in zip(lines, quantities)
        )

        order = self._order_store.create(OrderDraft(customer=customer, lines=priced_lines))
        log = log.bind(order_id=order.id)
        log.info("order.persisted")

        updates = self._reconcile_stock(order, products)
        try:
            self._product_catalog.update_quantity(updates)
        except StaleStockError as exc:
            log.warning("order.stock_conflict", product_ids=exc.product_ids)
            raise
        log.info("order.stock_reconciled", updates=len(updates))
        return order

    # --- Validation -----------------------------------------------------------

    def _find_customer(self, customer_id: str) -> Customer:
        customer = self._customer_directory.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound()
        return customer

    def _find_products(self, lines: list[OrderLineSpec]) -> dict[str, Product]:
        """Return the catalog snapshot for the request, keyed by product id.

        Missing ids are reported once per request line, in request order.
        """
        requested_ids = list(dict.fromkeys(line.product_id for line in lines))
        found = self._product_catalog.find_all_by_id(requested_ids)
        if not found:
            raise NoProductsFound()

        products = {product.id: product for product in found}
        missing = [line.product_id for line in lines if line.product_id not in products]
        if missing:
            raise ProductsNotFound(missing)
        return products

    @staticmethod
    def _check_stock(lines: list[OrderLineSpec], products: dict[str, Product]) -> None:
        short = [
            line.product_id
            for line in lines
            if not products[line.product_id].has_stock_for(line.quantity)
        ]
        if short:
            raise InsufficientStock(short)

    # --- Stock ------------------------------------------------------------------

    def _reconcile_stock(
        self, order: Order, products: dict[str, Product]
    ) -> list[StockUpdate]:
        updates: list[StockUpdate] = []
        for line in order.order_lines:
            stocked = self._snapshot(products, line.product_id).quantity
            updates.append(
                StockUpdate(
                    product_id=line.product_id,
                    quantity=stocked - line.quantity.value,
                    expected_quantity=stocked,
                )
            )
        return updates

    @staticmethod
    def _snapshot(products: dict[str, Product], product_id: str) -> Product:
        product = products.get(product_id)
        if product is None:
            # Only reachable if the order store returns lines it was not given.
            logger.error("order.invariant_violation", product_id=product_id)
            raise InvariantViolation(
                f"Product '{product_id}' is not in the catalog snapshot"
            )
        return product
