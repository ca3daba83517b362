"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shop.domain.model.cart import Cart
from shop.domain.model.catalog import Catalog, default_catalog
from shop.domain.repository.audit_log import AuditLog
from shop.domain.repository.order_registry import OrderRegistry
from shop.domain.service.checkout_service import CheckoutService
from shop.infrastructure.audit.file_audit_log import FileAuditLog
from shop.infrastructure.config import StoreConfig
from shop.infrastructure.persistence.in_memory_order_registry import (
    InMemoryOrderRegistry,
)
from shop.infrastructure.persistence.json_catalog_loader import load_catalog

logger = logging.getLogger(__name__)


@dataclass
class StoreSession:
    """Everything one shopper's session owns."""

    catalog: Catalog
    cart: Cart
    orders: OrderRegistry
    audit_log: AuditLog
    checkout: CheckoutService


def build_session(config: StoreConfig | None = None) -> StoreSession:
    config = config or StoreConfig()

    if config.catalog_file is not None:
        catalog = load_catalog(config.catalog_file)
        logger.info("Loaded %d products from %s", len(catalog), config.catalog_file)
    else:
        catalog = default_catalog()

    cart = Cart(max_lines=config.max_cart_lines)
    orders = InMemoryOrderRegistry(max_orders=config.max_orders)
    audit_log = FileAuditLog(config.log_file)

    return StoreSession(
        catalog=catalog,
        cart=cart,
        orders=orders,
        audit_log=audit_log,
        checkout=CheckoutService(cart, orders, audit_log),
    )
