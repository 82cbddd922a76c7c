"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import structlog

from pos.application.session import ShopSession
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.infrastructure.catalog_seed import seeded_catalog
from pos.infrastructure.persistence.file_order_log_sink import FileOrderLogSink
from pos.infrastructure.persistence.in_memory_order_ledger import (
    InMemoryOrderLedger,
)
from pos.infrastructure.persistence.json_catalog_loader import JsonCatalogLoader
from pos.infrastructure.settings import Settings

logger = structlog.get_logger(__name__)


def catalog(settings: Settings) -> Catalog:
    if settings.catalog_path is not None:
        logger.debug("Loading catalog", path=str(settings.catalog_path))
        return JsonCatalogLoader(settings.catalog_path).load(settings.catalog_capacity)
    return seeded_catalog(settings.catalog_capacity)


def shop_session(settings: Settings) -> ShopSession:
    """Build a session with an empty cart and an empty order history."""
    session = ShopSession(
        catalog=catalog(settings),
        cart=Cart(capacity=settings.cart_capacity, max_quantity=settings.max_quantity),
        ledger=InMemoryOrderLedger(capacity=settings.ledger_capacity),
        sink=FileOrderLogSink(settings.order_log_path),
    )
    logger.debug(
        "Session ready",
        products=len(session.catalog),
        order_log=str(settings.order_log_path),
    )
    return session
