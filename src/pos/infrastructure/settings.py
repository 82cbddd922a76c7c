"""Runtime settings.

Limits that used to be hard-wired are configuration values here.  Each
can be overridden with a ``POS_*`` environment variable, and the CLI
overrides the file locations on top of that.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import DEFAULT_CART_CAPACITY, MAX_LINE_QUANTITY
from pos.domain.model.catalog import DEFAULT_CATALOG_CAPACITY
from pos.infrastructure.persistence.in_memory_order_ledger import (
    DEFAULT_LEDGER_CAPACITY,
)

ENV_PREFIX = "POS_"


@dataclass(frozen=True)
class Settings:
    catalog_capacity: int = DEFAULT_CATALOG_CAPACITY
    cart_capacity: int = DEFAULT_CART_CAPACITY
    ledger_capacity: int = DEFAULT_LEDGER_CAPACITY
    max_quantity: int = MAX_LINE_QUANTITY
    order_log_path: Path = Path("orders.log")
    catalog_path: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``POS_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        catalog_path = env.get(f"{ENV_PREFIX}CATALOG_PATH")
        return cls(
            catalog_capacity=_positive_int(env, "CATALOG_CAPACITY", defaults.catalog_capacity),
            cart_capacity=_positive_int(env, "CART_CAPACITY", defaults.cart_capacity),
            ledger_capacity=_positive_int(env, "LEDGER_CAPACITY", defaults.ledger_capacity),
            max_quantity=_positive_int(env, "MAX_QUANTITY", defaults.max_quantity),
            order_log_path=Path(env.get(f"{ENV_PREFIX}ORDER_LOG_PATH", defaults.order_log_path)),
            catalog_path=Path(catalog_path) if catalog_path else None,
        )


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValidationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValidationError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value
