"""
Trading vocabularies: order side, type, status, and signal direction.
"""

from enum import Enum

from vocab.registry import (
    KeywordDefinition,
    build_enum_registry,
    build_registry,
    default_format_label,
)


class OrderStatus(str, Enum):
    """Order lifecycle states, as stored on Order.status."""
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    FILLED = "FILLED"
    CANCELLED = "CANCELLED"


# ── Orders ────────────────────────────────────────────────────────

SIDE = build_registry("side", {
    "buy": "Buy",
    "sell": "Sell",
})

ORDER_TYPE = build_registry("orderType", {
    "limit": {},
    "market": {},
    "stop": {},
    "stopLimit": KeywordDefinition(label="Stop-Limit"),
})

ORDER_STATUS = build_enum_registry(
    "orderStatus", OrderStatus, format_label=default_format_label,
)

# ── Signals ───────────────────────────────────────────────────────

SIGNAL_DIRECTION = build_registry("signalDirection", {
    "long": "Long",
    "short": "Short",
    "flat": KeywordDefinition(label="Flat / No Position"),
})

REGISTRIES = [SIDE, ORDER_TYPE, ORDER_STATUS, SIGNAL_DIRECTION]
