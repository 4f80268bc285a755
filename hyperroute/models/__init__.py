"""Data models for market data and exchange actions."""

from hyperroute.models.domain import (
    Asset,
    OrderBookLevel,
    OrderBookSnapshot,
    TradablePair,
    TradeSide,
)
from hyperroute.models.exchange import (
    CancelAction,
    CancelResult,
    CancelWire,
    HopResult,
    MultiHopResult,
    OrderAction,
    OrderWire,
    Signature,
    SpotMeta,
    SpotMetaToken,
    SpotMetaUniverse,
    TradeResult,
)

__all__ = [
    "Asset",
    "CancelAction",
    "CancelResult",
    "CancelWire",
    "HopResult",
    "MultiHopResult",
    "OrderAction",
    "OrderBookLevel",
    "OrderBookSnapshot",
    "OrderWire",
    "Signature",
    "SpotMeta",
    "SpotMetaToken",
    "SpotMetaUniverse",
    "TradablePair",
    "TradeResult",
    "TradeSide",
]
