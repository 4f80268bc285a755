"""Pydantic models for market reference data.

These are the shapes supplied by the market-metadata and market-data
collaborators: assets, tradable spot pairs and order book snapshots.
They are immutable once constructed.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class TradeSide(str, Enum):
    """Direction of a trade through a pair, from the base asset's point of view."""

    SELL = "sell"  # dispose of base, receive quote
    BUY = "buy"  # spend quote, acquire base


class Asset(BaseModel):
    """A tradable asset, identified by its symbol."""

    symbol: str = Field(min_length=1)
    name: str
    decimals: int = Field(ge=0, le=18)

    model_config = {"frozen": True}


class TradablePair(BaseModel):
    """A spot market between a base and a quote asset."""

    id: str
    base: Asset
    quote: Asset

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _distinct_assets(self) -> "TradablePair":
        if self.base.symbol == self.quote.symbol:
            raise ValueError(f"Pair {self.id} has identical base and quote")
        return self

    @property
    def name(self) -> str:
        """Display name in BASE/QUOTE form."""
        return f"{self.base.symbol}/{self.quote.symbol}"


class OrderBookLevel(BaseModel):
    """A single price level of an order book."""

    price: float = Field(gt=0)
    size: float = Field(ge=0)

    model_config = {"frozen": True}


class OrderBookSnapshot(BaseModel):
    """Order book for a pair at a point in time.

    Bids are sorted by descending price, asks by ascending price. Depth is
    arbitrary (possibly empty on either side).

    Attributes:
        pair_id: Identifier of the pair this book belongs to
        bids: Buy levels, best (highest) first
        asks: Sell levels, best (lowest) first
        timestamp: Capture time in epoch milliseconds
    """

    pair_id: str = Field(alias="pairId")
    bids: tuple[OrderBookLevel, ...] = ()
    asks: tuple[OrderBookLevel, ...] = ()
    timestamp: int = Field(ge=0)

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def _sorted_sides(self) -> "OrderBookSnapshot":
        bid_prices = [level.price for level in self.bids]
        if bid_prices != sorted(bid_prices, reverse=True):
            raise ValueError(f"Bids for {self.pair_id} must be sorted by descending price")
        ask_prices = [level.price for level in self.asks]
        if ask_prices != sorted(ask_prices):
            raise ValueError(f"Asks for {self.pair_id} must be sorted by ascending price")
        return self

    def side_for(self, side: TradeSide) -> tuple[OrderBookLevel, ...]:
        """Levels consumed by a trade in the given direction.

        Selling base hits the bids, buying base lifts the asks.
        """
        return self.bids if side == TradeSide.SELL else self.asks

    def age_ms(self, now_ms: int) -> int:
        """Milliseconds elapsed between capture and ``now_ms``."""
        return now_ms - self.timestamp


__all__ = [
    "Asset",
    "OrderBookLevel",
    "OrderBookSnapshot",
    "TradablePair",
    "TradeSide",
]
