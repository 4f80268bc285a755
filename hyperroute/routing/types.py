"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hyperroute.models.domain import Asset, TradablePair, TradeSide


@dataclass(frozen=True)
class GraphEdge:
    """One direction of a tradable pair.

    Each pair yields two edges: base->quote (sell base) and quote->base
    (buy base). The side is derived from which asset of the pair is entered.
    """

    pair: TradablePair
    from_asset: str
    to_asset: str
    side: TradeSide

    @classmethod
    def sell_base(cls, pair: TradablePair) -> GraphEdge:
        return cls(pair, pair.base.symbol, pair.quote.symbol, TradeSide.SELL)

    @classmethod
    def buy_base(cls, pair: TradablePair) -> GraphEdge:
        return cls(pair, pair.quote.symbol, pair.base.symbol, TradeSide.BUY)


@dataclass(frozen=True)
class HopEstimate:
    """Simulated result of pushing an amount through one order book side."""

    output: float
    price: float


@dataclass(frozen=True)
class RouteHop:
    """A single priced hop in a route."""

    pair: TradablePair
    side: TradeSide
    estimated_price: float
    estimated_output: float

    @property
    def from_symbol(self) -> str:
        return self.pair.base.symbol if self.side == TradeSide.SELL else self.pair.quote.symbol

    @property
    def to_symbol(self) -> str:
        return self.pair.quote.symbol if self.side == TradeSide.SELL else self.pair.base.symbol


class WarningKind(str, Enum):
    """Category of a route warning."""

    LOW_LIQUIDITY = "low_liquidity"
    STALE_DATA = "stale_data"
    # Reserved: no rule currently emits this kind
    HIGH_SLIPPAGE = "high_slippage"
    LONG_ROUTE = "long_route"


class WarningSeverity(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class RouteWarning:
    """A user-facing risk note attached to a route."""

    kind: WarningKind
    message: str
    severity: WarningSeverity


@dataclass(frozen=True)
class Route:
    """A discovered, priced route between two assets.

    Routes are value objects: re-discovery produces a new Route rather than
    updating an existing one.

    Attributes:
        source: Asset being sold
        destination: Asset being acquired
        input_amount: Amount of source fed into the first hop
        hops: Priced hops in execution order
        estimated_output: Output of the last hop
        warnings: Risk warnings, in the order they were generated
    """

    source: Asset
    destination: Asset
    input_amount: float
    hops: tuple[RouteHop, ...]
    estimated_output: float
    warnings: tuple[RouteWarning, ...] = ()

    @property
    def hop_count(self) -> int:
        return len(self.hops)

    @property
    def is_multihop(self) -> bool:
        return len(self.hops) > 1

    @property
    def path(self) -> list[str]:
        """Asset symbols visited, source first."""
        if not self.hops:
            return [self.source.symbol]
        return [self.hops[0].from_symbol] + [hop.to_symbol for hop in self.hops]

    def hop_input(self, index: int) -> float:
        """Estimated input amount of hop ``index``."""
        if index == 0:
            return self.input_amount
        return self.hops[index - 1].estimated_output

    def has_warning(self, kind: WarningKind) -> bool:
        return any(w.kind == kind for w in self.warnings)


__all__ = [
    "GraphEdge",
    "HopEstimate",
    "Route",
    "RouteHop",
    "RouteWarning",
    "WarningKind",
    "WarningSeverity",
]
