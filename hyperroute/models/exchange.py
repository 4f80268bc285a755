"""Pydantic models for Hyperliquid exchange actions and results.

Action models serialize to the exact key order the exchange hashes, so
``to_wire()`` must be used whenever an action is signed or submitted.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from hyperroute.constants import SPOT_ASSET_OFFSET


class OrderWire(BaseModel):
    """A single order in Hyperliquid's compact wire format.

    Attributes:
        a: Asset index (SPOT_ASSET_OFFSET + spot universe index)
        b: True for a buy, False for a sell
        p: Limit price string (see float_to_wire)
        s: Size string in base units (see float_to_wire)
        r: Reduce-only flag (always False for spot)
        t: Order type, e.g. {"limit": {"tif": "Ioc"}}
    """

    a: int = Field(ge=0)
    b: bool
    p: str
    s: str
    r: bool = False
    t: dict[str, Any] = Field(default_factory=lambda: {"limit": {"tif": "Ioc"}})


class OrderAction(BaseModel):
    """Place-order action."""

    type: Literal["order"] = "order"
    orders: list[OrderWire]
    grouping: str = "na"

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()


class CancelWire(BaseModel):
    """Cancel request for a single resting order."""

    a: int = Field(ge=0)
    o: int = Field(ge=0)


class CancelAction(BaseModel):
    """Cancel-order action."""

    type: Literal["cancel"] = "cancel"
    cancels: list[CancelWire]

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()


L1Action = OrderAction | CancelAction


class Signature(BaseModel):
    """An ECDSA signature split for wire transmission."""

    r: str
    s: str
    v: int


class SpotMetaToken(BaseModel):
    """Token entry of the spotMeta response."""

    name: str
    index: int
    sz_decimals: int = Field(alias="szDecimals", ge=0)
    wei_decimals: int | None = Field(default=None, alias="weiDecimals")
    token_id: str | None = Field(default=None, alias="tokenId")
    is_canonical: bool = Field(default=False, alias="isCanonical")

    model_config = {"populate_by_name": True}


class SpotMetaUniverse(BaseModel):
    """Pair entry of the spotMeta response. ``tokens`` is (base index, quote index)."""

    tokens: tuple[int, int]
    name: str
    index: int
    is_canonical: bool = Field(default=False, alias="isCanonical")

    model_config = {"populate_by_name": True}

    @property
    def asset_id(self) -> int:
        return SPOT_ASSET_OFFSET + self.index


class SpotMeta(BaseModel):
    """Spot market metadata: the token list and the pair universe."""

    tokens: list[SpotMetaToken]
    universe: list[SpotMetaUniverse]

    model_config = {"populate_by_name": True}

    def token_by_index(self, index: int) -> SpotMetaToken | None:
        for token in self.tokens:
            if token.index == index:
                return token
        return None

    def token_by_name(self, name: str) -> SpotMetaToken | None:
        for token in self.tokens:
            if token.name == name:
                return token
        return None


class TradeResult(BaseModel):
    """Outcome of submitting a single order.

    ``filled`` carries total size, average price and order id; ``resting``
    carries the order id only; ``error`` carries the message.
    """

    status: Literal["filled", "resting", "error"]
    total_sz: str | None = None
    avg_px: str | None = None
    oid: int | None = None
    error: str | None = None

    @classmethod
    def failure(cls, message: str) -> "TradeResult":
        return cls(status="error", error=message)

    @property
    def filled_size(self) -> float:
        return float(self.total_sz or 0)

    @property
    def average_price(self) -> float:
        return float(self.avg_px or 0)


class CancelResult(BaseModel):
    """Outcome of submitting a cancel."""

    status: Literal["success", "error"]
    error: str | None = None


class HopResult(BaseModel):
    """Realized outcome of one hop of a multi-hop execution."""

    hop_index: int = Field(ge=0)
    from_symbol: str
    to_symbol: str
    result: TradeResult


class MultiHopResult(BaseModel):
    """Outcome of a multi-hop execution.

    Attributes:
        status: completed (all hops filled), partial (some hops filled before
            a failure) or error (first hop failed)
        completed_hops: Hops that filled, in order
        failed_hop: The hop that halted execution, if any
        final_output: Realized output of the last hop, when completed
        error: Failure message, when not completed
    """

    status: Literal["completed", "partial", "error"]
    completed_hops: list[HopResult] = Field(default_factory=list)
    failed_hop: HopResult | None = None
    final_output: str | None = None
    error: str | None = None


__all__ = [
    "CancelAction",
    "CancelResult",
    "CancelWire",
    "HopResult",
    "L1Action",
    "MultiHopResult",
    "OrderAction",
    "OrderWire",
    "Signature",
    "SpotMeta",
    "SpotMetaToken",
    "SpotMetaUniverse",
    "TradeResult",
]
