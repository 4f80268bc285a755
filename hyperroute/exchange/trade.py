"""Single-hop spot order execution.

A hop is executed as an immediate-or-cancel limit order priced a fixed
slippage allowance away from the current mid price:

1. Resolve the spot pair and side from spot metadata
2. Fetch a fresh L2 book for the pair
3. Compute the IOC price and base size
4. Build, sign and submit the order
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.errors import ExchangeError, SigningError
from hyperroute.exchange.client import ExchangeClient
from hyperroute.exchange.signing import float_to_wire, sign_l1_action
from hyperroute.market.tokens import spot_name
from hyperroute.models.domain import TradeSide
from hyperroute.models.exchange import (
    CancelAction,
    CancelResult,
    CancelWire,
    OrderAction,
    OrderWire,
    SpotMeta,
    TradeResult,
)
from hyperroute.routing.router import now_millis

logger = structlog.get_logger()


@dataclass(frozen=True)
class ResolvedPair:
    """A concrete spot market and the side needed to go from one asset to another.

    Attributes:
        asset_id: Wire asset index (SPOT_ASSET_OFFSET + universe index)
        side: SELL when the source asset is the pair's base, BUY otherwise
        pair_name: Name as it appears in spotMeta.universe (used for l2Book)
        sz_decimals: Size precision of the base token
    """

    asset_id: int
    side: TradeSide
    pair_name: str
    sz_decimals: int


def resolve_pair(from_symbol: str, to_symbol: str, meta: SpotMeta) -> ResolvedPair | None:
    """Find the spot pair connecting two assets.

    If the user swaps A->B:
    - pair A/B exists -> SELL (sell A to get B)
    - pair B/A exists -> BUY (buy B by spending A)

    Display symbols (BTC, ETH, SOL) are mapped back to spot names first.
    """
    from_spot = spot_name(from_symbol)
    to_spot = spot_name(to_symbol)

    for pair in meta.universe:
        base = meta.token_by_index(pair.tokens[0])
        quote = meta.token_by_index(pair.tokens[1])
        if base is None or quote is None:
            continue

        if base.name == from_spot and quote.name == to_spot:
            return ResolvedPair(pair.asset_id, TradeSide.SELL, pair.name, base.sz_decimals)
        if base.name == to_spot and quote.name == from_spot:
            return ResolvedPair(pair.asset_id, TradeSide.BUY, pair.name, base.sz_decimals)

    return None


def round_price(price: float, side: TradeSide, sig_figs: int = 5) -> float:
    """Round a price to ``sig_figs`` significant figures.

    Buys round up and sells round down so the limit stays on the
    marketable side of the slippage bound.
    """
    if price <= 0:
        return 0.0
    digits = math.floor(math.log10(price)) + 1
    magnitude = 10.0 ** (sig_figs - digits)
    if side == TradeSide.BUY:
        rounded = math.ceil(price * magnitude) / magnitude
    else:
        rounded = math.floor(price * magnitude) / magnitude
    return float(f"{rounded:.8f}")


def floor_size(size: float, sz_decimals: int) -> float:
    factor = 10**sz_decimals
    return math.floor(size * factor) / factor


async def execute_trade(
    from_symbol: str,
    to_symbol: str,
    amount: float,
    *,
    spot_meta: SpotMeta,
    agent_key: str,
    client: ExchangeClient,
    config: RoutingConfig = DEFAULT_CONFIG,
    nonce_factory: Callable[[], int] = now_millis,
) -> TradeResult:
    """Execute a market-like spot trade from one asset to another.

    Args:
        from_symbol: Asset being spent
        to_symbol: Asset being acquired
        amount: Amount of ``from_symbol`` to spend
        spot_meta: Spot metadata used to resolve the pair
        agent_key: Delegated agent private key
        client: Exchange collaborator for book reads and submission
        config: Slippage, price precision and minimum order value
        nonce_factory: Source of millisecond nonces

    Returns:
        TradeResult; every failure (no pair, empty book, below minimum,
        signing or transport failure) is reported as an error result.
    """
    resolved = resolve_pair(from_symbol, to_symbol, spot_meta)
    if resolved is None:
        return TradeResult.failure(f"No direct spot pair found for {from_symbol} -> {to_symbol}")

    try:
        book = await client.fetch_l2_book(resolved.pair_name)
    except ExchangeError as err:
        return TradeResult.failure(str(err))

    if not book.bids or not book.asks:
        return TradeResult.failure("Orderbook is empty")

    mid_px = (book.bids[0].price + book.asks[0].price) / 2

    if resolved.side == TradeSide.SELL:
        # Selling base: amount is already in base units
        size = amount
        price = round_price(mid_px * (1 - config.slippage), TradeSide.SELL, config.price_sig_figs)
    else:
        # Buying base: amount is quote, convert to base size at mid
        size = amount / mid_px
        price = round_price(mid_px * (1 + config.slippage), TradeSide.BUY, config.price_sig_figs)

    size = floor_size(size, resolved.sz_decimals)
    if size <= 0:
        return TradeResult.failure("Trade size too small")

    order_value = size * mid_px if resolved.side == TradeSide.SELL else amount
    if order_value < config.min_order_value:
        return TradeResult.failure(
            f"Order value (${order_value:.2f}) is below the ${config.min_order_value:g} minimum"
        )

    action = OrderAction(
        orders=[
            OrderWire(
                a=resolved.asset_id,
                b=resolved.side == TradeSide.BUY,
                p=float_to_wire(price),
                s=float_to_wire(size),
                r=False,
            )
        ]
    )

    nonce = nonce_factory()
    try:
        signature = sign_l1_action(action, nonce, agent_key, is_mainnet=config.is_mainnet)
    except SigningError as err:
        logger.error("order_signing_failed", pair=resolved.pair_name, error=str(err))
        return TradeResult.failure(str(err))

    logger.info(
        "submitting_order",
        pair=resolved.pair_name,
        asset_id=resolved.asset_id,
        side=resolved.side.value,
        price=action.orders[0].p,
        size=action.orders[0].s,
        nonce=nonce,
    )
    return await client.submit_order(action, nonce, signature)


async def cancel_order(
    asset_id: int,
    order_id: int,
    *,
    agent_key: str,
    client: ExchangeClient,
    config: RoutingConfig = DEFAULT_CONFIG,
    nonce_factory: Callable[[], int] = now_millis,
) -> CancelResult:
    """Cancel a resting order."""
    action = CancelAction(cancels=[CancelWire(a=asset_id, o=order_id)])
    nonce = nonce_factory()
    try:
        signature = sign_l1_action(action, nonce, agent_key, is_mainnet=config.is_mainnet)
    except SigningError as err:
        return CancelResult(status="error", error=str(err))
    return await client.submit_cancel(action, nonce, signature)


__all__ = [
    "ResolvedPair",
    "cancel_order",
    "execute_trade",
    "floor_size",
    "resolve_pair",
    "round_price",
]
