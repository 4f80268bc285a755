"""Simulated order books.

Spreads and depths vary deliberately so routing quality and warning
generation can be exercised without a live connection.
"""

from __future__ import annotations

from hyperroute.models.domain import OrderBookLevel, OrderBookSnapshot
from hyperroute.routing.router import now_millis

BOOK_LEVELS = 5
# Each level further from mid carries this much less size than the best level
DEPTH_DECAY = 0.15


def make_orderbook(
    pair_id: str,
    mid_price: float,
    spread_bps: float,
    depth: float,
    age_ms: int = 0,
    *,
    now_ms: int | None = None,
    levels: int = BOOK_LEVELS,
) -> OrderBookSnapshot:
    """Build a symmetric book around ``mid_price``.

    Args:
        pair_id: Pair identifier
        mid_price: Mid price in quote units
        spread_bps: Full bid/ask spread in basis points
        depth: Size of the best level on each side
        age_ms: How old the snapshot should appear
        now_ms: Reference time (defaults to the wall clock)
        levels: Number of levels per side

    Returns:
        Snapshot with ``levels`` bids and asks, thinning away from mid
    """
    half_spread = mid_price * (spread_bps / 10_000 / 2)
    best_bid = mid_price - half_spread
    best_ask = mid_price + half_spread
    reference = now_ms if now_ms is not None else now_millis()

    bids = tuple(
        OrderBookLevel(
            price=round(best_bid - i * half_spread * 0.5, 6),
            size=round(depth * (1 - i * DEPTH_DECAY), 4),
        )
        for i in range(levels)
    )
    asks = tuple(
        OrderBookLevel(
            price=round(best_ask + i * half_spread * 0.5, 6),
            size=round(depth * (1 - i * DEPTH_DECAY), 4),
        )
        for i in range(levels)
    )
    return OrderBookSnapshot(pair_id=pair_id, bids=bids, asks=asks, timestamp=reference - age_ms)


def mock_orderbooks(now_ms: int | None = None) -> dict[str, OrderBookSnapshot]:
    """Simulated books for the default pairs, keyed by pair id.

    PIP/HYPE is 45 seconds old so it always triggers a stale_data warning.
    """
    reference = now_ms if now_ms is not None else now_millis()
    specs: list[tuple[str, float, float, float, int]] = [
        # Major pairs: tight spreads, deep books
        ("HYPE/USDC", 24.5, 10, 5000, 0),
        ("BTC/USDC", 97500, 5, 2.5, 0),
        ("ETH/USDC", 3450, 8, 40, 0),
        ("SOL/USDC", 185, 12, 300, 0),
        # Mid-tier: moderate spreads
        ("PURR/USDC", 0.85, 30, 50000, 0),
        ("DOGE/USDC", 0.32, 25, 100000, 0),
        ("ANIME/USDC", 0.045, 40, 500000, 0),
        ("JEFF/USDC", 0.012, 60, 1000000, 0),
        # Thin/exotic pairs
        ("PURR/HYPE", 0.035, 50, 30000, 0),
        ("PIP/HYPE", 0.0008, 80, 500000, 45_000),
    ]
    return {
        pair_id: make_orderbook(pair_id, mid, spread, depth, age, now_ms=reference)
        for pair_id, mid, spread, depth, age in specs
    }


__all__ = ["BOOK_LEVELS", "make_orderbook", "mock_orderbooks"]
