"""Order book walking for hop output estimation.

Walks order book levels to simulate a market order. The spread and the
visible depth are accounted for, but not the market impact of our own order
on levels beyond the snapshot.

- Sell (base -> quote): hit bids, converting base to quote.
- Buy (quote -> base): lift asks, converting quote to base.

When the book is too thin to absorb the whole amount, the remainder is
priced at the worst visible level. The estimate is pessimistic but always
defined; estimation never raises on thin or empty books.
"""

from __future__ import annotations

from collections.abc import Sequence

from hyperroute.models.domain import OrderBookLevel, OrderBookSnapshot, TradeSide
from hyperroute.routing.types import GraphEdge, HopEstimate

ZERO_ESTIMATE = HopEstimate(output=0.0, price=0.0)


def estimate_hop_output(
    edge: GraphEdge | TradeSide,
    amount: float,
    book: OrderBookSnapshot,
) -> HopEstimate:
    """Estimate the output of pushing ``amount`` through one hop.

    Args:
        edge: Graph edge (or bare trade side) being traversed
        amount: Input amount; base units for a sell, quote units for a buy
        book: Order book snapshot for the edge's pair

    Returns:
        HopEstimate with the output amount and volume-weighted average price
        (quote per base). Zero output and price for an empty side.
    """
    side = edge.side if isinstance(edge, GraphEdge) else edge
    if side == TradeSide.SELL:
        return walk_bids(amount, book.bids)
    return walk_asks(amount, book.asks)


def walk_bids(amount: float, bids: Sequence[OrderBookLevel]) -> HopEstimate:
    """Sell ``amount`` of base into bids; returns quote received."""
    if amount <= 0 or not bids:
        return ZERO_ESTIMATE

    remaining = amount
    total_output = 0.0

    for level in bids:
        if remaining <= 0:
            break
        filled = min(remaining, level.size)
        total_output += filled * level.price
        remaining -= filled

    if remaining > 0:
        total_output += remaining * bids[-1].price

    return HopEstimate(output=total_output, price=total_output / amount)


def walk_asks(quote_amount: float, asks: Sequence[OrderBookLevel]) -> HopEstimate:
    """Spend ``quote_amount`` of quote on asks; returns base received."""
    if quote_amount <= 0 or not asks:
        return ZERO_ESTIMATE

    remaining_quote = quote_amount
    total_base = 0.0

    for level in asks:
        if remaining_quote <= 0:
            break
        max_base_at_level = remaining_quote / level.price
        filled = min(max_base_at_level, level.size)
        total_base += filled
        remaining_quote -= filled * level.price

    if remaining_quote > 0:
        total_base += remaining_quote / asks[-1].price

    avg_price = quote_amount / total_base if total_base > 0 else 0.0
    return HopEstimate(output=total_base, price=avg_price)


def total_depth(levels: Sequence[OrderBookLevel]) -> float:
    """Sum of sizes across levels."""
    return sum(level.size for level in levels)


__all__ = ["estimate_hop_output", "total_depth", "walk_asks", "walk_bids"]
