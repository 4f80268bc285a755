"""Risk warnings attached to discovered routes.

Rules are evaluated per hop after the route is assembled and only read hop
data; they never change it. Thresholds come from RoutingConfig.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.models.domain import OrderBookSnapshot
from hyperroute.routing.types import RouteHop, RouteWarning, WarningKind, WarningSeverity


def stale_data_warning(
    hop: RouteHop, book: OrderBookSnapshot, now_ms: int, config: RoutingConfig
) -> RouteWarning | None:
    age_ms = book.age_ms(now_ms)
    if age_ms <= config.stale_threshold_ms:
        return None
    return RouteWarning(
        kind=WarningKind.STALE_DATA,
        message=f"Orderbook data for {hop.pair.name} is stale (>{round(age_ms / 1000)}s old)",
        severity=WarningSeverity.WARN,
    )


def low_liquidity_warning(
    hop: RouteHop, book: OrderBookSnapshot, config: RoutingConfig
) -> RouteWarning | None:
    # Top-of-book size on the consumed side vs. the hop's output
    levels = book.side_for(hop.side)
    if not levels:
        return RouteWarning(
            kind=WarningKind.LOW_LIQUIDITY,
            message=f"No liquidity on {hop.pair.name}",
            severity=WarningSeverity.WARN,
        )
    if levels[0].size >= hop.estimated_output * config.low_liquidity_ratio:
        return None
    return RouteWarning(
        kind=WarningKind.LOW_LIQUIDITY,
        message=f"Low liquidity on {hop.pair.name}, may experience significant slippage",
        severity=WarningSeverity.WARN,
    )


def long_route_warning(hop_count: int, config: RoutingConfig) -> RouteWarning | None:
    if hop_count < config.long_route_hops:
        return None
    return RouteWarning(
        kind=WarningKind.LONG_ROUTE,
        message=f"Route requires {hop_count} hops, cumulative slippage may be significant",
        severity=WarningSeverity.INFO,
    )


def generate_warnings(
    hops: Sequence[RouteHop],
    orderbooks: Mapping[str, OrderBookSnapshot],
    *,
    now_ms: int,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> list[RouteWarning]:
    """Inspect a route's hops for staleness, thin books and length.

    Per hop, stale data is checked before liquidity; the long-route warning
    comes last. Hops whose book is missing are skipped.

    Args:
        hops: Assembled route hops
        orderbooks: Snapshots keyed by pair id
        now_ms: Evaluation time in epoch milliseconds
        config: Warning thresholds

    Returns:
        Warnings in generation order (possibly empty)
    """
    warnings: list[RouteWarning] = []

    for hop in hops:
        book = orderbooks.get(hop.pair.id)
        if book is None:
            continue

        stale = stale_data_warning(hop, book, now_ms, config)
        if stale is not None:
            warnings.append(stale)

        thin = low_liquidity_warning(hop, book, config)
        if thin is not None:
            warnings.append(thin)

    long_route = long_route_warning(len(hops), config)
    if long_route is not None:
        warnings.append(long_route)

    return warnings


__all__ = [
    "generate_warnings",
    "long_route_warning",
    "low_liquidity_warning",
    "stale_data_warning",
]
