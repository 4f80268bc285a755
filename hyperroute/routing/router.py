"""Route assembly: pathfinding, per-hop estimation and warnings."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence

import structlog

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.models.domain import Asset, OrderBookSnapshot, TradablePair
from hyperroute.routing.estimator import estimate_hop_output
from hyperroute.routing.graph import TokenGraph
from hyperroute.routing.pathfinding import PathFinder
from hyperroute.routing.types import GraphEdge, Route, RouteHop
from hyperroute.routing.warnings import generate_warnings

logger = structlog.get_logger()


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def price_edges(
    edges: Sequence[GraphEdge],
    amount: float,
    orderbooks: Mapping[str, OrderBookSnapshot],
) -> list[RouteHop] | None:
    """Walk edges through the estimator, feeding each output to the next hop.

    Returns:
        Priced hops, or None if any edge's pair has no snapshot.
    """
    hops: list[RouteHop] = []
    current_amount = amount

    for edge in edges:
        book = orderbooks.get(edge.pair.id)
        if book is None:
            logger.info("missing_orderbook", pair=edge.pair.id)
            return None

        estimate = estimate_hop_output(edge, current_amount, book)
        hops.append(
            RouteHop(
                pair=edge.pair,
                side=edge.side,
                estimated_price=estimate.price,
                estimated_output=estimate.output,
            )
        )
        current_amount = estimate.output

    return hops


def find_route(
    source: Asset,
    destination: Asset,
    amount: float,
    pairs: Sequence[TradablePair],
    orderbooks: Mapping[str, OrderBookSnapshot],
    *,
    config: RoutingConfig = DEFAULT_CONFIG,
    now_ms: int | None = None,
) -> Route | None:
    """Discover and price a route from source to destination.

    Args:
        source: Asset to sell
        destination: Asset to acquire
        amount: Amount of source to convert
        pairs: Currently tradable pairs; the graph is built from these
        orderbooks: Snapshots keyed by pair id
        config: Hop bound and warning thresholds
        now_ms: Evaluation time for staleness (defaults to the wall clock)

    Returns:
        A priced Route with warnings, or None when no path exists within the
        hop bound or a hop cannot be priced.

    Raises:
        ValueError: If source and destination are the same asset
    """
    if source.symbol == destination.symbol:
        raise ValueError("Source and destination must differ")

    graph = TokenGraph.from_pairs(pairs)
    edges = PathFinder(graph, config.max_hops).find_shortest_path(
        source.symbol, destination.symbol
    )
    if not edges:
        return None

    hops = price_edges(edges, amount, orderbooks)
    if hops is None:
        return None

    evaluated_at = now_ms if now_ms is not None else now_millis()
    warnings = generate_warnings(hops, orderbooks, now_ms=evaluated_at, config=config)

    return Route(
        source=source,
        destination=destination,
        input_amount=amount,
        hops=tuple(hops),
        estimated_output=hops[-1].estimated_output,
        warnings=tuple(warnings),
    )


class RouteFinder:
    """Route discovery bound to a configuration.

    Usage:
        finder = RouteFinder(config)
        route = finder.find(sol, hype, 10.0, pairs, orderbooks)
    """

    def __init__(self, config: RoutingConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def find(
        self,
        source: Asset,
        destination: Asset,
        amount: float,
        pairs: Sequence[TradablePair],
        orderbooks: Mapping[str, OrderBookSnapshot],
        now_ms: int | None = None,
    ) -> Route | None:
        route = find_route(
            source,
            destination,
            amount,
            pairs,
            orderbooks,
            config=self.config,
            now_ms=now_ms,
        )
        if route is None:
            logger.info(
                "no_route",
                source=source.symbol,
                destination=destination.symbol,
                max_hops=self.config.max_hops,
            )
            return None

        logger.info(
            "route_found",
            source=source.symbol,
            destination=destination.symbol,
            path=route.path,
            amount=amount,
            estimated_output=route.estimated_output,
            warnings=[w.kind.value for w in route.warnings],
        )
        return route


__all__ = ["RouteFinder", "find_route", "now_millis", "price_edges"]
