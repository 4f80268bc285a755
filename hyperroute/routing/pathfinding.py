"""Breadth-first pathfinding over the token graph.

BFS returns the route with the fewest hops, not the best price. Fewer hops
usually means less cumulative spread and slippage, which makes hop count a
reasonable proxy. Among equally short paths the first one reached in edge
insertion order wins.
"""

from __future__ import annotations

from collections import deque

import structlog

from hyperroute.constants import MAX_HOPS
from hyperroute.routing.graph import TokenGraph
from hyperroute.routing.types import GraphEdge

logger = structlog.get_logger()


def find_path(
    graph: TokenGraph,
    source: str,
    destination: str,
    max_hops: int = MAX_HOPS,
) -> list[GraphEdge] | None:
    """Find the shortest edge path from source to destination.

    A node is marked visited when it is first discovered (not when it is
    dequeued), so the first path that reaches any node has minimal length.
    Paths that already have ``max_hops`` edges are not extended.

    Args:
        graph: Token graph to search
        source: Starting asset symbol
        destination: Target asset symbol
        max_hops: Maximum number of edges in the returned path

    Returns:
        List of edges from source to destination, ``[]`` when source equals
        destination, or None if no path exists within ``max_hops``.
    """
    if source == destination:
        return []

    visited = {source}
    queue: deque[tuple[str, list[GraphEdge]]] = deque([(source, [])])

    while queue:
        node, path = queue.popleft()
        if len(path) >= max_hops:
            continue

        for edge in graph.edges_from(node):
            if edge.to_asset in visited:
                continue

            new_path = path + [edge]
            if edge.to_asset == destination:
                return new_path

            visited.add(edge.to_asset)
            queue.append((edge.to_asset, new_path))

    return None


class PathFinder:
    """Binds a token graph and a hop bound for repeated queries.

    Usage:
        finder = PathFinder(TokenGraph.from_pairs(pairs))
        edges = finder.find_shortest_path("SOL", "HYPE")
    """

    def __init__(self, graph: TokenGraph, max_hops: int = MAX_HOPS) -> None:
        self.graph = graph
        self.max_hops = max_hops

    def find_shortest_path(self, source: str, destination: str) -> list[GraphEdge] | None:
        """Find the fewest-hop path; see :func:`find_path`."""
        edges = find_path(self.graph, source, destination, self.max_hops)
        logger.debug(
            "path_search",
            source=source,
            destination=destination,
            max_hops=self.max_hops,
            hops=None if edges is None else len(edges),
        )
        return edges

    def find_symbol_path(self, source: str, destination: str) -> list[str] | None:
        """Same as :meth:`find_shortest_path` but returns visited asset symbols."""
        edges = self.find_shortest_path(source, destination)
        if edges is None:
            return None
        if not edges:
            return [source]
        return [edges[0].from_asset] + [edge.to_asset for edge in edges]


__all__ = ["PathFinder", "find_path"]
