"""Token graph for route discovery.

The graph is an adjacency map from asset symbol to outgoing directed edges.
It is rebuilt from the current pair list for every discovery request, so it
carries no invalidation logic.
"""

from __future__ import annotations

from collections.abc import Iterable

from hyperroute.models.domain import TradablePair
from hyperroute.routing.types import GraphEdge


class TokenGraph:
    """Directed graph of assets connected by tradable pairs.

    Edges are kept in insertion order, which makes pathfinding deterministic
    for a given pair list.
    """

    def __init__(self) -> None:
        """Initialize an empty token graph."""
        self._adjacency: dict[str, list[GraphEdge]] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[TradablePair]) -> TokenGraph:
        """Build a TokenGraph from a list of pairs.

        Args:
            pairs: Tradable pairs, in the order their edges should be explored

        Returns:
            TokenGraph with a sell edge and a buy edge for every pair
        """
        graph = cls()
        for pair in pairs:
            graph._add_edge(GraphEdge.sell_base(pair))
            graph._add_edge(GraphEdge.buy_base(pair))
        return graph

    def _add_edge(self, edge: GraphEdge) -> None:
        self._adjacency.setdefault(edge.from_asset, []).append(edge)

    def edges_from(self, symbol: str) -> tuple[GraphEdge, ...]:
        """Outgoing edges of an asset; empty for assets without pairs."""
        return tuple(self._adjacency.get(symbol, ()))

    def has_token(self, symbol: str) -> bool:
        return symbol in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of assets with at least one outgoing edge."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())


def build_token_graph(pairs: Iterable[TradablePair]) -> TokenGraph:
    """Build a fresh token graph from ``pairs``."""
    return TokenGraph.from_pairs(pairs)


__all__ = ["TokenGraph", "build_token_graph"]
