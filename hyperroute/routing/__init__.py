"""Route discovery.

Module structure:
- types.py: GraphEdge, RouteHop, Route and warning types
- graph.py: TokenGraph adjacency map built from tradable pairs
- pathfinding.py: Bounded breadth-first search over the graph
- estimator.py: Order book walking per hop
- warnings.py: Staleness, liquidity and route-length warnings
- router.py: Route assembly (find_route, RouteFinder)
"""

from hyperroute.routing.estimator import estimate_hop_output
from hyperroute.routing.graph import TokenGraph, build_token_graph
from hyperroute.routing.pathfinding import PathFinder, find_path
from hyperroute.routing.router import RouteFinder, find_route
from hyperroute.routing.types import (
    GraphEdge,
    HopEstimate,
    Route,
    RouteHop,
    RouteWarning,
    WarningKind,
    WarningSeverity,
)
from hyperroute.routing.warnings import generate_warnings

__all__ = [
    "GraphEdge",
    "HopEstimate",
    "PathFinder",
    "Route",
    "RouteFinder",
    "RouteHop",
    "RouteWarning",
    "TokenGraph",
    "WarningKind",
    "WarningSeverity",
    "build_token_graph",
    "estimate_hop_output",
    "find_path",
    "find_route",
    "generate_warnings",
]
