"""Tests for bounded BFS pathfinding."""

from hyperroute.routing.graph import TokenGraph
from hyperroute.routing.pathfinding import PathFinder, find_path
from tests.helpers.factories import make_pair


def graph_of(*pairs: tuple[str, str]) -> TokenGraph:
    return TokenGraph.from_pairs([make_pair(base, quote) for base, quote in pairs])


class TestFindPath:
    """Tests for find_path."""

    def test_direct_path(self) -> None:
        graph = graph_of(("SOL", "USDC"))
        edges = find_path(graph, "SOL", "USDC")

        assert edges is not None
        assert [e.pair.id for e in edges] == ["SOL/USDC"]

    def test_two_hop_through_shared_quote(self) -> None:
        """SOL->HYPE with only SOL/USDC and HYPE/USDC goes through USDC."""
        graph = graph_of(("SOL", "USDC"), ("HYPE", "USDC"))
        edges = find_path(graph, "SOL", "HYPE")

        assert edges is not None
        assert len(edges) == 2
        assert [(e.from_asset, e.to_asset) for e in edges] == [("SOL", "USDC"), ("USDC", "HYPE")]
        assert all(e.pair.id != "SOL/HYPE" for e in edges)

    def test_direct_preferred_over_longer(self) -> None:
        graph = graph_of(("A", "B"), ("B", "C"), ("A", "C"))
        edges = find_path(graph, "A", "C")

        assert edges is not None
        assert [e.pair.id for e in edges] == ["A/C"]

    def test_minimal_length_when_long_path_listed_first(self) -> None:
        graph = graph_of(("A", "B"), ("B", "C"), ("C", "D"), ("A", "E"), ("E", "D"))
        edges = find_path(graph, "A", "D")

        assert edges is not None
        assert len(edges) == 2

    def test_same_asset_is_empty_path(self) -> None:
        graph = graph_of(("SOL", "USDC"))
        assert find_path(graph, "SOL", "SOL") == []

    def test_disconnected_returns_none(self) -> None:
        graph = graph_of(("SOL", "USDC"), ("PIP", "HYPE"))
        assert find_path(graph, "SOL", "PIP") is None

    def test_unknown_asset_returns_none(self) -> None:
        graph = graph_of(("SOL", "USDC"))
        assert find_path(graph, "SOL", "DOGE") is None

    def test_hop_bound_is_respected(self) -> None:
        graph = graph_of(("A", "B"), ("B", "C"), ("C", "D"), ("D", "E"))

        three = find_path(graph, "A", "D", max_hops=3)
        assert three is not None and len(three) == 3

        assert find_path(graph, "A", "E", max_hops=3) is None
        assert find_path(graph, "A", "D", max_hops=2) is None

    def test_tie_break_follows_pair_order(self) -> None:
        first = graph_of(("A", "B"), ("B", "D"), ("A", "C"), ("C", "D"))
        second = graph_of(("A", "C"), ("C", "D"), ("A", "B"), ("B", "D"))

        assert [e.to_asset for e in find_path(first, "A", "D") or []] == ["B", "D"]
        assert [e.to_asset for e in find_path(second, "A", "D") or []] == ["C", "D"]

    def test_deterministic(self) -> None:
        graph = graph_of(("A", "B"), ("B", "D"), ("A", "C"), ("C", "D"))
        assert find_path(graph, "A", "D") == find_path(graph, "A", "D")


class TestPathFinder:
    """Tests for the PathFinder facade."""

    def test_symbol_path(self) -> None:
        finder = PathFinder(graph_of(("PIP", "HYPE"), ("HYPE", "USDC")))
        assert finder.find_symbol_path("PIP", "USDC") == ["PIP", "HYPE", "USDC"]

    def test_symbol_path_same_asset(self) -> None:
        finder = PathFinder(graph_of(("PIP", "HYPE")))
        assert finder.find_symbol_path("PIP", "PIP") == ["PIP"]

    def test_max_hops_bound(self) -> None:
        finder = PathFinder(graph_of(("PIP", "HYPE"), ("HYPE", "USDC")), max_hops=1)
        assert finder.find_shortest_path("PIP", "USDC") is None
