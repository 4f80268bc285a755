"""Tests for token graph construction."""

from hyperroute.models.domain import TradeSide
from hyperroute.routing.graph import TokenGraph, build_token_graph
from tests.helpers.factories import make_pair


class TestTokenGraph:
    """Tests for TokenGraph class."""

    def test_empty_pairs(self) -> None:
        graph = TokenGraph.from_pairs([])
        assert graph.token_count == 0
        assert graph.edges_from("SOL") == ()

    def test_pair_yields_two_directed_edges(self) -> None:
        pair = make_pair("SOL", "USDC")
        graph = build_token_graph([pair])

        assert graph.edge_count == 2
        (sell,) = graph.edges_from("SOL")
        (buy,) = graph.edges_from("USDC")

        assert (sell.from_asset, sell.to_asset, sell.side) == ("SOL", "USDC", TradeSide.SELL)
        assert (buy.from_asset, buy.to_asset, buy.side) == ("USDC", "SOL", TradeSide.BUY)
        assert sell.pair is pair and buy.pair is pair

    def test_edges_keep_insertion_order(self) -> None:
        pairs = [make_pair("SOL", "USDC"), make_pair("HYPE", "USDC"), make_pair("PURR", "USDC")]
        graph = TokenGraph.from_pairs(pairs)

        assert [edge.to_asset for edge in graph.edges_from("USDC")] == ["SOL", "HYPE", "PURR"]

    def test_no_edge_without_pair(self) -> None:
        graph = TokenGraph.from_pairs([make_pair("SOL", "USDC"), make_pair("HYPE", "USDC")])

        assert all(edge.to_asset != "HYPE" for edge in graph.edges_from("SOL"))
        assert not graph.has_token("PIP")
