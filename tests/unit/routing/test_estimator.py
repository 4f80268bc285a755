"""Tests for order book walking."""

import math

import pytest

from hyperroute.models.domain import TradeSide
from hyperroute.routing.estimator import estimate_hop_output, total_depth, walk_asks, walk_bids
from hyperroute.routing.types import GraphEdge
from tests.helpers.factories import make_book, make_pair

FIVE_BIDS = [(10.0, 1.0), (9.9, 2.0), (9.8, 3.0), (9.7, 4.0), (9.6, 5.0)]
FIVE_ASKS = [(10.1, 1.0), (10.2, 2.0), (10.3, 3.0), (10.4, 4.0), (10.5, 5.0)]


@pytest.fixture
def pair():
    return make_pair("SOL", "USDC")


@pytest.fixture
def book(pair):
    return make_book(pair.id, bids=FIVE_BIDS, asks=FIVE_ASKS)


class TestSellSide:
    """Selling base into bids."""

    def test_single_level_fill(self, pair, book) -> None:
        estimate = estimate_hop_output(GraphEdge.sell_base(pair), 0.5, book)
        assert estimate.output == pytest.approx(5.0)
        assert estimate.price == pytest.approx(10.0)

    def test_conservation_across_levels(self, pair, book) -> None:
        """Deep enough book: output is exactly the sum of filled * price."""
        amount = 4.5  # 1 + 2 + 1.5
        estimate = estimate_hop_output(GraphEdge.sell_base(pair), amount, book)

        expected = 1.0 * 10.0 + 2.0 * 9.9 + 1.5 * 9.8
        assert estimate.output == expected
        assert estimate.price == pytest.approx(expected / amount)

    def test_extrapolates_beyond_depth_at_worst_bid(self, pair, book) -> None:
        """Input exceeding total bid size by X prices X at the 5th bid."""
        depth = total_depth(book.bids)
        shortfall = 7.0
        estimate = estimate_hop_output(GraphEdge.sell_base(pair), depth + shortfall, book)

        consumed = sum(p * s for p, s in FIVE_BIDS)
        assert estimate.output == pytest.approx(consumed + shortfall * 9.6)
        assert math.isfinite(estimate.output) and estimate.output >= 0

    def test_empty_bids_yield_zero(self, pair) -> None:
        empty = make_book(pair.id, bids=[], asks=FIVE_ASKS)
        estimate = estimate_hop_output(GraphEdge.sell_base(pair), 3.0, empty)
        assert (estimate.output, estimate.price) == (0.0, 0.0)

    def test_zero_amount(self, book) -> None:
        estimate = walk_bids(0.0, book.bids)
        assert (estimate.output, estimate.price) == (0.0, 0.0)

    def test_zero_size_levels(self, pair) -> None:
        thin = make_book(pair.id, bids=[(10.0, 0.0), (9.0, 0.0)])
        estimate = estimate_hop_output(TradeSide.SELL, 2.0, thin)
        assert estimate.output == pytest.approx(18.0)


class TestBuySide:
    """Spending quote on asks."""

    def test_single_level_fill(self, pair, book) -> None:
        estimate = estimate_hop_output(GraphEdge.buy_base(pair), 5.05, book)
        assert estimate.output == pytest.approx(0.5)
        assert estimate.price == pytest.approx(10.1)

    def test_walks_multiple_levels(self, pair, book) -> None:
        quote = 10.1 * 1.0 + 10.2 * 2.0 + 10.3 * 0.5
        estimate = estimate_hop_output(GraphEdge.buy_base(pair), quote, book)

        assert estimate.output == pytest.approx(3.5)
        assert estimate.price == pytest.approx(quote / 3.5)

    def test_extrapolates_beyond_depth_at_worst_ask(self, book) -> None:
        full_cost = sum(p * s for p, s in FIVE_ASKS)
        extra_quote = 21.0
        estimate = walk_asks(full_cost + extra_quote, book.asks)

        assert estimate.output == pytest.approx(15.0 + extra_quote / 10.5)

    def test_empty_asks_yield_zero(self, pair) -> None:
        empty = make_book(pair.id, bids=FIVE_BIDS, asks=[])
        estimate = estimate_hop_output(GraphEdge.buy_base(pair), 100.0, empty)
        assert (estimate.output, estimate.price) == (0.0, 0.0)


class TestIdempotence:
    def test_same_inputs_same_estimate(self, pair, book) -> None:
        edge = GraphEdge.buy_base(pair)
        assert estimate_hop_output(edge, 42.0, book) == estimate_hop_output(edge, 42.0, book)
