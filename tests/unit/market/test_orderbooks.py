"""Tests for simulated market data."""

from hyperroute.market.orderbooks import BOOK_LEVELS, make_orderbook, mock_orderbooks
from hyperroute.market.pairs import SPOT_PAIRS
from tests.helpers import NOW_MS


class TestMockOrderbooks:
    def test_every_pair_has_a_book(self) -> None:
        books = mock_orderbooks(now_ms=NOW_MS)
        assert set(books) == {pair.id for pair in SPOT_PAIRS}

    def test_levels_sorted_best_first(self) -> None:
        for book in mock_orderbooks(now_ms=NOW_MS).values():
            assert len(book.bids) == BOOK_LEVELS
            assert len(book.asks) == BOOK_LEVELS
            assert book.bids[0].price < book.asks[0].price
            assert [lvl.price for lvl in book.bids] == sorted(
                (lvl.price for lvl in book.bids), reverse=True
            )
            assert [lvl.price for lvl in book.asks] == sorted(lvl.price for lvl in book.asks)

    def test_pip_book_is_stale(self) -> None:
        books = mock_orderbooks(now_ms=NOW_MS)
        assert books["PIP/HYPE"].age_ms(NOW_MS) == 45_000
        assert books["HYPE/USDC"].age_ms(NOW_MS) == 0

    def test_spread(self) -> None:
        book = make_orderbook("X/USDC", 100.0, 20, 10, now_ms=NOW_MS)
        assert book.bids[0].price == 99.9
        assert book.asks[0].price == 100.1
        assert book.bids[0].size == 10
