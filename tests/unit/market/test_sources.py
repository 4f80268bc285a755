"""Tests for market data sources."""

import asyncio

from hyperroute.market.sources import HyperliquidMarketData, StaticMarketData, fetch_snapshots
from tests.helpers import FakeExchangeClient, make_book, make_pair


class TestStaticMarketData:
    def test_fetch_snapshots_skips_missing_books(self) -> None:
        pairs = [make_pair("SOL", "USDC"), make_pair("HYPE", "USDC")]
        book = make_book("SOL/USDC", bids=[(184.9, 1)], asks=[(185.1, 1)])
        source = StaticMarketData(pairs, {"SOL/USDC": book})

        books = asyncio.run(fetch_snapshots(source, pairs))

        assert books == {"SOL/USDC": book}


class TestHyperliquidMarketData:
    def test_books_rekeyed_by_pair_id(self, exchange_books) -> None:
        client = FakeExchangeClient(books=exchange_books)
        pairs = [make_pair("SOL", "USDC"), make_pair("PIP", "HYPE")]
        source = HyperliquidMarketData(client, pairs)

        books = asyncio.run(fetch_snapshots(source, pairs))

        assert set(books) == {"SOL/USDC", "PIP/HYPE"}
        assert books["SOL/USDC"].pair_id == "SOL/USDC"
        assert books["SOL/USDC"].bids[0].price == 184.9
        assert sorted(client.book_requests) == ["@156", "@200"]

    def test_unlisted_pair_and_fetch_failure(self) -> None:
        client = FakeExchangeClient(books={})
        pairs = [make_pair("SOL", "USDC"), make_pair("BTC", "USDC")]
        source = HyperliquidMarketData(client, pairs)

        books = asyncio.run(fetch_snapshots(source, pairs))

        assert books == {}
        # BTC is not in the spot metadata, so only SOL was requested
        assert client.book_requests == ["@156"]

    def test_spot_meta_fetched_once_for_concurrent_reads(self, exchange_books) -> None:
        class SlowMetaClient(FakeExchangeClient):
            async def fetch_spot_meta(self):
                await asyncio.sleep(0)
                return await super().fetch_spot_meta()

        client = SlowMetaClient(books=exchange_books)
        pairs = [make_pair("SOL", "USDC"), make_pair("HYPE", "USDC"), make_pair("PIP", "HYPE")]
        source = HyperliquidMarketData(client, pairs)

        books = asyncio.run(fetch_snapshots(source, pairs))

        assert len(books) == 3
        assert client.spot_meta_requests == 1
