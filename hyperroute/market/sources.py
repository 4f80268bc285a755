"""Market data sources consumed by route discovery.

A source supplies the tradable pair list and order book snapshots. Snapshot
reads for different pairs are independent, so discovery fetches them
concurrently.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

import structlog

from hyperroute.errors import ExchangeError
from hyperroute.exchange.client import ExchangeClient
from hyperroute.exchange.trade import resolve_pair
from hyperroute.models.domain import OrderBookSnapshot, TradablePair
from hyperroute.models.exchange import SpotMeta

logger = structlog.get_logger()


class MarketDataSource(Protocol):
    """Protocol for pair and order book providers."""

    async def get_pairs(self) -> Sequence[TradablePair]: ...

    async def get_snapshot(self, pair: TradablePair) -> OrderBookSnapshot | None: ...


class StaticMarketData:
    """Mapping-backed source, used for simulation and tests."""

    def __init__(
        self,
        pairs: Sequence[TradablePair],
        orderbooks: Mapping[str, OrderBookSnapshot],
    ) -> None:
        self.pairs = list(pairs)
        self.orderbooks = dict(orderbooks)

    async def get_pairs(self) -> Sequence[TradablePair]:
        return self.pairs

    async def get_snapshot(self, pair: TradablePair) -> OrderBookSnapshot | None:
        return self.orderbooks.get(pair.id)


class HyperliquidMarketData:
    """Live source reading L2 books through the exchange client.

    Pairs are matched to spot universe entries by token name, then each
    book is fetched by its universe name and re-keyed by the pair id.
    """

    def __init__(self, client: ExchangeClient, pairs: Sequence[TradablePair]) -> None:
        self.client = client
        self.pairs = list(pairs)
        self._spot_meta: SpotMeta | None = None
        self._meta_lock = asyncio.Lock()

    async def spot_meta(self) -> SpotMeta:
        """Spot metadata, fetched once and shared by concurrent snapshot reads."""
        async with self._meta_lock:
            if self._spot_meta is None:
                self._spot_meta = await self.client.fetch_spot_meta()
        return self._spot_meta

    async def get_pairs(self) -> Sequence[TradablePair]:
        return self.pairs

    async def get_snapshot(self, pair: TradablePair) -> OrderBookSnapshot | None:
        meta = await self.spot_meta()
        resolved = resolve_pair(pair.base.symbol, pair.quote.symbol, meta)
        if resolved is None:
            logger.info("pair_not_listed", pair=pair.id)
            return None
        try:
            book = await self.client.fetch_l2_book(resolved.pair_name)
        except ExchangeError as err:
            logger.warning("orderbook_fetch_failed", pair=pair.id, error=str(err))
            return None
        return book.model_copy(update={"pair_id": pair.id})


async def fetch_snapshots(
    source: MarketDataSource, pairs: Iterable[TradablePair]
) -> dict[str, OrderBookSnapshot]:
    """Fetch snapshots for all pairs concurrently, merged by pair id.

    Pairs without a snapshot are left out of the result.
    """
    pair_list = list(pairs)
    books = await asyncio.gather(*(source.get_snapshot(pair) for pair in pair_list))
    return {pair.id: book for pair, book in zip(pair_list, books) if book is not None}


__all__ = [
    "HyperliquidMarketData",
    "MarketDataSource",
    "StaticMarketData",
    "fetch_snapshots",
]
