"""Pytest configuration and fixtures."""

import pytest

from hyperroute.config import RoutingConfig
from hyperroute.market.orderbooks import mock_orderbooks
from hyperroute.market.pairs import SPOT_PAIRS
from hyperroute.models.domain import OrderBookSnapshot, TradablePair
from tests.helpers import NOW_MS, FakeExchangeClient, make_book, make_spot_meta


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def config() -> RoutingConfig:
    """Default config with no delay between hops."""
    return RoutingConfig(hop_delay_seconds=0.0)


@pytest.fixture
def pairs() -> list[TradablePair]:
    return list(SPOT_PAIRS)


@pytest.fixture
def orderbooks() -> dict[str, OrderBookSnapshot]:
    """Simulated books captured at NOW_MS (PIP/HYPE is 45s old)."""
    return mock_orderbooks(now_ms=NOW_MS)


@pytest.fixture
def exchange_books() -> dict[str, OrderBookSnapshot]:
    """L2 books keyed by spot universe name, as the exchange returns them."""
    return {
        "@156": make_book("@156", bids=[(184.9, 500)], asks=[(185.1, 500)]),
        "@107": make_book("@107", bids=[(24.49, 5000)], asks=[(24.51, 5000)]),
        "PURR/USDC": make_book("PURR/USDC", bids=[(0.849, 50000)], asks=[(0.851, 50000)]),
        "@200": make_book("@200", bids=[(0.0008, 1_000_000)], asks=[(0.00081, 1_000_000)]),
    }


@pytest.fixture
def fake_client(exchange_books) -> FakeExchangeClient:
    return FakeExchangeClient(books=exchange_books, spot_meta=make_spot_meta())
