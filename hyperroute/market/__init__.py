"""Market reference data: assets, default pairs and simulated order books.

Market data sources live in ``hyperroute.market.sources``.
"""

from hyperroute.market.orderbooks import make_orderbook, mock_orderbooks
from hyperroute.market.pairs import SPOT_PAIRS, make_pair
from hyperroute.market.tokens import TOKENS, display_name, get_asset, spot_name

__all__ = [
    "SPOT_PAIRS",
    "TOKENS",
    "display_name",
    "get_asset",
    "make_orderbook",
    "make_pair",
    "mock_orderbooks",
    "spot_name",
]
