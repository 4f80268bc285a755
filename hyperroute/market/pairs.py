"""Default spot pairs.

Not every asset combination has a direct pair. PIP only trades against
HYPE, so PIP->USDC needs two hops; that gap is what the router fills.
"""

from hyperroute.market.tokens import TOKENS
from hyperroute.models.domain import TradablePair


def make_pair(base: str, quote: str) -> TradablePair:
    return TradablePair(id=f"{base}/{quote}", base=TOKENS[base], quote=TOKENS[quote])


SPOT_PAIRS: list[TradablePair] = [
    # Major USDC pairs
    make_pair("HYPE", "USDC"),
    make_pair("PURR", "USDC"),
    make_pair("BTC", "USDC"),
    make_pair("ETH", "USDC"),
    make_pair("SOL", "USDC"),
    make_pair("DOGE", "USDC"),
    make_pair("JEFF", "USDC"),
    make_pair("ANIME", "USDC"),
    # HYPE pairs
    make_pair("PURR", "HYPE"),
    make_pair("PIP", "HYPE"),
]

__all__ = ["SPOT_PAIRS", "make_pair"]
