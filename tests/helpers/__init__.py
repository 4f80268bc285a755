"""Test helpers module for shared test utilities.

- constants: Asset fixtures, reference time and test keys
- factories: Pair, book and spot metadata factories
- fakes: In-memory exchange client
"""

from tests.helpers.constants import AGENT_KEY, HYPE, NOW_MS, PIP, PURR, SOL, USDC
from tests.helpers.factories import make_book, make_pair, make_spot_meta
from tests.helpers.fakes import FakeExchangeClient, filled, no_sleep

__all__ = [
    # Constants
    "AGENT_KEY",
    "HYPE",
    "NOW_MS",
    "PIP",
    "PURR",
    "SOL",
    "USDC",
    # Factories
    "make_book",
    "make_pair",
    "make_spot_meta",
    # Fakes
    "FakeExchangeClient",
    "filled",
    "no_sleep",
]
