"""Asset registry and spot display aliases.

In production the registry is populated from spot metadata; the defaults
below cover the markets the router ships with.
"""

from hyperroute.models.domain import Asset

TOKENS: dict[str, Asset] = {
    "USDC": Asset(symbol="USDC", name="USD Coin", decimals=2),
    "HYPE": Asset(symbol="HYPE", name="Hyperliquid", decimals=4),
    "PURR": Asset(symbol="PURR", name="Purr", decimals=4),
    "BTC": Asset(symbol="BTC", name="Bitcoin", decimals=8),
    "ETH": Asset(symbol="ETH", name="Ethereum", decimals=6),
    "SOL": Asset(symbol="SOL", name="Solana", decimals=4),
    "DOGE": Asset(symbol="DOGE", name="Dogecoin", decimals=2),
    "JEFF": Asset(symbol="JEFF", name="Jeff", decimals=4),
    "PIP": Asset(symbol="PIP", name="Pip", decimals=4),
    "ANIME": Asset(symbol="ANIME", name="Anime", decimals=4),
}

# Spot token names -> display symbols
SPOT_ALIASES: dict[str, str] = {
    "UBTC": "BTC",
    "UETH": "ETH",
    "USOL": "SOL",
}

REVERSE_ALIASES: dict[str, str] = {v: k for k, v in SPOT_ALIASES.items()}


def display_name(coin: str) -> str:
    """Map a spot token name to its display symbol (UBTC -> BTC)."""
    return SPOT_ALIASES.get(coin, coin)


def spot_name(symbol: str) -> str:
    """Map a display symbol back to its spot token name (BTC -> UBTC)."""
    return REVERSE_ALIASES.get(symbol, symbol)


def get_asset(symbol: str) -> Asset | None:
    return TOKENS.get(symbol)


__all__ = ["SPOT_ALIASES", "TOKENS", "display_name", "get_asset", "spot_name"]
