"""Runtime configuration for routing and execution.

Thresholds used by route warnings and order placement are plain settings
rather than hard-coded constants so deployments can tune them. Values are
read from environment variables prefixed with ``HYPERROUTE_``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from hyperroute import constants


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value is not None else default


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value is not None else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class RoutingConfig:
    """Settings shared by route discovery and multi-hop execution.

    Attributes:
        max_hops: Maximum number of hops in a discovered route
        stale_threshold_ms: Order book age above which a stale_data warning is raised
        low_liquidity_ratio: A hop warns when top-of-book size is below
            this fraction of the hop's estimated output
        long_route_hops: Hop count at which a long_route warning is raised
        slippage: Fractional allowance around mid price for IOC limit prices
        price_sig_figs: Significant figures allowed in order prices
        min_order_value: Minimum notional value (in quote units) of an order
        hop_delay_seconds: Pause between consecutive hop submissions
        is_mainnet: Selects the phantom agent source ("a" mainnet, "b" testnet)
        info_url: Hyperliquid info endpoint
        exchange_url: Hyperliquid exchange endpoint
        request_timeout: HTTP timeout in seconds
    """

    max_hops: int = constants.MAX_HOPS
    stale_threshold_ms: int = constants.STALE_THRESHOLD_MS
    low_liquidity_ratio: float = constants.LOW_LIQUIDITY_RATIO
    long_route_hops: int = constants.LONG_ROUTE_HOPS
    slippage: float = constants.SLIPPAGE
    price_sig_figs: int = constants.PRICE_SIG_FIGS
    min_order_value: float = constants.MIN_ORDER_VALUE
    hop_delay_seconds: float = constants.HOP_DELAY_SECONDS
    is_mainnet: bool = True
    info_url: str = constants.INFO_URL
    exchange_url: str = constants.EXCHANGE_URL
    request_timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.max_hops < 1:
            raise ValueError(f"max_hops must be at least 1, got {self.max_hops}")
        if not 0 <= self.slippage < 1:
            raise ValueError(f"slippage must be in [0, 1), got {self.slippage}")
        if self.stale_threshold_ms < 0:
            raise ValueError(f"stale_threshold_ms cannot be negative: {self.stale_threshold_ms}")

    @classmethod
    def from_env(cls) -> RoutingConfig:
        """Build a config from ``HYPERROUTE_*`` environment variables.

        Unset variables fall back to the defaults above.
        """
        return cls(
            max_hops=_env_int("HYPERROUTE_MAX_HOPS", constants.MAX_HOPS),
            stale_threshold_ms=_env_int(
                "HYPERROUTE_STALE_THRESHOLD_MS", constants.STALE_THRESHOLD_MS
            ),
            low_liquidity_ratio=_env_float(
                "HYPERROUTE_LOW_LIQUIDITY_RATIO", constants.LOW_LIQUIDITY_RATIO
            ),
            long_route_hops=_env_int("HYPERROUTE_LONG_ROUTE_HOPS", constants.LONG_ROUTE_HOPS),
            slippage=_env_float("HYPERROUTE_SLIPPAGE", constants.SLIPPAGE),
            price_sig_figs=_env_int("HYPERROUTE_PRICE_SIG_FIGS", constants.PRICE_SIG_FIGS),
            min_order_value=_env_float("HYPERROUTE_MIN_ORDER_VALUE", constants.MIN_ORDER_VALUE),
            hop_delay_seconds=_env_float(
                "HYPERROUTE_HOP_DELAY_SECONDS", constants.HOP_DELAY_SECONDS
            ),
            is_mainnet=_env_bool("HYPERROUTE_MAINNET", True),
            info_url=os.environ.get("HYPERROUTE_INFO_URL", constants.INFO_URL),
            exchange_url=os.environ.get("HYPERROUTE_EXCHANGE_URL", constants.EXCHANGE_URL),
            request_timeout=_env_float("HYPERROUTE_REQUEST_TIMEOUT", 10.0),
        )


DEFAULT_CONFIG = RoutingConfig()

__all__ = ["DEFAULT_CONFIG", "RoutingConfig"]
