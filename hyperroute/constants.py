"""Protocol constants for Hyperliquid spot routing.

Centralizes endpoint URLs, signing domains and exchange conventions.
"""

API_URL = "https://api.hyperliquid.xyz"
INFO_URL = f"{API_URL}/info"
EXCHANGE_URL = f"{API_URL}/exchange"

# Spot assets are addressed as 10000 + index into spotMeta.universe
SPOT_ASSET_OFFSET = 10_000

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# L1 actions are signed by a phantom agent on this fixed domain
L1_DOMAIN_NAME = "Exchange"
L1_DOMAIN_VERSION = "1"
L1_CHAIN_ID = 1337

# Phantom agent source: "a" on mainnet, "b" on testnet
MAINNET_SOURCE = "a"
TESTNET_SOURCE = "b"

# User-signed actions (approveAgent) use the connected chain (Arbitrum One)
USER_SIGNED_DOMAIN_NAME = "HyperliquidSignTransaction"
SIGNATURE_CHAIN_ID = 42161

# Routing defaults
MAX_HOPS = 3
STALE_THRESHOLD_MS = 30_000
LOW_LIQUIDITY_RATIO = 0.5
LONG_ROUTE_HOPS = 3

# Execution defaults
SLIPPAGE = 0.01
PRICE_SIG_FIGS = 5
MIN_ORDER_VALUE = 10.0
HOP_DELAY_SECONDS = 0.5

# Wire numbers carry at most this many decimals
WIRE_DECIMALS = 8
