"""Exchange connectivity: signing, order submission and multi-hop execution."""

from hyperroute.exchange.client import ExchangeClient, HyperliquidClient
from hyperroute.exchange.executor import MultiHopExecutor
from hyperroute.exchange.signing import float_to_wire, sign_l1_action
from hyperroute.exchange.trade import cancel_order, execute_trade, resolve_pair

__all__ = [
    "ExchangeClient",
    "HyperliquidClient",
    "MultiHopExecutor",
    "cancel_order",
    "execute_trade",
    "float_to_wire",
    "resolve_pair",
    "sign_l1_action",
]
