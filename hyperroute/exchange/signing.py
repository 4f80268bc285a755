"""Hyperliquid action signing via the phantom agent pattern.

L1 actions (place order, cancel) are authorized by a delegated agent key
rather than the user's primary wallet:

1. msgpack-encode the action
2. append the nonce (8 bytes big-endian) and a vault flag byte
3. keccak256 the result to obtain the 32-byte connection id
4. EIP-712 sign the ``Agent`` struct ``{source, connectionId}`` on the fixed
   ``Exchange`` domain (chain id 1337)

Everything here is pure: no I/O and no shared state, so it is safe to call
from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import msgpack
from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_utils import keccak, to_bytes, to_hex

from hyperroute.constants import (
    L1_CHAIN_ID,
    L1_DOMAIN_NAME,
    L1_DOMAIN_VERSION,
    MAINNET_SOURCE,
    SIGNATURE_CHAIN_ID,
    TESTNET_SOURCE,
    USER_SIGNED_DOMAIN_NAME,
    WIRE_DECIMALS,
    ZERO_ADDRESS,
)
from hyperroute.errors import SigningError
from hyperroute.models.exchange import L1Action, Signature

EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

AGENT_TYPE = [
    {"name": "source", "type": "string"},
    {"name": "connectionId", "type": "bytes32"},
]

APPROVE_AGENT_TYPE = [
    {"name": "hyperliquidChain", "type": "string"},
    {"name": "agentAddress", "type": "address"},
    {"name": "agentName", "type": "string"},
    {"name": "nonce", "type": "uint64"},
]


def float_to_wire(value: float) -> str:
    """Format a number for the wire.

    Up to 8 decimal places, trailing zeros (and a dangling point) stripped,
    negative zero normalized to "0".
    """
    text = f"{value:.{WIRE_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def _action_dict(action: L1Action | dict[str, Any]) -> dict[str, Any]:
    if isinstance(action, dict):
        return action
    return action.to_wire()


def action_hash(
    action: L1Action | dict[str, Any],
    nonce: int,
    vault_address: str | None = None,
) -> bytes:
    """Compute the connection id for an action.

    Args:
        action: Order or cancel action (or its wire dict)
        nonce: Millisecond timestamp nonce
        vault_address: Trade on behalf of this vault; None for the account itself

    Returns:
        32-byte keccak256 digest
    """
    data = msgpack.packb(_action_dict(action))
    data += nonce.to_bytes(8, "big")
    if vault_address is None:
        data += b"\x00"
    else:
        data += b"\x01" + to_bytes(hexstr=vault_address)
    return keccak(data)


def construct_phantom_agent(connection_id: bytes, is_mainnet: bool = True) -> dict[str, Any]:
    return {
        "source": MAINNET_SOURCE if is_mainnet else TESTNET_SOURCE,
        "connectionId": connection_id,
    }


def l1_payload(phantom_agent: dict[str, Any]) -> dict[str, Any]:
    """EIP-712 typed data for signing a phantom agent."""
    return {
        "domain": {
            "chainId": L1_CHAIN_ID,
            "name": L1_DOMAIN_NAME,
            "verifyingContract": ZERO_ADDRESS,
            "version": L1_DOMAIN_VERSION,
        },
        "types": {
            "Agent": AGENT_TYPE,
            "EIP712Domain": EIP712_DOMAIN_TYPE,
        },
        "primaryType": "Agent",
        "message": phantom_agent,
    }


def split_signature(r: int, s: int, v: int) -> Signature:
    return Signature(r=to_hex(r), s=to_hex(s), v=v)


def sign_typed_data(private_key: str, data: dict[str, Any]) -> Signature:
    """Sign EIP-712 typed data and split the signature into (r, s, v).

    Raises:
        SigningError: If the private key is malformed
    """
    try:
        account = Account.from_key(private_key)
    except Exception as err:
        # Never include the key itself in the message
        raise SigningError(f"Invalid signing key: {type(err).__name__}") from err

    structured = encode_typed_data(full_message=data)
    signed = account.sign_message(structured)
    return split_signature(signed.r, signed.s, signed.v)


def sign_l1_action(
    action: L1Action | dict[str, Any],
    nonce: int,
    agent_key: str,
    *,
    is_mainnet: bool = True,
    vault_address: str | None = None,
) -> Signature:
    """Sign an order or cancel action with the delegated agent key.

    Args:
        action: The action to authorize
        nonce: Millisecond timestamp nonce (also sent with the request)
        agent_key: Hex private key of the approved agent
        is_mainnet: Selects the phantom agent source
        vault_address: Optional vault to trade on behalf of

    Returns:
        Split signature ready for the exchange request

    Raises:
        SigningError: If the agent key is malformed
    """
    connection_id = action_hash(action, nonce, vault_address)
    phantom_agent = construct_phantom_agent(connection_id, is_mainnet)
    return sign_typed_data(agent_key, l1_payload(phantom_agent))


@dataclass(frozen=True)
class AgentCredentials:
    """A freshly generated agent key pair.

    The private key is owned by the caller's session store; this module
    never persists it.
    """

    address: str
    private_key: str

    def __repr__(self) -> str:
        return f"AgentCredentials(address={self.address!r})"


def generate_agent() -> AgentCredentials:
    """Create a new random agent key."""
    account = Account.create()
    return AgentCredentials(address=account.address.lower(), private_key=to_hex(account.key))


def approve_agent_action(
    agent_address: str,
    nonce: int,
    *,
    is_mainnet: bool = True,
    agent_name: str | None = None,
) -> dict[str, Any]:
    """Build the approveAgent action submitted to the exchange.

    ``agentName`` is null for an unnamed agent in the request body but an
    empty string in the signed message.
    """
    return {
        "type": "approveAgent",
        "hyperliquidChain": "Mainnet" if is_mainnet else "Testnet",
        "signatureChainId": hex(SIGNATURE_CHAIN_ID),
        "agentAddress": agent_address.lower(),
        "agentName": agent_name,
        "nonce": nonce,
    }


def approve_agent_payload(action: dict[str, Any]) -> dict[str, Any]:
    """EIP-712 typed data the user's wallet signs to approve an agent."""
    return {
        "domain": {
            "name": USER_SIGNED_DOMAIN_NAME,
            "version": "1",
            "chainId": int(action["signatureChainId"], 16),
            "verifyingContract": ZERO_ADDRESS,
        },
        "types": {
            "HyperliquidTransaction:ApproveAgent": APPROVE_AGENT_TYPE,
            "EIP712Domain": EIP712_DOMAIN_TYPE,
        },
        "primaryType": "HyperliquidTransaction:ApproveAgent",
        "message": {
            "hyperliquidChain": action["hyperliquidChain"],
            "agentAddress": action["agentAddress"],
            "agentName": action["agentName"] or "",
            "nonce": action["nonce"],
        },
    }


def sign_approve_agent(
    user_key: str,
    agent_address: str,
    nonce: int,
    *,
    is_mainnet: bool = True,
    agent_name: str | None = None,
) -> tuple[dict[str, Any], Signature]:
    """Build and sign the one-time approveAgent action with the user's key.

    Returns:
        Tuple of (action, signature) ready for submission
    """
    action = approve_agent_action(
        agent_address, nonce, is_mainnet=is_mainnet, agent_name=agent_name
    )
    return action, sign_typed_data(user_key, approve_agent_payload(action))


__all__ = [
    "AgentCredentials",
    "action_hash",
    "approve_agent_action",
    "approve_agent_payload",
    "construct_phantom_agent",
    "float_to_wire",
    "generate_agent",
    "l1_payload",
    "sign_approve_agent",
    "sign_l1_action",
    "sign_typed_data",
    "split_signature",
]
