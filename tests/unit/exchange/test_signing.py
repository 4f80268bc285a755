"""Tests for action hashing and EIP-712 signing."""

import msgpack
import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_utils import keccak

from hyperroute.errors import SigningError
from hyperroute.exchange.signing import (
    action_hash,
    approve_agent_action,
    approve_agent_payload,
    construct_phantom_agent,
    float_to_wire,
    generate_agent,
    l1_payload,
    sign_approve_agent,
    sign_l1_action,
)
from hyperroute.models.exchange import CancelAction, CancelWire, OrderAction, OrderWire
from tests.helpers import AGENT_KEY
from tests.helpers.constants import USER_KEY

NONCE = 1_700_000_000_123


def _order() -> OrderAction:
    return OrderAction(orders=[OrderWire(a=10156, b=False, p="183.15", s="1.234")])


def _recover(payload: dict, signature) -> str:
    return Account.recover_message(
        encode_typed_data(full_message=payload),
        vrs=(signature.v, int(signature.r, 16), int(signature.s, 16)),
    )


class TestFloatToWire:
    """Tests for wire number formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100.0, "100"),
            (0.5, "0.5"),
            (183.15, "183.15"),
            (1.234, "1.234"),
            (0.000000011, "0.00000001"),
            (-0.0, "0"),
            (-0.000000001, "0"),
        ],
    )
    def test_formats(self, value: float, expected: str) -> None:
        assert float_to_wire(value) == expected


class TestActionHash:
    """Tests for the connection id digest."""

    def test_matches_msgpack_nonce_and_vault_flag(self) -> None:
        action = _order()
        expected = keccak(
            msgpack.packb(action.to_wire()) + NONCE.to_bytes(8, "big") + b"\x00"
        )
        assert action_hash(action, NONCE) == expected

    def test_accepts_wire_dict(self) -> None:
        action = _order()
        assert action_hash(action.to_wire(), NONCE) == action_hash(action, NONCE)

    def test_wire_key_order_is_fixed(self) -> None:
        wire = _order().to_wire()
        assert list(wire) == ["type", "orders", "grouping"]
        assert list(wire["orders"][0]) == ["a", "b", "p", "s", "r", "t"]
        assert wire["orders"][0]["t"] == {"limit": {"tif": "Ioc"}}

    def test_nonce_changes_hash(self) -> None:
        action = _order()
        assert action_hash(action, NONCE) != action_hash(action, NONCE + 1)

    def test_vault_address_changes_hash(self) -> None:
        action = _order()
        vault = "0x" + "ab" * 20
        assert action_hash(action, NONCE, vault) != action_hash(action, NONCE)

    def test_cancel_action_hashes(self) -> None:
        action = CancelAction(cancels=[CancelWire(a=10156, o=42)])
        assert len(action_hash(action, NONCE)) == 32


class TestPhantomAgent:
    """Tests for phantom agent construction."""

    def test_mainnet_source(self) -> None:
        agent = construct_phantom_agent(b"\x01" * 32, is_mainnet=True)
        assert agent == {"source": "a", "connectionId": b"\x01" * 32}

    def test_testnet_source(self) -> None:
        assert construct_phantom_agent(b"\x01" * 32, is_mainnet=False)["source"] == "b"

    def test_payload_domain(self) -> None:
        payload = l1_payload(construct_phantom_agent(b"\x00" * 32))
        assert payload["primaryType"] == "Agent"
        assert payload["domain"]["name"] == "Exchange"
        assert payload["domain"]["version"] == "1"
        assert payload["domain"]["chainId"] == 1337
        assert payload["domain"]["verifyingContract"] == "0x" + "0" * 40


class TestSignL1Action:
    """Tests for signing L1 actions with the agent key."""

    def test_signature_recovers_agent_address(self) -> None:
        action = _order()
        signature = sign_l1_action(action, NONCE, AGENT_KEY)

        payload = l1_payload(construct_phantom_agent(action_hash(action, NONCE)))
        assert _recover(payload, signature) == Account.from_key(AGENT_KEY).address

    def test_signature_shape(self) -> None:
        signature = sign_l1_action(_order(), NONCE, AGENT_KEY)
        assert signature.r.startswith("0x")
        assert signature.s.startswith("0x")
        assert signature.v in (27, 28)

    def test_deterministic(self) -> None:
        first = sign_l1_action(_order(), NONCE, AGENT_KEY)
        second = sign_l1_action(_order(), NONCE, AGENT_KEY)
        assert first == second

    def test_network_changes_signature(self) -> None:
        mainnet = sign_l1_action(_order(), NONCE, AGENT_KEY, is_mainnet=True)
        testnet = sign_l1_action(_order(), NONCE, AGENT_KEY, is_mainnet=False)
        assert mainnet != testnet

    def test_malformed_key_raises_without_leaking(self) -> None:
        with pytest.raises(SigningError) as exc_info:
            sign_l1_action(_order(), NONCE, "0xnot-a-key")
        assert "not-a-key" not in str(exc_info.value)


class TestAgentKeys:
    """Tests for agent generation and approval."""

    def test_generate_agent(self) -> None:
        agent = generate_agent()
        assert agent.address == Account.from_key(agent.private_key).address.lower()
        assert agent.private_key not in repr(agent)

    def test_approve_agent_action(self) -> None:
        action = approve_agent_action("0xABCDEF" + "0" * 34, NONCE)
        assert action["type"] == "approveAgent"
        assert action["hyperliquidChain"] == "Mainnet"
        assert action["signatureChainId"] == "0xa4b1"
        assert action["agentAddress"] == "0xabcdef" + "0" * 34
        assert action["agentName"] is None

    def test_payload_uses_empty_name_for_unnamed_agent(self) -> None:
        payload = approve_agent_payload(approve_agent_action("0x" + "12" * 20, NONCE))
        assert payload["message"]["agentName"] == ""
        assert payload["domain"]["chainId"] == 42161
        assert payload["domain"]["name"] == "HyperliquidSignTransaction"

    def test_sign_approve_agent_recovers_user(self) -> None:
        agent = generate_agent()
        action, signature = sign_approve_agent(
            USER_KEY, agent.address, NONCE, is_mainnet=False, agent_name="router"
        )

        assert action["hyperliquidChain"] == "Testnet"
        assert action["agentName"] == "router"
        assert _recover(approve_agent_payload(action), signature) == (
            Account.from_key(USER_KEY).address
        )
