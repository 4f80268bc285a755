"""HTTP client for the Hyperliquid info and exchange endpoints.

Reads (spot metadata, L2 books) raise ExchangeError on failure. Submissions
never raise: transport failures and exchange rejections come back as error
results so the executor can account for them per hop.
"""

from __future__ import annotations

from typing import Any, Protocol

import httpx
import structlog

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.errors import ExchangeError
from hyperroute.models.domain import OrderBookLevel, OrderBookSnapshot
from hyperroute.models.exchange import (
    CancelAction,
    CancelResult,
    OrderAction,
    Signature,
    SpotMeta,
    TradeResult,
)

logger = structlog.get_logger()


class ExchangeClient(Protocol):
    """Protocol for exchange collaborators used by trade execution.

    This allows swapping the real HTTP client for an in-memory fake in tests.
    """

    async def fetch_spot_meta(self) -> SpotMeta: ...

    async def fetch_l2_book(self, coin: str) -> OrderBookSnapshot: ...

    async def submit_order(
        self, action: OrderAction, nonce: int, signature: Signature
    ) -> TradeResult: ...

    async def submit_cancel(
        self, action: CancelAction, nonce: int, signature: Signature
    ) -> CancelResult: ...


def parse_l2_book(coin: str, data: dict[str, Any]) -> OrderBookSnapshot:
    """Convert an ``l2Book`` response into a snapshot keyed by ``coin``."""
    try:
        bids_raw, asks_raw = data["levels"]
        return OrderBookSnapshot(
            pair_id=coin,
            bids=tuple(
                OrderBookLevel(price=float(lvl["px"]), size=float(lvl["sz"])) for lvl in bids_raw
            ),
            asks=tuple(
                OrderBookLevel(price=float(lvl["px"]), size=float(lvl["sz"])) for lvl in asks_raw
            ),
            timestamp=int(data["time"]),
        )
    except (KeyError, TypeError, ValueError) as err:
        raise ExchangeError(f"Malformed l2Book response for {coin}: {err}") from err


def parse_order_response(data: Any) -> TradeResult:
    """Interpret an exchange response to a single-order action."""
    if not isinstance(data, dict):
        return TradeResult.failure(f"Unexpected response: {data!r}")
    if data.get("status") != "ok":
        return TradeResult.failure(str(data.get("response", data)))

    try:
        statuses = data["response"]["data"]["statuses"]
        status = statuses[0]
    except (KeyError, IndexError, TypeError):
        return TradeResult.failure(f"Unexpected response: {data!r}")

    if not isinstance(status, dict):
        return TradeResult.failure(f"Unexpected order status: {status!r}")
    if "filled" in status:
        filled = status["filled"]
        if not isinstance(filled, dict) or "totalSz" not in filled or "avgPx" not in filled:
            return TradeResult.failure(f"Unexpected order status: {status!r}")
        return TradeResult(
            status="filled",
            total_sz=str(filled.get("totalSz")),
            avg_px=str(filled.get("avgPx")),
            oid=filled.get("oid"),
        )
    if "resting" in status:
        return TradeResult(status="resting", oid=status["resting"].get("oid"))
    if "error" in status:
        return TradeResult.failure(str(status["error"]))
    return TradeResult.failure(f"Unexpected order status: {status!r}")


def parse_cancel_response(data: Any) -> CancelResult:
    """Interpret an exchange response to a single-cancel action."""
    if not isinstance(data, dict) or data.get("status") != "ok":
        response = data.get("response", data) if isinstance(data, dict) else data
        return CancelResult(status="error", error=str(response))
    try:
        status = data["response"]["data"]["statuses"][0]
    except (KeyError, IndexError, TypeError):
        return CancelResult(status="error", error=f"Unexpected response: {data!r}")
    if status == "success":
        return CancelResult(status="success")
    if isinstance(status, dict) and "error" in status:
        return CancelResult(status="error", error=str(status["error"]))
    return CancelResult(status="error", error=f"Unexpected cancel status: {status!r}")


class HyperliquidClient:
    """Async client for Hyperliquid's REST API.

    Usage:
        async with HyperliquidClient(config) as client:
            meta = await client.fetch_spot_meta()
    """

    def __init__(
        self,
        config: RoutingConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Endpoint URLs and timeout
            http: Optional pre-built httpx client (e.g. with a mock transport).
                  The client is closed by ``aclose`` only if created here.
        """
        self.config = config or DEFAULT_CONFIG
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=self.config.request_timeout)

    async def __aenter__(self) -> HyperliquidClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _info(self, payload: dict[str, Any]) -> Any:
        try:
            response = await self._http.post(self.config.info_url, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as err:
            logger.warning("info_request_failed", request_type=payload.get("type"), error=str(err))
            raise ExchangeError(f"Info request {payload.get('type')} failed: {err}") from err

    async def fetch_spot_meta(self) -> SpotMeta:
        data = await self._info({"type": "spotMeta"})
        try:
            return SpotMeta.model_validate(data)
        except ValueError as err:
            raise ExchangeError(f"Malformed spotMeta response: {err}") from err

    async def fetch_l2_book(self, coin: str) -> OrderBookSnapshot:
        data = await self._info({"type": "l2Book", "coin": coin})
        return parse_l2_book(coin, data)

    async def _exchange(
        self, action: dict[str, Any], nonce: int, signature: Signature
    ) -> Any:
        payload = {
            "action": action,
            "nonce": nonce,
            "signature": signature.model_dump(),
            "vaultAddress": None,
        }
        response = await self._http.post(self.config.exchange_url, json=payload)
        if response.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {response.status_code}: {response.text}",
                request=response.request,
                response=response,
            )
        return response.json()

    async def submit_order(
        self, action: OrderAction, nonce: int, signature: Signature
    ) -> TradeResult:
        try:
            data = await self._exchange(action.to_wire(), nonce, signature)
        except (httpx.HTTPError, ValueError) as err:
            logger.warning("order_submit_failed", nonce=nonce, error=str(err))
            return TradeResult.failure(f"Order submission failed: {err}")

        result = parse_order_response(data)
        logger.info(
            "order_submitted",
            nonce=nonce,
            status=result.status,
            oid=result.oid,
            error=result.error,
        )
        return result

    async def submit_cancel(
        self, action: CancelAction, nonce: int, signature: Signature
    ) -> CancelResult:
        try:
            data = await self._exchange(action.to_wire(), nonce, signature)
        except (httpx.HTTPError, ValueError) as err:
            logger.warning("cancel_submit_failed", nonce=nonce, error=str(err))
            return CancelResult(status="error", error=f"Cancel submission failed: {err}")

        result = parse_cancel_response(data)
        logger.info("cancel_submitted", nonce=nonce, status=result.status, error=result.error)
        return result


__all__ = [
    "ExchangeClient",
    "HyperliquidClient",
    "parse_cancel_response",
    "parse_l2_book",
    "parse_order_response",
]
