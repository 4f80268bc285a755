"""Sequential multi-hop execution.

Each hop spends the realized output of the previous hop, so hops are
submitted strictly one after another. Execution is a fold over the hops
carrying the running amount and the list of completed hops; the first
failure halts the fold and is reported alongside whatever already filled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

import structlog

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.exchange.client import ExchangeClient
from hyperroute.exchange.trade import execute_trade
from hyperroute.models.domain import TradeSide
from hyperroute.models.exchange import HopResult, MultiHopResult, SpotMeta, TradeResult
from hyperroute.routing.router import now_millis
from hyperroute.routing.types import RouteHop

logger = structlog.get_logger()

RESTING_ERROR = "Order resting (not filled), IOC orders should fill or cancel"

HopCallback = Callable[[int, HopResult], None]
HopStartCallback = Callable[[int], None]


@dataclass
class ExecutionProgress:
    """Accumulator threaded through the hop fold."""

    current_amount: float
    completed_hops: list[HopResult] = field(default_factory=list)

    def halt(self, error: str, failed_hop: HopResult | None = None) -> MultiHopResult:
        return MultiHopResult(
            status="partial" if self.completed_hops else "error",
            completed_hops=list(self.completed_hops),
            failed_hop=failed_hop,
            error=error,
        )

    def complete(self) -> MultiHopResult:
        return MultiHopResult(
            status="completed",
            completed_hops=list(self.completed_hops),
            final_output=str(self.current_amount),
        )


def realized_output(side: TradeSide, result: TradeResult) -> float:
    """Amount received from a filled hop.

    A sell receives quote (size * average price); a buy receives base (size).
    """
    if side == TradeSide.SELL:
        return result.filled_size * result.average_price
    return result.filled_size


class MultiHopExecutor:
    """Executes route hops sequentially against the exchange.

    Args:
        client: Exchange collaborator for book reads and order submission
        config: Slippage, minimum order value and inter-hop delay
        sleep: Awaitable delay used between hops (injectable for tests)
        nonce_factory: Source of millisecond nonces
    """

    def __init__(
        self,
        client: ExchangeClient,
        config: RoutingConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        nonce_factory: Callable[[], int] = now_millis,
    ) -> None:
        self.client = client
        self.config = config or DEFAULT_CONFIG
        self._sleep = sleep
        self._nonce_factory = nonce_factory

    async def execute(
        self,
        hops: Sequence[RouteHop],
        initial_amount: float,
        *,
        agent_key: str,
        spot_meta: SpotMeta,
        on_hop_start: HopStartCallback | None = None,
        on_hop_complete: HopCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> MultiHopResult:
        """Execute hops in order, feeding each realized output to the next hop.

        Cancellation is only honoured between hops: a hop that has been
        submitted always runs to its result first.

        Args:
            hops: Route hops in execution order
            initial_amount: Amount of the first hop's source asset
            agent_key: Delegated agent private key
            spot_meta: Spot metadata for pair resolution
            on_hop_start: Called with the hop index before each submission
            on_hop_complete: Called with every hop result, including a failing one
            cancel_event: When set, execution stops before the next hop

        Returns:
            MultiHopResult: completed, partial (some hops filled) or error
        """
        progress = ExecutionProgress(current_amount=initial_amount)

        for index, hop in enumerate(hops):
            if index > 0:
                if cancel_event is not None and cancel_event.is_set():
                    logger.info("execution_cancelled", completed_hops=index)
                    return progress.halt(f"Execution cancelled after hop {index}")
                await self._sleep(self.config.hop_delay_seconds)

            if on_hop_start is not None:
                on_hop_start(index)

            result = await execute_trade(
                hop.from_symbol,
                hop.to_symbol,
                progress.current_amount,
                spot_meta=spot_meta,
                agent_key=agent_key,
                client=self.client,
                config=self.config,
                nonce_factory=self._nonce_factory,
            )
            hop_result = HopResult(
                hop_index=index,
                from_symbol=hop.from_symbol,
                to_symbol=hop.to_symbol,
                result=result,
            )

            if on_hop_complete is not None:
                on_hop_complete(index, hop_result)

            if result.status == "error":
                logger.warning("hop_failed", hop_index=index, error=result.error)
                return progress.halt(result.error or "Unknown error", hop_result)

            if result.status == "resting":
                logger.warning("hop_resting", hop_index=index, oid=result.oid)
                return progress.halt(RESTING_ERROR, hop_result)

            progress.completed_hops.append(hop_result)
            progress.current_amount = realized_output(hop.side, result)
            logger.info(
                "hop_filled",
                hop_index=index,
                from_symbol=hop.from_symbol,
                to_symbol=hop.to_symbol,
                total_sz=result.total_sz,
                avg_px=result.avg_px,
                output=progress.current_amount,
            )

        return progress.complete()


__all__ = ["ExecutionProgress", "MultiHopExecutor", "realized_output"]
