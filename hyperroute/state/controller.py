"""Caller-facing driver for the route state machine.

The controller is the single writer of the route state. It gates
concurrent requests, runs discovery against a market data source and
drives multi-hop execution, translating each step into a state machine
event. Listeners are notified of every new state.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import structlog

from hyperroute.config import DEFAULT_CONFIG, RoutingConfig
from hyperroute.errors import ConcurrentOperation, ExchangeError
from hyperroute.exchange.client import ExchangeClient
from hyperroute.exchange.executor import MultiHopExecutor
from hyperroute.market.sources import MarketDataSource, fetch_snapshots
from hyperroute.models.domain import Asset
from hyperroute.models.exchange import MultiHopResult, SpotMeta
from hyperroute.routing.router import RouteFinder
from hyperroute.routing.types import Route
from hyperroute.state.machine import (
    INITIAL_STATE,
    DiscoverRequested,
    Discovering,
    DiscoveryFailed,
    Executing,
    ExecutionFailed,
    ExecutionFinished,
    ExecutionRequested,
    HopStarted,
    NoRouteFound,
    Reset,
    RouteDiscovered,
    RouteEvent,
    RouteState,
    is_busy,
    transition,
)

logger = structlog.get_logger()

StateListener = Callable[[RouteState], None]


class RouteController:
    """Sequences discovery and execution through the route state machine.

    Args:
        market: Source of pairs and order book snapshots
        client: Exchange collaborator; required only for execution
        config: Routing and execution settings
        executor: Optional pre-built executor (defaults to one over ``client``)
    """

    def __init__(
        self,
        market: MarketDataSource,
        client: ExchangeClient | None = None,
        config: RoutingConfig | None = None,
        executor: MultiHopExecutor | None = None,
    ) -> None:
        self.market = market
        self.client = client
        self.config = config or DEFAULT_CONFIG
        self.finder = RouteFinder(self.config)
        if executor is None and client is not None:
            executor = MultiHopExecutor(client, self.config)
        self.executor = executor
        self.last_execution: MultiHopResult | None = None
        self._state: RouteState = INITIAL_STATE
        self._listeners: list[StateListener] = []
        self._cancel = asyncio.Event()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> RouteState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked with every new state."""
        self._listeners.append(listener)

    def dispatch(self, event: RouteEvent) -> RouteState:
        """Apply an event and notify listeners.

        Raises:
            InvalidTransition: If the current state does not accept ``event``
        """
        self._state = transition(self._state, event)
        logger.debug(
            "route_state", state=type(self._state).__name__, trigger=type(event).__name__
        )
        for listener in self._listeners:
            listener(self._state)
        return self._state

    def _ensure_idle(self, operation: str) -> None:
        if self._lock.locked() or is_busy(self._state):
            raise ConcurrentOperation(
                f"Cannot start {operation} while {type(self._state).__name__}"
            )

    async def discover(
        self,
        source: Asset | None,
        destination: Asset | None,
        amount: float,
    ) -> RouteState:
        """Validate the request, fetch snapshots and search for a route.

        Returns:
            The resulting state: RouteFound, NoRoute or Error

        Raises:
            ConcurrentOperation: If a discovery or execution is in flight
        """
        self._ensure_idle("discovery")
        async with self._lock:
            return await self._discover(source, destination, amount)

    async def _discover(
        self,
        source: Asset | None,
        destination: Asset | None,
        amount: float,
    ) -> RouteState:
        try:
            pairs = await self.market.get_pairs()
        except Exception:
            logger.exception("pairs_unavailable")
            pairs = []
        state = self.dispatch(
            DiscoverRequested(source, destination, amount, market_ready=bool(pairs))
        )
        if not isinstance(state, Discovering):
            logger.info("discovery_rejected", state=type(state).__name__)
            return state

        try:
            orderbooks = await fetch_snapshots(self.market, pairs)
            route = self.finder.find(state.source, state.destination, state.amount, pairs, orderbooks)
        except Exception as err:
            logger.exception(
                "discovery_error",
                source=state.source.symbol,
                destination=state.destination.symbol,
            )
            return self.dispatch(DiscoveryFailed(str(err) or type(err).__name__))

        if route is None:
            return self.dispatch(NoRouteFound(state.source, state.destination))
        return self.dispatch(RouteDiscovered(route))

    async def execute(self, agent_key: str, spot_meta: SpotMeta | None = None) -> RouteState:
        """Execute the found route hop by hop.

        Completed and partial executions end in Executed (the result shows
        which hops filled); an execution where nothing filled, or one that
        raised, ends in ExecutionError.

        Args:
            agent_key: Delegated agent private key
            spot_meta: Spot metadata; fetched from the client when omitted

        Raises:
            ConcurrentOperation: If a discovery or execution is in flight
            InvalidTransition: If no route has been found
        """
        self._ensure_idle("execution")
        if self.executor is None:
            raise ValueError("An exchange client is required for execution")
        async with self._lock:
            return await self._execute(self.executor, agent_key, spot_meta)

    async def _execute(
        self,
        executor: MultiHopExecutor,
        agent_key: str,
        spot_meta: SpotMeta | None,
    ) -> RouteState:
        state = self.dispatch(ExecutionRequested())
        assert isinstance(state, Executing)
        route = state.route
        self._cancel.clear()

        if spot_meta is None:
            try:
                spot_meta = await executor.client.fetch_spot_meta()
            except ExchangeError as err:
                return self.dispatch(ExecutionFailed(str(err)))

        try:
            result = await executor.execute(
                route.hops,
                route.input_amount,
                agent_key=agent_key,
                spot_meta=spot_meta,
                on_hop_start=lambda index: self.dispatch(HopStarted(index)),
                cancel_event=self._cancel,
            )
        except Exception as err:
            logger.exception("execution_error", path=route.path)
            return self.dispatch(ExecutionFailed(str(err) or type(err).__name__))
        self.last_execution = result

        logger.info(
            "execution_finished",
            status=result.status,
            completed_hops=len(result.completed_hops),
            final_output=result.final_output,
            error=result.error,
        )
        if result.status == "error":
            return self.dispatch(ExecutionFailed(result.error or "Execution failed"))
        return self.dispatch(ExecutionFinished(result))

    def cancel(self) -> None:
        """Request cancellation; honoured before the next hop is submitted."""
        self._cancel.set()

    def reset(self) -> RouteState:
        self._cancel.clear()
        self.last_execution = None
        return self.dispatch(Reset())

    @property
    def route(self) -> Route | None:
        """The route carried by the current state, if any."""
        return getattr(self._state, "route", None)


__all__ = ["RouteController", "StateListener"]
