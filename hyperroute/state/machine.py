"""Explicit state machine for the route lifecycle.

States:
    Idle            -> nothing requested yet
    Discovering     -> route computation in progress
    RouteFound      -> a priced route is available
    NoRoute         -> the graph search found nothing within the hop bound
    Error           -> a prerequisite was invalid or discovery raised
    Executing       -> hops are being submitted (current_hop when known)
    Executed        -> execution finished (completed or partial)
    ExecutionError  -> execution failed before anything filled

State and loading-ness are one tagged value, so combinations such as
"discovering with a route already present" cannot be represented. Every
transition is a pure function of (state, event).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typing_extensions import assert_never

from hyperroute.errors import InvalidTransition
from hyperroute.models.domain import Asset
from hyperroute.models.exchange import MultiHopResult
from hyperroute.routing.types import Route

# =============================================================================
# States
# =============================================================================


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Discovering:
    source: Asset
    destination: Asset
    amount: float


@dataclass(frozen=True)
class RouteFound:
    route: Route


@dataclass(frozen=True)
class NoRoute:
    source: Asset
    destination: Asset


@dataclass(frozen=True)
class Error:
    message: str


@dataclass(frozen=True)
class Executing:
    route: Route
    current_hop: int | None = None


@dataclass(frozen=True)
class Executed:
    route: Route
    result: MultiHopResult


@dataclass(frozen=True)
class ExecutionError:
    route: Route
    message: str


RouteState = Union[
    Idle,
    Discovering,
    RouteFound,
    NoRoute,
    Error,
    Executing,
    Executed,
    ExecutionError,
]

# =============================================================================
# Events
# =============================================================================


@dataclass(frozen=True)
class DiscoverRequested:
    """User asked for a route. Validated before entering Discovering.

    Attributes:
        source: Selected source asset, or None if nothing is selected
        destination: Selected destination asset, or None
        amount: Amount of source to convert
        market_ready: Whether pair metadata has been loaded
    """

    source: Asset | None
    destination: Asset | None
    amount: float
    market_ready: bool = True


@dataclass(frozen=True)
class RouteDiscovered:
    route: Route


@dataclass(frozen=True)
class NoRouteFound:
    source: Asset
    destination: Asset


@dataclass(frozen=True)
class DiscoveryFailed:
    message: str


@dataclass(frozen=True)
class ExecutionRequested:
    pass


@dataclass(frozen=True)
class HopStarted:
    hop_index: int


@dataclass(frozen=True)
class ExecutionFinished:
    result: MultiHopResult


@dataclass(frozen=True)
class ExecutionFailed:
    message: str


@dataclass(frozen=True)
class Reset:
    pass


RouteEvent = Union[
    DiscoverRequested,
    RouteDiscovered,
    NoRouteFound,
    DiscoveryFailed,
    ExecutionRequested,
    HopStarted,
    ExecutionFinished,
    ExecutionFailed,
    Reset,
]

INITIAL_STATE: RouteState = Idle()

# =============================================================================
# Transitions
# =============================================================================


def validate_discovery(event: DiscoverRequested) -> str | None:
    """Return the reason a discovery request is invalid, or None if valid."""
    if event.source is None or event.destination is None:
        return "Select both tokens"
    if event.source.symbol == event.destination.symbol:
        return "Source and destination must differ"
    if not event.amount > 0:
        return "Amount must be greater than zero"
    if not event.market_ready:
        return "Market data not loaded"
    return None


def is_terminal(state: RouteState) -> bool:
    """Whether the state ends a cycle and only Reset leaves it."""
    return isinstance(state, (NoRoute, Error, Executed, ExecutionError))


def is_busy(state: RouteState) -> bool:
    """Whether a discovery or execution is in flight."""
    return isinstance(state, (Discovering, Executing))


def _discover(state: RouteState, event: DiscoverRequested) -> RouteState:
    if not isinstance(state, (Idle, RouteFound)):
        raise InvalidTransition(state, event)
    message = validate_discovery(event)
    if message is not None:
        return Error(message)
    # validate_discovery guarantees both assets are present
    assert event.source is not None and event.destination is not None
    return Discovering(event.source, event.destination, event.amount)


def transition(state: RouteState, event: RouteEvent) -> RouteState:
    """Apply an event to a state.

    Args:
        state: Current state
        event: Event to apply

    Returns:
        The next state

    Raises:
        InvalidTransition: If the event is not accepted in ``state``
    """
    if isinstance(event, Reset):
        return Idle()

    if isinstance(event, DiscoverRequested):
        return _discover(state, event)

    if isinstance(event, (RouteDiscovered, NoRouteFound, DiscoveryFailed)):
        if not isinstance(state, Discovering):
            raise InvalidTransition(state, event)
        if isinstance(event, RouteDiscovered):
            return RouteFound(event.route)
        if isinstance(event, NoRouteFound):
            return NoRoute(event.source, event.destination)
        return Error(event.message)

    if isinstance(event, ExecutionRequested):
        if not isinstance(state, RouteFound):
            raise InvalidTransition(state, event)
        return Executing(state.route)

    if isinstance(event, (HopStarted, ExecutionFinished, ExecutionFailed)):
        if not isinstance(state, Executing):
            raise InvalidTransition(state, event)
        if isinstance(event, HopStarted):
            return Executing(state.route, event.hop_index)
        if isinstance(event, ExecutionFinished):
            return Executed(state.route, event.result)
        return ExecutionError(state.route, event.message)

    assert_never(event)


__all__ = [
    "INITIAL_STATE",
    "DiscoverRequested",
    "Discovering",
    "DiscoveryFailed",
    "Error",
    "Executed",
    "Executing",
    "ExecutionError",
    "ExecutionFailed",
    "ExecutionFinished",
    "ExecutionRequested",
    "HopStarted",
    "Idle",
    "NoRoute",
    "NoRouteFound",
    "Reset",
    "RouteDiscovered",
    "RouteEvent",
    "RouteFound",
    "RouteState",
    "is_busy",
    "is_terminal",
    "transition",
    "validate_discovery",
]
