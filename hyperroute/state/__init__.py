"""Route lifecycle: pure state machine and its controller."""

from hyperroute.state.controller import RouteController
from hyperroute.state.machine import (
    INITIAL_STATE,
    DiscoverRequested,
    Discovering,
    DiscoveryFailed,
    Error,
    Executed,
    Executing,
    ExecutionError,
    ExecutionFailed,
    ExecutionFinished,
    ExecutionRequested,
    HopStarted,
    Idle,
    NoRoute,
    NoRouteFound,
    Reset,
    RouteDiscovered,
    RouteEvent,
    RouteFound,
    RouteState,
    is_busy,
    is_terminal,
    transition,
)

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
    "RouteController",
    "RouteDiscovered",
    "RouteEvent",
    "RouteFound",
    "RouteState",
    "is_busy",
    "is_terminal",
    "transition",
]
