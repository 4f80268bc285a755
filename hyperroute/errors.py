"""Exception hierarchy for hyperroute."""


class HyperrouteError(Exception):
    """Base class for all hyperroute errors."""


class SigningError(HyperrouteError):
    """Raised when an action cannot be signed (e.g. malformed agent key)."""


class ExchangeError(HyperrouteError):
    """Raised when an exchange read (meta, order book) fails or is malformed."""


class InvalidTransition(HyperrouteError, ValueError):
    """Raised when an event is not accepted by the current route state.

    The route state machine only defines transitions that make sense for the
    lifecycle (e.g. execution can only start from a found route). Any other
    combination of state and event is a programming error in the caller.
    """

    def __init__(self, state: object, event: object) -> None:
        self.state = state
        self.event = event
        super().__init__(
            f"Event {type(event).__name__} not allowed in state {type(state).__name__}"
        )


class ConcurrentOperation(HyperrouteError):
    """Raised by the controller when a discovery or execution is already in flight."""


__all__ = [
    "ConcurrentOperation",
    "ExchangeError",
    "HyperrouteError",
    "InvalidTransition",
    "SigningError",
]
