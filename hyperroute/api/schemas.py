"""Request and response models for the routing API."""

from typing import Literal

from pydantic import BaseModel, Field

from hyperroute.models.domain import TradablePair
from hyperroute.routing.types import Route


class RouteRequest(BaseModel):
    """Route discovery request."""

    from_symbol: str | None = Field(default=None, alias="from")
    to_symbol: str | None = Field(default=None, alias="to")
    amount: float

    model_config = {"populate_by_name": True}


class RouteHopModel(BaseModel):
    pair: str
    side: Literal["buy", "sell"]
    from_symbol: str = Field(serialization_alias="from")
    to_symbol: str = Field(serialization_alias="to")
    estimated_price: float = Field(serialization_alias="estimatedPrice")
    estimated_output: float = Field(serialization_alias="estimatedOutput")


class RouteWarningModel(BaseModel):
    type: str
    message: str
    severity: str


class RouteModel(BaseModel):
    from_symbol: str = Field(serialization_alias="from")
    to_symbol: str = Field(serialization_alias="to")
    amount: float
    path: list[str]
    hops: list[RouteHopModel]
    estimated_output: float = Field(serialization_alias="estimatedOutput")
    warnings: list[RouteWarningModel]

    @classmethod
    def from_route(cls, route: Route) -> "RouteModel":
        return cls(
            from_symbol=route.source.symbol,
            to_symbol=route.destination.symbol,
            amount=route.input_amount,
            path=route.path,
            hops=[
                RouteHopModel(
                    pair=hop.pair.id,
                    side=hop.side.value,
                    from_symbol=hop.from_symbol,
                    to_symbol=hop.to_symbol,
                    estimated_price=hop.estimated_price,
                    estimated_output=hop.estimated_output,
                )
                for hop in route.hops
            ],
            estimated_output=route.estimated_output,
            warnings=[
                RouteWarningModel(type=w.kind.value, message=w.message, severity=w.severity.value)
                for w in route.warnings
            ],
        )


class RouteResponse(BaseModel):
    """Outcome of a discovery request, mirroring the route state."""

    status: Literal["route_found", "no_route", "error"]
    route: RouteModel | None = None
    message: str | None = None


class PairModel(BaseModel):
    id: str
    base: str
    quote: str

    @classmethod
    def from_pair(cls, pair: TradablePair) -> "PairModel":
        return cls(id=pair.id, base=pair.base.symbol, quote=pair.quote.symbol)
