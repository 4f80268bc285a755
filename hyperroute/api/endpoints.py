"""API endpoints for route discovery."""

import structlog
from fastapi import APIRouter, Depends

from hyperroute.api.schemas import PairModel, RouteModel, RouteRequest, RouteResponse
from hyperroute.config import RoutingConfig
from hyperroute.market.orderbooks import mock_orderbooks
from hyperroute.market.pairs import SPOT_PAIRS
from hyperroute.market.sources import MarketDataSource, StaticMarketData
from hyperroute.market.tokens import get_asset
from hyperroute.state.controller import RouteController
from hyperroute.state.machine import Error, NoRoute, RouteFound

logger = structlog.get_logger()

router = APIRouter()


def get_market() -> MarketDataSource:
    """Dependency provider for market data.

    Override this in tests to inject a fixed market:
        app.dependency_overrides[get_market] = lambda: StaticMarketData(pairs, books)

    Returns:
        Simulated books for the default pairs.
    """
    return StaticMarketData(SPOT_PAIRS, mock_orderbooks())


def get_config() -> RoutingConfig:
    return RoutingConfig.from_env()


@router.get("/pairs", response_model=list[PairModel])
async def list_pairs(market: MarketDataSource = Depends(get_market)) -> list[PairModel]:
    """List tradable pairs known to the market source."""
    pairs = await market.get_pairs()
    return [PairModel.from_pair(pair) for pair in pairs]


@router.post("/route", response_model_exclude_none=True, response_model_by_alias=True)
async def discover_route(
    request: RouteRequest,
    market: MarketDataSource = Depends(get_market),
    config: RoutingConfig = Depends(get_config),
) -> RouteResponse:
    """Discover a route between two assets.

    Error Handling:
        - Unknown symbol: status "error" naming the symbol
        - Validation failure (same asset, non-positive amount): status "error"
        - No path within the hop bound: status "no_route"
    """
    logger.info(
        "received_route_request",
        source=request.from_symbol,
        destination=request.to_symbol,
        amount=request.amount,
    )

    for symbol in (request.from_symbol, request.to_symbol):
        if symbol is not None and get_asset(symbol) is None:
            return RouteResponse(status="error", message=f"Unknown token: {symbol}")

    source = get_asset(request.from_symbol) if request.from_symbol else None
    destination = get_asset(request.to_symbol) if request.to_symbol else None

    controller = RouteController(market, config=config)
    state = await controller.discover(source, destination, request.amount)

    if isinstance(state, RouteFound):
        return RouteResponse(status="route_found", route=RouteModel.from_route(state.route))
    if isinstance(state, NoRoute):
        return RouteResponse(
            status="no_route",
            message=f"No route from {state.source.symbol} to {state.destination.symbol}",
        )
    if isinstance(state, Error):
        return RouteResponse(status="error", message=state.message)

    logger.error("unexpected_route_state", state=type(state).__name__)
    return RouteResponse(status="error", message="Unexpected state")
