"""Fare comparison endpoints"""
import logging

from fastapi import APIRouter, Depends

from ...models.domain import Coordinate
from ...models.schemas import (
    DistanceInfo,
    DurationInfo,
    ErrorResponse,
    FareRequest,
    FareResponse,
    ProviderInfo,
    ProviderTableResponse,
)
from ...services.directions_service import DirectionsService
from ...services.exceptions import (
    ConfigurationError,
    FareServiceError,
    Internal,
    RouteProviderError,
    RouteUnavailable,
)
from ...services.fare_service import FareEngine
from ...services.ranking_service import rank_estimates
from ..dependencies import get_directions_service, get_fare_engine

logger = logging.getLogger(__name__)

router = APIRouter()


def _client_message(error: FareServiceError) -> str:
    """Short, safe summary of a pipeline failure; provider payloads stay in the logs."""
    if isinstance(error, RouteUnavailable):
        return f"No route available ({error.provider_status})"
    if isinstance(error, RouteProviderError):
        return "Directions provider unreachable or timed out"
    if isinstance(error, ConfigurationError):
        return "Service is not configured"
    return "Unexpected error"


@router.post(
    "/calculate_fares",
    response_model=FareResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["Fares"],
)
def calculate_fares(
    request: FareRequest,
    engine: FareEngine = Depends(get_fare_engine),
    directions: DirectionsService = Depends(get_directions_service),
):
    """
    Compare ride fares across all configured providers.

    This endpoint:
    1. Resolves the driving route with the Directions API
    2. Prices the route with every provider's rate card
    3. Sorts the estimates cheapest first and attaches deep links

    Args:
        request: Origin and destination coordinates

    Returns:
        One estimate per provider plus the route distance and duration
    """
    origin = Coordinate(request.origin_lat, request.origin_lng)
    destination = Coordinate(request.dest_lat, request.dest_lng)
    logger.info("calculate_fares called origin=%s destination=%s", origin, destination)

    try:
        route = directions.get_route(origin, destination)
    except RouteUnavailable as e:
        logger.error(
            "Stage directions failed: status=%s message=%s",
            e.provider_status, e.provider_message,
        )
        raise Internal(f"Failed to calculate fares: {_client_message(e)}") from e
    except RouteProviderError as e:
        logger.error("Stage directions failed: %r", e.cause, exc_info=e)
        raise Internal(f"Failed to calculate fares: {_client_message(e)}") from e
    except ConfigurationError as e:
        logger.error("Stage configuration failed: %s", e)
        raise Internal(f"Failed to calculate fares: {_client_message(e)}") from e

    logger.info("Route found: %s, %s", route.distance_text, route.duration_text)

    estimates = engine.estimate(route)
    providers = rank_estimates(estimates, origin, destination)
    logger.info("Calculated %d fare estimates", len(providers))

    return FareResponse(
        providers=providers,
        distance=DistanceInfo(value=route.distance_meters, text=route.distance_text),
        duration=DurationInfo(value=route.duration_seconds, text=route.duration_text),
    )


@router.get("/providers", response_model=ProviderTableResponse, tags=["Fares"])
def list_providers(engine: FareEngine = Depends(get_fare_engine)):
    """
    List the providers compared by /calculate_fares.

    Returns:
        Provider table version and pricing configurations, in declaration order
    """
    return ProviderTableResponse(
        version=engine.table.version,
        providers=[
            ProviderInfo(
                name=p.name,
                category=p.category,
                base_fare=p.base_fare,
                per_km_rate=p.per_km_rate,
                per_min_rate=p.per_min_rate,
            )
            for p in engine.table
        ],
    )
