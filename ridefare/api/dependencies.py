"""Request-scoped access to the process-wide services built in create_app()"""
from fastapi import Request

from ..services.directions_service import DirectionsService
from ..services.fare_service import FareEngine


def get_fare_engine(request: Request) -> FareEngine:
    return request.app.state.fare_engine


def get_directions_service(request: Request) -> DirectionsService:
    return request.app.state.directions_service
