"""Health check endpoint"""
from fastapi import APIRouter, Depends

from ...services.fare_service import FareEngine
from ..dependencies import get_fare_engine

router = APIRouter()


@router.get("/health", tags=["Health"])
def health_check(engine: FareEngine = Depends(get_fare_engine)):
    """
    Health check endpoint for monitoring.

    Does not call the directions provider.

    Returns:
        Status plus the loaded provider table version and size
    """
    return {
        "status": "ok",
        "providerTableVersion": engine.table.version,
        "providers": len(engine.table),
    }
