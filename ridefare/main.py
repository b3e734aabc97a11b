"""FastAPI application factory"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from . import __version__, config
from .api.routes import fares, health
from .services.directions_service import DirectionsService
from .services.exceptions import FareApiError, Internal, InvalidArgument
from .services.fare_service import FareEngine, ProviderTable, load_provider_table

logger = logging.getLogger(__name__)


def _error_response(error: FareApiError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": {"code": error.code, "message": error.message}},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if first.get("type") == "missing":
        return f"Missing required field: {field}" if field else "Missing request body"
    return f"Invalid value for {field}: {first.get('msg')}" if field else "Request body must be a JSON object"


def create_app(
    table: Optional[ProviderTable] = None,
    directions_service: Optional[DirectionsService] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    The provider table is loaded and validated here, so a malformed table
    stops the process before it serves any request.

    Args:
        table: Provider table to use instead of the configured one
        directions_service: Directions client to use instead of the default

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: The provider table is malformed
    """
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="RideFare Fare Comparison API",
        description="Compara tarifas estimadas de Ola, Uber y Rapido para una ruta",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.fare_engine = FareEngine(table or load_provider_table())
    app.state.directions_service = directions_service or DirectionsService()

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("Stage validation failed on %s: %s", request.url.path, exc.errors())
        return _error_response(InvalidArgument(message))

    @app.exception_handler(FareApiError)
    async def handle_fare_api_error(request: Request, exc: FareApiError):
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return _error_response(Internal("Failed to calculate fares: Unexpected error"))

    # Include routers
    app.include_router(health.router)
    app.include_router(fares.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Redirect to Swagger documentation"""
        return RedirectResponse(url="/docs")

    return app


# Create app instance
app = create_app()
