"""Error taxonomy of the fare pipeline and its client-facing codes"""
from typing import Optional


class FareServiceError(Exception):
    """Base class for failures inside the fare pipeline."""
    pass


class RouteUnavailable(FareServiceError):
    """The directions provider answered but returned no usable route."""

    def __init__(self, provider_status: str, provider_message: Optional[str] = None):
        self.provider_status = provider_status
        self.provider_message = provider_message or "Unknown error"
        super().__init__(f"Directions API error: {provider_status} - {self.provider_message}")


class RouteProviderError(FareServiceError):
    """Transport, timeout or protocol failure talking to the directions provider."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Directions provider request failed: {type(cause).__name__}")


class ConfigurationError(FareServiceError):
    """Missing credentials or a malformed provider table."""
    pass


class FareApiError(Exception):
    """Error surfaced to the client as {"error": {"code", "message"}}."""

    code = "internal"
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgument(FareApiError):
    code = "invalid-argument"
    status_code = 400


class Internal(FareApiError):
    code = "internal"
    status_code = 500
