"""Google Directions client resolving a driving route between two coordinates"""
import logging
import os
from typing import Optional

import requests

from .. import config
from ..models.domain import Coordinate, RouteInfo
from .exceptions import ConfigurationError, RouteProviderError, RouteUnavailable

logger = logging.getLogger(__name__)


class DirectionsService:
    """
    Directions adapter.

    Sole responsibility:
    - Talk to the directions provider over HTTPS
    - Take the first route's first leg as canonical
    - Normalize it into RouteInfo, passing the provider's display text through

    A single attempt is made per call; there are no retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = config.DIRECTIONS_API_URL,
        timeout: float = config.DIRECTIONS_TIMEOUT_SECONDS,
        mode: str = config.DIRECTIONS_TRAVEL_MODE,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.mode = mode
        self.session = session

    @property
    def api_key(self) -> str:
        """Resolve the key lazily so a misconfigured process still starts."""
        key = self._api_key or os.getenv(config.DIRECTIONS_API_KEY_ENV)
        if not key:
            raise ConfigurationError(
                f"{config.DIRECTIONS_API_KEY_ENV} not configured"
            )
        return key

    def get_route(self, origin: Coordinate, destination: Coordinate) -> RouteInfo:
        """
        Resolve distance and duration between two coordinates.

        Args:
            origin: Pickup coordinate
            destination: Drop-off coordinate

        Returns:
            RouteInfo of the first leg of the first route

        Raises:
            ConfigurationError: API key is not configured
            RouteUnavailable: Provider returned a non-OK status or no route
            RouteProviderError: Network error, timeout or malformed response
        """
        params = {
            "origin": origin.as_param(),
            "destination": destination.as_param(),
            "mode": self.mode,
            "key": self.api_key,
        }
        logger.info(
            "Calling Directions API origin=%s destination=%s",
            params["origin"], params["destination"],
        )

        try:
            response = self._get(params)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise RouteProviderError(e) from e
        except ValueError as e:
            # Body was not JSON
            raise RouteProviderError(e) from e

        if not isinstance(data, dict):
            raise RouteProviderError(ValueError(f"Expected a JSON object, got {type(data).__name__}"))

        status = data.get("status")
        logger.info("Directions API response status: %s", status)
        if status != "OK":
            raise RouteUnavailable(str(status or "UNKNOWN"), data.get("error_message"))

        routes = data.get("routes") or []
        if not isinstance(routes, list) or not all(isinstance(r, dict) for r in routes):
            raise RouteProviderError(ValueError("'routes' must be a list of objects"))
        if not routes:
            raise RouteUnavailable("ZERO_RESULTS", "No route found")

        legs = routes[0].get("legs") or []
        if not isinstance(legs, list) or not all(isinstance(leg, dict) for leg in legs):
            raise RouteProviderError(ValueError("'legs' must be a list of objects"))
        if not legs:
            raise RouteUnavailable("ZERO_RESULTS", "No route found")

        return self._parse_leg(legs[0])

    def _get(self, params: dict) -> requests.Response:
        # Without an injected session each call opens its own connection,
        # so concurrent requests share no cookie jar or pool
        if self.session is None:
            return requests.get(self.base_url, params=params, timeout=self.timeout)
        return self.session.get(self.base_url, params=params, timeout=self.timeout)

    @staticmethod
    def _parse_leg(leg: dict) -> RouteInfo:
        try:
            return RouteInfo(
                distance_meters=int(leg["distance"]["value"]),
                distance_text=leg["distance"]["text"],
                duration_seconds=int(leg["duration"]["value"]),
                duration_text=leg["duration"]["text"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RouteProviderError(e) from e
