import pytest
from fastapi.testclient import TestClient

from ridefare.main import create_app
from ridefare.models.domain import Coordinate, RouteInfo
from ridefare.services.fare_service import build_provider_table


class MockDirections:
    """Stands in for DirectionsService; records calls and replays a fixed outcome."""

    def __init__(self, route=None, error=None):
        self.route = route
        self.error = error
        self.calls = []

    def get_route(self, origin, destination):
        self.calls.append((origin, destination))
        if self.error is not None:
            raise self.error
        return self.route


@pytest.fixture
def origin():
    # Bhubaneswar
    return Coordinate(20.2961, 85.8245)


@pytest.fixture
def destination():
    return Coordinate(20.2367, 85.8352)


@pytest.fixture
def route():
    return RouteInfo(
        distance_meters=6000,
        distance_text="6.0 km",
        duration_seconds=1080,
        duration_text="18 mins",
    )


@pytest.fixture
def provider_table():
    # Built-in table
    from ridefare import config
    return build_provider_table(config.PROVIDERS)


@pytest.fixture
def fare_request():
    return {
        "originLat": 20.2961,
        "originLng": 85.8245,
        "destLat": 20.2367,
        "destLng": 85.8352,
    }


@pytest.fixture
def mock_directions(route):
    return MockDirections(route=route)


@pytest.fixture
def client(provider_table, mock_directions):
    app = create_app(table=provider_table, directions_service=mock_directions)
    return TestClient(app)
