from ridefare.models.domain import Coordinate
from ridefare.models.schemas import FareEstimate
from ridefare.services.fare_service import FareEngine
from ridefare.services.ranking_service import (
    format_coordinate,
    generate_deep_link,
    rank_estimates,
)


def _estimate(provider, fare):
    return FareEstimate(
        provider=provider, category="Economy", estimated_fare=fare,
        currency="INR", distance="1.0 km", duration="3 mins",
    )


def test_deep_link_per_brand(origin, destination):
    assert generate_deep_link("Ola Mini", origin, destination) == (
        "olacabs://app/launch?lat=20.2961&lng=85.8245&drop_lat=20.2367&drop_lng=85.8352"
    )
    assert generate_deep_link("Uber Go", origin, destination) == (
        "uber://?action=setPickup&pickup[latitude]=20.2961&pickup[longitude]=85.8245"
        "&dropoff[latitude]=20.2367&dropoff[longitude]=85.8352"
    )
    assert generate_deep_link("Rapido Bike", origin, destination) == (
        "https://rapido.bike/ride/share?pickup_lat=20.2961&pickup_lng=85.8245"
        "&drop_lat=20.2367&drop_lng=85.8352"
    )


def test_deep_link_unknown_brand_is_empty(origin, destination):
    assert generate_deep_link("BluSmart Electric", origin, destination) == ""
    # Prefix match is case-sensitive
    assert generate_deep_link("ola mini", origin, destination) == ""


def test_deep_link_is_deterministic(origin, destination):
    links = {generate_deep_link("Uber Premier", origin, destination) for _ in range(5)}
    assert len(links) == 1


def test_deep_link_uses_custom_templates(origin, destination):
    templates = {"Blu": "blusmart://ride?from={origin_lat},{origin_lng}&to={dest_lat},{dest_lng}"}
    assert generate_deep_link("BluSmart", origin, destination, templates) == (
        "blusmart://ride?from=20.2961,85.8245&to=20.2367,85.8352"
    )
    assert generate_deep_link("Ola Mini", origin, destination, templates) == ""


def test_format_coordinate():
    assert format_coordinate(20.2961) == "20.2961"
    assert format_coordinate(20.0) == "20"
    assert format_coordinate(0) == "0"
    assert format_coordinate(-0.5) == "-0.5"


def test_rank_sorts_ascending_with_stable_ties(origin, destination):
    estimates = [
        _estimate("Uber Go", 120),
        _estimate("Ola Mini", 90),
        _estimate("Rapido Auto", 120),
        _estimate("Ola Auto", 90),
    ]

    ranked = rank_estimates(estimates, origin, destination)

    assert [e.provider for e in ranked] == ["Ola Mini", "Ola Auto", "Uber Go", "Rapido Auto"]


def test_rank_attaches_links_without_mutating_input(origin, destination):
    estimates = [_estimate("Ola Mini", 90), _estimate("Namma Yatri", 80)]

    ranked = rank_estimates(estimates, origin, destination)

    assert ranked[0].provider == "Namma Yatri"
    assert ranked[0].deep_link == ""
    assert ranked[1].deep_link.startswith("olacabs://")
    assert all(e.deep_link == "" for e in estimates)


def test_scenario_orders_rapido_bike_before_ola_mini(provider_table, route, origin, destination):
    ranked = rank_estimates(FareEngine(provider_table).estimate(route), origin, destination)

    names = [e.provider for e in ranked]
    assert names == [
        "Rapido Bike", "Rapido Auto", "Ola Auto", "Ola Mini",
        "Uber Go", "Ola Prime Sedan", "Uber Premier",
    ]
    fares = [e.estimated_fare for e in ranked]
    assert fares == sorted(fares)
    assert fares[:1] == [81]


def test_format_coordinate_small_values_match_javascript():
    assert format_coordinate(0.00001) == "0.00001"
    assert format_coordinate(0.000001) == "0.000001"
    assert format_coordinate(1e-7) == "1e-7"
    assert format_coordinate(-1.5e-7) == "-1.5e-7"
    assert format_coordinate(-0.0) == "0"
    assert format_coordinate(180) == "180"
