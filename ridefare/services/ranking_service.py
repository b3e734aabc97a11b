"""Ordering of fare estimates and provider deep links"""
from decimal import Decimal
from typing import List, Mapping

from .. import config
from ..models.domain import Coordinate
from ..models.schemas import FareEstimate


def format_coordinate(value: float) -> str:
    """
    Render a coordinate the way JavaScript's Number#toString does.

    Shortest round-trip digits, plain decimal down to 1e-6 and exponent
    form below that ("1e-7", not Python's "1e-07"). Whole values drop
    the ".0".
    """
    value = float(value)
    if value == 0:
        return "0"
    text = repr(value)
    if abs(value) < 1e-6:
        mantissa, _, exponent = text.partition("e")
        return f"{mantissa}e{int(exponent)}"
    text = format(Decimal(text), "f")
    return text[:-2] if text.endswith(".0") else text


def generate_deep_link(
    provider_name: str,
    origin: Coordinate,
    destination: Coordinate,
    templates: Mapping[str, str] = config.DEEP_LINK_TEMPLATES,
) -> str:
    """
    Build the app-launch URL for a provider.

    The first brand key that prefixes the provider name selects the template.

    Returns:
        Populated URL, or "" when no brand matches
    """
    for brand, template in templates.items():
        if provider_name.startswith(brand):
            return template.format(
                origin_lat=format_coordinate(origin.lat),
                origin_lng=format_coordinate(origin.lng),
                dest_lat=format_coordinate(destination.lat),
                dest_lng=format_coordinate(destination.lng),
            )
    return ""


def rank_estimates(
    estimates: List[FareEstimate],
    origin: Coordinate,
    destination: Coordinate,
    templates: Mapping[str, str] = config.DEEP_LINK_TEMPLATES,
) -> List[FareEstimate]:
    """
    Sort estimates cheapest first and attach deep links.

    The sort is stable, so equal fares keep the provider table order.
    Input estimates are not modified.
    """
    return [
        estimate.model_copy(
            update={
                "deep_link": generate_deep_link(estimate.provider, origin, destination, templates)
            }
        )
        for estimate in sorted(estimates, key=lambda e: e.estimated_fare)
    ]
