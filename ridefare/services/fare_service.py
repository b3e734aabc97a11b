"""Fare model engine and provider table loading"""
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .. import config
from ..models.domain import ProviderConfig, RouteInfo
from ..models.schemas import FareEstimate
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class ProviderTable:
    """Versioned, read-only set of provider pricing configurations."""

    version: str
    providers: Tuple[ProviderConfig, ...]

    def __len__(self):
        return len(self.providers)

    def __iter__(self):
        return iter(self.providers)


def _parse_provider(raw: Dict, categories: Sequence[str]) -> ProviderConfig:
    try:
        name = raw["name"]
        category = raw["category"]
        rates = {key: raw[key] for key in ("baseFare", "perKmRate", "perMinRate")}
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Malformed provider entry {raw!r}: missing {e}") from e

    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError(f"Provider name must be a non-empty string, got {name!r}")
    if category not in categories:
        raise ConfigurationError(
            f"Provider '{name}' has unknown category '{category}' (allowed: {', '.join(categories)})"
        )
    for key, value in rates.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"Provider '{name}' {key} must be a number, got {value!r}")
        if not math.isfinite(value) or value < 0:
            raise ConfigurationError(f"Provider '{name}' {key} must be non-negative, got {value}")

    return ProviderConfig(
        name=name,
        category=category,
        base_fare=rates["baseFare"],
        per_km_rate=rates["perKmRate"],
        per_min_rate=rates["perMinRate"],
    )


def build_provider_table(
    entries: Iterable[Dict],
    version: str = config.PROVIDER_TABLE_VERSION,
    categories: Sequence[str] = config.PROVIDER_CATEGORIES,
) -> ProviderTable:
    """
    Validate raw provider entries and freeze them into a ProviderTable.

    Args:
        entries: Dicts with name, category, baseFare, perKmRate, perMinRate
        version: Version label of the table
        categories: Allowed category names

    Returns:
        ProviderTable preserving the declaration order of entries

    Raises:
        ConfigurationError: Empty table, duplicate names, unknown category
            or a negative/non-numeric rate
    """
    providers = tuple(_parse_provider(raw, categories) for raw in entries)
    if not providers:
        raise ConfigurationError("Provider table is empty")

    seen = set()
    for provider in providers:
        if provider.name in seen:
            raise ConfigurationError(f"Duplicate provider name '{provider.name}'")
        seen.add(provider.name)

    return ProviderTable(version=str(version), providers=providers)


def load_provider_table(path: Optional[str] = config.PROVIDERS_FILE) -> ProviderTable:
    """Load the provider table from a JSON file, or the built-in table if no path is set."""
    if not path:
        table = build_provider_table(config.PROVIDERS)
        logger.info("Loaded built-in provider table v%s (%d providers)", table.version, len(table))
        return table

    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot read provider table {path}: {e}") from e
    if not isinstance(document, dict) or not isinstance(document.get("providers"), list):
        raise ConfigurationError(f"Provider table {path} must be an object with a 'providers' list")

    table = build_provider_table(
        document["providers"], version=document.get("version", "unversioned")
    )
    logger.info("Loaded provider table v%s from %s (%d providers)", table.version, path, len(table))
    return table


class FareEngine:
    """Computes one fare estimate per configured provider from a resolved route"""

    def __init__(self, table: ProviderTable, currency: str = config.CURRENCY):
        self.table = table
        self.currency = currency

    @staticmethod
    def calculate_fare(provider: ProviderConfig, distance_meters: int, duration_seconds: int) -> int:
        """
        Linear rate-card fare, rounded to the whole currency unit.

        fare = baseFare + km * perKmRate + minutes * perMinRate
        """
        distance_km = distance_meters / 1000
        duration_min = duration_seconds / 60
        fare = (
            provider.base_fare
            + distance_km * provider.per_km_rate
            + duration_min * provider.per_min_rate
        )
        return round_half_up(fare)

    @staticmethod
    def format_distance(distance_meters: int) -> str:
        # One decimal, halves rounded up (5250 m -> "5.3 km")
        tenths = round_half_up(distance_meters / 100)
        return f"{tenths / 10:.1f} km"

    @staticmethod
    def format_duration(duration_seconds: int) -> str:
        return f"{round_half_up(duration_seconds / 60)} mins"

    def estimate(self, route: RouteInfo) -> List[FareEstimate]:
        """
        Compute estimates for every provider, in provider table order.

        Display text is recomputed from the numeric route values so all rows
        share one unit system regardless of the upstream locale. Deep links
        are attached later by the ranking step.
        """
        distance_text = self.format_distance(route.distance_meters)
        duration_text = self.format_duration(route.duration_seconds)

        return [
            FareEstimate(
                provider=provider.name,
                category=provider.category,
                estimated_fare=self.calculate_fare(
                    provider, route.distance_meters, route.duration_seconds
                ),
                currency=self.currency,
                distance=distance_text,
                duration=duration_text,
            )
            for provider in self.table
        ]
