"""Fare pipeline: directions lookup, fare model, ranking"""
from .directions_service import DirectionsService
from .fare_service import FareEngine, ProviderTable, build_provider_table, load_provider_table
from .ranking_service import generate_deep_link, rank_estimates

__all__ = [
    "DirectionsService",
    "FareEngine",
    "ProviderTable",
    "build_provider_table",
    "load_provider_table",
    "generate_deep_link",
    "rank_estimates",
]
