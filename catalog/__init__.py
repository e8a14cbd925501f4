"""Solar-system catalogue core: normalization, view filtering, and state."""

from catalog.errors import CatalogError, CatalogUnavailableError, FetchError
from catalog.models import (
    UNKNOWN,
    Aggregates,
    Category,
    CategoryFilter,
    CelestialObject,
    FilterResult,
    Known,
    Measurement,
    Unknown,
)
from catalog.normalizer import normalize
from catalog.view_filter import aggregate, filter_and_aggregate, filter_objects
from catalog.store import CatalogSnapshot, CatalogStore, LoadStatus

__all__ = [
    "UNKNOWN",
    "Aggregates",
    "CatalogError",
    "CatalogSnapshot",
    "CatalogStore",
    "CatalogUnavailableError",
    "Category",
    "CategoryFilter",
    "CelestialObject",
    "FetchError",
    "FilterResult",
    "Known",
    "LoadStatus",
    "Measurement",
    "Unknown",
    "aggregate",
    "filter_and_aggregate",
    "filter_objects",
    "normalize",
]
