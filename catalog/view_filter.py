"""
View filter — derive the visible subset and the dashboard statistics.

Pure functions over the canonical dataset; nothing here mutates or copies
the CelestialObjects it is given, so calls are safe from any thread.

Statistics are always computed over the *full* dataset, never over the
filtered subset.  Unknown diameters add zero to the sum but still count in
the denominator of the average.
"""

from __future__ import annotations

from collections.abc import Sequence

from catalog.models import Aggregates, CategoryFilter, CelestialObject, FilterResult
from utils.numbers import round_half_away


def filter_objects(
    dataset: Sequence[CelestialObject],
    search: str = "",
    category: CategoryFilter | str = CategoryFilter.ALL,
) -> tuple[CelestialObject, ...]:
    """Return the objects matching *search* and *category*, in dataset order.

    Args:
        dataset:  Canonical dataset.
        search:   Case-insensitive substring of the name; "" matches all.
        category: "all", "planet" or "dwarf-planet".

    Raises:
        ValueError: *category* is not a recognised filter value.
    """
    wanted = CategoryFilter(category)
    needle = (search or "").lower()
    return tuple(
        obj for obj in dataset
        if needle in obj.name.lower() and wanted.admits(obj.category)
    )


def aggregate(dataset: Sequence[CelestialObject]) -> Aggregates:
    """Count, mean diameter (2 dp) and total moons over *dataset*."""
    count = len(dataset)
    if count == 0:
        return Aggregates()
    diameter_sum = sum(obj.diameter_km.value_or(0) for obj in dataset)
    return Aggregates(
        count=count,
        average_diameter=round_half_away(diameter_sum / count, 2),
        total_moons=sum(obj.moon_count for obj in dataset),
    )


def filter_and_aggregate(
    dataset: Sequence[CelestialObject],
    search: str = "",
    category: CategoryFilter | str = CategoryFilter.ALL,
) -> FilterResult:
    """Visible subset for the given criteria plus full-dataset statistics."""
    return FilterResult(
        visible=filter_objects(dataset, search, category),
        stats=aggregate(dataset),
    )
