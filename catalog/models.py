"""
Domain types for the solar-system catalogue.

Provides:
  - Known / Unknown: tagged measurement variant.  Aggregations call
    ``value_or()`` so the "Unknown" sentinel is never coerced silently.
  - Category / CategoryFilter: body classification and the dashboard's
    type selector.
  - CelestialObject: one normalized, display-ready catalogue row.
  - Aggregates / FilterResult: outputs of the view filter.

All record types are frozen dataclasses; a normalized dataset is a tuple
of them and is never mutated after creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from catalog.constants import UNKNOWN_LABEL


# ── Measurements ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Known:
    """A measurement the upstream record provided."""

    value: float

    @property
    def is_known(self) -> bool:
        return True

    def value_or(self, default: float) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Unknown:
    """A measurement missing from the upstream record."""

    @property
    def is_known(self) -> bool:
        return False

    def value_or(self, default: float) -> float:
        return default

    def __str__(self) -> str:
        return UNKNOWN_LABEL


UNKNOWN = Unknown()

Measurement = Union[Known, Unknown]


# ── Categories ────────────────────────────────────────────────────────────────


class Category(str, Enum):
    """Classification of a catalogue body."""

    PLANET = "planet"
    DWARF_PLANET = "dwarf-planet"


class CategoryFilter(str, Enum):
    """Type selector on the dashboard.

    ``CategoryFilter("comet")`` raises ``ValueError``.
    """

    ALL = "all"
    PLANET = "planet"
    DWARF_PLANET = "dwarf-planet"

    def admits(self, category: Category) -> bool:
        return self is CategoryFilter.ALL or self.value == category.value


# ── Records ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CelestialObject:
    """One row of the canonical dataset."""

    id: int
    name: str
    category: Category
    distance_au: Measurement = UNKNOWN
    diameter_km: Measurement = UNKNOWN
    moon_count: int = 0
    discovery_year: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; unknown measurements become ``None``."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "distance_au": self.distance_au.value_or(None),
            "diameter_km": self.diameter_km.value_or(None),
            "moon_count": self.moon_count,
            "discovery_year": self.discovery_year,
        }


@dataclass(frozen=True)
class Aggregates:
    """Summary statistics over the full canonical dataset."""

    count: int = 0
    average_diameter: float = 0.0
    total_moons: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "average_diameter": self.average_diameter,
            "total_moons": self.total_moons,
        }


@dataclass(frozen=True)
class FilterResult:
    """Visible subset plus the (filter-independent) aggregates."""

    visible: tuple[CelestialObject, ...] = field(default_factory=tuple)
    stats: Aggregates = field(default_factory=Aggregates)
