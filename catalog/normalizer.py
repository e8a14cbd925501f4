"""
Normalizer — upstream catalogue payload to canonical display records.

``normalize()`` runs three steps in a fixed order:

  1. Filter    keep bodies flagged ``isPlanet`` or typed "Dwarf Planet"
  2. Truncate  keep the first MAX_BODIES survivors, in upstream order
  3. Map       build a CelestialObject per survivor, ids 1..n by position

It never raises for bad records: missing or malformed numeric fields become
``UNKNOWN`` and non-mapping entries are dropped with the other discards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from itertools import islice
from typing import Any, TypedDict

from catalog.constants import (
    DWARF_PLANET_BODY_TYPE,
    KM_PER_AU,
    MAX_BODIES,
    NO_DISCOVERY_DATE,
)
from catalog.models import UNKNOWN, Category, CelestialObject, Known, Measurement
from utils.numbers import round_half_away, safe_number

logger = logging.getLogger(__name__)


class RawBody(TypedDict, total=False):
    """Fields read from one entry of the upstream ``bodies`` array."""

    id: str
    name: str
    englishName: str
    isPlanet: bool
    bodyType: str
    semimajorAxis: float
    meanRadius: float
    moons: list[dict[str, Any]] | None
    discoveryDate: str


def is_qualifying(raw: Mapping[str, Any]) -> bool:
    """True for planets and dwarf planets."""
    return raw.get("isPlanet") is True or raw.get("bodyType") == DWARF_PLANET_BODY_TYPE


def _measure(value: Any, scale=None) -> Measurement:
    # Zero counts as absent, matching how the catalogue marks unmeasured bodies.
    # Sizes and distances are never negative.
    number = safe_number(value)
    if not number or number < 0:
        return UNKNOWN
    return Known(scale(number) if scale else number)


def _display_name(raw: Mapping[str, Any]) -> str:
    for key in ("englishName", "name", "id"):
        value = raw.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def _moon_count(raw: Mapping[str, Any]) -> int:
    moons = raw.get("moons")
    return len(moons) if isinstance(moons, list) else 0


def _discovery_year(raw: Mapping[str, Any]) -> str:
    value = raw.get("discoveryDate")
    if isinstance(value, str) and value:
        return value
    return NO_DISCOVERY_DATE


def to_celestial_object(raw: Mapping[str, Any], object_id: int) -> CelestialObject:
    """Map one qualifying upstream record to a CelestialObject."""
    return CelestialObject(
        id=object_id,
        name=_display_name(raw),
        category=Category.PLANET if raw.get("isPlanet") is True else Category.DWARF_PLANET,
        distance_au=_measure(
            raw.get("semimajorAxis"), lambda km: round_half_away(km / KM_PER_AU, 2)
        ),
        diameter_km=_measure(raw.get("meanRadius"), lambda radius: radius * 2),
        moon_count=_moon_count(raw),
        discovery_year=_discovery_year(raw),
    )


def normalize(raw_bodies: Iterable[Any]) -> tuple[CelestialObject, ...]:
    """Convert upstream records into the canonical dataset.

    Args:
        raw_bodies: Entries of the upstream ``bodies`` array, in API order.

    Returns:
        At most MAX_BODIES CelestialObjects with ids 1..n.  Empty input (or
        input with no planets / dwarf planets) yields an empty tuple.
    """
    seen = 0

    def _qualifying():
        nonlocal seen
        for raw in raw_bodies:
            seen += 1
            if isinstance(raw, Mapping) and is_qualifying(raw):
                yield raw

    survivors = list(islice(_qualifying(), MAX_BODIES))
    dataset = tuple(
        to_celestial_object(raw, position)
        for position, raw in enumerate(survivors, start=1)
    )
    logger.debug(
        "normalized catalogue: kept=%d scanned=%d", len(dataset), seen,
    )
    return dataset
