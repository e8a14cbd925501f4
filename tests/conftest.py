"""
Pytest fixtures for the Space Explorer tests.

Provides a deterministic upstream payload shaped like the Solar System
OpenData ``bodies`` array, its normalized dataset, and catalogue stores
wired to in-memory fetchers so no test touches the network.

Qualifying bodies in RAW_BODIES, in order (ids after normalization):
    1 Earth    planet        1.00 AU   12,742 km    1 moon
    2 Pluto    dwarf-planet  39.48 AU  2,376.6 km   5 moons   18/02/1930
    3 Ceres    dwarf-planet  2.77 AU   939.46 km    0 moons   01/01/1801
    4 Mars     planet        1.52 AU   6,779 km     2 moons
    5 Jupiter  planet        5.20 AU   139,822 km   4 moons
    6 Haumea   dwarf-planet  43.13 AU  Unknown      2 moons   28/12/2004
"""

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from catalog.errors import FetchError  # noqa: E402
from catalog.normalizer import normalize  # noqa: E402
from catalog.store import CatalogStore  # noqa: E402


def _moons(*names: str) -> list[dict]:
    return [{"moon": n, "rel": f"https://api.le-systeme-solaire.net/rest/bodies/{n.lower()}"}
            for n in names]


RAW_BODIES: list[dict] = [
    {"id": "lune", "name": "La Lune", "englishName": "Moon", "isPlanet": False,
     "bodyType": "Moon", "semimajorAxis": 384400, "meanRadius": 1737.0,
     "moons": None, "discoveryDate": ""},
    {"id": "terre", "name": "La Terre", "englishName": "Earth", "isPlanet": True,
     "bodyType": "Planet", "semimajorAxis": 149598023, "meanRadius": 6371,
     "moons": _moons("La Lune"), "discoveryDate": ""},
    {"id": "pluton", "name": "Pluton", "englishName": "Pluto", "isPlanet": False,
     "bodyType": "Dwarf Planet", "semimajorAxis": 5906440628, "meanRadius": 1188.3,
     "moons": _moons("Charon", "Nix", "Hydra", "Kerberos", "Styx"),
     "discoveryDate": "18/02/1930"},
    {"id": "ceres", "name": "(1) Cérès", "englishName": "Ceres", "isPlanet": False,
     "bodyType": "Dwarf Planet", "semimajorAxis": 413690250, "meanRadius": 469.73,
     "moons": None, "discoveryDate": "01/01/1801"},
    {"id": "vesta", "name": "(4) Vesta", "englishName": "4 Vesta", "isPlanet": False,
     "bodyType": "Asteroid", "semimajorAxis": 353343000, "meanRadius": 262.7,
     "moons": None, "discoveryDate": "29/03/1807"},
    {"id": "mars", "name": "Mars", "englishName": "Mars", "isPlanet": True,
     "bodyType": "Planet", "semimajorAxis": 227939200, "meanRadius": 3389.5,
     "moons": _moons("Phobos", "Deïmos"), "discoveryDate": ""},
    {"id": "jupiter", "name": "Jupiter", "englishName": "Jupiter", "isPlanet": True,
     "bodyType": "Planet", "semimajorAxis": 778340821, "meanRadius": 69911,
     "moons": _moons("Io", "Europe", "Ganymède", "Callisto"), "discoveryDate": ""},
    {"id": "halley", "name": "Comète de Halley", "englishName": "Halley's Comet",
     "isPlanet": False, "bodyType": "Comet", "semimajorAxis": 2667950000,
     "meanRadius": 5.5, "moons": None, "discoveryDate": ""},
    {"id": "haumea", "name": "Hauméa", "englishName": "Haumea", "isPlanet": False,
     "bodyType": "Dwarf Planet", "semimajorAxis": 6452000000,
     "moons": _moons("Hiʻiaka", "Namaka"), "discoveryDate": "28/12/2004"},
]


@pytest.fixture()
def raw_bodies() -> list[dict]:
    """A fresh copy of the sample upstream payload."""
    return [dict(b) for b in RAW_BODIES]


@pytest.fixture()
def dataset(raw_bodies):
    """The sample payload, normalized."""
    return normalize(raw_bodies)


@pytest.fixture()
def make_store():
    """Factory for stores backed by an in-memory fetch.

    ``make_store(bodies)`` serves *bodies*; ``make_store(error=FetchError(...))``
    fails the fetch with that exception.
    """
    def _make(bodies=None, error: Exception | None = None,
              source_url: str = "https://catalog.test/bodies/") -> CatalogStore:
        calls = {"count": 0}

        def _fetch():
            calls["count"] += 1
            if error is not None:
                raise error
            return list(RAW_BODIES if bodies is None else bodies)

        store = CatalogStore(_fetch, source_url=source_url)
        store.fetch_calls = calls
        return store

    return _make


@pytest.fixture()
def ready_store(make_store):
    store = make_store()
    store.load()
    return store


@pytest.fixture()
def failed_store(make_store):
    store = make_store(error=FetchError("Network response was not ok (HTTP 502)",
                                        status_code=502))
    store.load()
    return store
