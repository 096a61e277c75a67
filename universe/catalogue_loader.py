"""
Catalogue Loader

Turns the raw planet list (JSON array, fetched over HTTPS or read from disk)
into Planet instances and holds them in a PlanetCatalog.

The load runs as a single background task. Its result is applied on the
frame thread by CatalogLoader.poll(), which is the only place a catalog
gets populated.
"""

from __future__ import annotations
import json
import math
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import httpx

from .planet import Planet


# ---------------------------------------------------------------------------
# Field normalisation
# ---------------------------------------------------------------------------

# Canonical field → accepted spellings, first match wins
_FIELD_ALIASES = {
    "radius":            ("radius", "radius_km"),
    "distance_from_sun": ("distance_from_sun",),
    "rotation_period":   ("rotation_period", "rotation_period_days"),
    "orbital_period":    ("orbital_period", "orbital_period_days"),
}


class RecordError(ValueError):
    """A single catalog entry could not be turned into a Planet"""


def _pick(record: dict, field: str):
    for key in _FIELD_ALIASES[field]:
        if key in record:
            return record[key]
    raise RecordError(f"missing field '{field}'")


def _as_number(value, field: str) -> float:
    # bool is an int subclass; true/false in the JSON is still garbage
    if isinstance(value, bool):
        raise RecordError(f"'{field}' is not a number: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise RecordError(f"'{field}' is not a number: {value!r}") from None
    if not math.isfinite(number):
        raise RecordError(f"'{field}' is not finite: {value!r}")
    return number


def planet_from_record(record) -> Planet:
    """
    Build a Planet from one JSON object.

    Raises:
        RecordError: if the entry is unusable. A bad colour is not an
        error; Planet replaces it with white.
    """
    if not isinstance(record, dict):
        raise RecordError(f"entry is not an object: {record!r}")

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RecordError("missing or blank 'name'")
    name = name.strip()

    radius = _as_number(_pick(record, "radius"), "radius")
    distance = _as_number(_pick(record, "distance_from_sun"), "distance_from_sun")
    rotation = _as_number(_pick(record, "rotation_period"), "rotation_period")
    orbital = _as_number(_pick(record, "orbital_period"), "orbital_period")

    try:
        return Planet(name, radius, distance, rotation, orbital,
                      color=record.get("color", ""))
    except ValueError as e:
        raise RecordError(str(e)) from None


def planets_from_records(records) -> List[Planet]:
    """
    Convert a decoded JSON document into planets.

    Bad entries are reported and skipped one by one; the rest still load.
    Duplicate names keep the first occurrence.
    """
    if not isinstance(records, list):
        print(f"Warning: planet data is not a JSON array ({type(records).__name__}), nothing loaded")
        return []

    planets: List[Planet] = []
    seen = set()
    for i, record in enumerate(records):
        try:
            planet = planet_from_record(record)
        except RecordError as e:
            print(f"Warning: skipping planet entry #{i}: {e}")
            continue
        if planet.name in seen:
            print(f"Warning: skipping duplicate planet '{planet.name}' (entry #{i})")
            continue
        seen.add(planet.name)
        planets.append(planet)
    return planets


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class PlanetCatalog:
    """
    Planets keyed by name, iterated in load order.

    Starts empty and is populated exactly once. Layouts must cope with
    the empty state, which is what early frames see.
    """

    def __init__(self):
        self._planets: Dict[str, Planet] = {}
        self._loaded = False

    def populate(self, planets: List[Planet]):
        """
        Fill the catalog. Calling this twice is a programming error.

        Raises:
            RuntimeError: if the catalog was already populated
            ValueError: if two planets share a name
        """
        if self._loaded:
            raise RuntimeError("planet catalog already populated")

        by_name: Dict[str, Planet] = {}
        for p in planets:
            if p.name in by_name:
                raise ValueError(f"duplicate planet name '{p.name}'")
            by_name[p.name] = p

        self._planets = by_name
        self._loaded = True
        print(f"Planet catalog loaded: {len(by_name)} planets")

    def is_loaded(self) -> bool:
        return self._loaded

    def get(self, name: str) -> Optional[Planet]:
        return self._planets.get(name)

    def planets(self) -> List[Planet]:
        return list(self._planets.values())

    def __contains__(self, name) -> bool:
        return name in self._planets

    def __iter__(self) -> Iterator[Planet]:
        return iter(list(self._planets.values()))

    def __len__(self) -> int:
        return len(self._planets)


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

def fetch_records(source: str, timeout: float = 10.0):
    """
    Read the raw planet list.

    Args:
        source: http(s) URL or path to a JSON file
        timeout: HTTP timeout in seconds

    Returns:
        Decoded JSON document
    """
    if source.startswith(("http://", "https://")):
        resp = httpx.get(source, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
        return resp.json()

    with open(Path(source), "r", encoding="utf-8") as f:
        return json.load(f)


class CatalogLoader:
    """
    One-shot background load of a PlanetCatalog.

    Usage:
        loader = CatalogLoader(catalog, source)
        loader.start()
        # once per frame:
        loader.poll()
        if loader.is_ready(): ...
    """

    def __init__(self, catalog: PlanetCatalog, source: str, timeout: float = 10.0):
        self.catalog = catalog
        self.source = source
        self.timeout = timeout
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional[Future] = None

    def start(self):
        """Submit the fetch. Does nothing if already started."""
        if self._future is not None:
            return
        print(f"Loading planet data from {self.source}")
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="catalog")
        self._future = self._executor.submit(fetch_records, self.source, self.timeout)
        self._executor.shutdown(wait=False)

    def poll(self) -> bool:
        """
        Apply the finished fetch to the catalog.

        A failed fetch leaves an empty but loaded catalog.

        Returns:
            True on the call that populated the catalog
        """
        if self.catalog.is_loaded() or self._future is None or not self._future.done():
            return False

        try:
            records = self._future.result()
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
            print(f"Warning: could not load planet data from {self.source}: {e}")
            records = []

        self.catalog.populate(planets_from_records(records))
        return True

    def is_ready(self) -> bool:
        return self.catalog.is_loaded()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the fetch finishes, then poll. Used by tools and tests."""
        if self._future is None:
            return False
        self._future.exception(timeout=timeout)
        self.poll()
        return self.is_ready()
