"""
Catalogue Loader Tests
======================

Field normalisation, per-entry rejection and the one-shot background load.
"""

import json

import httpx
import pytest

from core.config import DEFAULT_CATALOG
from universe import catalogue_loader
from universe.catalogue_loader import (
    CatalogLoader,
    PlanetCatalog,
    RecordError,
    planet_from_record,
    planets_from_records,
)

MARS = {"name": "Mars", "radius": 3389.5, "distance_from_sun": 227.9,
        "rotation_period": 1.026, "orbital_period": 686.98, "color": "#C1440E"}


def write_json(tmp_path, data, name="planets.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestRecordNormalisation:

    def test_canonical_fields(self):
        p = planet_from_record(MARS)
        assert p.name == "Mars"
        assert p.radius == pytest.approx(3389.5)
        assert p.distance_from_sun == pytest.approx(227.9e6)
        assert p.rotation_period == pytest.approx(1.026)
        assert p.orbital_period == pytest.approx(686.98)

    def test_suffixed_field_variants(self):
        record = {"name": "Mars", "radius_km": 3389.5, "distance_from_sun": 227.9,
                  "rotation_period_days": 1.026, "orbital_period_days": 686.98,
                  "color": "#C1440E"}
        p = planet_from_record(record)
        assert p.radius == pytest.approx(3389.5)
        assert p.rotation_period == pytest.approx(1.026)
        assert p.orbital_period == pytest.approx(686.98)

    def test_numeric_strings_are_coerced(self):
        p = planet_from_record({**MARS, "radius": "3389.5"})
        assert p.radius == pytest.approx(3389.5)

    def test_missing_colour_becomes_white(self, capsys):
        record = {k: v for k, v in MARS.items() if k != "color"}
        assert planet_from_record(record).color == "#FFFFFF"
        assert "Warning" in capsys.readouterr().out

    @pytest.mark.parametrize("record", [
        {**MARS, "name": ""},
        {**MARS, "name": "   "},
        {**MARS, "name": 42},
        {k: v for k, v in MARS.items() if k != "radius"},
        {**MARS, "radius": "big"},
        {**MARS, "radius": True},
        {**MARS, "radius": 0},
        {**MARS, "radius": float("nan")},
        {**MARS, "distance_from_sun": -3},
        {**MARS, "orbital_period": None},
        ["Mars", 3389.5],
    ])
    def test_bad_records_rejected(self, record):
        with pytest.raises(RecordError):
            planet_from_record(record)


class TestRecordsToPlanets:

    def test_bad_entries_skipped_individually(self, capsys):
        records = [MARS, {"name": "Broken"}, {**MARS, "name": "Venus", "radius": 6051.8}]
        planets = planets_from_records(records)
        assert [p.name for p in planets] == ["Mars", "Venus"]
        assert "skipping planet entry #1" in capsys.readouterr().out

    def test_duplicate_names_keep_first(self, capsys):
        planets = planets_from_records([MARS, {**MARS, "radius": 1.0}])
        assert len(planets) == 1
        assert planets[0].radius == pytest.approx(3389.5)
        assert "duplicate" in capsys.readouterr().out

    def test_non_array_loads_nothing(self, capsys):
        assert planets_from_records({"planets": [MARS]}) == []
        assert "not a JSON array" in capsys.readouterr().out


class TestPlanetCatalog:

    def test_starts_empty_and_not_loaded(self):
        cat = PlanetCatalog()
        assert len(cat) == 0
        assert not cat.is_loaded()
        assert cat.planets() == []

    def test_iteration_follows_load_order(self, planets):
        cat = PlanetCatalog()
        cat.populate(list(reversed(planets)))
        assert [p.name for p in cat] == [p.name for p in reversed(planets)]
        assert "Earth" in cat
        assert cat.get("Earth").name == "Earth"
        assert cat.get("Pluto") is None

    def test_populate_only_once(self, planets):
        cat = PlanetCatalog()
        cat.populate(planets)
        with pytest.raises(RuntimeError):
            cat.populate(planets)

    def test_duplicate_names_rejected(self, planets):
        with pytest.raises(ValueError):
            PlanetCatalog().populate([planets[0], planets[0]])


class TestCatalogLoader:

    def test_loads_from_file(self, tmp_path):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, write_json(tmp_path, [MARS]))
        assert not loader.is_ready()
        loader.start()
        assert loader.wait(timeout=5)
        assert [p.name for p in cat] == ["Mars"]

    def test_poll_before_start_does_nothing(self, tmp_path):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, write_json(tmp_path, [MARS]))
        assert loader.poll() is False
        assert not cat.is_loaded()

    def test_poll_populates_once(self, tmp_path):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, write_json(tmp_path, [MARS]))
        loader.start()
        loader.wait(timeout=5)
        # later polls leave the catalog alone
        assert loader.poll() is False
        assert len(cat) == 1

    def test_missing_file_leaves_empty_loaded_catalog(self, tmp_path, capsys):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, str(tmp_path / "absent.json"))
        loader.start()
        assert loader.wait(timeout=5)
        assert len(cat) == 0
        assert "could not load planet data" in capsys.readouterr().out

    def test_bad_json_leaves_empty_loaded_catalog(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, str(path))
        loader.start()
        assert loader.wait(timeout=5)
        assert len(cat) == 0

    def test_fetches_https_with_httpx(self, monkeypatch):
        url = "https://planets.invalid/planets.json"
        calls = []

        def fake_get(u, timeout, follow_redirects):
            calls.append((u, timeout))
            return httpx.Response(200, json=[MARS], request=httpx.Request("GET", u))

        monkeypatch.setattr(catalogue_loader.httpx, "get", fake_get)
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, url, timeout=3.0)
        loader.start()
        assert loader.wait(timeout=5)
        assert calls == [(url, 3.0)]
        assert [p.name for p in cat] == ["Mars"]

    def test_http_error_leaves_empty_loaded_catalog(self, monkeypatch, capsys):
        def fake_get(u, timeout, follow_redirects):
            return httpx.Response(503, request=httpx.Request("GET", u))

        monkeypatch.setattr(catalogue_loader.httpx, "get", fake_get)
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, "https://planets.invalid/planets.json")
        loader.start()
        assert loader.wait(timeout=5)
        assert len(cat) == 0
        assert "503" in capsys.readouterr().out

    @pytest.mark.parametrize("url", ["http://[::1/planets.json", "https://exa\x00mple.com/p.json"])
    def test_malformed_url_leaves_empty_loaded_catalog(self, url, capsys):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, url)
        loader.start()
        assert loader.wait(timeout=5)
        assert cat.is_loaded()
        assert len(cat) == 0
        assert "could not load planet data" in capsys.readouterr().out

    def test_bundled_data_loads_eight_planets(self):
        cat = PlanetCatalog()
        loader = CatalogLoader(cat, str(DEFAULT_CATALOG))
        loader.start()
        assert loader.wait(timeout=5)
        assert len(cat) == 8
        assert cat.planets()[0].name == "Mercury"
