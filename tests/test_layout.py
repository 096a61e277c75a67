"""
Layout Tests
============

Scale multiplier, stacked placement and the distance view's orbits.
"""

import json
import math

import pytest

from core.config import DEFAULT_CATALOG
from universe.catalogue_loader import planets_from_records
from universe.layout import (
    DISTANCE_MARKER_FRACTION,
    compute_distance_layout,
    compute_scale_layout,
    scale_multiplier,
)
from universe.planet import SUN_DIAMETER_KM, Planet


def planet(name, radius, distance=100.0):
    return Planet(name, radius, distance, 1.0, 365.0, "#FFFFFF")


class TestScaleMultiplier:

    def test_mercury_venus_example(self):
        mercury, venus = planet("Mercury", 2439.7), planet("Venus", 6051.8)
        layout = compute_scale_layout([mercury, venus], 800, 600)

        assert layout.multiplier == pytest.approx(540 / 12103.6)
        by_name = {b.name: b for b in layout.planets}
        assert by_name["Venus"].diameter == pytest.approx(540.0)
        assert by_name["Mercury"].diameter == pytest.approx(4879.4 * 540 / 12103.6)
        assert by_name["Mercury"].diameter == pytest.approx(217.69, abs=0.01)

    def test_largest_planet_fills_ninety_percent_of_short_side(self, planets):
        for w, h in [(800, 600), (600, 800), (1920, 1080), (700, 700)]:
            layout = compute_scale_layout(planets, w, h)
            largest = max(layout.planets, key=lambda b: b.planet.diameter())
            assert largest.diameter == pytest.approx(0.9 * min(w, h))

    def test_single_planet_fills_target(self):
        layout = compute_scale_layout([planet("Solo", 1234.5)], 1000, 500)
        assert layout.planets[0].diameter == pytest.approx(450.0)

    def test_empty_catalog_skips_layout(self):
        assert compute_scale_layout([], 800, 600) is None
        assert scale_multiplier([], 800, 600) is None

    def test_tiny_planet_stays_visible(self):
        layout = compute_scale_layout([planet("Giant", 1e6), planet("Speck", 1.0)], 800, 600)
        assert layout.planets[1].diameter >= 2


class TestScalePlacement:

    def test_sun_sits_above_the_stack(self, planets):
        layout = compute_scale_layout(planets, 800, 600, canvas_width=1000)
        assert layout.sun.center.x == pytest.approx(500.0)
        assert layout.sun.center.y == pytest.approx(0.0)
        assert layout.sun.diameter == pytest.approx(SUN_DIAMETER_KM * layout.multiplier)

    def test_planets_centred_and_in_load_order(self, planets):
        layout = compute_scale_layout(planets, 800, 600)
        assert [b.name for b in layout.planets] == [p.name for p in planets]
        assert all(b.center.x == pytest.approx(400.0) for b in layout.planets)
        ys = [b.center.y for b in layout.planets]
        assert ys == sorted(ys)

    def test_spacing_between_bodies(self, planets):
        layout = compute_scale_layout(planets, 800, 600)
        assert layout.spacer == pytest.approx(60.0)
        assert layout.planets[0].top == pytest.approx(layout.sun.radius + layout.spacer)
        for a, b in zip(layout.planets, layout.planets[1:]):
            assert b.top - a.bottom == pytest.approx(layout.spacer)

    def test_required_height_matches_drawn_stack(self, planets):
        layout = compute_scale_layout(planets, 800, 600)
        last = layout.planets[-1]
        assert layout.required_height == pytest.approx(last.bottom + layout.spacer)

        expected = layout.sun.radius + layout.spacer + sum(
            b.diameter + layout.spacer for b in layout.planets)
        assert layout.required_height == pytest.approx(expected)
        assert layout.canvas_height == math.ceil(layout.required_height)
        assert last.bottom <= layout.canvas_height


class TestDistanceLayout:

    def test_farthest_orbit_spans_ninety_percent_of_short_side(self, planets):
        layout = compute_distance_layout(planets, 800, 600)
        assert 2 * max(layout.orbit_radii) == pytest.approx(540.0)

    def test_orbits_proportional_to_distance(self, planets):
        layout = compute_distance_layout(planets, 800, 600)
        for p, r in zip(planets, layout.orbit_radii):
            assert r == pytest.approx(layout.inner_radius + p.distance_from_sun * layout.multiplier)

    def test_planets_sit_on_their_orbits(self, planets):
        layout = compute_distance_layout(planets, 800, 600, canvas_width=900)
        assert layout.center.x == pytest.approx(450.0)
        for body, r in zip(layout.planets, layout.orbit_radii):
            d = math.hypot(body.center.x - layout.center.x, body.center.y - layout.center.y)
            assert d == pytest.approx(r)

    def test_marker_sizes(self, planets):
        layout = compute_distance_layout(planets, 800, 600)
        sizes = {b.name: b.diameter for b in layout.planets}
        assert abs(sizes["Jupiter"] - DISTANCE_MARKER_FRACTION * 600) <= 1
        assert all(d >= 2 for d in sizes.values())
        assert sizes["Mercury"] <= sizes["Earth"] < sizes["Jupiter"]

    def test_all_at_sun_share_the_innermost_ring(self):
        layout = compute_distance_layout([planet("A", 10.0, 0.0), planet("B", 5.0, 0.0)], 800, 600)
        assert layout.multiplier == 0.0
        for body in layout.planets:
            d = math.hypot(body.center.x - layout.center.x, body.center.y - layout.center.y)
            assert d == pytest.approx(layout.inner_radius)
            assert d - body.radius > layout.sun.radius

    @pytest.mark.parametrize("size", [(800, 600), (1920, 1080), (600, 800), (400, 300)])
    def test_bundled_planets_clear_the_sun(self, size):
        with open(DEFAULT_CATALOG, encoding="utf-8") as f:
            bundled = planets_from_records(json.load(f))
        layout = compute_distance_layout(bundled, *size)

        assert 2 * max(layout.orbit_radii) == pytest.approx(0.9 * min(size))
        for body, r in zip(layout.planets, layout.orbit_radii):
            assert r - body.radius > layout.sun.radius, body.name

    def test_orbits_keep_catalog_distance_order(self, planets):
        layout = compute_distance_layout(planets, 800, 600)
        by_distance = sorted(zip(planets, layout.orbit_radii), key=lambda t: t[0].distance_from_sun)
        radii = [r for _, r in by_distance]
        assert radii == sorted(radii)

    def test_empty_catalog(self):
        assert compute_distance_layout([], 800, 600) is None
