"""
Universe module: planets, their catalog and their screen layouts.

Usage:
    from universe import PlanetCatalog, CatalogLoader
    catalog = PlanetCatalog()
    loader = CatalogLoader(catalog, "universe/data/planets.json")
    loader.start()

    # every frame
    loader.poll()
    layout = compute_scale_layout(catalog.planets(), 1280, 800)
"""

from .planet import (
    Planet,
    SUN_RADIUS_KM,
    SUN_DIAMETER_KM,
    MIN_VISIBLE_PX,
    is_valid_hex_color,
    hex_to_rgb,
)
from .catalogue_loader import (
    PlanetCatalog,
    CatalogLoader,
    RecordError,
    planet_from_record,
    planets_from_records,
    fetch_records,
)
from .layout import (
    BodyPlacement,
    ScaleLayout,
    DistanceLayout,
    compute_scale_layout,
    compute_distance_layout,
)
from .starfield import Star, Starfield, generate_stars

__all__ = [
    "Planet",
    "SUN_RADIUS_KM",
    "SUN_DIAMETER_KM",
    "MIN_VISIBLE_PX",
    "is_valid_hex_color",
    "hex_to_rgb",
    # catalog
    "PlanetCatalog",
    "CatalogLoader",
    "RecordError",
    "planet_from_record",
    "planets_from_records",
    "fetch_records",
    # layout
    "BodyPlacement",
    "ScaleLayout",
    "DistanceLayout",
    "compute_scale_layout",
    "compute_distance_layout",
    # background
    "Star",
    "Starfield",
    "generate_stars",
]
