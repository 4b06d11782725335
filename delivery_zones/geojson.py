# delivery_zones/geojson.py
"""
Normalize uploaded zone geography into a Polygon/MultiPolygon geometry.

Admin-drawn or uploaded GeoJSON may be a bare geometry, a Feature or a
FeatureCollection, and is often hand-edited. Everything that cannot be
reduced to a Polygon or MultiPolygon comes back as None; nothing here raises.
"""

import copy
from typing import Any, Dict, Optional

from .models import GeoJSONKind
from .logging_utils import get_logger

logger = get_logger("GeoJSON")


def classify_geojson(raw: Any) -> GeoJSONKind:
    """Report which kind of geography a raw value is, without unwrapping it."""
    if not isinstance(raw, dict):
        return GeoJSONKind.INVALID
    try:
        return GeoJSONKind(raw.get("type"))
    except ValueError:
        return GeoJSONKind.INVALID


def _unwrap(raw):
    if classify_geojson(raw) is GeoJSONKind.FEATURE_COLLECTION:
        features = raw.get("features")
        if isinstance(features, list) and features:
            raw = features[0]
    if classify_geojson(raw) is GeoJSONKind.FEATURE and raw.get("geometry"):
        raw = raw["geometry"]
    return raw


def _close_ring(ring):
    if not isinstance(ring, (list, tuple)):
        raise TypeError(f"ring must be a list, got {type(ring).__name__}")
    ring = list(ring)
    if len(ring) > 2:
        first, last = ring[0], ring[-1]
        if first[0] != last[0] or first[1] != last[1]:
            ring.append(list(first))
    return ring


def _close_polygon(rings):
    if not isinstance(rings, (list, tuple)):
        raise TypeError(f"polygon must be a list of rings, got {type(rings).__name__}")
    return [_close_ring(ring) for ring in rings]


def normalize_zone_geojson(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Reduce any zone geography to a closed Polygon or MultiPolygon.

    FeatureCollection -> first Feature -> geometry. Rings with more than two
    positions whose first and last positions differ are closed by repeating
    the first position.

    Args:
        raw: Parsed JSON value (or None)

    Returns:
        A new geometry dict (the input is not mutated), or None
    """
    if raw is None:
        return None

    geometry = _unwrap(raw)
    kind = classify_geojson(geometry)
    if kind not in (GeoJSONKind.POLYGON, GeoJSONKind.MULTIPOLYGON):
        return None

    geometry = copy.deepcopy(geometry)
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, (list, tuple)):
        return None

    try:
        if kind is GeoJSONKind.POLYGON:
            geometry["coordinates"] = _close_polygon(coordinates)
        else:
            geometry["coordinates"] = [_close_polygon(polygon) for polygon in coordinates]
    except (TypeError, IndexError, KeyError) as e:
        logger.debug(f"Discarding malformed {kind.value}: {e}")
        return None

    return geometry
