# delivery_zones/overlap.py
"""
Geometry checks used when an admin draws or uploads a new zone.
"""

from typing import Any, Dict, Iterable, List

from shapely.geometry import mapping, shape
from shapely.ops import unary_union

from .geojson import normalize_zone_geojson
from .models import GeometryMergeError, Zone
from .logging_utils import get_logger

logger = get_logger("Overlap")


def _to_shape(raw):
    geometry = normalize_zone_geojson(raw)
    if geometry is None:
        return None
    try:
        return shape(geometry)
    except Exception as e:
        logger.warning(f"Could not build geometry: {e}")
        return None


def find_overlapping_zones(geojson: Any, zones: Iterable[Zone]) -> List[int]:
    """
    Indexes of zones whose geometry partially overlaps `geojson`.

    Zones fully inside (or fully containing) the candidate are not reported,
    matching the DE-9IM "overlaps" predicate. Zones without a usable
    geometry are skipped.
    """
    candidate = _to_shape(geojson)
    if candidate is None:
        return []

    overlapping = []
    for i, zone in enumerate(zones):
        existing = _to_shape(zone.geojson)
        if existing is None:
            continue
        try:
            if candidate.overlaps(existing):
                overlapping.append(i)
        except Exception as e:
            logger.warning(f"Overlap test failed for zone {zone.id}: {e}")
    return overlapping


def merge_zone_geometries(geojson_a: Any, geojson_b: Any) -> Dict[str, Any]:
    """
    Union two zone geographies into one Polygon or MultiPolygon.

    Raises:
        GeometryMergeError: If either side is not a usable polygon or the
                            union comes out empty
    """
    a, b = _to_shape(geojson_a), _to_shape(geojson_b)
    if a is None or b is None:
        raise GeometryMergeError("Could not merge zones: both inputs must be Polygon or MultiPolygon")

    try:
        merged = unary_union([a, b])
    except Exception as e:
        raise GeometryMergeError(f"Could not merge zones: {e}") from e

    if merged.is_empty or merged.geom_type not in ("Polygon", "MultiPolygon"):
        raise GeometryMergeError(f"Could not merge zones: union produced {merged.geom_type}")
    logger.info(f"Merged zones into {merged.geom_type} covering {merged.area:.6f} sq deg")
    return mapping(merged)
