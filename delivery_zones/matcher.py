# delivery_zones/matcher.py
"""
Point-in-zone matching.

Containment uses shapely's `covers`: holes are excluded, a MultiPolygon
matches if any part does, and a point lying exactly on a boundary edge or
vertex counts as inside.
"""

from typing import Iterable, List, Optional

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import shape

from .geojson import normalize_zone_geojson
from .models import Point, SkipReason, Zone, ZoneMatch
from .logging_utils import get_logger

logger = get_logger("Matcher")


def zone_geometry(zone: Zone):
    """Shapely geometry for a zone, or None if its geography does not normalize."""
    geometry = normalize_zone_geojson(zone.geojson)
    if geometry is None:
        return None
    return shape(geometry)


def match_zone(point: Point, zone: Zone) -> ZoneMatch:
    """Test one zone, recording why it did not match."""
    if not zone.active:
        return ZoneMatch(zone, False, SkipReason.INACTIVE)

    try:
        polygon = zone_geometry(zone)
        if polygon is None:
            return ZoneMatch(zone, False, SkipReason.INVALID_GEOMETRY)
        inside = bool(polygon.covers(ShapelyPoint(point.lon, point.lat)))
    except Exception as e:
        logger.warning(f"Containment test failed for zone {zone.id} ({zone.name}): {e}")
        return ZoneMatch(zone, False, SkipReason.CONTAINMENT_ERROR, str(e))

    if not inside:
        return ZoneMatch(zone, False, SkipReason.OUTSIDE)
    return ZoneMatch(zone, True)


def match_zones(point: Point, zones: Iterable[Zone]) -> List[ZoneMatch]:
    """One ZoneMatch per zone, in input order."""
    return [match_zone(point, zone) for zone in zones]


def find_all_containing(point: Point, zones: Iterable[Zone]) -> List[Zone]:
    matches = [m.zone for m in match_zones(point, zones) if m.matched]
    logger.debug(f"Point ({point.lon}, {point.lat}) matched {len(matches)} zones")
    return matches


def find_first_containing(point: Point, zones: Iterable[Zone]) -> Optional[Zone]:
    for zone in zones:
        if match_zone(point, zone).matched:
            return zone
    return None
