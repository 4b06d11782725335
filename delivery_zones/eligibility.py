# delivery_zones/eligibility.py
"""
Delivery eligibility: the single entry point used by checkout.

The zone list is passed in by the caller; fetching and caching it is the
caller's business (see dataio.ZoneCache).
"""

from datetime import date
from typing import Iterable, List, Optional, Union

from .matcher import match_zones
from .models import DeliveryInfo, Point, Zone, ZoneMatch
from .windows import merge_weekly_windows, merge_windows, normalize_weekday, weekday_for_date
from .logging_utils import get_logger

logger = get_logger("Eligibility")


def _coerce_zones(zones) -> List[Zone]:
    return [Zone.from_record(zone) for zone in zones]


def _resolve_weekday(weekday) -> str:
    if isinstance(weekday, str):
        try:
            return normalize_weekday(weekday)
        except ValueError:
            # Not a day name, try it as an ISO date
            return weekday_for_date(weekday)
    return weekday_for_date(weekday)


def explain_delivery(point, zones: Iterable) -> List[ZoneMatch]:
    """Per-zone match outcomes, including why each non-matching zone was skipped."""
    return match_zones(Point.coerce(point), _coerce_zones(zones))


def get_delivery_info(
    point,
    zones: Iterable,
    weekday: Optional[Union[str, date]] = None,
) -> DeliveryInfo:
    """
    Decide whether a point can be delivered to and which windows it gets.

    Args:
        point: Point, (lon, lat) pair, {lat, lon} mapping or GeoJSON Point
        zones: Zone objects or raw zone records
        weekday: Day name or delivery date. None returns windows for the
                 whole week.

    Returns:
        DeliveryInfo. Eligibility only requires a matching zone, not that
        the zone has windows on the requested day.

    Raises:
        InvalidPointError: If the point has missing or non-numeric coordinates
    """
    point = Point.coerce(point)
    matches = match_zones(point, _coerce_zones(zones))
    matched = [m.zone for m in matches if m.matched]

    if weekday is None:
        merged = merge_weekly_windows(matched)
    else:
        day = _resolve_weekday(weekday)
        merged = {day: merge_windows(matched, day)}

    info = DeliveryInfo(
        is_eligible=bool(matched),
        zones=matched,
        merged_windows=merged,
        primary_zone=matched[0] if matched else None,
    )
    logger.info(
        f"Point ({point.lon}, {point.lat}): eligible={info.is_eligible}, "
        f"zones={[z.id for z in matched]}, skipped={len(matches) - len(matched)}"
    )
    return info
