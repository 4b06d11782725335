"""
Delivery zone eligibility: which admin-drawn zones cover an address and
which delivery windows they offer on a given day.
"""

from .eligibility import explain_delivery, get_delivery_info
from .geojson import classify_geojson, normalize_zone_geojson
from .matcher import find_all_containing, find_first_containing, match_zones
from .models import (
    DeliveryInfo,
    GeoJSONKind,
    GeometryMergeError,
    InvalidPointError,
    Point,
    SkipReason,
    TimeWindow,
    Zone,
    ZoneMatch,
)
from .windows import merge_weekly_windows, merge_windows, weekday_for_date

__all__ = [
    "DeliveryInfo",
    "GeoJSONKind",
    "GeometryMergeError",
    "InvalidPointError",
    "Point",
    "SkipReason",
    "TimeWindow",
    "Zone",
    "ZoneMatch",
    "classify_geojson",
    "explain_delivery",
    "find_all_containing",
    "find_first_containing",
    "get_delivery_info",
    "match_zones",
    "merge_weekly_windows",
    "merge_windows",
    "normalize_zone_geojson",
    "weekday_for_date",
]
