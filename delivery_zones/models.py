# delivery_zones/models.py
"""
Plain data types shared by the zone engine.
Zones are read-only inputs; Point and DeliveryInfo are created per check.
"""

import enum
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional

from .logging_utils import get_logger

logger = get_logger("Models")


class InvalidPointError(ValueError):
    """Raised when a point does not carry two finite numeric coordinates."""


class GeometryMergeError(ValueError):
    """Raised when two zone geographies cannot be merged into one."""


class GeoJSONKind(str, enum.Enum):
    POLYGON = "Polygon"
    MULTIPOLYGON = "MultiPolygon"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"
    INVALID = "Invalid"


class SkipReason(str, enum.Enum):
    INACTIVE = "inactive"
    INVALID_GEOMETRY = "invalid_geometry"
    OUTSIDE = "outside"
    CONTAINMENT_ERROR = "containment_error"


def _coordinate(value, name):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPointError(f"{name} must be numeric, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidPointError(f"{name} must be finite, got {value!r}")
    return value


@dataclass(frozen=True)
class Point:
    """
    WGS84 coordinate in (longitude, latitude) order.

    Raises InvalidPointError on construction if either coordinate is
    missing or non-numeric.
    """

    lon: float
    lat: float

    def __post_init__(self):
        object.__setattr__(self, "lon", _coordinate(self.lon, "lon"))
        object.__setattr__(self, "lat", _coordinate(self.lat, "lat"))

    @classmethod
    def from_latlon(cls, location: Mapping[str, Any]) -> "Point":
        """Build from a geocoder-style mapping with 'lat' and 'lon' keys."""
        try:
            return cls(lon=location["lon"], lat=location["lat"])
        except (KeyError, TypeError) as e:
            raise InvalidPointError(f"Expected a mapping with lat/lon, got {location!r}") from e

    @classmethod
    def from_geojson(cls, geometry: Mapping[str, Any]) -> "Point":
        """Build from a GeoJSON Point ({"type": "Point", "coordinates": [lon, lat]})."""
        try:
            if geometry.get("type") != "Point":
                raise InvalidPointError(f"Expected a GeoJSON Point, got {geometry.get('type')!r}")
            lon, lat = geometry["coordinates"][:2]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidPointError(f"Malformed GeoJSON Point: {geometry!r}") from e
        return cls(lon=lon, lat=lat)

    @classmethod
    def coerce(cls, value) -> "Point":
        """Accept a Point, a (lon, lat) pair, a lat/lon mapping or a GeoJSON Point."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            if "type" in value:
                return cls.from_geojson(value)
            return cls.from_latlon(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(lon=value[0], lat=value[1])
        raise InvalidPointError(f"Cannot interpret {value!r} as a point")

    @property
    def coordinates(self):
        return (self.lon, self.lat)


@dataclass(frozen=True)
class TimeWindow:
    start: str
    end: str

    @classmethod
    def from_record(cls, record) -> "TimeWindow":
        if isinstance(record, TimeWindow):
            return record
        return cls(start=record.get("start"), end=record.get("end"))

    def to_dict(self) -> Dict[str, str]:
        return {"start": self.start, "end": self.end}


def _parse_windows(raw, zone_id) -> Dict[str, List[TimeWindow]]:
    """Weekday -> windows; days or entries that are not lists/mappings are dropped."""
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        logger.debug(f"Zone {zone_id}: ignoring windows of type {type(raw).__name__}")
        return {}

    windows = {}
    for day, day_windows in raw.items():
        if not day_windows:
            windows[str(day).lower()] = []
            continue
        if not isinstance(day_windows, (list, tuple)):
            logger.debug(f"Zone {zone_id}: ignoring {day} windows of type {type(day_windows).__name__}")
            continue
        parsed = []
        for window in day_windows:
            if isinstance(window, (Mapping, TimeWindow)):
                parsed.append(TimeWindow.from_record(window))
            else:
                logger.debug(f"Zone {zone_id}: ignoring {day} window {window!r}")
        windows[str(day).lower()] = parsed
    return windows


@dataclass(frozen=True)
class Zone:
    """
    Admin-defined delivery area.

    Attributes:
        id: Storage identifier (always a string here)
        name: Display name
        geojson: Raw geography as stored; may be a Feature, FeatureCollection,
                 bare geometry, or garbage
        windows: {weekday: [TimeWindow, ...]}
        active: Inactive zones are never matched
    """

    id: str
    name: str
    geojson: Any = None
    windows: Mapping[str, List[TimeWindow]] = field(default_factory=dict)
    active: bool = True

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Zone":
        """Build a Zone from a delivery_zones storage row, ignoring unknown columns."""
        if isinstance(record, Zone):
            return record
        windows = _parse_windows(record.get("windows"), record.get("id"))
        return cls(
            id=str(record["id"]),
            name=record.get("name", ""),
            geojson=record.get("geojson"),
            windows=windows,
            active=bool(record.get("active", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "geojson": self.geojson,
            "windows": {
                day: [w.to_dict() for w in day_windows]
                for day, day_windows in self.windows.items()
            },
            "active": self.active,
        }


@dataclass(frozen=True)
class ZoneMatch:
    """Outcome of testing one zone against one point."""

    zone: Zone
    matched: bool
    reason: Optional[SkipReason] = None
    detail: str = ""


@dataclass(frozen=True)
class DeliveryInfo:
    is_eligible: bool
    zones: List[Zone]
    merged_windows: Dict[str, List[TimeWindow]]
    primary_zone: Optional[Zone]

    def to_dict(self) -> Dict[str, Any]:
        """Checkout payload, keyed the way the UI reads it."""
        return {
            "isEligible": self.is_eligible,
            "zones": [z.to_dict() for z in self.zones],
            "mergedWindows": {
                day: [w.to_dict() for w in day_windows]
                for day, day_windows in self.merged_windows.items()
            },
            "primaryZone": self.primary_zone.to_dict() if self.primary_zone else None,
        }
