# delivery_zones/dataio.py

import json
import time

import geopandas as gpd
import pyogrio
from .config import DELIVERIES_PATH, WGS84_CRS, ZONES_PATH, ZONE_CACHE_TTL_MINUTES
from .models import Zone
from .logging_utils import get_logger

logger = get_logger("DataIO")

def load_zones(path=ZONES_PATH, active_only=False):
    """
    Load delivery zones from a JSON export of the zone table.
    Accepts a list of zone records or {"zones": [...]}.
    Returns a list of Zone.
    """
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if isinstance(payload, dict) and "zones" in payload:
        payload = payload["zones"]
    if not isinstance(payload, list):
        raise ValueError(
            f"Zone file {path} must contain a list of zones or a 'zones' key, "
            f"got {type(payload).__name__}"
        )
    zones = [Zone.from_record(record) for record in payload]
    if active_only:
        zones = [z for z in zones if z.active]
    logger.info(f"Loaded {len(zones)} zones from {path}")
    return zones

def save_zones(zones, path=ZONES_PATH):
    """Write zones back out in the same JSON shape load_zones reads."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([z.to_dict() for z in zones], f, indent=2)
    logger.info(f"Saved {len(zones)} zones to {path}")

def read_gpkg_auto(path, layer=None, **kwargs):
    """
    Reads a GeoPackage, auto-selecting the layer if not provided.
    Returns a GeoDataFrame.
    """
    layers = [name for name, _ in pyogrio.list_layers(str(path))]
    if layer is None:
        if len(layers) == 1:
            layer = layers[0]
            logger.info(f"Auto-selected only layer: {layer}")
        else:
            raise ValueError(
                f"GeoPackage has multiple layers: {layers}. "
                "Specify 'layer' argument explicitly."
            )
    elif layer not in layers:
        raise ValueError(f"Layer '{layer}' not found in {layers}")
    return gpd.read_file(path, layer=layer, engine="pyogrio", **kwargs)

def load_deliveries(path=DELIVERIES_PATH, layer=None, crs=WGS84_CRS):
    """Load delivery points as a GeoDataFrame in lon/lat. Auto-selects layer if needed."""
    gdf = read_gpkg_auto(path, layer=layer)
    logger.info(f"Loaded {len(gdf)} deliveries.")
    return gdf.to_crs(crs)


class ZoneCache:
    """
    Caller-side cache for the zone list.

    Zone edits are rare admin actions, so a list fetched once is reused
    until `ttl_minutes` have passed.
    """

    def __init__(self, loader=load_zones, ttl_minutes=ZONE_CACHE_TTL_MINUTES, clock=time.monotonic):
        self._loader = loader
        self._ttl_seconds = ttl_minutes * 60
        self._clock = clock
        self._zones = None
        self._loaded_at = None

    def get(self):
        now = self._clock()
        if self._zones is None or now - self._loaded_at >= self._ttl_seconds:
            logger.info("Zone cache empty or expired, reloading zones...")
            self._zones = list(self._loader())
            self._loaded_at = now
        return self._zones

    def invalidate(self):
        self._zones = None
        self._loaded_at = None
