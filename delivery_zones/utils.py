# delivery_zones/utils.py
import geopandas as gpd
from .config import WGS84_CRS
from .matcher import find_first_containing, zone_geometry
from .models import Point
from .logging_utils import get_logger

logger = get_logger("Utils")

def zones_to_gdf(zones, crs=WGS84_CRS):
    """
    Build a GeoDataFrame of zones for plotting or export.
    Zones whose geography does not normalize to a polygon are left out.
    """
    rows = []
    for zone in zones:
        try:
            geometry = zone_geometry(zone)
        except Exception as e:
            logger.warning(f"Skipping zone {zone.id} ({zone.name}): {e}")
            continue
        if geometry is None:
            logger.warning(f"Skipping zone {zone.id} ({zone.name}): no usable geometry")
            continue
        rows.append({"id": zone.id, "name": zone.name, "active": zone.active, "geometry": geometry})
    return gpd.GeoDataFrame(rows, columns=["id", "name", "active", "geometry"], geometry="geometry", crs=crs)

def assign_deliveries_to_zones(deliveries_gdf, zones):
    """
    Tag each delivery point with the primary zone covering it.
    Args:
        deliveries_gdf: GeoDataFrame of delivery points (any CRS)
        zones: list of Zone
    Returns:
        Copy of deliveries in EPSG:4326 with 'zone_id' and 'is_eligible' columns
    """
    if deliveries_gdf.crs is not None and deliveries_gdf.crs.to_epsg() != WGS84_CRS:
        logger.info(f"Reprojecting deliveries to EPSG:{WGS84_CRS}")
        deliveries_gdf = deliveries_gdf.to_crs(WGS84_CRS)

    zones = list(zones)
    zone_ids = []
    for geom in deliveries_gdf.geometry:
        zone = find_first_containing(Point(lon=geom.x, lat=geom.y), zones)
        zone_ids.append(zone.id if zone else None)

    deliveries_gdf = deliveries_gdf.copy()
    deliveries_gdf["zone_id"] = zone_ids
    deliveries_gdf["is_eligible"] = [zone_id is not None for zone_id in zone_ids]
    eligible = int(deliveries_gdf["is_eligible"].sum())
    logger.info(f"Assigned deliveries: {eligible} inside a zone, {len(deliveries_gdf) - eligible} outside")
    return deliveries_gdf
