# delivery_zones/config.py

import os
from pathlib import Path

# Data directories
DATA_DIR = Path("data")
OUTPUTS_DIR = Path("outputs")

# File paths
ZONES_PATH = DATA_DIR / "delivery_zones.json"
DELIVERIES_PATH = DATA_DIR / "deliveries.gpkg"

WGS84_CRS = 4326         # Zones and geocoded points are lon/lat

# Business calendar
BUSINESS_TIMEZONE = "America/Los_Angeles"
WEEKDAYS = [
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

# Zone list is re-fetched by callers at most this often
ZONE_CACHE_TTL_MINUTES = 30

# Geocoder settings
GEOCODER_USER_AGENT = "delivery_zones"
GEOCODER_MIN_DELAY_SECONDS = 1
GEOCODER_COUNTRY_CODES = "us"

LOG_LEVEL = os.environ.get("DELIVERY_ZONES_LOG_LEVEL", "INFO")
