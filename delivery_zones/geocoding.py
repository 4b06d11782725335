# delivery_zones/geocoding.py

from dataclasses import dataclass
from typing import Optional

from .config import GEOCODER_COUNTRY_CODES, GEOCODER_MIN_DELAY_SECONDS, GEOCODER_USER_AGENT
from .models import Point
from .logging_utils import get_logger

logger = get_logger("Geocoding")


@dataclass(frozen=True)
class GeocodedAddress:
    lat: float
    lon: float
    display_name: str = ""

    @property
    def point(self) -> Point:
        return Point(lon=self.lon, lat=self.lat)


def make_geocoder(user_agent=GEOCODER_USER_AGENT, min_delay_seconds=GEOCODER_MIN_DELAY_SECONDS):
    from geopy.geocoders import Nominatim
    from geopy.extra.rate_limiter import RateLimiter

    geolocator = Nominatim(user_agent=user_agent)
    return RateLimiter(geolocator.geocode, min_delay_seconds=min_delay_seconds)


def geocode_address(address: str, geocode=None, country_codes=GEOCODER_COUNTRY_CODES) -> Optional[GeocodedAddress]:
    """
    Resolve a street address to coordinates.

    Args:
        address: Free-form address string
        geocode: Callable with the geopy `geocode` signature; defaults to a
                 rate-limited Nominatim geocoder
        country_codes: Restrict results to these countries

    Returns:
        GeocodedAddress, or None if the geocoder found nothing
    """
    if geocode is None:
        geocode = make_geocoder()

    logger.info(f"Geocoding address: {address}")
    location = geocode(address, country_codes=country_codes)
    if not location:
        logger.warning(f"Failed to geocode address {address!r}")
        return None

    logger.info(f"Geocoded {address!r}: {location.latitude}, {location.longitude}")
    return GeocodedAddress(
        lat=location.latitude,
        lon=location.longitude,
        display_name=getattr(location, "address", "") or "",
    )
