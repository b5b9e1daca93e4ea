import logging

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

from SkyErrors import PositionUnavailable

logger = logging.getLogger(__name__)

# San Francisco
FALLBACK_LOCATION = (37.7749, -122.4194)


class Geolocator:
    def __init__(self, fallback=FALLBACK_LOCATION, user_agent='skymap', timeout=10):
        self.fallback = fallback
        self.user_agent = user_agent
        self.timeout = timeout

    def geocode(self, city):
        geo = Nominatim(user_agent=self.user_agent)
        try:
            location = geo.geocode(city, timeout=self.timeout)
        except GeopyError as err:
            raise PositionUnavailable(f"geocoding {city!r} failed: {err}") from err

        if location is None:
            raise PositionUnavailable(f"could not geocode {city!r}")

        logger.info(f"located {city!r} at ({location.latitude:.4f}, {location.longitude:.4f})")
        return location.latitude, location.longitude

    def resolve(self, city=None, latitude=None, longitude=None):
        if latitude is not None and longitude is not None:
            return latitude, longitude
        if latitude is not None or longitude is not None:
            raise PositionUnavailable("latitude and longitude must be given together")
        if city:
            return self.geocode(city)
        raise PositionUnavailable("no location supplied")

    def locate(self, city=None, latitude=None, longitude=None):
        try:
            return self.resolve(city, latitude, longitude)
        except PositionUnavailable as err:
            logger.warning(f"{err}. using default coords {self.fallback}")
            return self.fallback
