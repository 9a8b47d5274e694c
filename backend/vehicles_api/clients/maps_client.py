import logging

import requests

from ..schemas.vehicle_schema import Location

logger = logging.getLogger(__name__)


class MapsClient:
    """Reverse-geocodes coordinates through the maps service"""

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_address(self, location: Location) -> Location:
        """
        Return a new Location with the input coordinates and, when the maps
        service answers, the resolved address fields.
        """
        try:
            response = requests.get(
                f"{self.base_url}/maps",
                params={"lat": location.lat, "lon": location.lon},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
            resolved = Location(
                lat=location.lat,
                lon=location.lon,
                address=data.get("address"),
                city=data.get("city"),
                state=data.get("state"),
                zip=data.get("zip"),
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Maps service unavailable for ({location.lat}, {location.lon}): {e}")
            return Location(lat=location.lat, lon=location.lon)
        except (ValueError, AttributeError) as e:
            logger.warning(f"Unexpected maps response for ({location.lat}, {location.lon}): {e}")
            return Location(lat=location.lat, lon=location.lon)
        return resolved
