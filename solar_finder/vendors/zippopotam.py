"""Postal code geocoding through the keyless Zippopotam.us API."""

import logging
from typing import Optional

import requests

from solar_finder.core.errors import GeocodeNotFound, GeocodeUnavailable
from solar_finder.core.models import GeoLocation
from solar_finder.etl.transform import safe_float

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "http://api.zippopotam.us/us"


class Geocoder:
    def __init__(
        self,
        base_url: str = _BASE_URL,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    def resolve(self, code: str) -> GeoLocation:
        """Resolve a 5-digit ZIP to its first listed place. No retries."""
        session = self._session or _SESSION
        try:
            response = session.get(f"{self.base_url}/{code}", timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Geocoder request failed for code=%s: %s", code, exc)
            raise GeocodeUnavailable(f"postal lookup unavailable for {code}") from exc

        if response.status_code != 200:
            logger.warning("Geocoder returned status=%s for code=%s", response.status_code, code)
            raise GeocodeNotFound(f"no location found for {code}")

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Geocoder returned malformed JSON for code=%s", code)
            raise GeocodeUnavailable(f"postal lookup returned an unreadable response for {code}") from exc

        places = payload.get("places") if isinstance(payload, dict) else None
        place = places[0] if isinstance(places, list) and places else None
        if not isinstance(place, dict):
            raise GeocodeNotFound(f"no location found for {code}")

        lat = safe_float(place.get("latitude"))
        lng = safe_float(place.get("longitude"))
        if lat is None or lng is None:
            logger.warning("Geocoder place for code=%s has no usable coordinates: %s", code, place)
            raise GeocodeNotFound(f"no coordinates for {code}")

        location = GeoLocation(
            lat=lat,
            lng=lng,
            locality_name=str(place.get("place name") or "").strip(),
            region_code=str(place.get("state abbreviation") or "").strip(),
        )
        logger.info("Resolved code=%s to %s, %s (%s, %s)", code, location.locality_name, location.region_code, lat, lng)
        return location
