"""Client utilities for the Google Places Nearby Search API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from solar_finder.core.errors import ProviderError
from solar_finder.core.models import BusinessResult, Coordinates, Provenance
from solar_finder.etl.transform import from_google_place, normalize_items
from solar_finder.vendors.base import ProviderAdapter

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://maps.googleapis.com/maps/api/place"


class GooglePlacesProvider(ProviderAdapter):
    vendor = "google"
    provenance = Provenance.PRIMARY
    max_radius_meters = 50_000

    def __init__(
        self,
        api_key: str,
        keyword: str = "solar electrician",
        place_type: Optional[str] = "electrician",
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(api_key)
        self.keyword = keyword
        self.place_type = place_type
        self.timeout = timeout
        self._session = session

    def nearby_search(self, center: Coordinates, radius_meters: int) -> Dict[str, Any]:
        params = {
            "location": f"{center.lat},{center.lng}",
            "radius": self.clamp_radius(radius_meters),
            "keyword": self.keyword,
            "key": self.api_key,
        }
        if self.place_type:
            params["type"] = self.place_type

        session = self._session or _SESSION
        try:
            response = session.get(f"{_BASE_URL}/nearbysearch/json", params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ProviderError(self.vendor, str(exc)) from exc

        if not isinstance(payload, dict):
            raise ProviderError(self.vendor, "response body is not an object")
        status = payload.get("status")
        if status not in {"OK", "ZERO_RESULTS"}:
            logger.error("nearby_search failed: status=%s, error_message=%s", status, payload.get("error_message"))
            raise ProviderError(self.vendor, payload.get("error_message") or str(status))
        return payload

    def search(self, center: Coordinates, radius_meters: int, limit: int) -> List[BusinessResult]:
        payload = self.nearby_search(center, radius_meters)
        items = payload.get("results") or []
        if not isinstance(items, list):
            raise ProviderError(self.vendor, "results is not a list")
        try:
            return normalize_items(items[:limit], from_google_place)
        except (TypeError, AttributeError, ValueError) as exc:
            raise ProviderError(self.vendor, f"malformed place: {exc}") from exc
