"""Client utilities for the Yelp Fusion business search API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from solar_finder.core.errors import ProviderError
from solar_finder.core.models import BusinessResult, Coordinates, Provenance
from solar_finder.etl.transform import from_yelp_business, normalize_items
from solar_finder.vendors.base import ProviderAdapter

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://api.yelp.com/v3"

MAX_LIMIT = 50


class YelpProvider(ProviderAdapter):
    vendor = "yelp"
    provenance = Provenance.SECONDARY
    max_radius_meters = 40_000

    def __init__(
        self,
        api_key: str,
        term: str = "solar electrician",
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(api_key)
        self.term = term
        self.timeout = timeout
        self._session = session

    def business_search(self, center: Coordinates, radius_meters: int, limit: int) -> Dict[str, Any]:
        params = {
            "term": self.term,
            "latitude": center.lat,
            "longitude": center.lng,
            "radius": self.clamp_radius(radius_meters),
            "limit": max(1, min(limit, MAX_LIMIT)),
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        session = self._session or _SESSION
        try:
            response = session.get(f"{_BASE_URL}/businesses/search", params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ProviderError(self.vendor, str(exc)) from exc

        if not (200 <= response.status_code < 300):
            logger.error("business_search failed: status=%s body=%s", response.status_code, response.text[:500])
            raise ProviderError(self.vendor, f"status {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError(self.vendor, "malformed JSON body") from exc
        if not isinstance(payload, dict):
            raise ProviderError(self.vendor, "response body is not an object")
        return payload

    def search(self, center: Coordinates, radius_meters: int, limit: int) -> List[BusinessResult]:
        payload = self.business_search(center, radius_meters, limit)
        items = payload.get("businesses") or []
        if not isinstance(items, list):
            raise ProviderError(self.vendor, "businesses is not a list")
        try:
            return normalize_items(items[:limit], from_yelp_business)
        except (TypeError, AttributeError, ValueError) as exc:
            raise ProviderError(self.vendor, f"malformed business: {exc}") from exc
