"""Search façade: cache lookup, geocoding, provider fallback and ranking."""

from __future__ import annotations

import logging
from typing import Optional

from solar_finder.core.cache import ResultCache
from solar_finder.core.config import Settings, get_settings
from solar_finder.core.models import CacheEntry, PostalQuery, SearchResponse
from solar_finder.search.fallback import FallbackOrchestrator
from solar_finder.search.query import validate_code
from solar_finder.search.ranking import rank_results
from solar_finder.vendors.google_places import GooglePlacesProvider
from solar_finder.vendors.yelp import YelpProvider
from solar_finder.vendors.zippopotam import Geocoder

logger = logging.getLogger(__name__)

ORIGIN_CACHE = "cache"
ORIGIN_LIVE = "live"


class SearchService:
    def __init__(
        self,
        geocoder: Geocoder,
        orchestrator: FallbackOrchestrator,
        cache: ResultCache,
        ttl_seconds: float = 600,
    ) -> None:
        self.geocoder = geocoder
        self.orchestrator = orchestrator
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    def execute(self, query: PostalQuery) -> SearchResponse:
        """Run one search. Raises InvalidInput or GeocodeFailed; provider failures are absorbed."""
        validate_code(query.code)
        key = query.cache_key

        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for key=%s", key)
            return SearchResponse.from_entry(cached, ORIGIN_CACHE)

        logger.info("Cache miss for key=%s", key)
        location = self.geocoder.resolve(query.code)
        outcome = self.orchestrator.search(query.code, location.center, query.radius_meters, query.limit)
        ranked = rank_results(outcome.results, query.limit)

        entry = CacheEntry(
            key=key,
            results=tuple(ranked),
            center=location.center,
            locality_name=location.locality_name,
            region_code=location.region_code,
        )
        self.cache.put(key, entry, self.ttl_seconds)
        logger.info("Served %d results from %s for key=%s", len(ranked), outcome.source, key)
        return SearchResponse.from_entry(entry, ORIGIN_LIVE)


def build_search_service(settings: Optional[Settings] = None, cache: Optional[ResultCache] = None) -> SearchService:
    """Wire a SearchService from settings, primary provider first."""
    settings = settings or get_settings()
    providers = [
        GooglePlacesProvider(
            settings.google_api_key,
            keyword=settings.search_keyword,
            place_type=settings.google_place_type,
            timeout=settings.request_timeout_seconds,
        ),
        YelpProvider(
            settings.yelp_api_key,
            term=settings.search_keyword,
            timeout=settings.request_timeout_seconds,
        ),
    ]
    return SearchService(
        geocoder=Geocoder(settings.geocoder_base_url, timeout=settings.request_timeout_seconds),
        orchestrator=FallbackOrchestrator(providers),
        cache=cache if cache is not None else ResultCache(),
        ttl_seconds=settings.cache_ttl_seconds,
    )
