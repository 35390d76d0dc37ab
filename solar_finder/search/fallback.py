"""Sequential provider fallback ending in the placeholder dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from solar_finder.core.errors import ProviderError
from solar_finder.core.models import BusinessResult, Coordinates, Provenance
from solar_finder.search.placeholder import placeholder_results
from solar_finder.vendors.base import ProviderAdapter

logger = logging.getLogger(__name__)

PLACEHOLDER_SOURCE = "placeholder"


@dataclass(frozen=True)
class FallbackOutcome:
    source: str
    provenance: Provenance
    results: Tuple[BusinessResult, ...]


class FallbackOrchestrator:
    """Try providers in priority order; the first non-empty answer wins.

    Providers are never merged and each one is called at most once per search.
    """

    def __init__(self, providers: Sequence[ProviderAdapter]) -> None:
        self.providers = list(providers)

    def _attempt(self, provider: ProviderAdapter, center: Coordinates, radius_meters: int, limit: int) -> List[BusinessResult]:
        try:
            results = provider.search(center, radius_meters, limit)
        except ProviderError as exc:
            logger.warning("Provider %s failed, falling back: %s", exc.vendor, exc.message)
            return []
        if not results:
            logger.info("Provider %s returned no results, falling back.", provider.vendor)
        return list(results)

    def search(self, code: str, center: Coordinates, radius_meters: int, limit: int) -> FallbackOutcome:
        for provider in self.providers:
            if not provider.is_configured:
                logger.debug("Skipping unconfigured provider %s", provider.vendor)
                continue
            results = self._attempt(provider, center, radius_meters, limit)
            if results:
                logger.info("Provider %s returned %d results", provider.vendor, len(results))
                return FallbackOutcome(source=provider.vendor, provenance=provider.provenance, results=tuple(results))

        logger.warning("No provider returned results for code=%s; serving placeholder dataset.", code)
        return FallbackOutcome(
            source=PLACEHOLDER_SOURCE,
            provenance=Provenance.PLACEHOLDER,
            results=tuple(placeholder_results(code, center)),
        )
