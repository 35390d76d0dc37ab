"""Capability interface shared by business-search vendors."""

from abc import ABC, abstractmethod
from typing import List

from solar_finder.core.models import BusinessResult, Coordinates, Provenance


class ProviderAdapter(ABC):
    """Nearby business search against one external vendor.

    Adapters without a credential report ``is_configured`` as False and are
    skipped; any failure of a configured adapter is raised as ``ProviderError``.
    """

    vendor: str = ""
    provenance: Provenance
    max_radius_meters: int

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def clamp_radius(self, radius_meters: int) -> int:
        return max(1, min(int(radius_meters), self.max_radius_meters))

    @abstractmethod
    def search(self, center: Coordinates, radius_meters: int, limit: int) -> List[BusinessResult]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vendor={self.vendor!r}, configured={self.is_configured})"
