"""Core data models shared by the search pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Provenance(str, Enum):
    PRIMARY = "primary-provider"
    SECONDARY = "secondary-provider"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True, slots=True)
class Coordinates:
    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class PostalQuery:
    """A validated search request: ZIP code, radius in miles and result limit."""

    code: str
    radius_miles: float = 10
    limit: int = 10

    @property
    def cache_key(self) -> Tuple[str, float, int]:
        return (self.code, self.radius_miles, self.limit)

    @property
    def radius_meters(self) -> int:
        return round(self.radius_miles * 1609.34)


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """Coordinates and locality label resolved from a postal code."""

    lat: float
    lng: float
    locality_name: str
    region_code: str

    @property
    def center(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)


@dataclass(frozen=True, slots=True)
class BusinessResult:
    """Normalized snapshot of a business returned by a search provider."""

    name: str
    rating: float = 0.0
    review_count: int = 0
    address: str = ""
    phone: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    external_url: Optional[str] = None
    provenance: Provenance = Provenance.PLACEHOLDER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "rating": self.rating,
            "reviewCount": self.review_count,
            "address": self.address,
            "phone": self.phone,
            "coordinates": self.coordinates.to_dict() if self.coordinates else None,
            "externalUrl": self.external_url,
            "provenance": self.provenance.value,
        }


@dataclass(frozen=True, slots=True)
class CacheEntry:
    key: Tuple[str, float, int]
    results: Tuple[BusinessResult, ...]
    center: Coordinates
    locality_name: str
    region_code: str
    expires_at: float = field(default=0.0, compare=False)


@dataclass(frozen=True, slots=True)
class SearchResponse:
    origin: str
    results: Tuple[BusinessResult, ...]
    center: Coordinates
    locality_name: str
    region_code: str

    @classmethod
    def from_entry(cls, entry: CacheEntry, origin: str) -> "SearchResponse":
        return cls(
            origin=origin,
            results=entry.results,
            center=entry.center,
            locality_name=entry.locality_name,
            region_code=entry.region_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "origin": self.origin,
            "results": [result.to_dict() for result in self.results],
            "center": self.center.to_dict(),
            "localityName": self.locality_name,
            "regionCode": self.region_code,
        }
