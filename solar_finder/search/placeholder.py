"""Fixed sample results served when no live provider yields data."""

from typing import List

from solar_finder.core.models import BusinessResult, Coordinates, Provenance

_OFFSET_DEGREES = 0.01


def placeholder_results(code: str, center: Coordinates) -> List[BusinessResult]:
    return [
        BusinessResult(
            name="Sunrise Solar Electricians",
            rating=4.9,
            review_count=125,
            address=f"123 Solar Way, {code}",
            phone="(555) 111-2222",
            coordinates=Coordinates(lat=center.lat + _OFFSET_DEGREES, lng=center.lng + _OFFSET_DEGREES),
            provenance=Provenance.PLACEHOLDER,
        ),
        BusinessResult(
            name="Bright Home Solar",
            rating=4.8,
            review_count=98,
            address=f"77 Sunny St, {code}",
            phone="(555) 333-4444",
            coordinates=Coordinates(lat=center.lat - _OFFSET_DEGREES, lng=center.lng - _OFFSET_DEGREES),
            provenance=Provenance.PLACEHOLDER,
        ),
    ]
