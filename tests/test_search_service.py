from unittest.mock import Mock

import pytest

from conftest import StubGeocoder, StubProvider, make_result
from solar_finder.core.cache import ResultCache
from solar_finder.core.config import Settings
from solar_finder.core.errors import GeocodeNotFound, GeocodeUnavailable, InvalidInput, ProviderError
from solar_finder.core.models import PostalQuery, Provenance
from solar_finder.search.fallback import FallbackOrchestrator
from solar_finder.search.service import SearchService, build_search_service
from solar_finder.vendors.google_places import GooglePlacesProvider
from solar_finder.vendors.yelp import YelpProvider


def _service(providers, clock, geocoder=None, ttl=600):
    return SearchService(
        geocoder=geocoder or StubGeocoder(),
        orchestrator=FallbackOrchestrator(providers),
        cache=ResultCache(clock=clock),
        ttl_seconds=ttl,
    )


def test_invalid_code_fails_before_outbound_calls(clock):
    geocoder = StubGeocoder()
    primary = StubProvider("google", Provenance.PRIMARY, results=[make_result("g", 4, 1)])
    service = _service([primary], clock, geocoder=geocoder)

    with pytest.raises(InvalidInput):
        service.execute(PostalQuery(code="1234"))

    assert geocoder.calls == []
    assert primary.calls == []


def test_live_then_cache(clock):
    primary = StubProvider(
        "google",
        Provenance.PRIMARY,
        results=[make_result("b", 4.1, 3), make_result("a", 4.9, 2), make_result("c", 4.1, 8)],
    )
    service = _service([primary], clock)
    query = PostalQuery(code="94103", radius_miles=10, limit=2)

    first = service.execute(query)
    second = service.execute(query)

    assert first.origin == "live"
    assert second.origin == "cache"
    assert [r.name for r in first.results] == ["a", "c"]
    assert second.results == first.results
    assert first.locality_name == "San Francisco"
    assert first.region_code == "CA"
    assert first.center.to_dict() == {"lat": 37.7725, "lng": -122.4091}
    assert len(primary.calls) == 1
    assert primary.calls[0][1:] == (16093, 2)


def test_cache_expires_after_ttl(clock):
    primary = StubProvider("google", Provenance.PRIMARY, results=[make_result("g", 4, 1)])
    geocoder = StubGeocoder()
    service = _service([primary], clock, geocoder=geocoder)
    query = PostalQuery(code="94103", radius_miles=10, limit=5)

    service.execute(query)
    clock.advance(601)
    again = service.execute(query)

    assert again.origin == "live"
    assert len(geocoder.calls) == 2
    assert len(primary.calls) == 2


def test_distinct_limits_do_not_share_cache(clock):
    primary = StubProvider("google", Provenance.PRIMARY, results=[make_result("g", 4, 1)])
    service = _service([primary], clock)

    service.execute(PostalQuery(code="94103", limit=5))
    response = service.execute(PostalQuery(code="94103", limit=6))

    assert response.origin == "live"
    assert len(primary.calls) == 2


@pytest.mark.parametrize("exc", [GeocodeNotFound("nope"), GeocodeUnavailable("down")])
def test_geocode_failures_propagate_and_are_not_cached(clock, exc):
    primary = StubProvider("google", Provenance.PRIMARY)
    service = _service([primary], clock, geocoder=StubGeocoder(exc=exc))

    with pytest.raises(type(exc)):
        service.execute(PostalQuery(code="99999"))

    assert primary.calls == []
    assert len(service.cache) == 0


def test_placeholder_when_no_credentials(clock):
    service = _service(
        [
            StubProvider("google", Provenance.PRIMARY, configured=False),
            StubProvider("yelp", Provenance.SECONDARY, configured=False),
        ],
        clock,
    )

    response = service.execute(PostalQuery(code="94103", radius_miles=10, limit=5))

    assert response.origin == "live"
    assert [r.name for r in response.results] == ["Sunrise Solar Electricians", "Bright Home Solar"]
    assert all(r.provenance is Provenance.PLACEHOLDER for r in response.results)


def test_placeholder_respects_smaller_limit(clock):
    service = _service([], clock)
    response = service.execute(PostalQuery(code="94103", limit=1))
    assert [r.name for r in response.results] == ["Sunrise Solar Electricians"]


def test_secondary_only_when_primary_fails(clock):
    primary = StubProvider("google", Provenance.PRIMARY, exc=ProviderError("google", "OVER_QUERY_LIMIT"))
    secondary = StubProvider(
        "yelp", Provenance.SECONDARY, results=[make_result("y", 4.5, 10, Provenance.SECONDARY)]
    )
    service = _service([primary, secondary], clock)

    response = service.execute(PostalQuery(code="94103"))

    assert [r.provenance for r in response.results] == [Provenance.SECONDARY]


def test_unexpected_errors_propagate(clock):
    geocoder = Mock()
    geocoder.resolve.side_effect = KeyError("surprise")
    service = _service([], clock, geocoder=geocoder)

    with pytest.raises(KeyError):
        service.execute(PostalQuery(code="94103"))


def test_build_search_service_wires_providers_in_priority_order():
    settings = Settings(google_api_key="", yelp_api_key="y", cache_ttl_seconds=42, request_timeout_seconds=3)

    service = build_search_service(settings)

    providers = service.orchestrator.providers
    assert [type(p) for p in providers] == [GooglePlacesProvider, YelpProvider]
    assert [p.is_configured for p in providers] == [False, True]
    assert all(p.timeout == 3 for p in providers)
    assert service.geocoder.timeout == 3
    assert service.ttl_seconds == 42
