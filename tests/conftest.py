import sys
from pathlib import Path

import pytest
import requests

# Ensure `solar_finder` is importable when running pytest from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solar_finder.core.models import BusinessResult, Coordinates, GeoLocation, Provenance  # noqa: E402


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text="", raise_on_json=False):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = text
        self.raise_on_json = raise_on_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.raise_on_json:
            raise ValueError("not json")
        return self._payload


class DummySession:
    def __init__(self, response=None, exc=None):
        self.calls = []
        self.response = response
        self.exc = exc

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


class StubProvider:
    """Provider test double recording each call."""

    def __init__(self, vendor, provenance, results=None, exc=None, configured=True):
        self.vendor = vendor
        self.provenance = provenance
        self.results = results or []
        self.exc = exc
        self.is_configured = configured
        self.calls = []

    def search(self, center, radius_meters, limit):
        self.calls.append((center, radius_meters, limit))
        if self.exc is not None:
            raise self.exc
        return list(self.results)


class StubGeocoder:
    def __init__(self, location=None, exc=None):
        self.location = location or GeoLocation(lat=37.7725, lng=-122.4091, locality_name="San Francisco", region_code="CA")
        self.exc = exc
        self.calls = []

    def resolve(self, code):
        self.calls.append(code)
        if self.exc is not None:
            raise self.exc
        return self.location


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


def make_result(name, rating, reviews, provenance=Provenance.PRIMARY):
    return BusinessResult(
        name=name,
        rating=rating,
        review_count=reviews,
        address=f"{name} address",
        coordinates=Coordinates(lat=37.0, lng=-122.0),
        provenance=provenance,
    )


@pytest.fixture
def dummy_session():
    return DummySession(response=DummyResponse())


@pytest.fixture
def clock():
    return FakeClock()
