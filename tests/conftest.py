"""
Pytest Configuration and Fixtures

Shared fixtures for the engine tests. Network access is never used: the
geocoder is driven through httpx.MockTransport.
"""

from typing import Callable

import httpx
import pytest

from streetwise.core.config import Settings
from streetwise.data.geocode_client import NominatimGeocode
from streetwise.schemas import CategoryScore
from streetwise.services.address_normalizer import AddressNormalizer


@pytest.fixture
def settings() -> Settings:
    return Settings(
        GEO_PROVIDER="nominatim",
        GEO_BASE_URL="https://geocoder.test",
        PROMETHEUS_ENABLED=True,
    )


@pytest.fixture
def make_categories() -> Callable[..., list[CategoryScore]]:
    """Build categories from (score, weight) pairs."""

    def _make(*pairs, **extra) -> list[CategoryScore]:
        return [
            CategoryScore(name=f"cat{i}", score=score, weight=weight, **extra)
            for i, (score, weight) in enumerate(pairs)
        ]

    return _make


@pytest.fixture
def streetwise_card() -> list[dict]:
    """The five-category card used by the product (40/20/15/20/5)."""
    return [
        {"name": "Market Analysis", "score": 82, "weight": 40,
         "positiveFactors": ["5.2% below comps"], "negativeFactors": ["High monthly fees"]},
        {"name": "Location", "score": 75, "weight": 20,
         "positiveFactors": ["Subway in 4 minutes"], "negativeFactors": ["Street noise"]},
        {"name": "Building", "score": 68, "weight": 15,
         "positiveFactors": ["Doorman"], "negativeFactors": ["No elevator"]},
        {"name": "Unit", "score": 85, "weight": 20,
         "positiveFactors": ["Renovated kitchen"], "negativeFactors": []},
        {"name": "Bonuses", "score": 72, "weight": 5,
         "positiveFactors": ["Tax abatement"], "negativeFactors": ["Flip tax"]},
    ]


@pytest.fixture
def geocoder_factory(settings):
    """
    Returns a factory building an AddressNormalizer whose provider answers
    through `handler`. Every request seen is appended to the returned list.
    Pass `settings=` to override the fixture settings for one normalizer.
    """

    def _factory(handler: Callable[[httpx.Request], httpx.Response], settings: Settings = settings):
        seen: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_recording))
        normalizer = AddressNormalizer(NominatimGeocode(http, settings), settings)
        return normalizer, seen

    return _factory


@pytest.fixture
def json_response():
    def _respond(payload, status_code: int = 200):
        return lambda request: httpx.Response(status_code, json=payload)

    return _respond
