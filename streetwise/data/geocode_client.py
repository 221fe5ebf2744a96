import logging
from typing import Any, List, Optional
from .base import GeocodeClient, BoundingBox
from ..core.config import Settings, settings as default_settings
from ..core.errors import ProviderUnavailable
from ..core.utils import fnv1a_32, seeded_rand
import httpx

logger = logging.getLogger(__name__)

class MockGeocode(GeocodeClient):
    """
    Offline geocoder that turns the query string into a stable lat/lon inside
    the search viewbox. Entirely deterministic and free of network access.
    """
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.box = BoundingBox.parse(self.settings.GEO_VIEWBOX)

    async def search(self, query: str) -> List[dict[str, Any]]:
        seed = fnv1a_32(query.lower())
        lat = self.box.south + seeded_rand(seed, 1)[0] * (self.box.north - self.box.south)
        lon = self.box.west + seeded_rand(seed + 1, 1)[0] * (self.box.east - self.box.west)
        importance = 0.3 + seeded_rand(seed + 2, 1)[0] * 0.6  # 0.3–0.9
        return [{
            "lat": f"{lat:.7f}",
            "lon": f"{lon:.7f}",
            "display_name": query,
            "importance": round(importance, 4),
        }]

class NominatimGeocode(GeocodeClient):
    """
    Nominatim-compatible search endpoint. One GET per call, no retries:
    callers sit on an interactive path and prefer a fast "not found".
    """
    def __init__(self, http: httpx.AsyncClient, settings: Optional[Settings] = None):
        self.http = http
        self.settings = settings or default_settings
        self.base_url = self.settings.GEO_BASE_URL.rstrip("/")

    def params(self, query: str) -> dict[str, str]:
        return {
            "q": query,
            "format": "json",
            "limit": "1",
            "countrycodes": self.settings.GEO_COUNTRY_CODE,
            "bounded": "1",
            "viewbox": self.settings.GEO_VIEWBOX,
            "addressdetails": "1",
        }

    async def search(self, query: str) -> List[dict[str, Any]]:
        try:
            r = await self.http.get(
                f"{self.base_url}/search",
                params=self.params(query),
                headers={"User-Agent": self.settings.GEO_USER_AGENT},
            )
        except httpx.HTTPError as exc:
            raise ProviderUnavailable(f"Geocoder request failed: {exc!r}") from exc

        if not r.is_success:
            raise ProviderUnavailable(
                f"Geocoder returned {r.status_code} {r.reason_phrase}", status_code=r.status_code
            )
        try:
            records = r.json()
        except ValueError as exc:
            raise ProviderUnavailable("Geocoder returned a non-JSON body", status_code=r.status_code) from exc
        if not isinstance(records, list):
            raise ProviderUnavailable("Geocoder payload is not a list of records", status_code=r.status_code)
        logger.debug("Geocoder returned %d record(s)", len(records))
        return records

def build_http_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """
    The one reusable connection pool for the provider. No timeout here:
    deadlines belong to the caller (see AddressNormalizer.normalize).
    """
    settings = settings or default_settings
    return httpx.AsyncClient(timeout=None, headers={"User-Agent": settings.GEO_USER_AGENT})

def geocode_client(http: Optional[httpx.AsyncClient] = None,
                   settings: Optional[Settings] = None) -> GeocodeClient:
    """
    Factory picks mock or nominatim based on env flags.
    """
    settings = settings or default_settings
    if settings.GEO_PROVIDER == "mock":
        return MockGeocode(settings)
    return NominatimGeocode(http or build_http_client(settings), settings)
