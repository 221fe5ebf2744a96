import asyncio
import logging
import time
from typing import Any, Optional

from ..core.config import Settings, settings as default_settings
from ..core.errors import InvalidAddress, ProviderUnavailable
from ..core.metrics import record_geocode
from ..core.utils import address_from_listing_url, clamp, normalize_address
from ..data.base import BoundingBox, GeocodeClient, GeocodeResult, GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_IMPORTANCE = 0.5

class AddressNormalizer:
    """
    Resolves a free-text address to coordinates through an injected provider
    client. Single attempt per call; every failure mode comes back as None.

    A result outside the plausible metro box is still returned, flagged with
    in_metro_bounds=False and its confidence left as the provider reported it.
    """
    def __init__(self, client: GeocodeClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or default_settings
        self.search_box = BoundingBox.parse(self.settings.GEO_VIEWBOX)
        self.plausible_box = BoundingBox.parse(self.settings.GEO_PLAUSIBLE_BOX)

    def search_text(self, address: str) -> str:
        """Append the metro suffix unless the address already names the area."""
        lowered = address.lower()
        if any(k in lowered for k in self.settings.metro_keywords):
            return address
        return f"{address}{self.settings.METRO_SUFFIX}"

    def is_within_metro(self, point: GeoPoint) -> bool:
        return self.search_box.contains(point)

    async def normalize(self, address: str, timeout: Optional[float] = None) -> Optional[GeocodeResult]:
        """
        timeout is the caller's deadline in seconds; None waits as long as the
        provider does. Expiry is treated like any other miss.
        """
        cleaned = normalize_address(address or "")
        if not cleaned:
            raise InvalidAddress("address must not be empty")

        query = self.search_text(cleaned)
        logger.info("Geocoding address: %s", cleaned)
        start = time.perf_counter()
        try:
            if timeout is None:
                records = await self.client.search(query)
            else:
                records = await asyncio.wait_for(self.client.search(query), timeout)
        except asyncio.TimeoutError:
            logger.warning("Geocoding timed out after %ss for %r", timeout, cleaned)
            record_geocode("timeout", settings=self.settings)
            return None
        except ProviderUnavailable as exc:
            logger.error("Geocoder unavailable for %r: %s", cleaned, exc.message)
            record_geocode("provider_unavailable", time.perf_counter() - start, settings=self.settings)
            return None
        elapsed = time.perf_counter() - start

        if not records:
            logger.info("No results found for address: %s", cleaned)
            record_geocode("not_found", elapsed, settings=self.settings)
            return None

        result = self._from_record(records[0])
        if result is None:
            logger.error("Malformed geocoder record for %r: %r", cleaned, records[0])
            record_geocode("invalid_record", elapsed, settings=self.settings)
            return None

        record_geocode("resolved", elapsed, settings=self.settings)
        logger.info(
            "Geocoded %r to %s, %s (confidence: %s)",
            cleaned, result.point.lat, result.point.lon, result.confidence,
        )
        return result

    async def normalize_listing_url(self, url: str, timeout: Optional[float] = None) -> Optional[GeocodeResult]:
        address = address_from_listing_url(url)
        if address is None:
            logger.info("Not a building listing URL: %s", url)
            return None
        return await self.normalize(address, timeout=timeout)

    def _from_record(self, record: Any) -> Optional[GeocodeResult]:
        try:
            point = GeoPoint(lat=float(record["lat"]), lon=float(record["lon"]))
            # absent, null and 0 all fall back to the default
            importance = float(record.get("importance") or DEFAULT_IMPORTANCE)
        except (KeyError, TypeError, ValueError, AttributeError):
            return None

        in_bounds = self.plausible_box.contains(point)
        if not in_bounds:
            logger.warning("Coordinates outside metro area: %s, %s", point.lat, point.lon)

        details = record.get("address")
        neighborhood = None
        if isinstance(details, dict):
            neighborhood = details.get("neighbourhood") or details.get("suburb")

        return GeocodeResult(
            point=point,
            formatted_address=str(record.get("display_name") or ""),
            confidence=clamp(importance * 100),
            neighborhood=neighborhood,
            in_metro_bounds=in_bounds,
        )
