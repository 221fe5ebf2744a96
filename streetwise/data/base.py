import math
from typing import Any, Protocol, List, Optional
from dataclasses import dataclass

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise ValueError(f"GeoPoint coordinates must be finite: {self.lat}, {self.lon}")

@dataclass(frozen=True)
class BoundingBox:
    west: float
    south: float
    east: float
    north: float

    @classmethod
    def parse(cls, viewbox: str) -> "BoundingBox":
        """Parse a "west,south,east,north" string (Nominatim viewbox order)."""
        west, south, east, north = (float(v) for v in viewbox.split(","))
        return cls(west=west, south=south, east=east, north=north)

    def contains(self, point: GeoPoint) -> bool:
        return self.south <= point.lat <= self.north and self.west <= point.lon <= self.east

    def to_viewbox(self) -> str:
        return f"{self.west},{self.south},{self.east},{self.north}"

@dataclass(frozen=True)
class GeocodeResult:
    point: GeoPoint
    formatted_address: str
    confidence: float              # 0..100, from provider importance
    neighborhood: Optional[str] = None
    in_metro_bounds: bool = True   # False ⇒ resolved, but outside the plausible metro box

# ----- Protocols (interfaces) -----

class GeocodeClient(Protocol):
    async def search(self, query: str) -> List[dict[str, Any]]:
        """
        Raw provider records, best match first. Raises ProviderUnavailable
        on transport/status/payload failure.
        """
        ...
