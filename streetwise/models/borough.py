from typing import Callable, Optional
from .base import BoroughClassifier
from ..core.config import Settings, settings as default_settings
from ..data.base import BoundingBox, GeoPoint

DEFAULT_BOROUGH = "Manhattan"

class CoarseBoroughClassifier(BoroughClassifier):
    """
    Half-plane heuristics checked in a fixed order; first match wins.
    Approximate by nature (rectangles, not borough polygons), so points near
    the East River or the Harlem River can land in the wrong borough.
    """
    RULES: list[tuple[str, Callable[[GeoPoint], bool]]] = [
        ("Bronx",         lambda p: p.lat >= 40.8 and p.lon >= -73.95),
        ("Staten Island", lambda p: p.lat <= 40.65 and p.lon <= -74.0),
        ("Brooklyn",      lambda p: p.lat <= 40.75 and p.lon >= -73.95),
        ("Queens",        lambda p: p.lat >= 40.75 and p.lon <= -73.85),
    ]

    def __init__(self, default: str = DEFAULT_BOROUGH):
        self.default = default

    def classify(self, point: GeoPoint) -> str:
        for label, matches in self.RULES:
            if matches(point):
                return label
        return self.default

class BoxBoroughClassifier(BoroughClassifier):
    """
    Closed rectangles per borough, checked in order. Tighter than the coarse
    rules inside the city, but anything outside every box gets the default.
    """
    BOXES: list[tuple[str, BoundingBox]] = [
        ("Manhattan",     BoundingBox(west=-74.02, south=40.70, east=-73.93, north=40.88)),
        ("Brooklyn",      BoundingBox(west=-74.04, south=40.57, east=-73.83, north=40.74)),
        ("Queens",        BoundingBox(west=-73.96, south=40.54, east=-73.70, north=40.80)),
        ("Bronx",         BoundingBox(west=-73.93, south=40.79, east=-73.76, north=40.92)),
        ("Staten Island", BoundingBox(west=-74.26, south=40.50, east=-74.05, north=40.65)),
    ]

    def __init__(self, default: str = DEFAULT_BOROUGH):
        self.default = default

    def classify(self, point: GeoPoint) -> str:
        for label, box in self.BOXES:
            if box.contains(point):
                return label
        return self.default

def borough_classifier(settings: Optional[Settings] = None) -> BoroughClassifier:
    """
    Factory picks the strategy from BOROUGH_CLASSIFIER (coarse | boxes).
    """
    settings = settings or default_settings
    if settings.BOROUGH_CLASSIFIER == "boxes":
        return BoxBoroughClassifier()
    return CoarseBoroughClassifier()
