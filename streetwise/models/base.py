from typing import Protocol
from ..data.base import GeoPoint

class BoroughClassifier(Protocol):
    def classify(self, point: GeoPoint) -> str:
        """
        Returns a borough label for any finite point. Must be total:
        points outside every known region fall back to a default label.
        """
        ...
