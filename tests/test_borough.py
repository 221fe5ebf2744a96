"""
Unit tests for borough classification strategies.
"""

import pytest

from streetwise.core.config import Settings
from streetwise.data.base import GeoPoint
from streetwise.models.borough import (
    BoxBoroughClassifier,
    CoarseBoroughClassifier,
    borough_classifier,
)

BOROUGHS = {"Manhattan", "Brooklyn", "Queens", "Bronx", "Staten Island"}


class TestCoarseBoroughClassifier:

    @pytest.mark.parametrize("lat,lon,label", [
        (40.8448, -73.8648, "Bronx"),          # Parkchester
        (40.5795, -74.1502, "Staten Island"),  # Willowbrook
        (40.6782, -73.9442, "Brooklyn"),       # Crown Heights
        (40.7282, -73.7949, "Brooklyn"),       # southern rule wins before Queens
        (40.7680, -73.8700, "Queens"),         # LaGuardia
        (40.7128, -74.0060, "Manhattan"),      # Financial District
    ])
    def test_known_points(self, lat, lon, label):
        assert CoarseBoroughClassifier().classify(GeoPoint(lat, lon)) == label

    def test_rule_order_bronx_before_queens(self):
        # Matches both the Bronx and Queens rules; Bronx is checked first
        assert CoarseBoroughClassifier().classify(GeoPoint(40.85, -73.90)) == "Bronx"

    @pytest.mark.parametrize("lat,lon", [
        (51.5074, -0.1278),     # London
        (-33.8688, 151.2093),   # Sydney
        (90.0, 180.0),
        (-90.0, -180.0),
    ])
    def test_total_for_far_points(self, lat, lon):
        label = CoarseBoroughClassifier().classify(GeoPoint(lat, lon))
        assert label
        assert label in BOROUGHS

    def test_custom_default(self):
        classifier = CoarseBoroughClassifier(default="Unknown")
        # Lower Manhattan matches none of the rules
        assert classifier.classify(GeoPoint(40.70, -74.01)) == "Unknown"


class TestBoxBoroughClassifier:

    @pytest.mark.parametrize("lat,lon,label", [
        (40.7580, -73.9855, "Manhattan"),      # Times Square
        (40.6501, -73.9496, "Brooklyn"),       # Flatbush
        (40.7498, -73.7976, "Queens"),         # Flushing
        (40.8700, -73.8500, "Bronx"),          # Pelham Gardens
        (40.5834, -74.1496, "Staten Island"),
    ])
    def test_known_points(self, lat, lon, label):
        assert BoxBoroughClassifier().classify(GeoPoint(lat, lon)) == label

    def test_outside_every_box_falls_back(self):
        assert BoxBoroughClassifier().classify(GeoPoint(34.05, -118.24)) == "Manhattan"


class TestFactory:

    def test_default_is_coarse(self):
        assert isinstance(borough_classifier(Settings()), CoarseBoroughClassifier)

    def test_boxes(self):
        assert isinstance(borough_classifier(Settings(BOROUGH_CLASSIFIER="boxes")), BoxBoroughClassifier)


class TestGeoPoint:

    @pytest.mark.parametrize("lat,lon", [(float("nan"), 0.0), (0.0, float("inf"))])
    def test_rejects_non_finite(self, lat, lon):
        with pytest.raises(ValueError):
            GeoPoint(lat, lon)
