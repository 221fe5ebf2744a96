"""
Unit tests for the price gap analyzer.
"""

import math

import pytest

from streetwise.core.errors import InvalidPrice
from streetwise.services.price_gap import PriceGapAnalyzer, describe_gap, format_gap


@pytest.fixture
def analyzer() -> PriceGapAnalyzer:
    return PriceGapAnalyzer()


class TestAnalyze:

    def test_overpriced_by_five_percent(self, analyzer):
        result = analyzer.analyze(1_000_000, 950_000)
        assert result.price_gap == pytest.approx(-5.0)

    def test_product_example(self, analyzer):
        result = analyzer.analyze(1_250_000, 1_180_000)
        assert result.price_gap == pytest.approx(-5.6, abs=0.05)

    def test_underpriced_is_positive(self, analyzer):
        result = analyzer.analyze(1_185_000, 1_250_000)
        assert result.price_gap > 0
        assert describe_gap(result.price_gap) == "underpriced"

    def test_gap_not_rounded(self, analyzer):
        result = analyzer.analyze(300_000, 400_000)
        assert result.price_gap == pytest.approx(100 / 3)
        assert result.price_gap != 33.3

    def test_equal_prices(self, analyzer):
        result = analyzer.analyze(800_000, 800_000)
        assert result.price_gap == 0
        assert describe_gap(result.price_gap) == "fair"

    def test_keeps_inputs(self, analyzer):
        result = analyzer.analyze(1_000_000, 950_000)
        assert result.asking_price == 1_000_000
        assert result.expected_price == 950_000

    def test_serializes_with_public_names(self, analyzer):
        payload = analyzer.analyze(1_000_000, 950_000).model_dump(by_alias=True)
        assert set(payload) == {"askingPrice", "expectedPrice", "priceGap"}


class TestInvalidPrice:

    @pytest.mark.parametrize("asking,expected", [
        (0, 950_000),
        (-1, 950_000),
        (1_000_000, 0),
        (1_000_000, -5),
        (math.nan, 950_000),
        (1_000_000, math.inf),
        (None, 950_000),
        ("a lot", 950_000),
    ])
    def test_rejected(self, analyzer, asking, expected):
        with pytest.raises(InvalidPrice):
            analyzer.analyze(asking, expected)

    def test_reports_offending_field(self, analyzer):
        with pytest.raises(InvalidPrice) as exc_info:
            analyzer.analyze(1_000_000, -5)
        assert exc_info.value.field == "expected_price"
        assert exc_info.value.value == -5


class TestFormatting:

    def test_positive_gets_sign(self):
        assert format_gap(5.48) == "+5.5%"

    def test_negative(self):
        assert format_gap(-5.6) == "-5.6%"

    def test_zero_has_no_sign(self):
        assert format_gap(0.0) == "0.0%"

    def test_overpriced(self):
        assert describe_gap(-0.1) == "overpriced"
