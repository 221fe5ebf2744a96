import math
from ..core.errors import InvalidPrice
from ..schemas import PriceAnalysis

def _check_price(field: str, value) -> float:
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise InvalidPrice(field, value) from None
    if not math.isfinite(price) or price <= 0:
        raise InvalidPrice(field, value)
    return price

class PriceGapAnalyzer:
    """
    priceGap = (expected - asking) / asking * 100, kept at full precision.
    Positive means the listing is priced below what comps say it is worth.
    """
    def analyze(self, asking_price: float, expected_price: float) -> PriceAnalysis:
        asking = _check_price("asking_price", asking_price)
        expected = _check_price("expected_price", expected_price)
        return PriceAnalysis(
            asking_price=asking,
            expected_price=expected,
            price_gap=(expected - asking) / asking * 100,
        )

def describe_gap(price_gap: float) -> str:
    if price_gap > 0:
        return "underpriced"
    if price_gap < 0:
        return "overpriced"
    return "fair"

def format_gap(price_gap: float) -> str:
    """Display helper: one decimal, explicit sign for positive gaps (e.g. "+3.2%")."""
    sign = "+" if price_gap > 0 else ""
    return f"{sign}{price_gap:.1f}%"
