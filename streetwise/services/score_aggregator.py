"""
Weighted roll-up of category scores into the Streetwise Score.

Weights are percentages and must already sum to 100 (within tolerance).
They are never renormalized here: a bad total almost always means an
upstream scorer dropped or duplicated a category, and quietly rescaling
would hide that.
"""

import logging
import math
from typing import Optional, Sequence

from ..core.config import Settings, settings as default_settings
from ..core.errors import EmptyCategorySet, InvalidConfidence, InvalidWeights
from ..core.utils import clamp, round_half_up
from ..schemas import AggregateScore, CategoryScore, Interpretation

logger = logging.getLogger(__name__)

# Lower bounds, checked top-down; first match wins
INTERPRETATION_LADDER: list[tuple[int, Interpretation]] = [
    (85, Interpretation.EXCELLENT),
    (70, Interpretation.GOOD_VALUE),
    (50, Interpretation.FAIR),
    (30, Interpretation.BELOW_AVERAGE),
]

# (minimum category count, confidence cap) when confidence must be derived
CONFIDENCE_CAPS: list[tuple[int, int]] = [
    (5, 100),
    (3, 80),
    (0, 60),
]

def interpret(score: float) -> Interpretation:
    for threshold, label in INTERPRETATION_LADDER:
        if score >= threshold:
            return label
    return Interpretation.POOR

def confidence_cap(category_count: int) -> int:
    for min_count, cap in CONFIDENCE_CAPS:
        if category_count >= min_count:
            return cap
    return CONFIDENCE_CAPS[-1][1]

class ScoreAggregator:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def validate(self, categories: Sequence[CategoryScore]) -> None:
        if not categories:
            raise EmptyCategorySet()
        total = sum(c.weight for c in categories)
        tolerance = self.settings.WEIGHT_TOLERANCE
        if abs(total - 100) > tolerance:
            raise InvalidWeights(total=total, tolerance=tolerance)

    def weighted_score(self, categories: Sequence[CategoryScore]) -> int:
        raw = sum(c.score * c.weight for c in categories) / 100
        # A total weight of up to 100 + tolerance can push a perfect card past 100
        return int(clamp(round_half_up(raw)))

    def derive_confidence(self, categories: Sequence[CategoryScore]) -> float:
        """
        Weight-averaged data-quality confidence of the categories that report
        one (100 if none do), capped by how many categories were scored at all.
        """
        rated = [c for c in categories if c.data_quality is not None]
        rated_weight = sum(c.weight for c in rated)
        if rated and rated_weight > 0:
            base = sum(c.data_quality.confidence * c.weight for c in rated) / rated_weight
        elif rated:
            base = sum(c.data_quality.confidence for c in rated) / len(rated)
        else:
            base = 100.0
        return min(base, confidence_cap(len(categories)))

    @staticmethod
    def check_confidence(value) -> float:
        """Rejects NaN and non-numbers; infinities are left for clamping."""
        if isinstance(value, bool):
            raise InvalidConfidence(value)
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidConfidence(value) from None
        if math.isnan(value):
            raise InvalidConfidence(value)
        return value

    def aggregate(self, categories: Sequence[CategoryScore],
                  confidence: Optional[float] = None) -> AggregateScore:
        """
        confidence, when given, comes from upstream evidence and is only
        clamped and rounded; otherwise it is derived from the categories.
        """
        self.validate(categories)
        score = self.weighted_score(categories)
        if confidence is None:
            confidence = self.derive_confidence(categories)
        else:
            confidence = self.check_confidence(confidence)
        result = AggregateScore(
            score=score,
            # Clamp before rounding so +/-inf land on the bounds
            confidence=round_half_up(clamp(confidence)),
            interpretation=interpret(score),
        )
        logger.debug(
            "Aggregated %d categories: score=%d confidence=%d (%s)",
            len(categories), result.score, result.confidence, result.interpretation.value,
        )
        return result
