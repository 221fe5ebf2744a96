import logging
from typing import Any, Iterable, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from ..core.config import Settings, settings as default_settings
from ..core.errors import InvalidCategory
from ..core.logging import analysis_context
from ..core.metrics import record_analysis
from ..data.geocode_client import geocode_client
from ..models.base import BoroughClassifier
from ..models.borough import borough_classifier
from ..schemas import CategoryScore, Location, ValuationReport
from .address_normalizer import AddressNormalizer
from .price_gap import PriceGapAnalyzer
from .score_aggregator import ScoreAggregator

logger = logging.getLogger(__name__)

CategoryInput = Union[CategoryScore, Mapping[str, Any]]

class ValuationService:
    """
    Orchestrates one analysis:
      categories → weighted score + confidence + interpretation
      asking/expected price → price gap
      address (optional) → geocode → borough
    Caller-data errors raise before any network call. A failed geocode only
    drops the location block; the report is still produced.
    """
    def __init__(
        self,
        normalizer: Optional[AddressNormalizer] = None,
        classifier: Optional[BoroughClassifier] = None,
        aggregator: Optional[ScoreAggregator] = None,
        pricer: Optional[PriceGapAnalyzer] = None,
        http: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.normalizer = normalizer or AddressNormalizer(
            geocode_client(http=http, settings=self.settings), self.settings
        )
        self.classifier = classifier or borough_classifier(self.settings)
        self.aggregator = aggregator or ScoreAggregator(self.settings)
        self.pricer = pricer or PriceGapAnalyzer()

    async def aclose(self) -> None:
        """Release the provider connection pool, if the provider holds one."""
        http = getattr(self.normalizer.client, "http", None)
        if http is not None:
            await http.aclose()

    @staticmethod
    def _category(raw: CategoryInput) -> CategoryScore:
        if isinstance(raw, CategoryScore):
            return raw
        try:
            return CategoryScore.model_validate(raw)
        except ValidationError as exc:
            name = raw.get("name") if isinstance(raw, Mapping) else None
            raise InvalidCategory(name, exc.errors()) from exc

    async def analyze(
        self,
        categories: Iterable[CategoryInput],
        asking_price: float,
        expected_price: float,
        address: Optional[str] = None,
        listing_url: Optional[str] = None,
        confidence: Optional[float] = None,
        timeout: Optional[float] = None,
        analysis_id: Optional[str] = None,
    ) -> ValuationReport:
        with analysis_context(analysis_id):
            cats = [self._category(c) for c in categories]

            # 1) Pure computations first; bad input fails the whole request
            aggregate = self.aggregator.aggregate(cats, confidence=confidence)
            price = self.pricer.analyze(asking_price, expected_price)

            # 2) Location enrichment (optional, never fatal)
            geo = None
            if address and address.strip():
                geo = await self.normalizer.normalize(address, timeout=timeout)
            elif listing_url:
                geo = await self.normalizer.normalize_listing_url(listing_url, timeout=timeout)

            borough = None
            location = None
            if geo is not None:
                borough = self.classifier.classify(geo.point)
                location = Location(
                    lat=geo.point.lat,
                    lng=geo.point.lon,
                    formatted_address=geo.formatted_address,
                    confidence=geo.confidence,
                    neighborhood=geo.neighborhood,
                    within_metro=geo.in_metro_bounds,
                )
            elif address or listing_url:
                logger.info("Proceeding without location data")

            report = ValuationReport(
                score=aggregate.score,
                confidence=aggregate.confidence,
                interpretation=aggregate.interpretation,
                price_analysis=price,
                borough=borough,
                location=location,
            )
            record_analysis(report.interpretation.value, settings=self.settings)
            logger.info(
                "Analysis complete: score=%d confidence=%d interpretation=%s gap=%.1f%% borough=%s",
                report.score, report.confidence, report.interpretation.value,
                price.price_gap, borough,
            )
            return report
