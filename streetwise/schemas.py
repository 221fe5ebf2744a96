from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class Contract(BaseModel):
    # camelCase on the wire, snake_case in Python; immutable once built
    model_config = ConfigDict(populate_by_name=True, frozen=True)

class Interpretation(str, Enum):
    EXCELLENT = "Excellent"
    GOOD_VALUE = "Good Value"
    FAIR = "Fair"
    BELOW_AVERAGE = "Below Average"
    POOR = "Poor"

class DataQuality(Contract):
    completeness: float = Field(default=100, ge=0, le=100)
    confidence: float = Field(ge=0, le=100)
    sources: list[str] = Field(default_factory=list)

class CategoryScore(Contract):
    """One independently scored dimension (market, location, building, unit, bonuses)."""
    name: str
    score: float = Field(ge=0, le=100)
    weight: float = Field(ge=0, le=100)
    positive_factors: list[str] = Field(default_factory=list, alias="positiveFactors")
    negative_factors: list[str] = Field(default_factory=list, alias="negativeFactors")
    description: str | None = None
    data_quality: DataQuality | None = Field(default=None, alias="dataQuality")

class AggregateScore(Contract):
    score: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    interpretation: Interpretation

class PriceAnalysis(Contract):
    asking_price: float = Field(gt=0, alias="askingPrice")
    expected_price: float = Field(gt=0, alias="expectedPrice")
    # Percent, unrounded; positive = listed below expected value
    price_gap: float = Field(alias="priceGap")

class Location(Contract):
    lat: float
    lng: float
    formatted_address: str = Field(alias="formattedAddress")
    confidence: float = Field(ge=0, le=100)
    neighborhood: str | None = None
    within_metro: bool = Field(alias="withinMetro")

class ValuationReport(Contract):
    score: int = Field(ge=0, le=100)
    confidence: int = Field(ge=0, le=100)
    interpretation: Interpretation
    price_analysis: PriceAnalysis = Field(alias="priceAnalysis")
    borough: str | None = None
    location: Location | None = None

    def to_dict(self) -> dict:
        """JSON-ready dict using the public (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)
