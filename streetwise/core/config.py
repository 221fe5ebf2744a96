import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Geocoding provider
    GEO_PROVIDER: str = os.getenv("GEO_PROVIDER", "nominatim")     # nominatim | mock
    GEO_BASE_URL: str = os.getenv("GEO_BASE_URL", "https://nominatim.openstreetmap.org")
    GEO_USER_AGENT: str = os.getenv("GEO_USER_AGENT", "StreetWise/1.0 (Property Analysis Service)")
    GEO_COUNTRY_CODE: str = os.getenv("GEO_COUNTRY_CODE", "US")
    # Strict search box for the metro area (west,south,east,north)
    GEO_VIEWBOX: str = os.getenv("GEO_VIEWBOX", "-74.2591,40.4774,-73.7004,40.9176")
    # Looser box used only to flag implausible results
    GEO_PLAUSIBLE_BOX: str = os.getenv("GEO_PLAUSIBLE_BOX", "-74.3,40.4,-73.6,41.0")
    METRO_SUFFIX: str = os.getenv("METRO_SUFFIX", ", New York, NY, USA")
    METRO_KEYWORDS: str = os.getenv(
        "METRO_KEYWORDS", "new york,nyc,brooklyn,manhattan,queens,bronx,staten island"
    )

    # Scoring
    BOROUGH_CLASSIFIER: str = os.getenv("BOROUGH_CLASSIFIER", "coarse")  # coarse | boxes
    WEIGHT_TOLERANCE: float = float(os.getenv("WEIGHT_TOLERANCE", "0.5"))

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

    @property
    def metro_keywords(self) -> list[str]:
        return [k.strip().lower() for k in self.METRO_KEYWORDS.split(",") if k.strip()]

settings = Settings()
