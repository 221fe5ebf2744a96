from typing import Optional

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from .config import Settings, settings as default_settings

# Define metrics (names follow Prometheus conventions)
GEOCODE_REQUESTS = Counter(
    "streetwise_geocode_requests_total", "Geocode lookups by outcome", ["outcome"]
)
GEOCODE_LATENCY = Histogram(
    "streetwise_geocode_duration_seconds", "Geocode provider round-trip time"
)
ANALYSES = Counter(
    "streetwise_analyses_total", "Completed analyses by interpretation bucket", ["interpretation"]
)

def _enabled(settings: Optional[Settings]) -> bool:
    return (settings or default_settings).PROMETHEUS_ENABLED

def record_geocode(outcome: str, elapsed: float | None = None,
                   settings: Optional[Settings] = None) -> None:
    """
    outcome: resolved | not_found | provider_unavailable | timeout | invalid_record
    settings: the calling component's settings; the module default otherwise.
    """
    if not _enabled(settings):
        return
    GEOCODE_REQUESTS.labels(outcome=outcome).inc()
    if elapsed is not None:
        GEOCODE_LATENCY.observe(elapsed)

def record_analysis(interpretation: str, settings: Optional[Settings] = None) -> None:
    if not _enabled(settings):
        return
    ANALYSES.labels(interpretation=interpretation).inc()

def render_metrics() -> tuple[bytes, str]:
    """
    Exposition payload + content type, for whatever server scrapes us.
    """
    return generate_latest(), CONTENT_TYPE_LATEST
