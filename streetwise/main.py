from typing import Optional

import httpx

# Core modules
from .core.config import Settings, settings as default_settings
from .core.logging import configure_logging

# Engine
from .data.geocode_client import build_http_client, geocode_client
from .models.borough import borough_classifier
from .services.address_normalizer import AddressNormalizer
from .services.valuation_service import ValuationService

def create_service(settings: Optional[Settings] = None,
                   http: Optional[httpx.AsyncClient] = None) -> ValuationService:
    """
    Service factory so tests and host applications wire the engine the same way.
    Builds the single shared provider connection unless one is passed in.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)  # JSON logs + analysis-id filter

    if http is None and settings.GEO_PROVIDER != "mock":
        http = build_http_client(settings)

    normalizer = AddressNormalizer(geocode_client(http=http, settings=settings), settings)
    return ValuationService(
        normalizer=normalizer,
        classifier=borough_classifier(settings),
        settings=settings,
    )
