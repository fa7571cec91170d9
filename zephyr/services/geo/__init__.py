from zephyr.services.geo.geo_service import (
    GeoService,
    GeoLookupError,
    GeoConfigurationError,
)

__all__ = ["GeoService", "GeoLookupError", "GeoConfigurationError"]
