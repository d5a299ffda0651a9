from .service import GeocodingClient
from .views import GeoCodingData

__all__ = [
    "GeocodingClient",
    "GeoCodingData",
]
