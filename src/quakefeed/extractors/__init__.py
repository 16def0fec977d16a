from .base_client import BaseClient
from .coordinates import parse_coordinates
from .jma import JMAClient
from .models import EarthquakeRecord, EventRecord
from .result import ExtractionResult

__all__ = [
    "BaseClient",
    "EarthquakeRecord",
    "EventRecord",
    "ExtractionResult",
    "JMAClient",
    "parse_coordinates",
]
