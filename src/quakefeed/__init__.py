"""JMA earthquake feed extraction and depth statistics."""

from .diagnostics import DiagnosticSink, LoggingSink, RecordingSink
from .extractors import (
    EarthquakeRecord,
    ExtractionResult,
    JMAClient,
    parse_coordinates,
)
from .stats import average_depth, summarize_depths

__all__ = [
    "DiagnosticSink",
    "EarthquakeRecord",
    "ExtractionResult",
    "JMAClient",
    "LoggingSink",
    "RecordingSink",
    "average_depth",
    "parse_coordinates",
    "summarize_depths",
]
