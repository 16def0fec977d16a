"""
JMA coordinate string parser.

The feed encodes a hypocenter as a compact ``cod`` string such as
``+36.1+140.7-30000/``: signed latitude with two integer digits, signed
longitude with three, then the depth in (negative) metres up to a slash.
"""

import logging
import re
from typing import Any, Optional

from ..diagnostics import DiagnosticSink, LoggingSink
from .models import CoordinateTriple

INVALID_FORMAT = "Invalid coordinate string format"
CONVERSION_FAILED = "Failed to parse coordinates"

# Searched rather than anchored; the depth group is greedy up to the last "/".
COORDINATE_PATTERN = re.compile(r"([+-]\d{2}\.\d+)([+-]\d{3}\.\d+)(.*)/")

_default_sink = LoggingSink(logging.getLogger("extractor.coordinates"))


def parse_coordinates(
    coord_string: Any,
    sink: Optional[DiagnosticSink] = None,
) -> Optional[CoordinateTriple]:
    """Parse a coordinate string into ``(latitude, longitude, raw_depth)``.

    No unit conversion happens here; ``raw_depth`` is returned exactly as
    encoded in the feed.

    Args:
        coord_string: The ``cod`` value of a feed record.
        sink: Where to report failures. Defaults to the
            ``extractor.coordinates`` logger.

    Returns:
        The parsed triple, or None if the string does not match the
        expected format or a captured group is not numeric.

    Example::

        parse_coordinates("+36.1+140.7-30000/")  # (36.1, 140.7, -30000.0)
        parse_coordinates("invalid")             # None
    """
    sink = sink or _default_sink

    match = None
    if isinstance(coord_string, str):
        match = COORDINATE_PATTERN.search(coord_string)
    if match is None:
        sink.report(INVALID_FORMAT, coord_string)
        return None

    try:
        lat = float(match.group(1))
        lon = float(match.group(2))
        depth = float(match.group(3))
    except ValueError as exc:
        sink.report(CONVERSION_FAILED, exc)
        return None

    return lat, lon, depth
