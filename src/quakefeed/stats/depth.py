"""
Depth statistics over extracted earthquakes.
"""

from typing import Any, Dict, Sequence

import pandas as pd

from ..extractors.models import EarthquakeRecord


def average_depth(records: Sequence[EarthquakeRecord]) -> float:
    """Arithmetic mean of ``depth`` in km, or 0.0 for no records.

    Example::

        average_depth([EarthquakeRecord(36.1, 140.7, 30),
                       EarthquakeRecord(35.5, 139.8, 10)])  # 20.0
        average_depth([])  # 0.0
    """
    if not records:
        return 0.0
    total = sum(r.depth for r in records)
    return total / len(records)


def summarize_depths(records: Sequence[EarthquakeRecord]) -> Dict[str, Any]:
    """Count, mean, median, min and max depth.

    Median, min and max are None when there are no records.
    """
    depths = pd.Series([r.depth for r in records], dtype="float64")
    empty = depths.empty
    return {
        "count": len(depths),
        "mean": average_depth(records),
        "median": None if empty else float(depths.median()),
        "min": None if empty else float(depths.min()),
        "max": None if empty else float(depths.max()),
    }
