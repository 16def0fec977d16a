"""
Feed record shapes.

``EventRecord`` describes the raw JMA list entry as received; only the
two consumed keys are declared.  ``EarthquakeRecord`` is the typed output
of the extractor.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple, TypedDict

CoordinateTriple = Tuple[float, float, float]

# Scale from the feed's encoded depth (negative metres) to kilometres below
# the reference point.
DEPTH_SCALE = -0.001


class EventRecord(TypedDict):
    """One entry of the JMA ``list.json`` array (extra keys ignored)."""

    ttl: str
    cod: str


@dataclass(frozen=True)
class EarthquakeRecord:
    """A located earthquake.

    Attributes:
        latitude: Degrees north.
        longitude: Degrees east.
        depth: Kilometres below the reference point.
    """

    latitude: float
    longitude: float
    depth: float

    @classmethod
    def from_triple(cls, triple: CoordinateTriple) -> "EarthquakeRecord":
        lat, lon, raw_depth = triple
        return cls(latitude=lat, longitude=lon, depth=DEPTH_SCALE * raw_depth)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
