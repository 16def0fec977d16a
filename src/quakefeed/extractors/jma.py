"""
JMA earthquake list client.

Fetches the Japan Meteorological Agency bulletin list
(``bosai/quake/data/list.json``), keeps hypocenter/seismic-intensity
reports, and decodes their compact coordinate strings.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from ..diagnostics import DiagnosticSink, LoggingSink
from .base_client import BaseClient
from .coordinates import parse_coordinates
from .models import EarthquakeRecord, EventRecord
from .result import ExtractionResult

FETCH_FAILED = "Failed to fetch or parse earthquake data"


class JMAClient(BaseClient):
    """Client for the JMA earthquake information feed.

    Public operations are total: failures are reported to the client's
    diagnostic sink and degrade to an empty list (``fetch``) or an error
    ``ExtractionResult`` (``extract``).  Nothing is raised to the caller.
    Both reset telemetry on entry, so ``get_telemetry()`` describes the
    most recent call.

    Usage::

        client = JMAClient()
        quakes = client.fetch(max_depth_km=10)
        result = client.extract()
        print(result.data.head())
    """

    source_name = "jma"
    base_url = "https://www.jma.go.jp/bosai/quake"

    FEED_PATH = "/data/list.json"
    # Record-kind title for hypocenter and seismic intensity information.
    HYPOCENTER_TITLE = "震源・震度情報"

    COLUMNS = ["latitude", "longitude", "depth"]

    def __init__(
        self,
        sink: Optional[DiagnosticSink] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            sink: Receiver for failure diagnostics. Defaults to the
                ``extractor.jma`` logger.
            timeout: Optional request timeout in seconds.
        """
        super().__init__(timeout=timeout)
        self.sink = sink or LoggingSink(self._log)

    @property
    def feed_url(self) -> str:
        return f"{self.base_url}{self.FEED_PATH}"

    def fetch(self, max_depth_km: Optional[float] = None) -> List[EarthquakeRecord]:
        """Fetch located earthquakes from the feed.

        Args:
            max_depth_km: Keep only events at or above this depth (km).
                None keeps everything.

        Returns:
            EarthquakeRecords in feed order; an empty list if the request
            or decoding failed.
        """
        self.reset_telemetry()

        try:
            quakes, _ = self._collect(max_depth_km)
        except Exception as exc:
            self.sink.report(FETCH_FAILED, exc)
            return []
        return quakes

    def extract(
        self,
        max_depth_km: Optional[float] = None,
        **kwargs,
    ) -> ExtractionResult:
        """Fetch earthquakes into a DataFrame-backed ExtractionResult.

        Args:
            max_depth_km: Same as for ``fetch``.

        Returns:
            ExtractionResult with ``latitude``, ``longitude`` and ``depth``
            columns, or an error result if the request failed.
        """
        started = datetime.now(timezone.utc)
        self.reset_telemetry()

        try:
            quakes, dropped = self._collect(max_depth_km)
        except Exception as exc:
            self.sink.report(FETCH_FAILED, exc)
            return self._build_error(str(exc), started)

        warnings = []
        if dropped:
            warnings.append(
                f"{dropped} hypocenter record(s) dropped: unparseable coordinates"
            )
        return self._build_result(self._to_dataframe(quakes), started, warnings)

    # --- Internal helpers -----------------------------------------------------

    def _collect(
        self, max_depth_km: Optional[float]
    ) -> Tuple[List[EarthquakeRecord], int]:
        """Run the pipeline, raising on transport or decoding errors.

        Returns:
            The surviving records and the number of hypocenter records
            whose coordinates could not be parsed.
        """
        events = self._get(self.FEED_PATH)
        hypocenters = self._hypocenters(events)

        quakes: List[EarthquakeRecord] = []
        dropped = 0
        for event in hypocenters:
            triple = parse_coordinates(event.get("cod"), sink=self.sink)
            if triple is None:
                dropped += 1
                continue
            quakes.append(EarthquakeRecord.from_triple(triple))

        if max_depth_km is not None:
            quakes = [q for q in quakes if q.depth <= max_depth_km]

        self._log.debug(
            "%d events, %d hypocenter reports, %d kept",
            len(events), len(hypocenters), len(quakes),
        )
        return quakes, dropped

    def _hypocenters(self, events: Sequence[EventRecord]) -> List[EventRecord]:
        """Keep only hypocenter/seismic-intensity reports.

        Entries that are not objects are ignored like any other record kind.
        """
        if not isinstance(events, list):
            raise ValueError(
                f"Expected a JSON array, got {type(events).__name__}"
            )
        return [
            e for e in events
            if isinstance(e, dict) and e.get("ttl") == self.HYPOCENTER_TITLE
        ]

    def _to_dataframe(self, quakes: List[EarthquakeRecord]) -> pd.DataFrame:
        """Flatten records into a DataFrame, preserving feed order."""
        if not quakes:
            return pd.DataFrame(columns=self.COLUMNS)
        return pd.DataFrame([q.to_dict() for q in quakes], columns=self.COLUMNS)
