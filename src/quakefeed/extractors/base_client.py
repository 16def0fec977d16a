"""
Base API client.

All source-specific clients inherit from BaseClient, which provides:
- Session pooling
- A single-shot JSON GET (no retries, no caching, no rate limiting)
- Optional transport timeout, off by default
- Per-request telemetry
- ExtractionResult builders
"""

import logging
import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import pandas as pd
import requests

from .result import ExtractionResult


class BaseClient(ABC):
    """Abstract base class for API clients.

    Subclasses implement ``source_name``, ``base_url`` and ``extract()``
    to pull data from a specific API.  Telemetry is handled automatically.

    Usage::

        class MyClient(BaseClient):
            source_name = "my_api"
            base_url = "https://api.example.com"

            def extract(self, **kwargs):
                started = datetime.now(timezone.utc)
                data = self._get("/endpoint")
                df = pd.DataFrame(data)
                return self._build_result(df, started)
    """

    # --- Abstract interface ---------------------------------------------------

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Short identifier for this data source (e.g. 'jma')."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Root URL for this API (no trailing slash)."""

    @abstractmethod
    def extract(self, **kwargs) -> ExtractionResult:
        """Run the extraction and return an ExtractionResult."""

    # --- Lifecycle ------------------------------------------------------------

    def __init__(self, timeout: Optional[float] = None):
        """Initialize the client.

        Args:
            timeout: Seconds passed through to ``requests``. None (default)
                leaves the request unbounded.
        """
        self._timeout = timeout

        # Session pooling
        self._session = requests.Session()

        # Telemetry counters
        self.api_calls = 0
        self.errors = 0
        self._timings: list = []

        # Logger
        self._log = logging.getLogger(f"extractor.{self.source_name}")

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- HTTP -----------------------------------------------------------------

    def _get(self, path: str) -> Any:
        """Single GET request returning the decoded JSON body.

        Args:
            path: URL path appended to ``base_url``, or an absolute URL.

        Returns:
            Parsed JSON response.

        Raises:
            requests.HTTPError: On any non-2xx status.
            requests.RequestException: On transport failures.
            ValueError: If the body is not valid JSON.
        """
        url = f"{self.base_url}{path}" if path.startswith("/") else path

        self.api_calls += 1
        start = time.monotonic()
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException:
            self.errors += 1
            raise
        finally:
            self._timings.append(time.monotonic() - start)

        self._log.debug(
            "GET %s -> %d in %.3fs", url, resp.status_code, self._timings[-1]
        )

        if not 200 <= resp.status_code < 300:
            self.errors += 1
            raise requests.HTTPError(
                f"HTTP error! status: {resp.status_code}", response=resp
            )

        try:
            return resp.json()
        except ValueError:
            self.errors += 1
            raise

    # --- Result builder -------------------------------------------------------

    def _build_result(
        self,
        data,
        started_at: datetime,
        warnings: Optional[list] = None,
    ) -> ExtractionResult:
        """Build a successful ExtractionResult from a DataFrame."""
        completed = datetime.now(timezone.utc)
        records = len(data) if isinstance(data, pd.DataFrame) else 0
        return ExtractionResult(
            success=True,
            source=self.source_name,
            records=records,
            api_calls=self.api_calls,
            started_at=started_at,
            completed_at=completed,
            duration_seconds=(completed - started_at).total_seconds(),
            warnings=warnings or [],
            data=data,
        )

    def _build_error(
        self, error: str, started_at: datetime
    ) -> ExtractionResult:
        """Build a failed ExtractionResult."""
        completed = datetime.now(timezone.utc)
        return ExtractionResult(
            success=False,
            source=self.source_name,
            records=0,
            api_calls=self.api_calls,
            started_at=started_at,
            completed_at=completed,
            duration_seconds=(completed - started_at).total_seconds(),
            error=error,
        )

    # --- Telemetry ------------------------------------------------------------

    def get_telemetry(self) -> Dict[str, Any]:
        """Return telemetry summary for this client."""
        return {
            "source": self.source_name,
            "api_calls": self.api_calls,
            "errors": self.errors,
            "avg_latency": (
                sum(self._timings) / len(self._timings)
                if self._timings
                else 0.0
            ),
        }

    def reset_telemetry(self) -> None:
        """Reset all telemetry counters."""
        self.api_calls = 0
        self.errors = 0
        self._timings.clear()
