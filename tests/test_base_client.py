"""Tests for BaseClient: single GET, status handling, telemetry."""

from datetime import datetime, timezone
from unittest.mock import patch

import pandas as pd
import pytest
import requests

from quakefeed.extractors.base_client import BaseClient

from conftest import make_response


class StubClient(BaseClient):
    """Minimal concrete client for testing base functionality."""

    source_name = "stub"
    base_url = "https://stub.example.com"

    def extract(self, **kwargs):
        started = datetime.now(timezone.utc)
        data = self._get("/data")
        df = pd.DataFrame(data) if isinstance(data, list) else pd.DataFrame()
        return self._build_result(df, started)


class TestGet:
    """HTTP behaviour tests."""

    def test_joins_base_url(self):
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response({"ok": True})) as mock_get:
            assert client._get("/data") == {"ok": True}
        mock_get.assert_called_once_with("https://stub.example.com/data", timeout=None)

    def test_absolute_url_passthrough(self):
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response([])) as mock_get:
            client._get("https://other.example.com/x.json")
        mock_get.assert_called_once_with("https://other.example.com/x.json", timeout=None)

    def test_no_retry_on_5xx(self):
        """A server error is raised after a single attempt."""
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response(status_code=500)) as mock_get:
            with pytest.raises(requests.HTTPError, match="500"):
                client._get("/data")
        assert mock_get.call_count == 1
        assert client.api_calls == 1
        assert client.errors == 1

    def test_redirect_status_is_failure(self):
        """Anything outside 2xx counts as failure."""
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response(status_code=304)):
            with pytest.raises(requests.HTTPError):
                client._get("/data")

    def test_no_cache(self):
        """Repeated calls always reach the network."""
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response([1])) as mock_get:
            client._get("/data")
            client._get("/data")
        assert mock_get.call_count == 2

    def test_connection_error_propagates(self):
        client = StubClient()
        with patch.object(client._session, "get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(requests.ConnectionError):
                client._get("/data")
        assert client.errors == 1

    def test_bad_json_propagates(self):
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response(json_error=ValueError("no json"))):
            with pytest.raises(ValueError):
                client._get("/data")
        assert client.errors == 1


class TestResultBuilders:

    def test_build_result(self):
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response([{"a": 1}, {"a": 2}])):
            result = client.extract()
        assert result.success
        assert result.records == 2
        assert result.source == "stub"
        assert result.duration_seconds >= 0

    def test_build_error(self):
        client = StubClient()
        result = client._build_error("boom", datetime.now(timezone.utc))
        assert not result.success
        assert result.error == "boom"
        assert result.records == 0


class TestTelemetry:
    """Telemetry tracking tests."""

    def test_telemetry_tracks_calls(self):
        client = StubClient()
        with patch.object(client._session, "get", return_value=make_response([])):
            client._get("/data")
        t = client.get_telemetry()
        assert t["api_calls"] == 1
        assert t["errors"] == 0
        assert t["source"] == "stub"
        assert t["avg_latency"] >= 0.0

    def test_telemetry_reset(self):
        """reset_telemetry should zero all counters."""
        client = StubClient()
        client.api_calls = 10
        client.errors = 2
        client._timings.append(0.5)
        client.reset_telemetry()
        t = client.get_telemetry()
        assert t["api_calls"] == 0
        assert t["errors"] == 0
        assert t["avg_latency"] == 0.0


class TestSession:

    def test_session_reuse(self):
        client = StubClient()
        assert client._session is client._session

    def test_context_manager_closes_session(self):
        client = StubClient()
        with patch.object(client._session, "close") as mock_close:
            with client:
                pass
        mock_close.assert_called_once()
