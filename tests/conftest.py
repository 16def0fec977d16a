"""Shared test fixtures and path setup."""
import sys
from pathlib import Path

# Allow running without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from unittest.mock import MagicMock

import pytest

from quakefeed.diagnostics import RecordingSink
from quakefeed.extractors.models import EarthquakeRecord


HYPOCENTER = "震源・震度情報"


@pytest.fixture
def sink():
    """In-memory diagnostic sink."""
    return RecordingSink()


@pytest.fixture
def jma_feed():
    """Sample JMA list.json payload with two hypocenter reports."""
    return [
        {
            "ctt": "20240101161500",
            "eid": "20240101161018",
            "ttl": HYPOCENTER,
            "anm": "石川県能登地方",
            "mag": "7.6",
            "maxi": "7",
            "cod": "+36.1+140.7-30000/",
        },
        {
            "ctt": "20240101162000",
            "eid": "20240101161550",
            "ttl": HYPOCENTER,
            "anm": "神奈川県西部",
            "mag": "4.2",
            "maxi": "3",
            "cod": "+35.5+139.8-10000/",
        },
    ]


@pytest.fixture
def mixed_feed():
    """One hypocenter report and one intensity-only quick report."""
    return [
        {"ttl": HYPOCENTER, "cod": "+34.8+139.3-10000/"},
        {"ttl": "震度速報", "cod": ""},
    ]


@pytest.fixture
def sample_quakes():
    """Pre-built records at 30 km and 10 km."""
    return [
        EarthquakeRecord(latitude=36.1, longitude=140.7, depth=30.0),
        EarthquakeRecord(latitude=35.5, longitude=139.8, depth=10.0),
    ]


def make_response(payload=None, status_code=200, json_error=None):
    """Build a mock ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp
