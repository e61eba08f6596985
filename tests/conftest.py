import os
import time

import pytest

from storage_report.app import app


@pytest.fixture(scope="session")
def cli():
    client = app.test_client()
    return client


@pytest.fixture
def utc_timezone():
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "UTC"
    time.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()


def _make_record(path, size, node_id=b"\x01\x02", node_name="alpha", last_changed=None):
    return {
        "node_id": node_id,
        "node_name": node_name,
        "path": path,
        "size": size,
        "last_changed": last_changed,
    }


@pytest.fixture
def make_record():
    return _make_record


@pytest.fixture
def sample_files():
    return [
        _make_record("a/b.txt", 100, last_changed="2024-01-01T10:00:00Z"),
        _make_record("a/c.txt", 300, last_changed="2024-03-01T10:00:00Z"),
        _make_record("d.txt", 50),
    ]


@pytest.fixture
def sample_payload():
    return {
        "files": [
            {"node_id": [1, 2], "node_name": "alpha", "path": "a/b.txt", "size": 100},
            {
                "node_id": [1, 2],
                "node_name": "alpha",
                "path": "a/c.txt",
                "size": 300,
                "last_changed": "2024-03-01T10:00:00Z",
            },
            {"node_id": [1, 2], "path": "d.txt", "size": 50},
            {"node_id": "ff00", "path": "music/song.mp3", "size": 2048},
        ]
    }
