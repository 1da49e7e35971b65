"""
conftest.py – central pytest configuration and test bootstrap ("config test").

Pytest imports this module before it collects any test files, which lets us prepare the
environment so subsequent imports succeed consistently:
1) Extend `sys.path` with the project root directory so absolute-style imports like
   `from core ...` and `from provider_api ...` resolve without an editable install.
2) Define safe environment defaults read at import time by the configuration layer
   (`config/__init__.py`), so no test depends on a developer's `.env` file.

Shared fixtures for directive envelopes and device records live here as well.
"""

import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for direct imports like `core`, `shared`, etc.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Provide required environment defaults for tests
os.environ.setdefault("DISCOVERY_PROVIDER", "cloud")
os.environ.setdefault("REMOTE_CLOUD_HOSTNAME", "cloud.example.test")
os.environ.setdefault("REMOTE_CLOUD_BASE_PATH", "/api")
os.environ.setdefault("LOG_FILE_PATH", "")


def make_discovery_event(token="access-token-from-skill", **header_overrides):
    """Build a typical discovery directive envelope."""
    header = {
        "namespace": "Alexa.Discovery",
        "name": "Discover",
        "payloadVersion": "3",
        "messageId": "123-456-789",
    }
    header.update(header_overrides)
    return {
        "directive": {
            "header": header,
            "payload": {
                "scope": {
                    "type": "BearerToken",
                    "token": token,
                }
            },
        }
    }


def make_device(**overrides):
    """Build a raw device record as the cloud returns it."""
    device = {
        "id": "stone-1",
        "name": "Kitchen Lamp",
        "description": None,
        "address": "C1:3A:00:00:00:01",
        "sphereId": "sphere-1",
        "type": "PLUG",
        "location": None,
        "abilities": [],
    }
    device.update(overrides)
    return device


@pytest.fixture
def discovery_event():
    return make_discovery_event()


@pytest.fixture
def device_factory():
    return make_device


@pytest.fixture
def event_factory():
    return make_discovery_event
