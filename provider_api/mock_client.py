"""
Deterministic mock device source for local runs, demos, and tests.

This module provides a reference implementation of the provider-agnostic interface so the
skill can be exercised end-to-end without a cloud account, an access token, or network
access. The records mirror what the real cloud returns for `Stones/all` with location and
abilities included: one dimmable built-in placed in a room and one plug without a room.

Usage:
- Select it with `provider: "mock"` in config.json or `DISCOVERY_PROVIDER=mock` in the
  environment (env: environment variables).
"""

import copy
from typing import Any, Dict, List, Optional

from .base import ProviderClient
from .cloud_client import CloudAPIStatusError


MOCK_DEVICES: List[Dict[str, Any]] = [
    {
        "id": "stone-1",
        "name": "Living Room Ceiling",
        "description": "Dimmer behind the wall switch",
        "address": "C1:3A:00:00:00:01",
        "sphereId": "sphere-1",
        "type": "BUILTIN_ONE",
        "location": {"name": "Living Room"},
        "abilities": [
            {"type": "dimming", "enabled": True},
            {"type": "switchcraft", "enabled": False},
        ],
    },
    {
        "id": "stone-2",
        "name": "Coffee Machine",
        "address": "C1:3A:00:00:00:02",
        "sphereId": "sphere-1",
        "type": "PLUG",
        "location": None,
        "abilities": [
            {"type": "dimming", "enabled": False},
        ],
    },
]


class MockProviderClient(ProviderClient):
    """
    In-memory implementation of `ProviderClient` with deterministic output.

    The token is accepted but not checked, except that an empty token is refused the
    way the cloud refuses it, so the error path can be demonstrated too.

    Args:
        devices (Optional[List[Dict[str, Any]]]): Records to serve instead of MOCK_DEVICES.
    """

    def __init__(self, devices: Optional[List[Dict[str, Any]]] = None) -> None:
        self._devices = devices if devices is not None else MOCK_DEVICES

    def get_devices(self, token: str) -> List[Dict[str, Any]]:
        """
        Return a copy of the configured records.

        Raises:
            CloudAPIStatusError: With status 401 when the token is empty.
        """
        if not token:
            raise CloudAPIStatusError(401)
        return copy.deepcopy(self._devices)
