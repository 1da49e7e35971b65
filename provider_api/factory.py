"""
Provider factory for the device source behind discovery (cloud/mock switch).

`make_provider_client(config)` reads `config["provider"]` in {"cloud", "mock"} and builds
the matching `ProviderClient`. Unknown values raise a `ValueError` with a clear message
to aid debugging and configuration hygiene.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .base import ProviderClient
from .cloud_client import CloudProviderClient
from .mock_client import MockProviderClient

logger = logging.getLogger(__name__)


def make_provider_client(config: Dict[str, Any]) -> ProviderClient:
    """
    Build the device source according to the configured provider.

    Args:
        config (Dict[str, Any]): The global CONFIG mapping (not just the remote_cloud section).

    Returns:
        ProviderClient: A cloud client for "cloud", the in-memory client for "mock".

    Raises:
        ValueError: If the provider value is unsupported or the cloud hostname is missing.
    """
    provider = str(config.get("provider", "cloud")).strip().lower()
    logger.info("Provider selection (devices): %s", provider)

    if provider == "cloud":
        return CloudProviderClient.from_config(config)
    if provider == "mock":
        return MockProviderClient()

    raise ValueError(f"Unsupported discovery provider: {provider}")
