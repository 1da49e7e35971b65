"""
provider_api package: device sources for the discovery skill.

This package contains the abstraction and the concrete implementations the discovery
handler uses to obtain the raw device records of a user. The rest of the codebase speaks
to a small contract (`ProviderClient.get_devices`) while transport details, status-code
interpretation and error classification stay behind that boundary.

Included modules:
- base: the abstract interface every device source implements.
- cloud_client: the HTTPS client for the remote cloud, plus its error taxonomy.
- mock_client: a deterministic in-memory source for local runs and demos.
- factory: selects a source from configuration.
"""

from .base import ProviderClient
from .cloud_client import (
    CloudAPIError,
    CloudAPIStatusError,
    CloudAPITimeoutError,
    CloudAPITransportError,
    CloudProviderClient,
    MalformedPayloadError,
)
from .factory import make_provider_client
from .mock_client import MockProviderClient

__all__ = [
    "ProviderClient",
    "CloudProviderClient",
    "MockProviderClient",
    "make_provider_client",
    "CloudAPIError",
    "CloudAPIStatusError",
    "CloudAPITransportError",
    "CloudAPITimeoutError",
    "MalformedPayloadError",
]
