"""
Provider-agnostic client interface for the device inventory behind the skill.

This module defines the abstract contract that any device source must fulfill in order
to feed the discovery handler. Implementations are responsible for authentication,
HTTP transport and status handling; they return the raw device records exactly as the
cloud describes them, and the discovery core takes care of validating and translating
them into endpoint descriptors.

Key concepts and abbreviations:
- API: Application Programming Interface, here the small surface the discovery core
  depends on.
- ABC: Abstract Base Class, a Python mechanism for defining interfaces via abstract
  methods that subclasses must implement.

Two implementations ship with the repository: `provider_api.cloud_client` talks to the
remote cloud over HTTPS, and `provider_api.mock_client` serves a fixed inventory so the
skill can be exercised end-to-end without credentials or network access.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ProviderClient(ABC):
    """
    Abstract client defining the device listing operation used by discovery.

    Failures are reported by raising: implementations raise the errors defined in
    `provider_api.cloud_client` (`CloudAPIError` and its subclasses) so the discovery
    handler can route them to the error callback of the invocation.
    """

    @abstractmethod
    def get_devices(self, token: str) -> List[Dict[str, Any]]:
        """
        Retrieve every device the token's owner has access to.

        Each record is expected to carry at least:
        - id (str), name (str), address (str), sphereId (str), type (str)
        - description (str, optional)
        - location ({"name": str}, optional)
        - abilities (List[{"type": str, "enabled": bool}])

        Args:
            token (str): The access token taken from the directive's scope.

        Returns:
            List[Dict[str, Any]]: Raw device records in the order the source returned them.

        Raises:
            CloudAPIError: On any upstream, transport or payload failure.
        """
        raise NotImplementedError
