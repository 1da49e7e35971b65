"""
HTTPS client for the remote device cloud (the inventory behind discovery).

This module issues the single GET request a discovery needs: it asks the cloud for all
devices ("stones") visible to an access token, including their location and abilities,
and returns the decoded JSON array. It uses only Python's standard library for the HTTP
call, the same way the other outbound clients in this codebase do, and it always sets an
explicit timeout so a hanging cloud cannot stall the invocation indefinitely.

The error taxonomy is explicit so callers can tell the failure classes apart:
- CloudAPIStatusError: the cloud answered with a status outside 200..299. The message
  encodes the status code and, for 401/403/500, a short hint for the user.
- CloudAPITransportError: the request or the response stream failed at the network level.
- CloudAPITimeoutError: a transport error caused by the timeout expiring.
- MalformedPayloadError: the body was not JSON or not a JSON array.
No retry is attempted for any of them.
"""

from __future__ import annotations

import json
import logging
import socket
from http.client import HTTPException
from typing import Any, Dict, List, Optional
from urllib import error as urlerror
from urllib import request as urlrequest
from urllib.parse import quote, urlencode

from monitoring import INTEGRATOR_REQUEST_TIME, track_errors, track_latency
from shared.utils import mask_token

from .base import ProviderClient

logger = logging.getLogger(__name__)

# Asks the cloud to embed each device's location and its abilities (with properties).
DEVICE_FILTER = {"include": ["location", {"abilities": "properties"}]}

STATUS_GUIDANCE = {
    401: ". Please use the right token.",
    500: ". Please use the right arguments.",
    403: ". Please, check if your token is correct and check your scope permissions",
}


class CloudAPIError(Exception):
    """
    Base exception for remote cloud failures.

    Every failure of a discovery fetch is raised as this type or one of its subclasses,
    so the discovery handler can report it once through the error callback.
    """


class CloudAPIStatusError(CloudAPIError):
    """
    The cloud rejected the request with a non-2xx status.

    Attributes:
        status_code (int): The HTTP status returned by the cloud.
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(status_message(status_code))


class CloudAPITransportError(CloudAPIError):
    """Connection-level failure while sending the request or reading the response."""


class CloudAPITimeoutError(CloudAPITransportError):
    """The request exceeded the configured timeout."""


class MalformedPayloadError(CloudAPIError):
    """The response body (or a record inside it) does not have the expected shape."""


def status_message(status_code: int) -> str:
    """
    Build the user-facing message for a rejected request.

    Args:
        status_code (int): HTTP status returned by the cloud.

    Returns:
        str: "Status code: <code>" followed by guidance for 401, 403 and 500.
    """
    return f"Status code: {status_code}" + STATUS_GUIDANCE.get(status_code, "")


def build_devices_path(base_path: str, token: str) -> str:
    """
    Build the request path for the device listing, including the query string.

    The filter is serialised compactly and both query values are percent-encoded.

    Args:
        base_path (str): Configured API prefix such as "/api"; may be empty.
        token (str): The access token appended as `access_token`.

    Returns:
        str: e.g. "/api/Stones/all?filter=%7B%22include%22...&access_token=abc"
    """
    prefix = "/" + base_path.strip("/") if base_path and base_path.strip("/") else ""
    query = urlencode(
        {
            "filter": json.dumps(DEVICE_FILTER, separators=(",", ":")),
            "access_token": token,
        },
        quote_via=quote,
    )
    return f"{prefix}/Stones/all?{query}"


class CloudProviderClient(ProviderClient):
    """
    Device source backed by the remote cloud's `Stones/all` endpoint.

    Args:
        hostname (str): Cloud host name, without scheme.
        base_path (str): API prefix prepended to `/Stones/all`.
        port (int): HTTPS port, 443 unless configured otherwise.
        timeout_s (float): Socket timeout applied to connect and read.
    """

    def __init__(self, hostname: str, base_path: str = "", port: int = 443, timeout_s: float = 10.0) -> None:
        self.hostname = hostname
        self.base_path = base_path or ""
        self.port = int(port)
        self.timeout_s = float(timeout_s)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "CloudProviderClient":
        """Build a client from the `remote_cloud` section of CONFIG."""
        cloud_cfg = config.get("remote_cloud", {}) or {}
        hostname = cloud_cfg.get("hostname")
        if not isinstance(hostname, str) or not hostname.strip():
            raise ValueError("Missing CONFIG['remote_cloud']['hostname'] for the cloud provider")

        return cls(
            hostname=hostname.strip(),
            base_path=cloud_cfg.get("base_path", ""),
            port=cloud_cfg.get("port", 443),
            timeout_s=cloud_cfg.get("timeout_s", 10.0),
        )

    def devices_url(self, token: str) -> str:
        return f"https://{self.hostname}:{self.port}{build_devices_path(self.base_path, token)}"

    @track_errors("upstream", "cloud_client")
    @track_latency(INTEGRATOR_REQUEST_TIME, labels=lambda self: {"endpoint": "stones_all"})
    def get_devices(self, token: str) -> List[Dict[str, Any]]:
        """
        GET all devices for the token and return the decoded JSON array.

        Raises:
            CloudAPIStatusError: Status outside 200..299.
            CloudAPITimeoutError: The timeout expired.
            CloudAPITransportError: Any other network failure.
            MalformedPayloadError: Body is not valid JSON or not an array.
        """
        url = self.devices_url(token)
        req = urlrequest.Request(url, method="GET")
        req.add_header("accept", "application/json")

        logger.info(
            "Fetching devices from %s (token %s)", self.hostname, mask_token(token)
        )

        body = self._read_body(req)
        return parse_devices_body(body)

    def _read_body(self, req: urlrequest.Request) -> str:
        try:
            with urlrequest.urlopen(req, timeout=self.timeout_s) as resp:
                status = getattr(resp, "status", 200)
                if status < 200 or status > 299:
                    raise CloudAPIStatusError(status)
                return resp.read().decode("utf-8", errors="replace")
        except urlerror.HTTPError as exc:
            # urlopen raises for 4xx/5xx before we see the response object
            logger.warning("Cloud rejected device request with status %s", exc.code)
            exc.close()
            raise CloudAPIStatusError(exc.code) from exc
        except socket.timeout as exc:
            raise CloudAPITimeoutError(f"Request timed out after {self.timeout_s}s") from exc
        except urlerror.URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise CloudAPITimeoutError(f"Request timed out after {self.timeout_s}s") from exc
            raise CloudAPITransportError(f"Network error calling device cloud: {exc.reason}") from exc
        except (HTTPException, OSError) as exc:
            # Failures while streaming the body (reset connection, truncated read)
            raise CloudAPITransportError(f"Network error reading device cloud response: {exc}") from exc


def parse_devices_body(body: str) -> List[Dict[str, Any]]:
    """
    Decode the device listing body.

    Args:
        body (str): Full response text.

    Returns:
        List[Dict[str, Any]]: The decoded array.

    Raises:
        MalformedPayloadError: When the body is not JSON or not an array.
    """
    try:
        devices: Optional[Any] = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(
            f"Invalid JSON from device cloud: {exc}: body={body[:200]}"
        ) from exc

    if not isinstance(devices, list):
        raise MalformedPayloadError(
            f"Expected a JSON array of devices, got {type(devices).__name__}"
        )
    return devices
