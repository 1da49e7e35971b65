"""
shared/utils.py

Shared utility functions used across multiple modules.

This module contains the small helpers used by both the discovery core and the
entry points: device type prettifying, token masking for logs, and rendering of
the assistant's error response event.
"""

import logging
import uuid
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Error types understood by the assistant platform
INVALID_AUTHORIZATION_CREDENTIAL = "INVALID_AUTHORIZATION_CREDENTIAL"
BRIDGE_UNREACHABLE = "BRIDGE_UNREACHABLE"
INVALID_DIRECTIVE = "INVALID_DIRECTIVE"
INTERNAL_ERROR = "INTERNAL_ERROR"

DEVICE_TYPE_NAMES = {
    "PLUG": "Crownstone Plug",
    "BUILTIN": "Crownstone Built-in",
    "BUILTIN_ONE": "Crownstone Built-in One",
    "GUIDESTONE": "Guidestone",
    "CROWNSTONE_USB": "Crownstone USB",
    "HUB": "Crownstone Hub",
}

def prettify_device_type(device_type: Optional[str]) -> str:
    """
    Render a cloud device type tag as a human readable name.

    Args:
        device_type (Optional[str]): Tag such as "PLUG" or "BUILTIN_ONE"

    Returns:
        str: Known tags map to their product name; unknown tags are title-cased
        with underscores replaced by spaces; a missing tag renders as "Crownstone".
    """
    if not device_type:
        return "Crownstone"
    known = DEVICE_TYPE_NAMES.get(device_type.upper())
    if known:
        return known
    return device_type.replace("_", " ").strip().title()

def mask_token(token: Optional[str], visible: int = 4) -> str:
    """
    Mask an access token for logging, keeping only the last few characters.

    Args:
        token (Optional[str]): The bearer token
        visible (int): How many trailing characters to keep

    Returns:
        str: e.g. "****abcd", or "<none>" when no token was given
    """
    if not token:
        return "<none>"
    if len(token) <= visible:
        return "*" * len(token)
    return "*" * 4 + token[-visible:]

def error_type_for(error: BaseException) -> str:
    """
    Classify an error into the assistant's error response type.

    Upstream 401/403 means the linked token is not accepted; transport failures mean
    the cloud could not be reached; a rejected directive is reported as such.
    Everything else is an internal error.
    """
    # Local imports keep shared/ free of import cycles with provider_api and core
    from provider_api.cloud_client import CloudAPIStatusError, CloudAPITransportError
    from core.discovery import InvalidDirectiveError

    if isinstance(error, CloudAPIStatusError) and error.status_code in (401, 403):
        return INVALID_AUTHORIZATION_CREDENTIAL
    if isinstance(error, CloudAPITransportError):
        return BRIDGE_UNREACHABLE
    if isinstance(error, InvalidDirectiveError):
        return INVALID_DIRECTIVE
    return INTERNAL_ERROR

def create_error_response(error: BaseException, request_header: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Create the assistant's ErrorResponse event for a failed directive.

    Args:
        error (BaseException): The error reported through the error callback
        request_header (Optional[Dict[str, Any]]): Header of the inbound directive; its
            correlationToken is echoed when present

    Returns:
        Dict[str, Any]: {"event": {"header": {...}, "payload": {"type": ..., "message": ...}}}
    """
    header = {
        "namespace": "Alexa",
        "name": "ErrorResponse",
        "payloadVersion": "3",
        "messageId": str(uuid.uuid4()),
    }
    if request_header and request_header.get("correlationToken"):
        header["correlationToken"] = request_header["correlationToken"]

    return {
        "event": {
            "header": header,
            "payload": {
                "type": error_type_for(error),
                "message": str(error) or type(error).__name__,
            },
        }
    }
