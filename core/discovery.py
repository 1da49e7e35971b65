"""
core/discovery.py

Discovery handler: answer an `Alexa.Discovery / Discover` directive.

Flow for one invocation:
1. Read the access token from `directive.payload.scope.token`
2. Fetch the raw device records from the configured device source
3. Validate every record and translate it into an endpoint descriptor
4. Wrap the endpoints in the response envelope (copied header, name "Discover.Response")
5. Report through the completion context, exactly once

There is no partial success: one bad record rejects the whole discovery.
"""

import copy
import json
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from config.logging_config import get_logger
from monitoring import DISCOVERED_ENDPOINTS, ERROR_COUNT
from provider_api import CloudAPIError, CloudAPITransportError, MalformedPayloadError, ProviderClient
from shared.models import DeviceRecord, Endpoint, EndpointKind
from shared.utils import mask_token

from .capabilities import DISCOVER_DIRECTIVE, DISCOVER_RESPONSE, DISCOVERY_NAMESPACE
from .context import CompletionContext
from .translator import build_endpoint

logger = get_logger(__name__)


class InvalidDirectiveError(Exception):
    """The inbound directive is missing a required field or is not supported."""


def directive_header(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return the inbound directive header.

    Raises:
        InvalidDirectiveError: When the event has no `directive.header` object.
    """
    try:
        header = event["directive"]["header"]
    except (KeyError, TypeError) as exc:
        raise InvalidDirectiveError("Directive header is missing") from exc
    if not isinstance(header, dict):
        raise InvalidDirectiveError("Directive header is not an object")
    return header


def extract_token(event: Dict[str, Any]) -> str:
    """
    Return the access token at `directive.payload.scope.token`.

    Raises:
        InvalidDirectiveError: When the token is absent or empty.
    """
    try:
        token = event["directive"]["payload"]["scope"]["token"]
    except (KeyError, TypeError) as exc:
        raise InvalidDirectiveError("Directive does not carry payload.scope.token") from exc
    if not isinstance(token, str) or not token:
        raise InvalidDirectiveError("Directive access token is empty")
    return token


def validate_records(raw_devices: Iterable[Any]) -> List[DeviceRecord]:
    """
    Validate the raw records returned by the device source.

    Raises:
        MalformedPayloadError: On the first record that does not validate.
    """
    records = []
    for index, raw in enumerate(raw_devices):
        try:
            records.append(DeviceRecord.model_validate(raw))
        except ValidationError as exc:
            raise MalformedPayloadError(
                f"Device record {index} is malformed: {exc.error_count()} validation error(s)"
            ) from exc
    return records


def build_discovery_response(header: Dict[str, Any], endpoints: List[Endpoint]) -> Dict[str, Any]:
    """
    Assemble the discovery response envelope.

    The inbound header is copied, never modified; only `name` differs in the copy.
    """
    response_header = copy.deepcopy(header)
    response_header["name"] = DISCOVER_RESPONSE

    return {
        "event": {
            "header": response_header,
            "payload": {
                "endpoints": [endpoint.to_dict() for endpoint in endpoints]
            },
        }
    }


class DiscoveryHandler:
    """
    Handles discovery directives using a device source.

    Args:
        client (ProviderClient): Where the device records come from.
    """

    namespace = DISCOVERY_NAMESPACE
    name = DISCOVER_DIRECTIVE

    def __init__(self, client: ProviderClient):
        self.client = client

    def discover(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run the discovery and return the response envelope.

        Raises:
            InvalidDirectiveError: Header or token missing.
            CloudAPIError: Any fetch or payload failure.
        """
        header = directive_header(event)
        token = extract_token(event)

        log = get_logger(
            __name__,
            message_id=header.get("messageId", "no_id"),
            directive=f"{self.namespace}.{self.name}",
        )
        log.info("Handling discovery for token %s", mask_token(token))

        raw_devices = self.client.get_devices(token)
        records = validate_records(raw_devices)
        endpoints = [build_endpoint(record) for record in records]

        for kind in EndpointKind:
            DISCOVERED_ENDPOINTS.labels(display_category=kind.display_category).observe(
                sum(1 for endpoint in endpoints if endpoint.kind is kind)
            )

        result = build_discovery_response(header, endpoints)
        log.info("Discovered %d endpoints", len(endpoints))
        log.debug("Discovery response: %s", json.dumps(result))
        return result

    def handle(self, event: Dict[str, Any], context: CompletionContext) -> None:
        """
        Run the discovery and report the outcome through `context`.

        Every failure, expected or not, goes to the error callback; the success
        callback receives the envelope. Exactly one of them fires.
        """
        try:
            result = self.discover(event)
        except (InvalidDirectiveError, CloudAPIError) as e:
            logger.error("Discovery failed: %s", e)
            ERROR_COUNT.labels(type=_error_kind(e), location="discovery").inc()
            context.fail(e)
            return
        except Exception as e:
            logger.error("Unexpected error during discovery", exc_info=True)
            ERROR_COUNT.labels(type="unexpected", location="discovery").inc()
            context.fail(e)
            return

        context.succeed(result)


def _error_kind(error: BaseException) -> str:
    if isinstance(error, InvalidDirectiveError):
        return "directive"
    if isinstance(error, MalformedPayloadError):
        return "payload"
    if isinstance(error, CloudAPITransportError):
        return "transport"
    return "upstream"
