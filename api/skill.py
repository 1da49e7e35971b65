""" api/skill.py: HTTP endpoint receiving voice assistant directives.

The assistant platform (or a thin forwarding function in front of it) posts the directive
envelope as JSON. The endpoint routes it through the shared `SkillRouter`, waits for the
handler to complete, and answers with the response envelope. Failures are rendered as the
assistant's ErrorResponse event, with an HTTP status describing the failure class.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from config import CONFIG
from core.discovery import InvalidDirectiveError
from core.skill import SkillRouter
from provider_api import CloudAPIStatusError, CloudAPITransportError, make_provider_client
from shared.utils import create_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

# One router per process; the device source is read-only after construction
skill_router = SkillRouter(make_provider_client(CONFIG))


def http_status_for(error: BaseException) -> int:
    """
    Map a handler error to the HTTP status of the response.

    Returns:
        int: 400 for a rejected directive, 502 when the device cloud rejected the request
        or could not be reached, 500 for everything else.
    """
    if isinstance(error, InvalidDirectiveError):
        return 400
    if isinstance(error, (CloudAPIStatusError, CloudAPITransportError)):
        return 502
    return 500


def _request_header(event: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    directive = event.get("directive") if isinstance(event, dict) else None
    header = directive.get("header") if isinstance(directive, dict) else None
    return header if isinstance(header, dict) else None


@router.post("/alexa")
def handle_directive(event: Dict[str, Any] = Body(...)):
    """
    Answer one assistant directive.

    Declared as a plain function so FastAPI runs it in its threadpool; the device fetch
    is a blocking HTTPS call.

    Args:
        event (Dict[str, Any]): The directive envelope, {"directive": {"header": ..., "payload": ...}}

    Returns:
        JSONResponse: The response envelope (200) or an ErrorResponse event (400/500/502).
    """
    outcome = skill_router.invoke(event)

    if outcome.error is None:
        return JSONResponse(outcome.result)

    status_code = http_status_for(outcome.error)
    logger.info(f"[handle_directive] Responding with error ({status_code}): {outcome.error}")
    return JSONResponse(
        create_error_response(outcome.error, _request_header(event)),
        status_code=status_code,
    )
