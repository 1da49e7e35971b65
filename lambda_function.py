"""
lambda_function.py: AWS Lambda entry point for the smart home skill.

The assistant platform invokes `lambda_handler(event, context)` with the directive
envelope. The handler returns the response envelope, or the assistant's ErrorResponse
event when the directive could not be answered. The Lambda `context` is not used; the
completion callbacks are bound per invocation by the router.
"""

import logging
from typing import Any, Dict, Optional

from config import CONFIG
from core.skill import SkillRouter
from provider_api import make_provider_client
from shared.utils import create_error_response

logger = logging.getLogger(__name__)

_router: Optional[SkillRouter] = None


def get_router() -> SkillRouter:
    """Build the router on first use and reuse it across warm invocations."""
    global _router
    if _router is None:
        _router = SkillRouter(make_provider_client(CONFIG))
    return _router


def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Answer one directive.

    Args:
        event (Dict[str, Any]): The directive envelope sent by the assistant platform
        context (Any): The Lambda runtime context (unused)

    Returns:
        Dict[str, Any]: The response envelope or an ErrorResponse event
    """
    outcome = get_router().invoke(event)
    if outcome.error is None:
        return outcome.result

    header = None
    if isinstance(event, dict) and isinstance(event.get("directive"), dict):
        header = event["directive"].get("header")
    logger.info("Directive failed: %s", outcome.error)
    return create_error_response(outcome.error, header if isinstance(header, dict) else None)
