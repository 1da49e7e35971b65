"""
Health endpoint for the skill bridge.

This module defines a minimal FastAPI router that exposes a liveness check at the path
"/health". It deliberately does not call the device cloud: the check answers whether
the HTTP process is up, not whether the upstream is healthy.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

from version import __version__

router = APIRouter()


@router.get("/health")
def health() -> Dict[str, str]:
    """
    Return a simple health status payload.

    Returns:
        Dict[str, str]: A JSON‑serializable dictionary with keys "status", "version" and
        "timestamp". The timestamp is generated via datetime.now(timezone.utc).isoformat().
    """
    return {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
