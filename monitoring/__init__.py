"""
Monitoring package initializer.

This package exposes Prometheus metrics and helper decorators for tracking directive
handling and remote cloud latency.
"""

from .metrics import (
    DIRECTIVE_COUNT,
    ERROR_COUNT,
    INTEGRATOR_REQUEST_TIME,
    DISCOVERED_ENDPOINTS,
    track_latency,
    track_errors,
)

__all__ = [
    'DIRECTIVE_COUNT',
    'ERROR_COUNT',
    'INTEGRATOR_REQUEST_TIME',
    'DISCOVERED_ENDPOINTS',
    'track_latency',
    'track_errors',
]
