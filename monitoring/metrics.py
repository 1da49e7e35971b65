"""
Core metrics and monitoring decorators for the discovery skill bridge.

This module defines Prometheus metrics and decorators for tracking:
- Directive counts by outcome
- Error rates
- Remote cloud API latency
- Number of endpoints returned per discovery
"""

import time
import functools
import logging
from typing import Optional, Callable
from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

# Directive metrics
DIRECTIVE_COUNT = Counter(
    'skill_directives_total',
    'Total number of skill directives handled',
    ['namespace', 'name', 'outcome']  # outcome: 'success' or 'error'
)

# Error metrics
ERROR_COUNT = Counter(
    'error_total',
    'Total number of errors',
    ['type', 'location']  # type: e.g., 'upstream', 'transport', 'payload'; location: specific component
)

# External API metrics
INTEGRATOR_REQUEST_TIME = Histogram(
    'integrator_request_duration_seconds',
    'Time spent waiting for the remote device cloud API',
    ['endpoint'],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, float("inf")]
)

# Discovery metrics
DISCOVERED_ENDPOINTS = Histogram(
    'discovered_endpoints',
    'Number of endpoints returned per discovery response',
    ['display_category'],
    buckets=[0, 1, 5, 10, 25, 50, 100, float("inf")]
)

def track_latency(metric: Histogram, labels: Optional[Callable] = None) -> Callable:
    """
    A decorator factory that tracks the execution time of a function using a Prometheus Histogram.

    Args:
        metric (Histogram): The Prometheus Histogram to record the timing in
        labels (Callable, optional): Function that receives the first positional argument
            (``self`` for methods) and returns the metric labels dictionary

    Returns:
        Callable: The decorated function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.time() - start_time
                if labels and args:
                    metric.labels(**labels(args[0])).observe(duration)
                else:
                    metric.observe(duration)

                func_name = func.__name__
                logger.debug(
                    f"Function {func_name} execution time: {duration:.2f} seconds",
                    extra={'duration': duration, 'function': func_name}
                )
        return wrapper
    return decorator

def track_errors(error_type: str, location: str) -> Callable:
    """
    A decorator factory that counts and logs exceptions escaping a function.

    Args:
        error_type (str): Type of error (e.g., 'upstream', 'transport')
        location (str): Where the error occurred

    Returns:
        Callable: The decorated function

    Example:
        @track_errors('upstream', 'cloud_client')
        def get_devices(self, token):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                ERROR_COUNT.labels(
                    type=error_type,
                    location=location
                ).inc()

                logger.error(
                    f"Error in {location} ({error_type}): {str(e)}",
                    extra={
                        'error_type': error_type,
                        'location': location,
                        'error': str(e)
                    },
                )
                raise
        return wrapper
    return decorator
