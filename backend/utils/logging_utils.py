"""
Logging Utilities for Consistent Structured Logging

Provides helpers for structured logging with context and timing.
"""

import time
import logging
from typing import Dict, Any, Optional, Callable, TypeVar
from contextlib import contextmanager
from functools import wraps

logger = logging.getLogger(__name__)

T = TypeVar('T')


@contextmanager
def log_operation(operation_name: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """
    Context manager for logging operation start, end, and duration with context.

    Usage:
        with log_operation("cooling_load", {"city": "Mumbai", "tier": "low"}):
            # Do operation
            pass
    """
    logger = logger or logging.getLogger(__name__)
    start_time = time.perf_counter()

    logger.info(f"Starting {operation_name}", extra={
        'operation': operation_name,
        'context': context,
        'status': 'started'
    })

    try:
        yield
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"Completed {operation_name} in {duration_ms:.2f}ms", extra={
            'operation': operation_name,
            'context': context,
            'status': 'completed',
            'duration_ms': duration_ms
        })
    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"Failed {operation_name} after {duration_ms:.2f}ms: {str(e)}", extra={
            'operation': operation_name,
            'context': context,
            'status': 'failed',
            'duration_ms': duration_ms,
            'error_type': type(e).__name__,
            'error_message': str(e)
        })
        raise


def timed_operation(operation_name: Optional[str] = None):
    """
    Decorator to time function execution and log results.

    Usage:
        @timed_operation("size_room")
        def main():
            pass
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            name = operation_name or func.__name__
            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.info(f"[TIMING] {name} completed in {duration_ms:.2f}ms")
                return result
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(f"[TIMING] {name} failed after {duration_ms:.2f}ms: {str(e)}")
                raise

        return wrapper
    return decorator
