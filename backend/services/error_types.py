"""
Custom Error Types for the Cooling Load Calculator

Separates critical errors that stop a calculation from non-critical
conditions that are logged while the calculation completes.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class HVACCalculationError(Exception):
    """Base exception for all HVAC calculation errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CriticalError(HVACCalculationError):
    """
    Critical errors that stop the calculation. No partial result is returned.
    """
    pass


class NonCriticalError(HVACCalculationError):
    """
    Non-critical errors that are logged but don't stop the calculation.
    """
    pass


class DataQualityError(NonCriticalError):
    """
    Questionable input that is tolerated.

    Examples:
    - Appliance name not in the catalog (contributes no load)
    """
    pass


class ValidationError(CriticalError):
    """
    Input validation errors, raised only while normalizing calculator input.

    Examples:
    - Missing or non-positive room dimension
    - City not in the reference table
    - High tier without windows, walls or appliances
    """
    pass


def log_error_with_context(error: HVACCalculationError, context: Dict[str, Any]):
    """
    Log error with additional context information.

    Args:
        error: Error to log
        context: Additional context (city, tier, stage, etc.)
    """
    log_data = {
        'error_type': type(error).__name__,
        'error_message': error.message,
        'details': error.details,
        'context': context
    }

    if isinstance(error, CriticalError):
        logger.error(f"CRITICAL ERROR: {error.message}", extra=log_data)
    else:
        logger.warning(f"Non-critical error: {error.message}", extra=log_data)
