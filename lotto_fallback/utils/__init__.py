"""
Utility functions for the offline lottery predictor.

This package contains input validation helpers and the error types
shared by the analyzer, the selector and the fallback chain.
"""

from .validation import require_int, unique_numbers, validate_entry
from .exceptions import PredictionError, InsufficientPoolError, StrategyError

__all__ = [
    'require_int',
    'unique_numbers',
    'validate_entry',
    'PredictionError',
    'InsufficientPoolError',
    'StrategyError',
]
