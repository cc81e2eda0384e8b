"""
Input error classifications for values supplied by callers.

Raised when text coming from a shell or script cannot be resolved into one
of the toolkit's typed values.
"""

from typing import Optional, Dict, Any


class InputError(Exception):
    """Base class for caller-supplied values that cannot be resolved."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidTransactionTypeError(InputError):
    """Transaction type is neither BUY nor SELL."""

    def __init__(self, message: str, value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value


class InvalidTimestampError(InputError):
    """Trade timestamp carries no timezone."""

    def __init__(self, message: str, timestamp: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
