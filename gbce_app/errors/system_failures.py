"""
System failure error classifications for unrecoverable errors.

These exceptions represent setup problems that must be fixed before the
toolkit can be used at all.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or []
        self.context = context or {}
        self.recoverable = False
