"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import CalculationParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_DECIMAL_PLACES = 10


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_calculation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate calculation parameters."""
        errors = []

        # Validate decimal_places
        if "decimal_places" in params:
            value = params["decimal_places"]
            if (not isinstance(value, int) or isinstance(value, bool)
                    or value < 0 or value > MAX_DECIMAL_PLACES):
                errors.append(ValidationError(
                    field="decimal_places",
                    message=f"Must be an integer between 0 and {MAX_DECIMAL_PLACES}",
                    value=value
                ))

        # Validate vwsp_window_minutes
        if "vwsp_window_minutes" in params:
            value = params["vwsp_window_minutes"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="vwsp_window_minutes",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_known_fields(section: str, params: dict[str, Any], params_type: type) -> list[ValidationError]:
        """Reject keys that the typed parameter section does not declare."""
        known = {f.name for f in fields(params_type)}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown setting", value=value)
            for key, value in params.items()
            if key not in known
        ]

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration dictionary."""
        errors = []
        errors.extend(cls.validate_known_fields("calculation", config.get("calculation", {}), CalculationParams))
        errors.extend(cls.validate_known_fields("logging", config.get("logging", {}), LoggingParams))
        errors.extend(cls.validate_calculation_params(config.get("calculation", {})))
        errors.extend(cls.validate_logging_params(config.get("logging", {})))
        return errors
