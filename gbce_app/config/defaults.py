"""Default configuration parameters for the stock calculation toolkit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalculationParams:
    """Calculation engine parameters."""
    decimal_places: int = 2                          # Half-up rounding scale for every result
    vwsp_window_minutes: int = 15                    # Trailing window for volume weighted price


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    calculation: CalculationParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        calculation=CalculationParams(),
        logging=LoggingParams(),
    )
