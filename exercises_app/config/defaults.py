"""Default configuration parameters for the exercises."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AgeParams:
    """Age bracket boundaries used by the age classifier."""
    adult_min_age: int = 18                          # First age classified as Adult
    senior_min_age: int = 65                         # First age classified as Senior


@dataclass(frozen=True)
class OutputParams:
    """Formatting of printed lines."""
    greeting_template: str = "Hello, {name}"
    total_label: str = "Total Price"
    currency_symbol: str = "$"
    decimal_places: int = 2


@dataclass(frozen=True)
class LoggingParams:
    """Logging setup used by the command-line scripts."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    age: AgeParams = field(default_factory=AgeParams)
    output: OutputParams = field(default_factory=OutputParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        age=AgeParams(),
        output=OutputParams(),
        logging=LoggingParams(),
    )
