"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import AgeParams, LoggingParams, OutputParams

_SECTIONS = {
    "age": AgeParams,
    "output": OutputParams,
    "logging": LoggingParams,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_age_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate age bracket parameters."""
        errors = []

        for name in ("adult_min_age", "senior_min_age"):
            if name in params and not _is_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be an integer",
                    value=params[name]
                ))

        # Brackets must not overlap
        adult = params.get("adult_min_age", AgeParams.adult_min_age)
        senior = params.get("senior_min_age", AgeParams.senior_min_age)
        if _is_int(adult) and _is_int(senior) and adult >= senior:
            errors.append(ValidationError(
                field="senior_min_age",
                message="Must be greater than adult_min_age",
                value=senior
            ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output formatting parameters."""
        errors = []

        # Validate greeting_template
        if "greeting_template" in params:
            value = params["greeting_template"]
            if not isinstance(value, str) or "{name}" not in value:
                errors.append(ValidationError(
                    field="greeting_template",
                    message="Must be a string containing '{name}'",
                    value=value
                ))

        for name in ("total_label", "currency_symbol"):
            if name in params and not isinstance(params[name], str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a string",
                    value=params[name]
                ))

        # Validate decimal_places
        if "decimal_places" in params:
            value = params["decimal_places"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="decimal_places",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        # Validate level
        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(_LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_unknown_keys(config: dict[str, Any]) -> list[ValidationError]:
        """Report sections and keys that no parameter class declares."""
        errors = []

        for section, params in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = {f.name for f in fields(_SECTIONS[section])}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_unknown_keys(config)
        if errors:
            return errors

        if "age" in config:
            errors.extend(ConfigValidator.validate_age_params(config["age"]))

        if "output" in config:
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
