"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from typing import Any

from .defaults import LOG_LEVELS, TIME_LABEL_MODES


_COLOR_TOKEN = re.compile(r"^color\.\w+$")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_engine_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate engine parameters."""
        errors = []

        if "time_labels" in params:
            value = params["time_labels"]
            if value not in TIME_LABEL_MODES:
                errors.append(ValidationError(
                    field="time_labels",
                    message=f"Must be one of {', '.join(TIME_LABEL_MODES)}",
                    value=value
                ))

        if "default_overlay" in params:
            value = params["default_overlay"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="default_overlay",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_palette_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate palette overrides."""
        errors = []

        colors = params.get("colors", {})
        if not isinstance(colors, dict):
            return [ValidationError(
                field="colors",
                message="Must be a mapping of color tokens to values",
                value=colors
            )]

        for token, value in colors.items():
            if not isinstance(token, str) or not _COLOR_TOKEN.match(token):
                errors.append(ValidationError(
                    field="colors",
                    message="Keys must look like color.<name>",
                    value=token
                ))
            elif not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field=f"colors.{token}",
                    message="Must be a non-empty string",
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
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "engine" in config:
            errors.extend(ConfigValidator.validate_engine_params(config["engine"]))

        if "palette" in config:
            errors.extend(ConfigValidator.validate_palette_params(config["palette"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
