"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from typing import Any

from ..models.style import TRANSPARENT, DashStyle, GapPolicy

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_LINE_NAMES = ("basis", "upper", "lower")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate band calculation parameters."""
        errors = []

        if "length" in params:
            value = params["length"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="length",
                    message="Must be a positive integer",
                    value=value
                ))

        if "std_multiplier" in params:
            value = params["std_multiplier"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="std_multiplier",
                    message="Must be a non-negative number",
                    value=value
                ))

        if "offset" in params:
            value = params["offset"]
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(ValidationError(
                    field="offset",
                    message="Must be an integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_line_style(name: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate one line's style section."""
        errors = []

        if "visible" in params and not isinstance(params["visible"], bool):
            errors.append(ValidationError(
                field=f"{name}.visible",
                message="Must be a boolean",
                value=params["visible"]
            ))

        if "color" in params:
            value = params["color"]
            if not isinstance(value, str) or (value != TRANSPARENT and not _HEX_COLOR.match(value)):
                errors.append(ValidationError(
                    field=f"{name}.color",
                    message="Must be a hex colour or 'transparent'",
                    value=value
                ))

        if "width" in params:
            value = params["width"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field=f"{name}.width",
                    message="Must be a positive integer",
                    value=value
                ))

        if "dash" in params:
            value = params["dash"]
            if value not in {d.value for d in DashStyle}:
                errors.append(ValidationError(
                    field=f"{name}.dash",
                    message="Must be 'solid' or 'dashed'",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_style(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the style section."""
        errors = []

        for name in _LINE_NAMES:
            if name in params:
                errors.extend(ConfigValidator.validate_line_style(name, params[name] or {}))

        fill = params.get("band_fill") or {}
        if "visible" in fill and not isinstance(fill["visible"], bool):
            errors.append(ValidationError(
                field="band_fill.visible",
                message="Must be a boolean",
                value=fill["visible"]
            ))

        if "opacity" in fill:
            value = fill["opacity"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="band_fill.opacity",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_render(params: dict[str, Any]) -> list[ValidationError]:
        """Validate render options."""
        errors = []

        if "gap_policy" in params:
            value = params["gap_policy"]
            if value not in {p.value for p in GapPolicy}:
                errors.append(ValidationError(
                    field="gap_policy",
                    message="Must be 'bridge' or 'break'",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "indicator" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicator"]))

        if "style" in config:
            errors.extend(ConfigValidator.validate_style(config["style"]))

        if "render" in config:
            errors.extend(ConfigValidator.validate_render(config["render"]))

        return errors
