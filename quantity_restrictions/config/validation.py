"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_NUMBER = (int, float)


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, _NUMBER) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_quantity_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate quantity arithmetic parameters."""
        issues = []

        if "precision" in params:
            value = params["precision"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > 12:
                issues.append(ConfigIssue(
                    field="quantity.precision",
                    message="Must be an integer between 0 and 12",
                    value=value
                ))

        if "default_min_quantity" in params:
            value = params["default_min_quantity"]
            if not _is_number(value) or value <= 0:
                issues.append(ConfigIssue(
                    field="quantity.default_min_quantity",
                    message="Must be a positive number",
                    value=value
                ))

        unknown = set(params) - {"precision", "default_min_quantity"}
        for key in sorted(unknown):
            issues.append(ConfigIssue(
                field=f"quantity.{key}",
                message="Unknown parameter",
                value=params[key]
            ))

        return issues

    @staticmethod
    def validate_default_policy(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate the policy applied to SKUs without a stored policy."""
        issues = []

        minimum = params.get("min")
        if "min" in params and (not _is_number(minimum) or minimum < 0):
            issues.append(ConfigIssue(
                field="default_policy.min",
                message="Must be a non-negative number",
                value=minimum
            ))

        interval = params.get("interval")
        if "interval" in params and (not _is_number(interval) or interval < 0):
            issues.append(ConfigIssue(
                field="default_policy.interval",
                message="Must be a non-negative number",
                value=interval
            ))

        maximum = params.get("max")
        if maximum is not None:
            if not _is_number(maximum):
                issues.append(ConfigIssue(
                    field="default_policy.max",
                    message="Must be a number or null",
                    value=maximum
                ))
            elif _is_number(minimum) and maximum < minimum:
                issues.append(ConfigIssue(
                    field="default_policy.max",
                    message="Must not be lower than default_policy.min",
                    value=maximum
                ))

        unknown = set(params) - {"min", "max", "interval"}
        for key in sorted(unknown):
            issues.append(ConfigIssue(
                field=f"default_policy.{key}",
                message="Unknown parameter",
                value=params[key]
            ))

        return issues

    @staticmethod
    def validate_rounder_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate rounder parameters."""
        issues = []

        if "max_candidates" in params:
            value = params["max_candidates"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                issues.append(ConfigIssue(
                    field="rounder.max_candidates",
                    message="Must be a non-negative integer",
                    value=value
                ))

        unknown = set(params) - {"max_candidates"}
        for key in sorted(unknown):
            issues.append(ConfigIssue(
                field=f"rounder.{key}",
                message="Unknown parameter",
                value=params[key]
            ))

        return issues

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        issues = []

        for section in ("quantity", "default_policy", "rounder"):
            if section in config and not isinstance(config[section], dict):
                issues.append(ConfigIssue(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if issues:
            return issues

        if "quantity" in config:
            issues.extend(ConfigValidator.validate_quantity_params(config["quantity"]))

        if "default_policy" in config:
            issues.extend(ConfigValidator.validate_default_policy(config["default_policy"]))

        if "rounder" in config:
            issues.extend(ConfigValidator.validate_rounder_params(config["rounder"]))

        return issues
