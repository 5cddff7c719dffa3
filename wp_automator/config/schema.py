"""
Configuration Schema.

This module provides schema declaration and validation for automator settings.

Key features:
- Typed field definitions with defaults
- Numeric bounds for ints, minimum length for strings
- Validation of partial configs (missing keys keep their defaults)
"""

from dataclasses import dataclass
from typing import Any


class SchemaError(Exception):
    """Base exception for schema-related errors."""

    pass


class ValidationError(SchemaError):
    """Raised when value validation fails."""

    pass


@dataclass
class ConfigField:
    """
    Represents a configuration field with type and constraints.

    Attributes:
        type_: The expected type of the field value (int or str)
        default: Default value for the field
        description: Human-readable description, written as a TOML comment
        min: Lower bound for ints, minimum length for strings
        max: Upper bound for ints
    """

    type_: type
    default: Any
    description: str = ""
    min: int | None = None
    max: int | None = None

    def __post_init__(self):
        """Validate field definition."""
        if self.type_ not in (int, str):
            raise SchemaError(f"Unsupported field type {self.type_.__name__}")

        if self.max is not None and self.type_ is not int:
            raise SchemaError("max is only supported for int fields")

        self.validate(self.default)

    def validate(self, value: Any) -> None:
        """
        Validate a value against this field's constraints.

        Raises:
            ValidationError: If validation fails
        """
        # bool is a subclass of int; a mode of True is never meant
        if not isinstance(value, self.type_) or isinstance(value, bool):
            raise ValidationError(
                f"Expected type {self.type_.__name__}, got {type(value).__name__}"
            )

        size = value if self.type_ is int else len(value)
        if self.min is not None and size < self.min:
            what = "Value" if self.type_ is int else "String length"
            raise ValidationError(f"{what} {size} is less than minimum {self.min}")
        if self.max is not None and size > self.max:
            raise ValidationError(f"Value {size} is greater than maximum {self.max}")


def validate_config(config: dict[str, Any], schema: dict[str, ConfigField]) -> None:
    """
    Validate a (possibly partial) configuration dictionary against a schema.

    Raises:
        ValidationError: On unknown fields or invalid values
    """
    for key in config:
        if key not in schema:
            raise ValidationError(f"Unknown configuration field: {key}")

    for field_name, value in config.items():
        try:
            schema[field_name].validate(value)
        except ValidationError as e:
            raise ValidationError(f"Field '{field_name}': {e}") from e


def generate_default_config(schema: dict[str, ConfigField]) -> dict[str, Any]:
    """Default value for every field in the schema."""
    return {field_name: field.default for field_name, field in schema.items()}
