"""Exceptions raised on request when a record is invalid."""

import typing


class ValidationError(ValueError):
    """Raised when a record fails schema validation.

    Attributes:
        errors: Dictionary mapping field names to error messages
    """

    def __init__(self, errors: dict[str, str], value: typing.Any = None) -> None:
        """Initialize ValidationError with error details.

        Args:
            errors: Dictionary mapping field names to error messages
            value: The record that failed validation
        """
        self.errors = errors
        self.value = value
        error_msg = ", ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(f"Validation failed: {error_msg}")
