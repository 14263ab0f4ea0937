"""Error handling options for batch validation."""

from enum import Enum


class ErrorOption(str, Enum):
    """Options for how to handle invalid records.

    Attributes:
        RETURN: Return errors in the result object without raising
        RAISE: Immediately raise ValidationError when a record is invalid
        SKIP: Skip invalid records silently
    """

    RETURN = "return"
    RAISE = "raise"
    SKIP = "skip"
