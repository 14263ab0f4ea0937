"""Result types for batch validation."""

import typing as _t

from . import record as _record


class SchemaValidationResult(_t.NamedTuple):
    """Result of validating a single record against a schema.

    Attributes:
        errors: Mapping of field name to error message, None if valid
        value: Original record that was validated
    """

    errors: _record.Errors | None
    value: _record.Record | None
