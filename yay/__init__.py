"""Validate records against declarative, chainable schemas.

A Python package for checking request payloads, form data or configuration
objects against a mapping of field names to chained validation rules.

    >>> import yay
    >>> schema = {"name": yay.item().required().string()}
    >>> yay.validate(schema, {})
    {'name': 'is required'}
"""

__version__ = "0.1.0"

from yay.item import YayItem, Schema, item
from yay.validate import validate, validate_record, validate_records
from yay.rules import Rule, RuleOutcome, OutcomeKind
from yay.errors import ValidationError
from yay.options import ErrorOption
from yay.result import SchemaValidationResult

__all__ = [
    "item",
    "validate",
    "validate_record",
    "validate_records",
    "YayItem",
    "Schema",
    "Rule",
    "RuleOutcome",
    "OutcomeKind",
    "ValidationError",
    "ErrorOption",
    "SchemaValidationResult",
]
