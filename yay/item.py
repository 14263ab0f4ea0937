"""Chainable per-field validators."""

import json
import logging
import typing

from . import checks as _checks
from . import record as _record
from . import rules as _rules

logger = logging.getLogger(__name__)

Schema = typing.Mapping[str, "YayItem"]
"""Type alias for a schema: field name -> YayItem."""


class YayItem:
    """An ordered list of rules for one field, assembled by chaining.

    Every builder method appends one rule (``optional`` and ``items_of_type``
    on a non-array excepted) and returns the same instance, so a validator
    reads as a sentence:

        >>> name = item().required().string().max_length(40)
        >>> name.validate("Alice") is None
        True

    Rules run in the order they were added and validation stops at the first
    one that fails. Once built, a YayItem is only read by ``validate`` and may
    be shared between threads.
    """

    def __init__(self) -> None:
        self._rules: list[_rules.Rule] = []
        self._optional = False
        self._is_array = False
        self._item_validator: YayItem | None = None
        self._object_schema: Schema | None = None

    @property
    def rules(self) -> tuple[_rules.Rule, ...]:
        return tuple(self._rules)

    @property
    def is_optional(self) -> bool:
        return self._optional

    @property
    def is_array(self) -> bool:
        return self._is_array

    @property
    def item_validator(self) -> "YayItem | None":
        return self._item_validator

    @property
    def object_schema(self) -> Schema | None:
        return self._object_schema

    def __repr__(self) -> str:
        return (
            f"YayItem(rules={len(self._rules)}, optional={self._optional}, "
            f"array={self._is_array})"
        )

    def validate(self, value: typing.Any) -> str | None:
        """Validate a single value.

        Args:
            value: Value to validate, None when the field is absent

        Returns:
            Message of the first failing rule, None if the value is valid
        """
        if value is None and self._optional:
            return None

        for rule in self._rules:
            outcome = rule.check(value)
            if not outcome.passed:
                return outcome.message

        return None

    def _add_rule(self, message: str, predicate: _rules.Predicate) -> "YayItem":
        self._rules.append(_rules.Rule(message, predicate))
        return self

    def _calc_length(self, value: typing.Any) -> int:
        return _checks.calc_length(value, self._is_array)

    def required(self, message: str = "is required") -> "YayItem":
        self._optional = False
        return self._add_rule(message, lambda value: value is not None)

    def optional(self) -> "YayItem":
        """Accept a missing or None value, wherever in the chain this is called."""
        self._optional = True
        return self

    def string(self, message: str = "needs to be a string") -> "YayItem":
        return self._add_rule(message, _checks.is_string)

    def integer(self, message: str = "needs to be an integer") -> "YayItem":
        return self._add_rule(message, _checks.is_integer)

    def array(self, message: str = "needs to be an array") -> "YayItem":
        """Require a list or tuple and switch length rules to element counts."""
        self._is_array = True
        return self._add_rule(message, _checks.is_array)

    def items_of_type(self, item_validator: "YayItem") -> "YayItem":
        """Validate every element of the array with another YayItem.

        The first failing element is reported as ``"array items <message>"``,
        so nested arrays produce ``"array items array items <message>"``.
        Must follow ``array()``; on any other validator this is a no-op.

        Args:
            item_validator: Validator applied to each element

        Returns:
            This validator
        """
        if not self._is_array:
            logger.warning("items_of_type() ignored on %r: call array() first", self)
            return self

        self._item_validator = item_validator

        def check_items(values: typing.Any) -> bool | str:
            if not _checks.is_array(values):
                return True
            for element in values:
                error = item_validator.validate(element)
                if error is not None:
                    return f"array items {error}"
            return True

        return self._add_rule("", check_items)

    def min_length(self, min_length: int, message: str = "has a min length of ") -> "YayItem":
        return self._add_rule(
            f"{message}{min_length}",
            lambda value: self._calc_length(value) >= min_length,
        )

    def max_length(self, max_length: int, message: str = "has a max length of ") -> "YayItem":
        return self._add_rule(
            f"{message}{max_length}",
            lambda value: self._calc_length(value) <= max_length,
        )

    def length(self, length: int, message: str = "needs to have a length of ") -> "YayItem":
        return self._add_rule(
            f"{message}{length}",
            lambda value: self._calc_length(value) == length,
        )

    def str_has_only_digits(self, message: str = "can have only digits") -> "YayItem":
        return self._add_rule(message, _checks.has_only_digits)

    def str_is_alpha(self, message: str = "can have only alpha characters") -> "YayItem":
        return self._add_rule(message, _checks.is_alpha)

    def str_is_upper_alpha_numeric(
        self, message: str = "can have only uppercase characters"
    ) -> "YayItem":
        """Require uppercase letters followed by uppercase letters, digits, '.' or '_'."""
        return self._add_rule(message, _checks.is_upper_alpha_numeric)

    def is_number_between(
        self,
        bounds: typing.Sequence[typing.Any],
        message: str = "needs to be a number between the values",
    ) -> "YayItem":
        """Require a number within inclusive bounds.

        Args:
            bounds: (low, high) pair
            message: Message prefix, the bounds are appended

        Returns:
            This validator
        """
        low, high = bounds
        return self._add_rule(
            f"{message} {low} and {high}",
            lambda value: _checks.is_number_between(value, low, high),
        )

    def is_us_date_format(
        self, message: str = "needs to have the date format YYYY-mm-dd"
    ) -> "YayItem":
        return self._add_rule(
            message, lambda value: _checks.is_date_format(value, _checks.US_DATE)
        )

    def is_brazil_date_format(
        self, message: str = "needs to have the date format dd/mm/YYYY"
    ) -> "YayItem":
        return self._add_rule(
            message, lambda value: _checks.is_date_format(value, _checks.BRAZIL_DATE)
        )

    def custom(self, message: str, predicate: _rules.Predicate) -> "YayItem":
        """Add a user-supplied rule.

        Args:
            message: Error message if the predicate returns a falsy value
            predicate: Function(value) -> bool, or a string to report instead

        Returns:
            This validator
        """
        return self._add_rule(message, predicate)

    def float(self, message: str = "needs to be a float") -> "YayItem":
        return self._add_rule(message, _checks.is_number)

    def bool(self, message: str = "needs to be a boolean value") -> "YayItem":
        return self._add_rule(message, _checks.is_boolean)

    def object(self, schema: Schema, message: str = "needs to be an object") -> "YayItem":
        """Require a mapping that itself satisfies a schema.

        The nested schema is applied non-strictly. When it reports errors the
        failure message is ``"object needs to have schema: "`` followed by the
        nested errors as JSON.

        Args:
            schema: Mapping of field name to YayItem for the nested record
            message: Error message if the value is not a mapping

        Returns:
            This validator
        """
        from .validate import validate as _validate_schema

        self._object_schema = schema

        def check_object(value: typing.Any) -> bool | str:
            nested = _record.as_mapping(value)
            if nested is None:
                return False
            errors = _validate_schema(schema, nested)
            if errors is None:
                return True
            return "object needs to have schema: " + json.dumps(errors, separators=(",", ":"))

        return self._add_rule(message, check_object)


def item() -> YayItem:
    """Start building a new field validator.

    Returns:
        An empty YayItem
    """
    return YayItem()
