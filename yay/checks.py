"""Stateless helper predicates shared by the built-in rules."""

import numbers
import re
import typing
import unicodedata

import dateutil.parser  # type: ignore[import-untyped]


_DIGITS = re.compile(r"[0-9]+")
_UPPER_ALPHA_NUMERIC = re.compile(r"[A-Z]+[A-Z0-9._]+")


class DateFormat(typing.NamedTuple):
    """A fixed calendar date layout.

    Attributes:
        template: str.format template rendering year, month and day
        dayfirst: Whether the parser should read the day before the month
        yearfirst: Whether the parser should read the year first
    """

    template: str
    dayfirst: bool = False
    yearfirst: bool = False

    def render(self, year: int, month: int, day: int) -> str:
        return self.template.format(year=year, month=month, day=day)


US_DATE = DateFormat("{year:04d}-{month:02d}-{day:02d}", yearfirst=True)
BRAZIL_DATE = DateFormat("{day:02d}/{month:02d}/{year:04d}", dayfirst=True)


def is_string(value: typing.Any) -> bool:
    return isinstance(value, str)


def is_integer(value: typing.Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: typing.Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_boolean(value: typing.Any) -> bool:
    return isinstance(value, bool)


def is_array(value: typing.Any) -> bool:
    return isinstance(value, (list, tuple))


def has_only_digits(value: typing.Any) -> bool:
    return isinstance(value, str) and _DIGITS.fullmatch(value) is not None


def is_alpha(value: typing.Any) -> bool:
    return isinstance(value, str) and value.isalpha()


def is_upper_alpha_numeric(value: typing.Any) -> bool:
    return isinstance(value, str) and _UPPER_ALPHA_NUMERIC.fullmatch(value) is not None


def is_number_between(value: typing.Any, low: typing.Any, high: typing.Any) -> bool:
    """Check that a value is a real number within inclusive bounds.

    Strings are rejected even when they hold a number.
    """
    return is_number(value) and low <= value <= high


def calc_length(value: typing.Any, as_array: bool) -> int:
    """Compute the length a length rule compares against.

    Args:
        value: Value being validated
        as_array: Count elements instead of characters

    Returns:
        Element count for arrays, character count for strings, 0 for anything else
    """
    if as_array:
        return len(value) if is_array(value) else 0
    if isinstance(value, str):
        # Count composed characters, not code units of decomposed forms
        return len(unicodedata.normalize("NFC", value))
    return 0


def is_date_format(value: typing.Any, date_format: DateFormat) -> bool:
    """Check that a string is a real calendar date in exactly the given layout.

    The string is parsed and rendered back; only an identical rendering is
    accepted, so out-of-range components, other separators and unpadded
    components are all rejected.

    Args:
        value: Value to check
        date_format: Expected layout

    Returns:
        True if the value is a valid date string in that layout
    """
    if not isinstance(value, str):
        return False
    try:
        parsed = dateutil.parser.parse(
            value, dayfirst=date_format.dayfirst, yearfirst=date_format.yearfirst
        )
    except (ValueError, OverflowError, dateutil.parser.ParserError):
        return False
    return date_format.render(parsed.year, parsed.month, parsed.day) == value
