"""Single validation rules and their outcomes."""

import typing
from enum import Enum


Predicate = typing.Callable[[typing.Any], typing.Any]
"""Type alias for a rule predicate.

A predicate returns a truthy value when the value passes, a falsy value when it
fails, or a string carrying its own failure message.
"""


class OutcomeKind(str, Enum):
    """How a rule predicate resolved.

    Attributes:
        PASS: The value satisfied the rule
        FAIL: The value failed, the rule's own message applies
        FAIL_WITH_MESSAGE: The value failed, the predicate supplied the message
    """

    PASS = "pass"
    FAIL = "fail"
    FAIL_WITH_MESSAGE = "fail_with_message"


class RuleOutcome(typing.NamedTuple):
    """Result of checking a value against one rule.

    Attributes:
        kind: How the predicate resolved
        message: Failure message, None when the rule passed
    """

    kind: OutcomeKind
    message: str | None = None

    @property
    def passed(self) -> bool:
        return self.kind is OutcomeKind.PASS


class Rule(typing.NamedTuple):
    """A named predicate plus the message reported when it fails.

    Attributes:
        message: Error message if validation fails
        predicate: Function(value) -> bool | str
    """

    message: str
    predicate: Predicate

    def check(self, value: typing.Any) -> RuleOutcome:
        """Run the predicate against a value.

        Exceptions raised by the predicate are not caught.

        Args:
            value: Value to validate

        Returns:
            RuleOutcome describing whether the value passed
        """
        verdict = self.predicate(value)
        if isinstance(verdict, str):
            return RuleOutcome(OutcomeKind.FAIL_WITH_MESSAGE, verdict or self.message)
        if verdict:
            return RuleOutcome(OutcomeKind.PASS)
        return RuleOutcome(OutcomeKind.FAIL, self.message)
