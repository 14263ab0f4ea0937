"""Type aliases for validation inputs and outputs."""

import typing
from collections.abc import Mapping

import pydantic


Record = Mapping | pydantic.BaseModel
"""Type alias for a record that can be validated.

A Record can be either a mapping or a Pydantic BaseModel instance.
"""

Errors = dict[str, str]
"""Mapping of field name to error message."""


def as_mapping(value: typing.Any) -> Mapping | None:
    """Return a record as a mapping, or None if it is not record-shaped.

    Args:
        value: Mapping or Pydantic model instance

    Returns:
        The mapping itself, the model's dumped fields, or None
    """
    if isinstance(value, Mapping):
        return value
    if isinstance(value, pydantic.BaseModel):
        return value.model_dump()
    return None
