import logging
import typing as _typing

from . import errors as _errors
from .item import Schema
from . import options as _options
from . import record as _record
from . import result as _result

logger = logging.getLogger(__name__)

NOT_ALLOWED_MESSAGE = "is not allowed in the schema"


def validate(
    schema: Schema,
    record: _record.Record | None,
    strict: bool = False,
    *,
    raise_errors: bool = False,
) -> _record.Errors | None:
    """Validate a record against a schema.

    Every field of the schema is looked up in the record (a missing key counts
    as None) and checked by its YayItem. In strict mode every record key the
    schema does not declare is reported as well.

    Args:
        schema: Mapping of field name to YayItem
        record: Mapping or Pydantic model to validate, None for an empty record
        strict: Whether to reject fields not declared in the schema
        raise_errors: If True, raise ValidationError instead of returning errors

    Returns:
        Dictionary of field name to error message, None if the record is valid

    Raises:
        ValidationError: If raise_errors=True and the record is invalid
        TypeError: If record is neither None, a mapping nor a Pydantic model

    Example:
        >>> schema = {"name": item().string(), "age": item().integer()}
        >>> validate(schema, {"name": "X", "age": 18, "weight": 63.5}, strict=True)
        {'weight': 'is not allowed in the schema'}
    """
    values = {} if record is None else _record.as_mapping(record)
    if values is None:
        raise TypeError(
            f"record must be a mapping or a Pydantic model, got {type(record).__name__}"
        )

    errors: _record.Errors = {}
    for field_name, field_item in schema.items():
        error = field_item.validate(values.get(field_name))
        if error is not None:
            logger.debug("Field %r failed validation: %s", field_name, error)
            errors[field_name] = error

    if strict:
        for field_name in values:
            if field_name not in schema:
                logger.debug("Field %r is not declared in the schema", field_name)
                errors[field_name] = NOT_ALLOWED_MESSAGE

    if not errors:
        return None
    if raise_errors:
        raise _errors.ValidationError(errors, record)
    return errors


def validate_record(
    record: _record.Record | None,
    schema: Schema,
    *,
    strict: bool = False,
    raise_errors: bool = False,
) -> _result.SchemaValidationResult:
    """Validate a single record and wrap the outcome with the original value.

    Args:
        record: Mapping or Pydantic model to validate
        schema: Mapping of field name to YayItem
        strict: Whether to reject fields not declared in the schema
        raise_errors: If True, raise ValidationError instead of returning it in the result

    Returns:
        SchemaValidationResult containing errors (if any) and the original value
    """
    errors = validate(schema, record, strict, raise_errors=raise_errors)
    return _result.SchemaValidationResult(errors, record)


def validate_records(
    records: _typing.Iterable[_record.Record | None],
    schema: Schema,
    *,
    strict: bool = False,
    error_option: _options.ErrorOption = _options.ErrorOption.RETURN,
) -> _typing.Generator[_result.SchemaValidationResult, None, None]:
    """Validate an iterable of records against one schema.

    Args:
        records: Iterable of mappings or Pydantic models to validate
        schema: Mapping of field name to YayItem
        strict: Whether to reject fields not declared in the schema
        error_option: How to handle invalid records (RETURN, RAISE, or SKIP)

    Yields:
        SchemaValidationResult for each record (skipped if error_option=SKIP and it is invalid)

    Raises:
        ValidationError: If error_option=RAISE and a record is invalid
    """
    skipped = 0
    for index, record in enumerate(records):
        record_result = validate_record(
            record,
            schema,
            strict=strict,
            raise_errors=error_option == _options.ErrorOption.RAISE,
        )

        if record_result.errors and error_option == _options.ErrorOption.SKIP:
            skipped += 1
            logger.debug("Skipping invalid record at index %d", index)
            continue

        yield record_result

    if skipped:
        logger.info("Skipped %d invalid record(s)", skipped)
