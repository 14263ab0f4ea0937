"""Tests for ErrorOption behavior in batch validation."""

import pytest

from yay import ValidationError
from yay.options import ErrorOption
from yay.validate import validate_records


def test_error_option_return(person_schema, mixed_person_records):
    """Test ErrorOption.RETURN returns errors in results."""
    results = list(
        validate_records(
            iter(mixed_person_records), person_schema, error_option=ErrorOption.RETURN
        )
    )

    assert len(results) == 4
    assert results[0].errors is None
    assert results[1].errors == {"age": "needs to be an integer"}
    assert results[2].errors is None
    assert results[3].errors == {
        "name": "needs to be a string",
        "age": "needs to be an integer",
    }
    assert [r.value for r in results] == mixed_person_records


def test_error_option_is_return_by_default(person_schema, valid_person_records):
    results = list(validate_records(valid_person_records, person_schema))

    assert len(results) == 3
    assert all(r.errors is None for r in results)


def test_error_option_raise_immediately(person_schema, mixed_person_records):
    """Test ErrorOption.RAISE raises on the first invalid record."""
    results = validate_records(
        iter(mixed_person_records), person_schema, error_option=ErrorOption.RAISE
    )

    assert next(results).errors is None
    with pytest.raises(ValidationError) as exc_info:
        next(results)

    assert exc_info.value.errors == {"age": "needs to be an integer"}
    assert exc_info.value.value == mixed_person_records[1]


def test_error_option_skip(person_schema, mixed_person_records, caplog):
    """Test ErrorOption.SKIP silently skips invalid records."""
    with caplog.at_level("INFO", logger="yay.validate"):
        results = list(
            validate_records(
                iter(mixed_person_records), person_schema, error_option=ErrorOption.SKIP
            )
        )

    assert len(results) == 2
    assert all(r.errors is None for r in results)
    assert results[0].value["name"] == "Alice"
    assert results[1].value["name"] == "Charlie"
    assert "Skipped 2 invalid record(s)" in caplog.text


def test_strict_batch(person_schema):
    records = [{"name": "Alice", "age": 30, "extra": True}]

    results = list(validate_records(records, person_schema, strict=True))

    assert results[0].errors == {"extra": "is not allowed in the schema"}


def test_error_option_values():
    assert ErrorOption("skip") is ErrorOption.SKIP
    assert ErrorOption.RAISE == "raise"
