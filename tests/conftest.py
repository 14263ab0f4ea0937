"""Shared pytest fixtures for yay tests."""

import typing

import pydantic
import pytest

from yay import item
from yay.item import Schema


class Customer(pydantic.BaseModel):
    """Test model representing a customer."""

    name: str
    age: int
    nickname: str | None = None
    hobbies: list[str]


@pytest.fixture
def customer_model() -> type[pydantic.BaseModel]:
    """Fixture providing the Customer Pydantic model."""
    return Customer


@pytest.fixture
def person_schema() -> Schema:
    """Fixture providing a flat two-field schema."""
    return {
        "name": item().string(),
        "age": item().integer(),
    }


@pytest.fixture
def customer_schema() -> Schema:
    """Fixture providing a schema with a nested object field."""
    return {
        "customer": item().object(
            {
                "name": item().string(),
                "age": item().integer(),
                "nickname": item().optional().string(),
                "hobbies": item().array().items_of_type(item().string()).min_length(2),
            }
        ),
    }


@pytest.fixture
def nested_array_schema() -> Schema:
    """Fixture providing an array of arrays of at least two integers."""
    return {
        "names": item().array().items_of_type(
            item().array().min_length(2).items_of_type(item().integer())
        ),
    }


@pytest.fixture
def valid_person_records() -> list[dict[str, typing.Any]]:
    """Fixture providing valid person records."""
    return [
        {"name": "Alice", "age": 30},
        {"name": "Bob", "age": 25},
        {"name": "Charlie", "age": 35},
    ]


@pytest.fixture
def mixed_person_records() -> list[dict[str, typing.Any]]:
    """Fixture providing mix of valid and invalid person records."""
    return [
        {"name": "Alice", "age": 30},  # Valid
        {"name": "Bob", "age": "25"},  # Invalid age type
        {"name": "Charlie", "age": 35},  # Valid
        {"age": 40.5},  # Invalid name and age
    ]
