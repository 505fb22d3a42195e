"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from hypothesis import strategies as st

from validation_result.results import ValidationError, ValidationResult
from validation_result.validators import BaseValidator

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for valid field names (letters and numbers only)
field_names = st.text(
    min_size=1,
    max_size=50,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for messages
messages = st.text(min_size=1, max_size=200)

# Strategy for optional string values
optional_strings = st.one_of(st.none(), st.text(max_size=100))

# Strategy for single errors
errors = st.builds(
    ValidationError,
    message=messages,
    field=st.one_of(st.none(), field_names),
    value=optional_strings,
)

# Strategy for results of either variant; invalid results may hold no errors
results = st.one_of(
    st.just(ValidationResult.valid()),
    st.lists(errors, max_size=5).map(ValidationResult.invalid),
)


# -----------------------------------------------------------------------------
# Test Model Classes
# -----------------------------------------------------------------------------


@dataclass
class SampleModel:
    """Simple item for exercising validators."""

    name: str
    value: int = 0


@dataclass(frozen=True)
class MessageOnlyError:
    """Third-party error type exposing nothing but a message."""

    message: str


# -----------------------------------------------------------------------------
# Test Validator Classes
# -----------------------------------------------------------------------------


class SimpleValidator(BaseValidator[SampleModel]):
    """Simple validator that always passes."""

    def __init__(self, name: str = "simple") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def validate(self, item: SampleModel) -> ValidationResult:
        return ValidationResult.valid()


class FailingValidator(BaseValidator[SampleModel]):
    """Validator that always fails with a configurable error."""

    def __init__(
        self, name: str = "failing", error_field: str = "test", error_msg: str = "Failed"
    ) -> None:
        self._name = name
        self._error_field = error_field
        self._error_msg = error_msg

    @property
    def name(self) -> str:
        return self._name

    def validate(self, item: SampleModel) -> ValidationResult:
        return ValidationResult.valid().with_error(self._error_msg, field=self._error_field)


class ConditionalValidator(BaseValidator[SampleModel]):
    """Validator that fails if value is negative."""

    def __init__(self, name: str = "conditional") -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def validate(self, item: SampleModel) -> ValidationResult:
        result = ValidationResult.valid()
        if item.value < 0:
            result = result.with_error(
                "Value cannot be negative", field="value", value=str(item.value)
            )
        return result


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def sample_model() -> SampleModel:
    """Create a fresh SampleModel instance."""
    return SampleModel(name="test")


@pytest.fixture
def valid_result() -> ValidationResult:
    return ValidationResult.valid()


@pytest.fixture
def invalid_result() -> ValidationResult:
    """Invalid result with two errors."""
    return ValidationResult.invalid(
        [
            ValidationError("Email is required", field="email"),
            ValidationError("Age cannot be negative", field="age", value="-1"),
        ]
    )


@pytest.fixture
def simple_validator() -> SimpleValidator:
    return SimpleValidator()


@pytest.fixture
def failing_validator() -> FailingValidator:
    return FailingValidator()


@pytest.fixture
def conditional_validator() -> ConditionalValidator:
    return ConditionalValidator()
