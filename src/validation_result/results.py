"""Validation result containers.

ValidationResult is a closed two-variant outcome: ``valid`` or ``invalid``
carrying an ordered tuple of errors. Results are immutable; merging produces
new values.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from validation_result.protocols import ErrorLike

__all__ = ["ResultKind", "ValidationError", "ValidationResult"]


class ResultKind(Enum):
    """Tag for the two ValidationResult variants."""

    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class ValidationError:
    """A single validation error."""

    message: str
    field: str | None = None
    value: str | None = None


@dataclass(frozen=True, eq=False)
class ValidationResult:
    """Outcome of validation: either valid, or invalid with errors.

    Build values with the ``valid()`` / ``invalid()`` constructors rather
    than the dataclass initializer.

    Equality is intentionally loose: two invalid results are equal when the
    concatenation of their error messages (no separator) is the same, so
    ``invalid([E("a"), E("b")]) == invalid([E("ab")])``.

    Example:
        name_check = ValidationResult.invalid([ValidationError("name is required")])
        age_check = ValidationResult.valid()

        combined = ValidationResult.merge_all([name_check, age_check])
        combined.is_valid  # False
        combined.messages  # ("name is required",)
    """

    kind: ResultKind
    errors: tuple[ErrorLike, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.kind is ResultKind.VALID and self.errors:
            raise ValueError("a valid result cannot carry errors")

    @classmethod
    def valid(cls) -> ValidationResult:
        """Create the valid result."""
        return cls(ResultKind.VALID)

    @classmethod
    def invalid(cls, errors: Iterable[ErrorLike] = ()) -> ValidationResult:
        """Create an invalid result holding ``errors`` in order.

        An empty error sequence is allowed and still yields an invalid result.
        """
        return cls(ResultKind.INVALID, tuple(errors))

    @classmethod
    def from_errors(cls, errors: Iterable[ErrorLike]) -> ValidationResult:
        """Create a valid result when ``errors`` is empty, invalid otherwise."""
        collected = tuple(errors)
        if not collected:
            return cls.valid()
        return cls.invalid(collected)

    @classmethod
    def merge_all(cls, results: Iterable[ValidationResult]) -> ValidationResult:
        """Merge multiple results together, starting from the valid result.

        Args:
            results: Results to merge, in order.

        Returns:
            The merged result; valid for an empty input.
        """
        return cls.valid().merge(results)

    @property
    def is_valid(self) -> bool:
        """True iff this result equals the valid result."""
        return self == ValidationResult.valid()

    @property
    def messages(self) -> tuple[str, ...]:
        """Messages of the contained errors, in order."""
        return tuple(error.message for error in self.errors)

    def merge(self, other: ValidationResult | Iterable[ValidationResult]) -> ValidationResult:
        """Merge this result with another result, or with several.

        Merging two invalid results concatenates their errors, this result's
        first. A valid operand is the identity.

        Args:
            other: A single result, or an iterable of results folded from left
                to right starting with this one.

        Returns:
            Merged validation result.

        Example:
            valid.merge(valid)                  # valid
            valid.merge(invalid([e]))           # invalid([e])
            invalid([e1]).merge(invalid([e2]))  # invalid([e1, e2])
            valid.merge([invalid([e1]), valid, invalid([e2])])  # invalid([e1, e2])
        """
        if not isinstance(other, ValidationResult):
            return reduce(ValidationResult.merge, other, self)

        if self.kind is ResultKind.VALID:
            return other
        if other.kind is ResultKind.VALID:
            return self
        return ValidationResult.invalid(self.errors + other.errors)

    def with_error(
        self, message: str, field: str | None = None, value: str | None = None
    ) -> ValidationResult:
        """Return an invalid result with one more error appended."""
        error = ValidationError(message=message, field=field, value=value)
        return self.merge(ValidationResult.invalid([error]))

    def raise_if_invalid(self) -> None:
        """Raise PydanticCustomError if this result is invalid.

        Lets a result be surfaced from inside pydantic field or model
        validators. Valid results return ``None``.

        Raises:
            PydanticCustomError: With error type ``validation_error`` and the
                error messages under the ``errors`` context key.
        """
        if self.is_valid:
            return
        raise PydanticCustomError(
            "validation_error",
            "; ".join(self.messages) or "validation failed",
            {"errors": list(self.messages)},
        )

    def _joined_messages(self) -> str:
        return "".join(self.messages)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationResult):
            return NotImplemented
        if self.kind is not other.kind:
            return False
        if self.kind is ResultKind.VALID:
            return True
        return self._joined_messages() == other._joined_messages()

    def __hash__(self) -> int:
        return hash((self.kind, self._joined_messages()))

    def __repr__(self) -> str:
        if self.kind is ResultKind.VALID:
            return "ValidationResult.valid()"
        return f"ValidationResult.invalid({list(self.errors)!r})"
