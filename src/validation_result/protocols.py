"""Protocols for type checking.

Structural types for error descriptors and validators, usable in type hints
and with ``isinstance``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from validation_result.results import ValidationResult

__all__ = ["ErrorLike", "ValidatorProtocol"]

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ErrorLike(Protocol):
    """Anything that can be held by an invalid ValidationResult.

    Only ``message`` is read; it drives result equality.
    """

    message: str


@runtime_checkable
class ValidatorProtocol(Protocol[T]):
    """Protocol for validation implementations.

    Use this for type hints when accepting any validator.
    Generic over T, the type of object being validated.
    """

    def validate(self, item: T) -> ValidationResult:
        """Validate an item."""
        ...

    @property
    def name(self) -> str:
        """Name of this validator."""
        ...
