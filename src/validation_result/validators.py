"""Validators that produce ValidationResults.

Validation rules are written elsewhere, either as BaseValidator subclasses
or as plain check functions wrapped in FunctionValidator. CompositeValidator
folds its children's results into one with ValidationResult.merge_all.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from validation_result.events import ObservableMixin, ValidationEvent, ValidationEventType
from validation_result.results import ValidationResult

if TYPE_CHECKING:
    from validation_result.protocols import ErrorLike

__all__ = ["BaseValidator", "CompositeValidator", "FunctionValidator"]

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """A named check over items of type T.

    Example:
        class EmailValidator(BaseValidator[User]):
            name = "email"

            def validate(self, item: User) -> ValidationResult:
                if "@" in item.email:
                    return ValidationResult.valid()
                return ValidationResult.valid().with_error(
                    "Email must contain @", field="email", value=item.email
                )
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifies the validator in events and error reports."""

    @abstractmethod
    def validate(self, item: T) -> ValidationResult:
        """Check ``item`` and return the outcome; never raise for bad input."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class FunctionValidator(BaseValidator[T]):
    """Adapt a function returning errors into a validator.

    The function returns (or yields) the errors it found; none means valid.

    Example:
        def check_age(user: User) -> list[ValidationError]:
            if user.age < 0:
                return [ValidationError("Age cannot be negative", "age", str(user.age))]
            return []

        age = FunctionValidator("age", check_age)
    """

    def __init__(self, name: str, check: Callable[[T], Iterable[ErrorLike]]) -> None:
        self._name = name
        self._check = check

    @property
    def name(self) -> str:
        return self._name

    def validate(self, item: T) -> ValidationResult:
        return ValidationResult.from_errors(self._check(item))


class CompositeValidator(ObservableMixin, BaseValidator[T]):
    """Runs child validators and merges their results in order.

    Composites are immutable: ``then`` returns a new composite with more
    children rather than changing this one. Observers are not carried over
    to the new composite.

    With ``fail_fast`` the run stops after the first invalid child result,
    so later children are neither run nor reported.

    Events per ``validate`` call: VALIDATION_STARTED, one VALIDATOR_COMPLETED
    per child that ran, then VALIDATION_COMPLETED carrying the merged result.

    Example:
        signup = CompositeValidator([EmailValidator(), age], name="signup")
        strict = signup.then(PasswordValidator())
        strict.validate(user).messages
        # ("Email must contain @", "Password too short")
    """

    def __init__(
        self,
        validators: Iterable[BaseValidator[T]] = (),
        *,
        name: str = "composite",
        fail_fast: bool = False,
    ) -> None:
        self._validators: tuple[BaseValidator[T], ...] = tuple(validators)
        self._name = name
        self._fail_fast = fail_fast

    @property
    def name(self) -> str:
        return self._name

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    @property
    def validators(self) -> tuple[BaseValidator[T], ...]:
        """Child validators in run order."""
        return self._validators

    def then(self, *validators: BaseValidator[T]) -> CompositeValidator[T]:
        """Return a composite that also runs ``validators`` after these."""
        return CompositeValidator(
            self._validators + validators, name=self._name, fail_fast=self._fail_fast
        )

    def iter_results(self, item: T) -> Iterator[tuple[str, ValidationResult]]:
        """Run children lazily, yielding ``(validator name, result)`` pairs.

        Honours ``fail_fast`` and emits VALIDATOR_COMPLETED for each child.
        """
        for validator in self._validators:
            result = validator.validate(item)
            self.emit(
                ValidationEvent(
                    ValidationEventType.VALIDATOR_COMPLETED,
                    source=self,
                    validator_name=validator.name,
                    result=result,
                    data={"item": item},
                )
            )
            yield validator.name, result
            if self._fail_fast and not result.is_valid:
                return

    def validate(self, item: T) -> ValidationResult:
        """Merge the results of every child run; valid when there are none."""
        self.emit(
            ValidationEvent(
                ValidationEventType.VALIDATION_STARTED,
                source=self,
                validator_name=self._name,
                data={"item": item, "validator_count": len(self._validators)},
            )
        )
        started = time.perf_counter()

        merged = ValidationResult.merge_all(result for _, result in self.iter_results(item))

        self.emit(
            ValidationEvent(
                ValidationEventType.VALIDATION_COMPLETED,
                source=self,
                validator_name=self._name,
                result=merged,
                data={"item": item, "duration_ms": (time.perf_counter() - started) * 1000},
            )
        )
        return merged

    def __repr__(self) -> str:
        names = ", ".join(v.name for v in self._validators)
        return f"CompositeValidator(name={self._name!r}, validators=[{names}])"
