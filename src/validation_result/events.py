"""Observer events for composite validation.

Events are the library's logging channel: composites emit one when a run
starts, one per child result and one for the merged result.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from validation_result.results import ValidationResult

__all__ = [
    "ValidationEventType",
    "ValidationEvent",
    "ValidationObserver",
    "ObservableMixin",
]


class ValidationEventType(Enum):
    """Points in a composite run that observers are told about."""

    VALIDATION_STARTED = auto()
    VALIDATOR_COMPLETED = auto()
    VALIDATION_COMPLETED = auto()


@dataclass(frozen=True)
class ValidationEvent:
    """Something that happened during a composite run.

    Attributes:
        event_type: Which point of the run this is.
        source: The composite that emitted the event.
        validator_name: The composite's name for STARTED/COMPLETED, the
            child's name for VALIDATOR_COMPLETED.
        result: The child result, or the merged result on completion.
            None for VALIDATION_STARTED.
        data: Extra details (``item``, ``validator_count``, ``duration_ms``).
    """

    event_type: ValidationEventType
    source: object
    validator_name: str
    result: ValidationResult | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool | None:
        """Validity of the attached result, or None when there is none."""
        return None if self.result is None else self.result.is_valid

    @property
    def error_count(self) -> int:
        return 0 if self.result is None else len(self.result.errors)


@runtime_checkable
class ValidationObserver(Protocol):
    """Anything with an ``on_event`` method can observe validation."""

    def on_event(self, event: ValidationEvent) -> None: ...


class ObservableMixin:
    """Adds an observer registry and ``emit`` to a class.

    The registry is created lazily, so subclasses need not call a mixin
    ``__init__``. Observers are called in registration order; an exception
    raised by an observer propagates to the emitter.
    """

    def _registry(self) -> list[ValidationObserver]:
        return self.__dict__.setdefault("_observers", [])

    def add_observer(self, observer: ValidationObserver) -> None:
        """Register ``observer``; registering it again has no effect."""
        registry = self._registry()
        if observer not in registry:
            registry.append(observer)

    def remove_observer(self, observer: ValidationObserver) -> None:
        """Unregister ``observer`` if it is registered."""
        registry = self._registry()
        if observer in registry:
            registry.remove(observer)

    def clear_observers(self) -> None:
        self._registry().clear()

    @property
    def observers(self) -> tuple[ValidationObserver, ...]:
        """Registered observers, in order."""
        return tuple(self._registry())

    def emit(self, event: ValidationEvent) -> ValidationEvent:
        """Send ``event`` to every observer and return it."""
        for observer in self._registry():
            observer.on_event(event)
        return event
