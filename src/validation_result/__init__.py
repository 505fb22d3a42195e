"""Immutable validation results with merge, plus validator composition."""

from validation_result.events import (
    ObservableMixin,
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)
from validation_result.protocols import ErrorLike, ValidatorProtocol
from validation_result.report import ErrorEntry, ValidationReport
from validation_result.results import ResultKind, ValidationError, ValidationResult
from validation_result.rich_observers import RichResultObserver, render_result
from validation_result.validators import BaseValidator, CompositeValidator, FunctionValidator

__all__ = [
    # Validation results
    "ResultKind",
    "ValidationResult",
    "ValidationError",
    "ErrorLike",
    # Validator abstractions
    "BaseValidator",
    "CompositeValidator",
    "FunctionValidator",
    "ValidatorProtocol",
    # Observer pattern
    "ObservableMixin",
    "ValidationEvent",
    "ValidationEventType",
    "ValidationObserver",
    # Reports
    "ErrorEntry",
    "ValidationReport",
    # Rich display
    "RichResultObserver",
    "render_result",
]

__version__ = "0.1.0"
