"""Serializable reports of validation results.

Pydantic models that snapshot a ValidationResult for export to JSON or a
DataFrame.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from validation_result.protocols import ErrorLike
    from validation_result.results import ValidationResult

__all__ = ["ErrorEntry", "ValidationReport"]


class ErrorEntry(BaseModel):
    """One error of a reported result.

    Attributes:
        message: The error message.
        field: Name of the field the error relates to, if known.
        value: String form of the offending value, if known.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    field: str | None = None
    value: str | None = None

    @classmethod
    def from_error(cls, error: ErrorLike) -> ErrorEntry:
        """Build an entry from any object exposing ``message``.

        ``field`` and ``value`` are read when present; values that are not
        strings are converted with ``str()``.
        """
        value = getattr(error, "value", None)
        return cls(
            message=error.message,
            field=getattr(error, "field", None),
            value=str(value) if value is not None else None,
        )


class ValidationReport(BaseModel):
    """Snapshot of a ValidationResult.

    Attributes:
        is_valid: Whether the reported result was valid.
        errors: The result's errors, in order.
        source: Optional identifier of what was validated.
        created_at: ISO format timestamp of when the report was built.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: tuple[ErrorEntry, ...] = ()
    source: str | None = None
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    @classmethod
    def from_result(cls, result: ValidationResult, source: str | None = None) -> ValidationReport:
        """Build a report from a result.

        Example:
            report = ValidationReport.from_result(result, source="users.csv:42")
            report.model_dump_json()
        """
        return cls(
            is_valid=result.is_valid,
            errors=tuple(ErrorEntry.from_error(error) for error in result.errors),
            source=source,
        )

    @property
    def error_count(self) -> int:
        """Number of errors in the report."""
        return len(self.errors)

    def to_rows(self) -> list[dict[str, Any]]:
        """Export one dict per error, suitable for pd.DataFrame().

        Each row carries ``created_at`` and, when set, ``source``.
        """
        rows: list[dict[str, Any]] = []
        for entry in self.errors:
            row = entry.model_dump()
            row["created_at"] = self.created_at
            if self.source:
                row["source"] = self.source
            rows.append(row)
        return rows
