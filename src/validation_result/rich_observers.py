"""Rich-based display of validation results.

Provides a table renderer for a single ValidationResult and an observer that
prints a summary line whenever a composite validation completes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from validation_result.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console
    from rich.table import Table

    from validation_result.results import ValidationResult

__all__ = ["RichResultObserver", "render_result"]

_MAX_MESSAGE_WIDTH = 80


def render_result(result: ValidationResult, title: str = "Validation result") -> Table:
    """Render a result as a Rich table with one row per error.

    A valid result renders an empty table whose caption reports the pass.

    Args:
        result: The result to render.
        title: Table title.

    Returns:
        A Rich Table ready for ``Console.print``.
    """
    from rich.table import Table

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("#", justify="right", width=4)
    table.add_column("Field", style="cyan", width=20)
    table.add_column("Error", style="yellow")
    table.add_column("Value", style="dim", width=20)

    for index, error in enumerate(result.errors, start=1):
        message = error.message
        if len(message) > _MAX_MESSAGE_WIDTH:
            message = message[:_MAX_MESSAGE_WIDTH] + "..."
        field = getattr(error, "field", None)
        value = getattr(error, "value", None)
        table.add_row(
            str(index),
            field if field is not None else "-",
            message,
            str(value) if value is not None else "-",
        )

    if result.is_valid:
        table.caption = "[green]✓ valid[/]"
    else:
        table.caption = f"[red]✗ {len(result.errors):,} error(s)[/]"

    return table


class RichResultObserver(ValidationObserver):
    """Print a summary of each completed composite validation.

    Example:
        observer = RichResultObserver(show_errors=True)
        composite.add_observer(observer)
        composite.validate(user)
        # contact_checks ✗ 2 error(s) in 0.4 ms
        # ...followed by the error table
    """

    def __init__(self, console: Console | None = None, show_errors: bool = False) -> None:
        """Initialize the observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            show_errors: Also print the error table for invalid results.
        """
        from rich.console import Console

        self._console = console or Console()
        self._show_errors = show_errors
        self._completed = 0
        self._failed = 0

    @property
    def completed(self) -> int:
        """Number of completed validations seen."""
        return self._completed

    @property
    def failed(self) -> int:
        """Number of completed validations that were invalid."""
        return self._failed

    def on_event(self, event: ValidationEvent) -> None:
        result = event.result
        if event.event_type != ValidationEventType.VALIDATION_COMPLETED or result is None:
            return

        self._completed += 1
        name = event.validator_name
        duration_ms = event.data.get("duration_ms", 0.0)

        if result.is_valid:
            self._console.print(f"[bold]{name}[/] [green]✓ valid[/] in {duration_ms:.1f} ms")
            return

        self._failed += 1
        self._console.print(
            f"[bold]{name}[/] [red]✗ {len(result.errors):,} error(s)[/] in {duration_ms:.1f} ms"
        )
        if self._show_errors:
            self._console.print(render_result(result, title=name))
