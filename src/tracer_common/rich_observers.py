"""Rich-based observer for validation chain output.

Prints check failures and chain outcomes to a Rich console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracer_common.events import (
    ValidationEvent,
    ValidationEventType,
    ValidationObserver,
)

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["RichConsoleObserver"]


class RichConsoleObserver(ValidationObserver):
    """Console output for validation chains.

    Prints one line per failed or skipped check, per null-value error and per
    dispatched outcome. With verbose=True passed checks are printed too.

    Example:
        observer = RichConsoleObserver(prefix="span")
        AcceptableValidator.of(span).with_observer(observer).on(...).validate(s, e)
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        prefix: str = "validate",
        verbose: bool = False,
    ) -> None:
        """Initialize the console observer.

        Args:
            console: Rich Console instance. If None, creates a new one.
            prefix: Label printed at the start of each line.
            verbose: If True, also print passed checks.
        """
        from rich.console import Console

        self._console = console or Console()
        self._prefix = prefix
        self._verbose = verbose
        self._passed = 0
        self._failed = 0

    @property
    def counts(self) -> dict[str, int]:
        """Number of successful and failed dispatches seen."""
        return {"passed": self._passed, "failed": self._failed}

    def on_event(self, event: ValidationEvent) -> None:
        """Print a line for the event, if it is one worth showing.

        Args:
            event: The validation event to handle.
        """
        data = event.data
        label = f"[bold blue]{self._prefix}[/]"

        if event.event_type == ValidationEventType.CHECK_FAILED:
            self._console.print(
                f"{label} [red]✗ {data.get('check')}[/] "
                f"{self._format_error(data.get('code'), data.get('message'))}"
            )

        elif event.event_type == ValidationEventType.NULL_VALUE:
            self._console.print(
                f"{label} [red]✗ null value[/] "
                f"{self._format_error(data.get('code'), data.get('message'))}"
            )

        elif event.event_type == ValidationEventType.CHECK_SKIPPED:
            self._console.print(
                f"{label} [yellow]- {data.get('check')}[/] [dim]skipped ({data.get('reason')})[/]"
            )

        elif event.event_type == ValidationEventType.CHECK_PASSED:
            if self._verbose:
                self._console.print(f"{label} [green]✓ {data.get('check')}[/]")

        elif event.event_type == ValidationEventType.VALIDATION_COMPLETED:
            if data.get("is_valid"):
                self._passed += 1
                self._console.print(f"{label} [bold green]valid[/]")
            else:
                self._failed += 1
                self._console.print(
                    f"{label} [bold red]invalid[/] "
                    f"{self._format_error(data.get('code'), data.get('message'))}"
                )

    @staticmethod
    def _format_error(code: str | None, message: str | None) -> str:
        from rich.markup import escape

        text = escape(message or "")
        if code:
            return f"[cyan]{escape(f'[{code}]')}[/] {text}"
        return text
