"""Console reporter: EnhancementReport → rich formatted output."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from deployenhance.domain.model.report import OutcomeStatus

if TYPE_CHECKING:
    from deployenhance.domain.model.report import DescriptorOutcome, EnhancementReport

_STATUS_STYLE = {
    OutcomeStatus.ENHANCED: "green",
    OutcomeStatus.FAILED: "red",
    OutcomeStatus.NOT_ATTEMPTED: "yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_class_roots: List class roots under each descriptor.
        show_errors: Show error text of failed / abandoned descriptors.
        width: Console width used by render().
    """

    show_class_roots: bool = True
    show_errors: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    render() returns a str, report() prints to the given console
    (stderr by default, stdout belongs to the host).
    """

    def __init__(self, config: ConsoleConfig | None = None, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            console: Destination for report(). Uses stderr console if None.
        """
        self._config = config or ConsoleConfig()
        self._console = console

    def report(self, report: EnhancementReport) -> None:
        """Print report to the configured console."""
        console = self._console or Console(stderr=True)
        self._render(console, report)

    def render(self, report: EnhancementReport) -> str:
        """Format report as rich formatted string.

        Args:
            report: Report to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)
        self._render(console, report)
        return output.getvalue()

    def _render(self, console: Console, report: EnhancementReport) -> None:
        """Render header, then outcomes table, then cleanup."""
        console.print()
        console.rule("[bold]DEPLOY-TIME ENHANCEMENT[/bold]")
        console.print()

        if report.skipped:
            console.print(
                f"[yellow]Skipped[/yellow]: enhancer not available "
                f"({len(report.locations)} location(s) not scanned)"
            )
            console.print()
            return

        console.print(
            f"[bold]Locations:[/bold] {len(report.locations)}  "
            f"[bold]Descriptors:[/bold] {report.descriptor_count}  "
            f"[bold]Enhanced:[/bold] {report.enhanced_count}  "
            f"[bold]Failed:[/bold] {report.failed_count}  "
            f"[bold]Classes:[/bold] {report.class_file_count}"
        )
        if report.aborted:
            console.print("[bold red]Aborted[/bold red]: options could not be created")
        console.print()

        if report.outcomes:
            console.print(self._outcomes_table(report.outcomes))
            console.print()

        if report.cleaned:
            console.print(f"[bold]Cleaned up[/bold] ({len(report.cleaned)})")
            for path in report.cleaned:
                console.print(f"  [dim]{path}[/dim]")
            console.print()

    def _outcomes_table(self, outcomes: tuple[DescriptorOutcome, ...]) -> Table:
        """One row per descriptor."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Descriptor", style="cyan")
        table.add_column("Status")
        table.add_column("Classes", justify="right")
        if self._config.show_class_roots:
            table.add_column("Class roots", style="dim")
        if self._config.show_errors:
            table.add_column("Error", style="red")

        for outcome in outcomes:
            style = _STATUS_STYLE[outcome.status]
            row = [
                str(outcome.descriptor),
                f"[{style}]{outcome.status.name}[/{style}]",
                str(outcome.class_file_count),
            ]
            if self._config.show_class_roots:
                row.append("\n".join(str(root) for root in outcome.class_roots))
            if self._config.show_errors:
                row.append(outcome.error or "")
            table.add_row(*row)

        return table
