"""Reporter protocol for enhancement reports.

Users implement this Protocol to route reports anywhere.
deployenhance provides ConsoleReporter (rich) as default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from deployenhance.domain.model.report import EnhancementReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Called once per deployment event, after cleanup.
    """

    def report(self, report: EnhancementReport) -> None:
        """Report what happened during one deployment event.

        Args:
            report: Complete event report
        """
        ...
