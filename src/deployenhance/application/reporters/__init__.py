"""Reporters for enhancement reports."""

from deployenhance.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
