"""
pai-guard — Reporting and output formatting.

Handles:
- Per-file pass/fail lines (in file-set order)
- Violation itemization
- Final pass/fail banner
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .checker import FileResult

REMEDIATION_HINTS = (
    "Remove API keys, tokens and other secrets",
    "Remove personal email addresses and phone numbers",
    "Replace personal names with template placeholders",
    "Move private configuration into untracked files",
)


def _emit(console: Console, text: str) -> None:
    # paths and matched text are shown verbatim, never as :emoji: codes
    console.print(text, emoji=False, highlight=False)


class Reporter:
    """Collects per-file results and renders them."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self.console = console or Console(soft_wrap=True, emoji=False, highlight=False)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)
        self.results: list[FileResult] = []

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    @property
    def failures(self) -> list[FileResult]:
        return [r for r in self.results if not r.valid]

    @property
    def passed(self) -> bool:
        return all(r.valid for r in self.results)

    def header(self, mode: str, count: int) -> None:
        _emit(self.console, f"[bold cyan]pai-guard[/] checking {count} {mode} file(s)")

    def notice(self, message: str) -> None:
        _emit(self.console, f"[yellow]{escape(message)}[/]")

    def fatal(self, message: str) -> None:
        _emit(self.err_console, f"[bold red]ERROR:[/] {escape(message)}")

    def render_file(self, result: FileResult) -> None:
        if result.valid:
            _emit(self.console, f"[green]✓[/] {escape(result.file)}")
            return
        _emit(self.err_console, f"[red]✗[/] {escape(result.file)}")
        for message in result.violations:
            _emit(self.err_console, f"    [red]-[/] {escape(message)}")

    def render_summary(self) -> None:
        if self.passed:
            self.console.print(Panel(
                f"All {len(self.results)} file(s) passed protected-content checks",
                title="PASS", border_style="green",
            ))
            return

        violation_count = sum(len(r.violations) for r in self.failures)
        lines = [
            f"{len(self.failures)} of {len(self.results)} file(s) failed "
            f"with {violation_count} violation(s)",
            "",
            "Before committing:",
        ]
        lines.extend(f"  • {hint}" for hint in REMEDIATION_HINTS)
        self.err_console.print(Panel(
            "\n".join(lines), title="FAIL", border_style="red",
        ))

    def render(self) -> None:
        """Print every collected result in order, then the banner."""
        for result in self.results:
            self.render_file(result)
        self.render_summary()
