"""
Text reporter - findings grouped per file plus a summary, colored with Rich
"""

from rich.console import Console
from rich.markup import escape

from marklint.core.models import RunResult


def format_elapsed(elapsed_seconds: float) -> str:
    """`12ms` under one second, `1.5s` from there on."""
    if elapsed_seconds < 1:
        return f"{int(elapsed_seconds * 1000)}ms"
    return f"{elapsed_seconds:.1f}s"


class TextReporter:
    """Line oriented terminal report"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: RunResult, elapsed_seconds: float, link_check_enabled: bool) -> None:
        self._print_findings(result)
        self._print_summary(result, elapsed_seconds, link_check_enabled)

    def _print_findings(self, result: RunResult) -> None:
        for path in result.ordered_paths:
            findings = result.findings_by_file.get(path, [])
            if not findings:
                continue
            self.console.print(f"Errors in {escape(path)}:", soft_wrap=True)
            for finding in findings:
                self.console.print(
                    f"  {escape(finding.file)}:{finding.line}: {escape(finding.message)}",
                    soft_wrap=True,
                )
            self.console.print()

    def _print_summary(self, result: RunResult, elapsed_seconds: float, link_check_enabled: bool) -> None:
        totals = result.totals

        self.console.print()
        if totals.errors > 0:
            self.console.print(f"[red]✖ {totals.errors} issues found[/red]")
        else:
            self.console.print("[green]✔ No issues found[/green]")

        stats = f"Checked {totals.files} file(s), {totals.lines} line(s)"
        if link_check_enabled:
            stats += f", {totals.links_checked} link(s)"
        self.console.print(
            f"[green]✓[/green] {stats} in [dim]{format_elapsed(elapsed_seconds)}[/dim]"
        )
