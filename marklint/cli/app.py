"""
CLI entry point - command line interface built with Typer

Lint flow:
1. load the config file and apply command line overrides
2. expand the given paths into Markdown files
3. lint all files
4. print the report
5. set the exit code
"""

import os
import time
from typing import List, Optional

import typer
from rich.console import Console

from marklint.config import (
    DEFAULT_CONFIG_PATH,
    load_or_default,
    merge_overrides,
    validate_config,
    write_default_config,
)
from marklint.errors import ConfigError
from marklint.filters import expand_paths
from marklint.linter import Linter
from marklint.logging import configure_logging
from marklint.reporters import JsonReporter, Reporter, TextReporter

app = typer.Typer(
    name="marklint",
    help="marklint: checks Markdown files for heading structure, blank lines, broken links and more.",
    add_completion=False,
)

console = Console()


def should_fail(error_count: int, strict: bool) -> bool:
    """Findings fail the run in strict mode or on GitHub Actions."""
    if error_count == 0:
        return False
    return strict or os.environ.get("GITHUB_ACTIONS") == "true"


def get_reporter(output: str) -> Reporter:
    if output == "json":
        return JsonReporter()
    return TextReporter(console)


@app.command()
def check(
    paths: Optional[List[str]] = typer.Argument(
        None,
        help="Markdown files or directories (defaults to 'include' from the config)",
    ),
    config_path: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Path to the config file",
    ),
    min_heading: Optional[int] = typer.Option(
        None,
        "--min-heading",
        help="Expected level of the first heading (default: 2)",
    ),
    enable_link_check: Optional[bool] = typer.Option(
        None,
        "--enable-link-check/--disable-link-check",
        help="Verify external links over the network",
    ),
    heading_level_check: Optional[bool] = typer.Option(
        None,
        "--enable-heading-level-check/--disable-heading-level-check",
        help="Check heading levels",
    ),
    duplicate_heading_check: Optional[bool] = typer.Option(
        None,
        "--enable-duplicate-heading-check/--disable-duplicate-heading-check",
        help="Check for duplicate headings",
    ),
    blank_lines_check: Optional[bool] = typer.Option(
        None,
        "--enable-no-multiple-blank-lines-check/--disable-no-multiple-blank-lines-check",
        help="Check for multiple consecutive blank lines",
    ),
    setext_check: Optional[bool] = typer.Option(
        None,
        "--enable-no-setext-headings-check/--disable-no-setext-headings-check",
        help="Check for setext style headings",
    ),
    final_blank_line_check: Optional[bool] = typer.Option(
        None,
        "--enable-final-blank-line-check/--disable-final-blank-line-check",
        help="Check that files end with a newline",
    ),
    skip_link_patterns: Optional[List[str]] = typer.Option(
        None,
        "--skip-link-patterns",
        help="Regex of URLs not to check (repeatable)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: text (default) or json",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when issues are found, even outside CI",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """
    Lint Markdown files.

    Examples:
        marklint check README.md docs
        marklint check --enable-link-check --skip-link-patterns "localhost"
        marklint check --output json
    """
    configure_logging(verbose=verbose)
    start = time.perf_counter()

    try:
        config = load_or_default(config_path)
        config = merge_overrides(
            config,
            min_heading_level=min_heading,
            enable_link_check=enable_link_check,
            enable_heading_level_check=heading_level_check,
            enable_duplicate_heading_check=duplicate_heading_check,
            enable_no_multiple_blank_lines_check=blank_lines_check,
            enable_no_setext_headings_check=setext_check,
            enable_final_blank_line_check=final_blank_line_check,
            skip_link_patterns=skip_link_patterns or None,
            output=output,
        )
        validate_config(config)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    targets = paths or config.include
    if not targets:
        console.print(
            "[red]Error:[/red] please provide a markdown file or directory "
            f"(or set 'include' in {DEFAULT_CONFIG_PATH})"
        )
        raise typer.Exit(2)

    files = expand_paths(targets, config.ignore)

    linter = Linter(config)
    result = linter.run(files)
    elapsed = time.perf_counter() - start

    get_reporter(config.output).report(result, elapsed, config.enable_link_check)

    if should_fail(result.totals.errors, strict):
        raise typer.Exit(1)


@app.command()
def init(
    path: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--path",
        help="Where to write the config file",
    ),
) -> None:
    """Generate a default config file."""
    try:
        written = write_default_config(path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✔[/green] {written} created")


@app.command()
def version() -> None:
    """Show the version of marklint."""
    from marklint import __version__
    console.print(f"[bold]marklint[/bold] v{__version__}")


if __name__ == "__main__":
    app()
