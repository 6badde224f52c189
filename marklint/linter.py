"""
Linter - runs the enabled rules over every input file

Flow per file:
1. read the file
2. strip frontmatter, remembering how many lines were removed
3. run the enabled rule checkers and, if enabled, the link verifier
4. merge findings and sort them by line

Files are processed concurrently; results are aggregated under one lock and
reported in sorted path order.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from marklint.config import LintConfig
from marklint.core.code_blocks import CodeBlockRanges
from marklint.core.models import FileResult, LintFinding, RunResult
from marklint.filters.expand import read_file as default_read_file
from marklint.parsing.frontmatter import strip_frontmatter as default_strip_frontmatter
from marklint.rules import (
    check_duplicate_headings,
    check_empty_alt_text,
    check_final_blank_line,
    check_heading_levels,
    check_no_multiple_blank_lines,
    check_no_setext_headings,
    check_unclosed_code_blocks,
)
from marklint.verification.links import (
    DEFAULT_MAX_CONCURRENCY,
    ExternalLinkVerifier,
    LinkCache,
    compile_skip_patterns,
)

logger = logging.getLogger(__name__)

# Upper bound on files linted at the same time
MAX_FILE_WORKERS = 32


class Linter:
    """Lints Markdown files with one configuration."""

    def __init__(
        self,
        config: LintConfig,
        verifier: Optional[ExternalLinkVerifier] = None,
        read_file: Callable[[str], str] = default_read_file,
        strip_frontmatter: Callable[[str], tuple[str, int]] = default_strip_frontmatter,
    ):
        """
        Initialize the linter.

        Args:
            config: lint options
            verifier: link verifier, created from the config when link checking
                is enabled and none is given
            read_file: returns the text of a path
            strip_frontmatter: returns (body, lines removed)
        """
        self.config = config
        self.read_file = read_file
        self.strip_frontmatter = strip_frontmatter
        self.link_cache = LinkCache()
        self.skip_patterns = []
        self.verifier = verifier

        if config.enable_link_check:
            self.skip_patterns = compile_skip_patterns(config.skip_link_patterns)
            if self.verifier is None:
                self.verifier = ExternalLinkVerifier(
                    timeout=config.link_check_timeout_seconds,
                    pool_size=MAX_FILE_WORKERS * DEFAULT_MAX_CONCURRENCY,
                )

    def lint_content(self, path: str, content: str) -> FileResult:
        """
        Lint the content of one file.

        Args:
            path: reported as the finding's file
            content: full file content, frontmatter included

        Returns:
            FileResult with findings sorted by line
        """
        cfg = self.config
        body, offset = self.strip_frontmatter(content)
        lines = body.split("\n")
        code_blocks = CodeBlockRanges.scan(lines)

        findings: list[LintFinding] = []
        if cfg.enable_final_blank_line_check:
            findings.extend(check_final_blank_line(path, lines, offset))
        if cfg.enable_unclosed_code_block_check:
            findings.extend(check_unclosed_code_blocks(path, lines, offset, code_blocks))
        if cfg.enable_empty_alt_text_check:
            findings.extend(check_empty_alt_text(path, lines, offset, code_blocks))
        if cfg.enable_heading_level_check:
            findings.extend(check_heading_levels(
                path, lines, offset, code_blocks, cfg.min_heading_level
            ))
        if cfg.enable_duplicate_heading_check:
            findings.extend(check_duplicate_headings(path, lines, offset, code_blocks))
        if cfg.enable_no_multiple_blank_lines_check:
            findings.extend(check_no_multiple_blank_lines(path, lines, offset, code_blocks))
        if cfg.enable_no_setext_headings_check:
            findings.extend(check_no_setext_headings(path, lines, offset, code_blocks))

        links_checked = 0
        if cfg.enable_link_check and self.verifier is not None:
            link_findings, links_checked = self.verifier.check(
                path, lines, offset, self.skip_patterns, self.link_cache
            )
            findings.extend(link_findings)

        # stable: findings on the same line keep checker order
        findings.sort(key=lambda f: f.line)

        return FileResult(
            findings=findings,
            line_count=content.count("\n") + 1,
            links_checked=links_checked,
        )

    def run(self, paths: list[str]) -> RunResult:
        """
        Lint files concurrently.

        A path given twice is linted once. A file that cannot be read is
        recorded in `failed_files` and contributes nothing else.

        Args:
            paths: Markdown file paths

        Returns:
            RunResult with paths sorted for output
        """
        unique_paths = list(dict.fromkeys(paths))
        result = RunResult()
        result.totals.files = len(unique_paths)
        lock = threading.Lock()

        def lint_path(path: str) -> None:
            try:
                content = self.read_file(path)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read {path}: {e}")
                with lock:
                    result.failed_files[path] = str(e)
                return

            file_result = self.lint_content(path, content)

            with lock:
                result.findings_by_file[path] = file_result.findings
                result.ordered_paths.append(path)
                result.totals.errors += len(file_result.findings)
                result.totals.lines += file_result.line_count
                result.totals.links_checked += file_result.links_checked

        if unique_paths:
            workers = min(MAX_FILE_WORKERS, len(unique_paths))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                for future in [executor.submit(lint_path, p) for p in unique_paths]:
                    future.result()

        result.ordered_paths.sort()
        return result
