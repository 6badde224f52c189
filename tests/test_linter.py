"""Tests for the linter: rule orchestration and concurrent runs."""

from unittest.mock import MagicMock

from marklint.config import LintConfig
from marklint.core.models import LintFinding
from marklint.linter import MAX_FILE_WORKERS, Linter
from marklint.verification import DEFAULT_MAX_CONCURRENCY, ExternalLinkVerifier


def lines_and_messages(findings):
    return [(f.line, f.message) for f in findings]


# ============================================================
# lint_content
# ============================================================

def test_clean_document():
    result = Linter(LintConfig()).lint_content("README.md", "## Title\n\nSome text.\n")
    assert result.findings == []
    assert result.line_count == 4
    assert result.links_checked == 0


def test_findings_sorted_and_offset_by_frontmatter():
    content = "---\ntitle: x\n---\n\n# Title\n### Skipped\n\n\n\ntext"
    result = Linter(LintConfig()).lint_content("doc.md", content)

    assert lines_and_messages(result.findings) == [
        (5, "First heading should be level 2 (found level 1)"),
        (6, "Heading level jumped from 1 to 3"),
        (8, "Multiple consecutive blank lines"),
        (9, "Multiple consecutive blank lines"),
        (10, "Missing final blank line"),
    ]
    assert all(f.file == "doc.md" for f in result.findings)
    assert result.line_count == 10


def test_same_line_keeps_checker_order():
    # both findings land on line 1 and keep checker order
    result = Linter(LintConfig()).lint_content("a.md", "```")
    assert [f.message for f in result.findings] == [
        "Missing final blank line",
        "Unclosed code block",
    ]


def test_disabled_rules_not_run():
    config = LintConfig(
        enable_heading_level_check=False,
        enable_final_blank_line_check=False,
        enable_duplicate_heading_check=False,
    )
    result = Linter(config).lint_content("a.md", "# One\n# One")
    assert result.findings == []


def test_all_rules_reported():
    content = "\n".join([
        "# Top",
        "Title",
        "=====",
        "",
        "",
        "",
        "# Top",
        "![ ](img.png)",
        "```",
    ])
    result = Linter(LintConfig()).lint_content("all.md", content)

    messages = {f.message for f in result.findings}
    assert messages == {
        "First heading should be level 2 (found level 1)",
        "Setext heading found (prefer ATX style instead)",
        "Multiple consecutive blank lines",
        'duplicate heading: "top"',
        "image with empty alt text",
        "Unclosed code block",
        "Missing final blank line",
    }


def test_deterministic():
    content = "# A\n#### B\n\n\n\n# A\n"
    linter = Linter(LintConfig())
    assert linter.lint_content("x.md", content) == linter.lint_content("x.md", content)


def test_link_findings_merged():
    verifier = MagicMock()
    verifier.check.return_value = (
        [LintFinding(file="a.md", line=1, message="Link unreachable: https://x.example")],
        1,
    )
    config = LintConfig(enable_link_check=True, skip_link_patterns=["localhost"])
    linter = Linter(config, verifier=verifier)

    result = linter.lint_content("a.md", "https://x.example\n## Title\n")

    assert result.links_checked == 1
    assert lines_and_messages(result.findings) == [
        (1, "Link unreachable: https://x.example"),
    ]
    args = verifier.check.call_args.args
    assert args[0] == "a.md"
    assert args[2] == 0
    assert [p.pattern for p in args[3]] == ["localhost"]
    assert args[4] is linter.link_cache


def test_link_check_disabled_never_calls_verifier():
    verifier = MagicMock()
    Linter(LintConfig(), verifier=verifier).lint_content("a.md", "https://x.example\n")
    verifier.check.assert_not_called()


def test_link_cache_shared_across_files(fake_session):
    url = "https://example.com/404"
    session = fake_session({url: [404]})
    verifier = ExternalLinkVerifier(session=session, sleep=lambda seconds: None)
    linter = Linter(LintConfig(enable_link_check=True), verifier=verifier)

    first = linter.lint_content("a.md", f"## A\n\n{url}\n")
    second = linter.lint_content("b.md", f"## B\n\n{url}\n")

    assert lines_and_messages(first.findings) == [(3, f"Link unreachable: {url}")]
    assert lines_and_messages(second.findings) == [(3, f"Link unreachable: {url}")]
    assert session.count(url) == 1


# ============================================================
# run
# ============================================================

def test_run_aggregates_totals():
    files = {
        "b.md": "# B\n",
        "a.md": "## A\n\ntext",
        "c.md": "## C\n",
    }
    linter = Linter(LintConfig(), read_file=files.__getitem__)

    result = linter.run(["b.md", "a.md", "c.md", "a.md"])

    assert result.ordered_paths == ["a.md", "b.md", "c.md"]
    assert result.totals.files == 3
    assert result.totals.errors == 2
    assert result.totals.lines == 2 + 3 + 2
    assert result.findings_by_file["c.md"] == []
    assert lines_and_messages(result.findings_by_file["a.md"]) == [
        (3, "Missing final blank line"),
    ]
    assert result.failed_files == {}


def test_run_records_unreadable_files(caplog):
    def read_file(path):
        if path == "missing.md":
            raise FileNotFoundError("no such file")
        return "## Ok\n"

    result = Linter(LintConfig(), read_file=read_file).run(["ok.md", "missing.md"])

    assert result.ordered_paths == ["ok.md"]
    assert result.failed_files == {"missing.md": "no such file"}
    assert result.totals.files == 2
    assert result.totals.errors == 0
    assert "Failed to read missing.md" in caplog.text


def test_run_many_files():
    paths = [f"doc{i:03d}.md" for i in range(100)]
    linter = Linter(LintConfig(), read_file=lambda path: "# Wrong level\n")

    result = linter.run(list(reversed(paths)))

    assert result.ordered_paths == paths
    assert result.totals.errors == 100
    assert all(len(result.findings_by_file[p]) == 1 for p in paths)


def test_run_empty():
    result = Linter(LintConfig()).run([])
    assert result.ordered_paths == []
    assert result.totals.files == 0


def test_link_check_session_pool_covers_all_workers():
    linter = Linter(LintConfig(enable_link_check=True))
    adapter = linter.verifier.session.get_adapter("https://example.com")
    assert adapter.poolmanager.connection_pool_kw["maxsize"] == (
        MAX_FILE_WORKERS * DEFAULT_MAX_CONCURRENCY
    )
