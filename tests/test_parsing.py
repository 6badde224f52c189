"""Tests for link extraction and frontmatter handling."""

import marklint.parsing
from marklint.core.models import ExtractedLink
from marklint.parsing import extract_external_links_with_line_numbers, strip_frontmatter


def urls(text):
    return [link.url for link in extract_external_links_with_line_numbers(text.split("\n"))]


# ============================================================
# link extraction
# ============================================================

def test_inline_link():
    assert urls("This is a [link](https://example.com/page).") == [
        "https://example.com/page",
    ]


def test_image_link():
    assert urls("Here: ![logo](https://example.com/logo.png)") == [
        "https://example.com/logo.png",
    ]


def test_bare_url():
    assert urls("Check this out: https://example.com/docs") == [
        "https://example.com/docs",
    ]


def test_non_http_links_ignored():
    assert urls("[Local](/relative/path)\n[FTP](ftp://example.com)") == []


def test_same_url_on_each_line_is_a_separate_link():
    lines = ["[Link1](https://dup.com)", "[Link2](https://dup.com)", "https://dup.com"]
    links = extract_external_links_with_line_numbers(lines)
    assert links == [
        ExtractedLink("https://dup.com", 1),
        ExtractedLink("https://dup.com", 2),
        ExtractedLink("https://dup.com", 3),
    ]


def test_same_url_twice_on_one_line_collapses():
    links = extract_external_links_with_line_numbers(
        ["See [docs](https://a.io) or https://a.io directly"]
    )
    assert links == [ExtractedLink("https://a.io", 1)]


def test_pattern_order_within_line():
    links = extract_external_links_with_line_numbers(
        ["https://b.io then [a](https://a.io)"]
    )
    assert [link.url for link in links] == ["https://a.io", "https://b.io"]


def test_bare_url_trailing_punctuation_dropped():
    assert urls('See "https://c.io" and https://d.io/page.') == [
        "https://c.io",
        "https://d.io/page",
    ]
    assert urls("Visit https://e.io, then https://f.io;") == ["https://e.io", "https://f.io"]


def test_bare_url_keeps_inner_punctuation():
    assert urls("https://g.io/a.b?x=1:2") == ["https://g.io/a.b?x=1:2"]


def test_offset_applied():
    links = extract_external_links_with_line_numbers(["text", "go to https://a.io"], offset=5)
    assert links == [ExtractedLink("https://a.io", 7)]


# ============================================================
# frontmatter
# ============================================================

def test_strip_frontmatter():
    content = '---\ntitle: "Test"\ndate: 2025-01-01\n---\n\n# Hello'
    assert strip_frontmatter(content) == ("# Hello", 5)


def test_strip_frontmatter_absent():
    assert strip_frontmatter("# Hello") == ("# Hello", 0)


def test_strip_frontmatter_incomplete():
    content = '---\ntitle: "Oops"'
    assert strip_frontmatter(content) == (content, 0)


# ============================================================
# package surface
# ============================================================

def test_public_names():
    assert sorted(marklint.parsing.__all__) == [
        "extract_external_links_with_line_numbers",
        "strip_frontmatter",
    ]
