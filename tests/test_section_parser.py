"""Tests for the section parser."""

from __future__ import annotations

import pytest

from llmsdocs.schemas import DocSection
from llmsdocs.section_parser import (
    is_sub_heading,
    is_top_level_heading,
    parse_sections,
    slugify_heading,
)


class TestHeadingDetection:
    """Tests for heading prefix detection."""

    @pytest.mark.parametrize(
        ("line", "top_level", "sub"),
        [
            ("# Intro", True, False),
            ("## Details", False, True),
            ("### Deep", False, False),
            ("#NoSpace", False, False),
            (" # Indented", False, False),
            ("plain text", False, False),
        ],
    )
    def test_prefixes(self, line: str, top_level: bool, sub: bool) -> None:
        assert is_top_level_heading(line) is top_level
        assert is_sub_heading(line) is sub


class TestSlugifyHeading:
    """Tests for slugify_heading function."""

    def test_lowercases_and_joins_words(self) -> None:
        assert slugify_heading("Getting Started") == "getting_started"

    def test_collapses_whitespace_runs(self) -> None:
        assert slugify_heading("Getting   Started\tGuide") == "getting_started_guide"

    def test_ignores_surrounding_whitespace(self) -> None:
        assert slugify_heading("  Orders  ") == "orders"


class TestParseSections:
    """Tests for parse_sections function."""

    def test_sample_document(self, sample_doc: str) -> None:
        """Top-level body, sub-section and next top-level come out in order."""
        assert parse_sections(sample_doc) == [
            DocSection(title="Intro", content="Hello world", path="intro"),
            DocSection(title="Intro | Details", content="## Details\nMore text", path="intro"),
            DocSection(title="Next", content="Other content", path="next"),
        ]

    def test_single_sub_section(self) -> None:
        """A sub-heading directly under its parent yields one nested section."""
        sections = parse_sections("# A\n## B\nx")

        assert len(sections) == 1
        assert sections[0].title == "A | B"
        assert sections[0].content.splitlines() == ["## B", "x"]
        assert sections[0].path == "a"

    def test_drops_heading_without_body(self) -> None:
        sections = parse_sections("# First\n# Second\nbody")

        assert [section.title for section in sections] == ["Second"]

    def test_drops_whitespace_only_body(self) -> None:
        sections = parse_sections("# First\n   \n\n# Second\nbody")

        assert [section.title for section in sections] == ["Second"]

    def test_drops_empty_trailing_section(self) -> None:
        sections = parse_sections("# First\nbody\n# Trailing\n")

        assert [section.title for section in sections] == ["First"]

    def test_discards_lines_before_first_heading(self) -> None:
        sections = parse_sections("stray line\n## Orphan\nmore\n# Real\nbody")

        assert sections == [DocSection(title="Real", content="body", path="real")]

    def test_deeper_headings_are_content(self) -> None:
        sections = parse_sections("# A\n## B\ntext\n### C\ndeep text")

        assert len(sections) == 1
        assert sections[0].title == "A | B"
        assert sections[0].content == "## B\ntext\n### C\ndeep text"

    def test_sub_heading_without_body_keeps_heading_line(self) -> None:
        sections = parse_sections("# A\n## B\n## C\nbody")

        assert [(s.title, s.content) for s in sections] == [
            ("A | B", "## B"),
            ("A | C", "## C\nbody"),
        ]

    def test_sub_sections_share_parent_path(self, guide_doc: str) -> None:
        sections = parse_sections(guide_doc)

        assert [(s.title, s.path) for s in sections] == [
            ("Getting Started", "getting_started"),
            ("Getting Started | Installation", "getting_started"),
            ("Getting Started | Configuration", "getting_started"),
            ("Payment Providers", "payment_providers"),
            ("Payment Providers | Stripe", "payment_providers"),
            ("Orders", "orders"),
        ]

    def test_content_is_trimmed(self) -> None:
        sections = parse_sections("# A\n\n   padded body   \n\n")

        assert sections[0].content == "padded body"

    def test_content_comes_from_document(self, guide_doc: str) -> None:
        """Every section body is a verbatim slice of the input."""
        for section in parse_sections(guide_doc):
            assert section.content in guide_doc

    def test_url_and_category_are_not_populated(self, guide_doc: str) -> None:
        for section in parse_sections(guide_doc):
            assert section.url is None
            assert section.category is None

    @pytest.mark.parametrize("text", ["", "\n\n", "no headings here\n## still none"])
    def test_headingless_input_yields_nothing(self, text: str) -> None:
        assert parse_sections(text) == []

    def test_parsing_is_deterministic(self, guide_doc: str) -> None:
        assert parse_sections(guide_doc) == parse_sections(guide_doc)
