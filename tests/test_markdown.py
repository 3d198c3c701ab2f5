"""Tests for llmdoc.migration.markdown module."""

from llmdoc.migration.markdown import (
    extract_field,
    extract_items,
    extract_section,
    first_heading,
    iter_headings,
    parse_heading,
    split_csv,
    strip_html_comments,
)

ADR_DOC = """\
# ADR 3: Storage

## Context
We weighed options. The Decision below was hard.

## Decision
Use JSON files.
### Details
One file per record.

## Consequences
Only one writer at a time.
"""


class TestExtractSection:
    """Test extract_section function."""

    def test_returns_body_between_headings(self):
        assert extract_section(ADR_DOC, "Context") == "We weighed options. The Decision below was hard."

    def test_no_cross_contamination_from_name_in_body(self):
        """A section name mentioned in prose is not a heading."""
        context = extract_section(ADR_DOC, "Context")
        decision = extract_section(ADR_DOC, "Decision")
        assert "Use JSON files" not in context
        assert decision.startswith("Use JSON files.")

    def test_includes_deeper_headings(self):
        decision = extract_section(ADR_DOC, "Decision")
        assert decision == "Use JSON files.\n### Details\nOne file per record."

    def test_stops_at_next_heading_not_last(self):
        assert extract_section(ADR_DOC, "Decision").endswith("One file per record.")

    def test_runs_to_end_of_text(self):
        assert extract_section(ADR_DOC, "Consequences") == "Only one writer at a time."

    def test_missing_section_returns_none(self):
        assert extract_section(ADR_DOC, "Alternatives") is None

    def test_case_sensitive(self):
        assert extract_section(ADR_DOC, "context") is None

    def test_heading_free_and_empty_input(self):
        assert extract_section("just prose\nno headings", "Context") is None
        assert extract_section("", "Context") is None

    def test_empty_body(self):
        assert extract_section("## Context\n## Decision\nx", "Context") == ""

    def test_trims_heading_whitespace_and_closing_hashes(self):
        doc = "##   Goals  ##\n- a\n"
        assert extract_section(doc, "Goals") == "- a"

    def test_code_fence_comment_is_not_a_heading(self):
        doc = (
            "## Decision\nInstall it:\n```bash\n# install deps\npip install x\n```\n"
            "Then run.\n\n## Consequences\nnone"
        )
        decision = extract_section(doc, "Decision")
        assert decision == "Install it:\n```bash\n# install deps\npip install x\n```\nThen run."
        assert extract_section(doc, "Consequences") == "none"

    def test_fenced_heading_cannot_be_selected(self):
        doc = "~~~\n## Context\nfake\n~~~\n## Context\nreal\n"
        assert extract_section(doc, "Context") == "real"

    def test_longer_fence_needs_matching_close(self):
        doc = "## A\n````\n```\n# still code\n````\nafter\n## B\n"
        assert extract_section(doc, "A") == "````\n```\n# still code\n````\nafter"


class TestExtractItems:
    """Test extract_items function."""

    def test_mixed_markers(self):
        body = "- one\n* two\n[ ] three\nnot a bullet\n  - nested\n- [ ] four\n"
        assert extract_items(body) == ["one", "two", "three", "nested", "four"]

    def test_drops_empty_items(self):
        assert extract_items("-\n- \n* real\n[ ]\n") == ["real"]

    def test_bold_and_rules_are_not_bullets(self):
        assert extract_items("**Status:** done\n---\n- kept") == ["kept"]

    def test_checked_boxes(self):
        assert extract_items("- [x] done thing\n[X] other") == ["done thing", "other"]

    def test_empty_body(self):
        assert extract_items("") == []


class TestExtractField:
    """Test extract_field function."""

    def test_reads_value(self):
        assert extract_field("**Status:** In progress\n", "Status") == "In progress"

    def test_missing_field(self):
        assert extract_field("**Type:** Bug", "Status") is None

    def test_blank_value_is_none(self):
        assert extract_field("**Status:**   \n**Type:** Bug", "Status") is None

    def test_field_inside_bullet(self):
        assert extract_field("- **Owner:** platform", "Owner") == "platform"


class TestHelpers:
    """Test first_heading and split_csv."""

    def test_first_heading_level_one(self):
        assert first_heading("intro\n## Sub\n# Title\n# Later") == "Title"

    def test_first_heading_none(self):
        assert first_heading("## Only second level") is None

    def test_split_csv(self):
        assert split_csv("a, b,, c ,") == ["a", "b", "c"]
        assert split_csv(None) == []

    def test_first_heading_skips_code_fences(self):
        assert first_heading("```\n# not a title\n```\n# Title\n") == "Title"

    def test_strip_html_comments_keeps_surrounding_text(self):
        text = "**Status:** Done <!-- was blocked -->\nkeep <!-- a\nb --> this\n<!-- open"
        assert strip_html_comments(text) == "**Status:** Done \nkeep  this\n"


class TestParseHeading:
    """Test parse_heading and iter_headings."""

    def test_closing_hashes_need_space(self):
        assert parse_heading("## Uses C#").text == "Uses C#"
        assert parse_heading("## Title ##").text == "Title"
        assert parse_heading("# F# and C# #").text == "F# and C#"

    def test_not_a_heading(self):
        assert parse_heading("#hashtag") is None
        assert parse_heading("    text") is None

    def test_iter_headings_line_indexes(self):
        headings = iter_headings("# A\n```\n# B\n```\n## C\n")
        assert [(h.text, h.line_index) for h in headings] == [("A", 0), ("C", 4)]
