"""
Unit Tests for the Em Dash Sanitizer.

Letters must never contain em dashes, en dashes or the horizontal bar.
"""

import pytest

from src.writing.no_em_dash import (
    EM_DASH,
    EN_DASH,
    HORIZONTAL_BAR,
    contains_em_dash,
    remove_em_dashes,
    sanitize_email,
)


class TestContainsEmDash:
    """Detection of forbidden dashes."""

    @pytest.mark.parametrize("dash", [EM_DASH, EN_DASH, HORIZONTAL_BAR])
    def test_detects_each_dash(self, dash):
        """Should flag every forbidden dash character."""
        assert contains_em_dash(f"a{dash}b") is True

    def test_plain_hyphen_is_allowed(self):
        """Should not flag ASCII hyphens."""
        assert contains_em_dash("Follow-up - Executive Assistant") is False

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        """Should treat empty input as dash free."""
        assert contains_em_dash(text) is False


class TestRemoveEmDashes:
    """Replacement rules."""

    def test_spaced_em_dash(self):
        """Should turn a spaced em dash into a comma."""
        assert remove_em_dashes("Thanks — it went well") == "Thanks, it went well"

    def test_unspaced_en_dash(self):
        """Should turn an unspaced en dash into a comma plus space."""
        assert remove_em_dashes("Q3–Q4 planning") == "Q3, Q4 planning"

    def test_horizontal_bar(self):
        """Should handle the horizontal bar like an em dash."""
        assert remove_em_dashes("One―two") == "One, two"

    def test_run_of_dashes(self):
        """Should collapse consecutive dashes into one comma."""
        assert remove_em_dashes("wait——what") == "wait, what"

    def test_leading_dash_dropped(self):
        """Should drop a dash that opens a line."""
        text = "Highlights:\n— Calendar audits\n– Travel policy"
        assert remove_em_dashes(text) == "Highlights:\nCalendar audits\nTravel policy"

    def test_no_double_comma(self):
        """Should not leave ',,' when a comma precedes the dash."""
        assert remove_em_dashes("budget, — and travel") == "budget, and travel"

    def test_no_trailing_space_at_line_end(self):
        """Should not leave ', ' dangling at the end of a line."""
        assert remove_em_dashes("We covered travel —\nand more") == "We covered travel,\nand more"

    def test_preserves_paragraph_breaks(self):
        """Should keep blank lines between paragraphs."""
        text = "Hi Sam,\n\nThanks — really.\n\nBest,"
        assert remove_em_dashes(text) == "Hi Sam,\n\nThanks, really.\n\nBest,"

    def test_text_without_dashes_unchanged(self):
        """Should return dash-free text exactly as given."""
        text = "Hi Sam,  \n\nA plain - hyphen stays.  "
        assert remove_em_dashes(text) == text

    def test_empty_string(self):
        """Should return empty input unchanged."""
        assert remove_em_dashes("") == ""

    @pytest.mark.parametrize("text", [
        "Thanks — it went well",
        "— leading\n– another — with — several",
        "a,—,b – c ―",
        "no dashes at all",
    ])
    def test_idempotent(self, text):
        """Should give the same result when applied twice."""
        once = remove_em_dashes(text)
        assert remove_em_dashes(once) == once
        assert not contains_em_dash(once)


class TestSanitizeEmail:
    def test_sanitizes_subject_and_body(self):
        """Should clean both parts of an email."""
        subject, body = sanitize_email("Thank you — EA", "Hi — Sam")
        assert subject == "Thank you, EA"
        assert body == "Hi, Sam"
