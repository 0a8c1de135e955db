"""
Unit Tests for the cliche phrase linter.
"""

import pytest

from src.writing.phrase_lint import (
    CLICHE_PHRASES,
    count_cliches,
    has_too_many_cliches,
    lint_phrases,
)
from src.writing.types import PhraseWarning


class TestLintPhrases:
    """Detection and ordering."""

    def test_clean_text_has_no_warnings(self):
        """Should report nothing for specific, plain writing."""
        text = "Thank you for explaining the travel booking changes. I rebuilt a similar process last year."
        assert lint_phrases(text) == []

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        """Should return an empty list for empty input."""
        assert lint_phrases(text) == []

    def test_case_insensitive(self):
        """Should match regardless of case."""
        warnings = lint_phrases("I AM PASSIONATE ABOUT calendars")
        assert [w.phrase for w in warnings] == ["passionate about"]

    def test_reports_position(self):
        """Should report the index of the match in the original text."""
        text = "Honestly, it was a pleasure."
        warnings = lint_phrases(text)
        assert warnings[0].index == text.index("it was")

    def test_overlapping_phrases_both_reported(self):
        """Should report each denylist entry that matches, even when they overlap."""
        warnings = lint_phrases("Please do not hesitate to reach out.")

        assert [w.phrase for w in warnings] == [
            "Please do not hesitate to",
            "do not hesitate to reach out",
        ]
        assert [w.index for w in warnings] == [0, 7]

    def test_sorted_by_index(self):
        """Should order warnings by position, not by denylist order."""
        text = "Let's circle back. I am passionate about this. At the end of the day it matters."
        warnings = lint_phrases(text)
        indices = [w.index for w in warnings]

        assert indices == sorted(indices)
        assert [w.phrase for w in warnings] == [
            "circle back",
            "passionate about",
            "at the end of the day",
        ]

    def test_repeated_phrase_reported_each_time(self):
        """Should report every occurrence."""
        assert count_cliches("synergy and more synergy") == 2

    @pytest.mark.parametrize("text,phrase", [
        ("I look forward to hearing from you.", "Looking forward to hearing from you"),
        ("Looking forward to hearing from you!", "Looking forward to hearing from you"),
        ("I'm very interested in the role", "I am very interested in"),
        ("I am confident that I would be an asset", "I am confident I would be"),
        ("I'm a perfect fit", "I am a great/perfect/strong fit"),
        ("I'm so thrilled to apply", "I am thrilled to apply"),
        ("This is my dream job", "dream job"),
    ])
    def test_variants(self, text, phrase):
        """Should match the common spellings of each phrase."""
        assert phrase in [w.phrase for w in lint_phrases(text)]

    def test_warning_carries_suggestion(self):
        """Should attach a non-empty suggestion to every warning."""
        warning = lint_phrases("We touched base yesterday")[0]
        assert isinstance(warning, PhraseWarning)
        assert warning.suggestion
        assert warning.to_dict()["phrase"] == "touched base"

    def test_every_entry_has_suggestion(self):
        """Should never ship a denylist entry without advice."""
        for _, phrase, suggestion in CLICHE_PHRASES:
            assert phrase and suggestion


class TestClicheCounts:
    def test_count(self):
        assert count_cliches("Thank you for your time and consideration") == 1

    def test_threshold(self):
        text = "I am passionate about this. Let's circle back."
        assert has_too_many_cliches(text) is True
        assert has_too_many_cliches(text, threshold=3) is False
        assert has_too_many_cliches("plain text") is False
