"""
Unit Tests for letter export helpers.
"""

from datetime import date

import pytest
from docx import Document

from src.writing.format_export import (
    ExportFormat,
    format_email,
    generate_filename,
    save_as_docx,
    save_as_txt,
)
from src.writing.no_em_dash import contains_em_dash

BODY = "Hi Sam,\n\nThank you for the conversation.\n\n\n\nBest,\n\n[Your Name]"


class TestFormatEmail:
    """Per-client formatting."""

    def test_plain_leaves_body_untouched(self):
        """Should only prefix the subject for plain output."""
        result = format_email("Thanks", BODY, export_format="plain")
        assert result == f"Subject: Thanks\n\n{BODY}"

    def test_gmail_collapses_blank_lines(self):
        """Should collapse runs of blank lines to a single one."""
        result = format_email("Thanks", BODY, export_format=ExportFormat.GMAIL)
        assert "\n\n\n" not in result
        assert result.endswith("Best,\n\n[Your Name]")

    def test_outlook_tightens_signoff(self):
        """Should put the sign-off directly above the name."""
        result = format_email("Thanks", BODY, export_format="outlook")
        assert result.endswith("conversation.\n\nBest,\n[Your Name]")

    def test_without_subject(self):
        """Should return only the body when the subject is excluded."""
        assert format_email("Thanks", "Hi Sam,", include_subject=False) == "Hi Sam,"

    def test_unknown_format_raises(self):
        """Should reject formats it does not know."""
        with pytest.raises(ValueError):
            format_email("Thanks", BODY, export_format="pdf")


class TestGenerateFilename:
    def test_strips_punctuation(self):
        """Should drop punctuation and join words with underscores."""
        name = generate_filename("Acme, Inc.", today=date(2025, 1, 31))
        assert name == "Thank_You_Acme_Inc_2025-01-31"

    def test_truncates_long_company_names(self):
        """Should cap the company part at 30 characters."""
        name = generate_filename("A" * 50, today=date(2025, 1, 31))
        assert name == f"Thank_You_{'A' * 30}_2025-01-31"

    def test_custom_prefix(self):
        name = generate_filename("Acme", prefix="Follow_Up", today=date(2025, 2, 1))
        assert name == "Follow_Up_Acme_2025-02-01"


class TestSaveAsTxt:
    """Writing letters to disk."""

    def test_writes_utf8_file(self, tmp_path):
        """Should write the content and add a .txt suffix."""
        path = save_as_txt("Hi Sam, café time", "letter", tmp_path)

        assert path == tmp_path / "letter.txt"
        assert path.read_text(encoding="utf-8") == "Hi Sam, café time"

    def test_keeps_existing_suffix(self, tmp_path):
        path = save_as_txt("Hi", "letter.txt", tmp_path)
        assert path.name == "letter.txt"

    def test_creates_directory(self, tmp_path):
        """Should create a missing output directory."""
        path = save_as_txt("Hi", "letter", tmp_path / "nested" / "letters")
        assert path.exists()

    def test_sanitizes_em_dashes(self, tmp_path):
        """Should never write an em dash to disk."""
        path = save_as_txt("Thanks — Sam", "letter", tmp_path)
        assert path.read_text(encoding="utf-8") == "Thanks, Sam"


class TestSaveAsDocx:
    """Writing letters as Word documents."""

    LETTER_BODY = "Hi Sam,\n\nThanks — the travel chat was useful.\n\nBest,\n\n[Your Name]"

    def test_one_paragraph_per_block_after_bold_subject(self, tmp_path):
        """Should write a bold subject then one paragraph per body block."""
        path = save_as_docx("Thank you – EA", self.LETTER_BODY, "letter", tmp_path)

        assert path == tmp_path / "letter.docx"
        doc = Document(str(path))
        paragraphs = doc.paragraphs

        assert len(paragraphs) == 1 + 4
        assert paragraphs[0].text == "Subject: Thank you, EA"
        assert paragraphs[0].runs[0].bold is True
        assert paragraphs[1].text == "Hi Sam,"
        assert paragraphs[-1].text == "[Your Name]"

    def test_no_em_dashes_written(self, tmp_path):
        """Should sanitize subject and body before writing."""
        path = save_as_docx("Thank you — EA", self.LETTER_BODY, "letter", tmp_path)

        doc = Document(str(path))
        assert not any(contains_em_dash(p.text) for p in doc.paragraphs)

    def test_body_font(self, tmp_path):
        path = save_as_docx("Thanks", "Hi Sam,", "letter", tmp_path)

        run = Document(str(path)).paragraphs[1].runs[0]
        assert run.font.name == "Calibri"
        assert run.font.size.pt == 12
        assert not run.bold

    def test_without_subject(self, tmp_path):
        """Should skip the subject paragraph when it is excluded."""
        path = save_as_docx("Thanks", self.LETTER_BODY, "letter.docx", tmp_path, include_subject=False)

        doc = Document(str(path))
        assert path.name == "letter.docx"
        assert [p.text for p in doc.paragraphs][0] == "Hi Sam,"
        assert len(doc.paragraphs) == 4
