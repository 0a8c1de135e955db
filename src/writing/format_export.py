"""
Export helpers for thank-you letters.

Formats a letter for the mail client it will be pasted into and writes
plain-text or Word (.docx) copies to disk.
"""

import re
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from docx import Document
from docx.shared import Pt

from src.common.logger import get_logger
from src.writing.no_em_dash import remove_em_dashes

logger = get_logger(__name__, component="export")


class ExportFormat(str, Enum):
    """Target mail client."""

    PLAIN = "plain"
    GMAIL = "gmail"
    OUTLOOK = "outlook"


_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")
# "\n\nBest,\n\n[Your Name]" -> sign-off directly above the name
_SIGNOFF_GAP = re.compile(r"\n\n([A-Za-z]+,)\n\n")
_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def _with_subject(subject: str, body: str, include_subject: bool) -> str:
    if include_subject:
        return f"Subject: {subject}\n\n{body}"
    return body


def format_email(
    subject: str,
    body: str,
    export_format: Union[ExportFormat, str] = ExportFormat.PLAIN,
    include_subject: bool = True,
) -> str:
    """
    Format a letter for a mail client.

    - plain: body untouched
    - gmail: runs of 3+ newlines collapsed to one blank line
    - outlook: as gmail, and single-word sign-offs sit directly above the name

    Args:
        subject: Subject line (without "Subject: ")
        body: Letter body
        export_format: ExportFormat or its string value
        include_subject: Prefix the "Subject: ..." line

    Returns:
        Formatted text
    """
    export_format = ExportFormat(export_format)

    if export_format == ExportFormat.GMAIL:
        body = _EXTRA_BLANK_LINES.sub("\n\n", body)
    elif export_format == ExportFormat.OUTLOOK:
        body = _EXTRA_BLANK_LINES.sub("\n\n", body)
        body = _SIGNOFF_GAP.sub(r"\n\n\1\n", body)

    return _with_subject(subject, body, include_subject)


def generate_filename(
    company_name: str,
    prefix: str = "Thank_You",
    today: Optional[date] = None,
) -> str:
    """
    Build a filesystem-safe filename stem from the company and date.

    Example: generate_filename("Acme, Inc.") -> "Thank_You_Acme_Inc_2025-01-31"
    """
    safe_name = _UNSAFE_FILENAME_CHARS.sub("", company_name or "")
    safe_name = _WHITESPACE.sub("_", safe_name)[:30]
    stamp = (today or date.today()).isoformat()
    return f"{prefix}_{safe_name}_{stamp}"


def save_as_txt(
    content: str,
    filename: str,
    directory: Union[str, Path] = ".",
) -> Path:
    """
    Write a letter to a UTF-8 .txt file.

    The content is sanitized of em dashes first; the directory is created
    if missing.

    Returns:
        Path of the written file
    """
    if not filename.endswith(".txt"):
        filename = f"{filename}.txt"

    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename

    path.write_text(remove_em_dashes(content), encoding="utf-8")
    logger.info(f"Saved letter to {path}")
    return path


DOCX_FONT = "Calibri"
DOCX_FONT_SIZE = Pt(12)


def save_as_docx(
    subject: str,
    body: str,
    filename: str,
    directory: Union[str, Path] = ".",
    include_subject: bool = True,
) -> Path:
    """
    Write a letter to a Word document.

    One paragraph per blank-line separated block of the body, preceded by a
    bold "Subject: ..." paragraph when include_subject is set. Text is
    sanitized of em dashes first.

    Returns:
        Path of the written .docx file
    """
    if not filename.endswith(".docx"):
        filename = f"{filename}.docx"

    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename

    doc = Document()

    if include_subject and subject:
        subject_para = doc.add_paragraph()
        run = subject_para.add_run(f"Subject: {remove_em_dashes(subject)}")
        run.font.name = DOCX_FONT
        run.font.size = DOCX_FONT_SIZE
        run.font.bold = True
        subject_para.paragraph_format.space_after = Pt(20)

    for block in remove_em_dashes(body).split("\n\n"):
        para = doc.add_paragraph()
        run = para.add_run(block)
        run.font.name = DOCX_FONT
        run.font.size = DOCX_FONT_SIZE
        para.paragraph_format.space_after = Pt(10)

    doc.save(str(path))
    logger.info(f"Saved letter to {path}")
    return path
