"""
Em Dash Sanitizer.

Letters must never contain em dashes (U+2014), en dashes (U+2013) or the
horizontal bar (U+2015). Every such dash becomes a comma plus space:

    "Thanks — it went well"   -> "Thanks, it went well"
    "Q3–Q4 planning"          -> "Q3, Q4 planning"

A dash that opens a line is dropped. Spacing around the replaced dash is
collapsed. The sanitizer is idempotent: text without dashes is returned as is.

Usage:
    from src.writing.no_em_dash import remove_em_dashes, contains_em_dash

    if contains_em_dash(edited_body):
        edited_body = remove_em_dashes(edited_body)
"""

import re
from typing import Tuple

EM_DASH = "—"
EN_DASH = "–"
HORIZONTAL_BAR = "―"

_DASHES = EM_DASH + EN_DASH + HORIZONTAL_BAR

_LEADING_DASH = re.compile(rf"^[ \t]*[{_DASHES}][ \t]*", re.MULTILINE)
_INLINE_DASH = re.compile(rf"[ \t]*[{_DASHES}]+[ \t]*")
_DOUBLE_COMMA = re.compile(r",(?:[ \t]*,)+")
_COMMA_AT_EOL = re.compile(r",[ \t]+$", re.MULTILINE)


def contains_em_dash(text: str) -> bool:
    """Check if text contains any em dash, en dash or horizontal bar."""
    if not text:
        return False
    return any(dash in text for dash in _DASHES)


def remove_em_dashes(text: str) -> str:
    """
    Replace every em/en dash in text with ", ".

    Args:
        text: Text that may contain dashes

    Returns:
        Text with no em dash, en dash or horizontal bar
    """
    if not contains_em_dash(text):
        return text

    result = _LEADING_DASH.sub("", text)
    result = _INLINE_DASH.sub(", ", result)
    # "word, — next" would otherwise become "word,, next"
    result = _DOUBLE_COMMA.sub(",", result)
    # A dash that ended a line leaves a trailing ", "
    result = _COMMA_AT_EOL.sub(",", result)
    return result


def sanitize_email(subject: str, body: str) -> Tuple[str, str]:
    """Sanitize subject and body together."""
    return remove_em_dashes(subject), remove_em_dashes(body)
