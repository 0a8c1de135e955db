"""
Writing engine for the thank-you letter tool.

Two stages, both pure:

1. Highlight Extractor - ranked topics, verbatim key sentences and resume
   impact lines from pasted text
2. Letter Assembler - tone/length/interview-type keyed templates filled into
   a subject, body and full email, sanitized of em dashes

Plus the style helpers the UI uses on hand-edited drafts (word count,
length targets, cliche lint, em dash removal).
"""

from src.writing.types import (
    ExtractionResult,
    GeneratedLetter,
    InterviewType,
    LengthTargetResult,
    LetterLength,
    PhraseWarning,
    TemplateInput,
    Tone,
    LENGTH_TARGETS,
)
from src.writing.highlight_extractor import (
    HighlightExtractor,
    extract_highlights,
    extract_resume_impact,
)
from src.writing.letter_generator import (
    ThankYouLetterGenerator,
    generate_thank_you_letter,
    get_word_count,
    meets_length_target,
    first_choice,
    seeded_selector,
)
from src.writing.phrase_lint import lint_phrases, count_cliches, has_too_many_cliches
from src.writing.no_em_dash import contains_em_dash, remove_em_dashes, sanitize_email
from src.writing.format_export import (
    ExportFormat,
    format_email,
    generate_filename,
    save_as_docx,
    save_as_txt,
)
from src.writing.thank_you_workflow import (
    ThankYouLetterWorkflow,
    ThankYouRequest,
    ThankYouDraft,
    LetterReview,
    review_letter,
    parse_key_points,
    build_interview_references,
)

__all__ = [
    # Types
    "ExtractionResult",
    "GeneratedLetter",
    "InterviewType",
    "LengthTargetResult",
    "LetterLength",
    "PhraseWarning",
    "TemplateInput",
    "Tone",
    "LENGTH_TARGETS",
    # Extraction
    "HighlightExtractor",
    "extract_highlights",
    "extract_resume_impact",
    # Assembly
    "ThankYouLetterGenerator",
    "generate_thank_you_letter",
    "get_word_count",
    "meets_length_target",
    "first_choice",
    "seeded_selector",
    # Style helpers
    "lint_phrases",
    "count_cliches",
    "has_too_many_cliches",
    "contains_em_dash",
    "remove_em_dashes",
    "sanitize_email",
    # Export
    "ExportFormat",
    "format_email",
    "generate_filename",
    "save_as_txt",
    "save_as_docx",
    # Workflow
    "ThankYouLetterWorkflow",
    "ThankYouRequest",
    "ThankYouDraft",
    "LetterReview",
    "review_letter",
    "parse_key_points",
    "build_interview_references",
]
