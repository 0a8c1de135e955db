"""
Thank-you letter workflow.

Runs the full path from raw form fields to a reviewed draft:

1. Extract highlights from interview notes and impact lines from the resume
2. Parse the user's key points (one per line, bullets allowed)
3. Build interview references (key sentences, then key points, then topics)
4. Assemble the letter
5. Review the body: word count vs length target, cliches, em dashes

Review results are advisory. Nothing here raises for degenerate text input;
an empty notes field simply yields a letter without a reference paragraph.
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from src.common.logger import get_logger
from src.writing.highlight_extractor import HighlightExtractor
from src.writing.letter_generator import (
    ThankYouLetterGenerator,
    get_word_count,
    meets_length_target,
)
from src.writing.no_em_dash import contains_em_dash
from src.writing.phrase_lint import lint_phrases
from src.writing.types import (
    ExtractionResult,
    GeneratedLetter,
    InterviewType,
    LengthTargetResult,
    LetterLength,
    PhraseWarning,
    TemplateInput,
    Tone,
)

logger = get_logger(__name__, component="workflow")

DEFAULT_INTERVIEWER = "Hiring Team"
MAX_SENTENCE_REFERENCES = 3
MAX_KEY_POINT_REFERENCES = 2
MAX_TOPIC_REFERENCES = 3
REFERENCE_MAX_CHARS = 80

_LEADING_BULLET = re.compile(r"^[-•*]\s*")


def parse_key_points(text: str) -> List[str]:
    """Split a key-points textarea into clean points, one per line."""
    if not text or not text.strip():
        return []
    points = [_LEADING_BULLET.sub("", line.strip()).strip() for line in text.splitlines()]
    return [point for point in points if point]


def condense_reference(sentence: str, max_chars: int = REFERENCE_MAX_CHARS) -> str:
    """Truncate long sentences to max_chars, ending in '...'."""
    if len(sentence) > max_chars:
        return sentence[:max_chars - 3] + "..."
    return sentence


def build_interview_references(
    highlights: Optional[ExtractionResult],
    key_points: Sequence[str],
) -> List[str]:
    """
    Choose what the letter should reference from the interview.

    Key sentences come first (condensed), then up to two key points; topics
    are only used when neither is available.
    """
    references: List[str] = []

    if highlights and highlights.key_sentences:
        references.extend(
            condense_reference(sentence)
            for sentence in highlights.key_sentences[:MAX_SENTENCE_REFERENCES]
        )

    references.extend(list(key_points)[:MAX_KEY_POINT_REFERENCES])

    if not references and highlights and highlights.top_topics:
        references.extend(highlights.top_topics[:MAX_TOPIC_REFERENCES])

    return references


@dataclass(frozen=True)
class LetterReview:
    """Advisory checks on a letter body."""

    word_count: int
    length_check: LengthTargetResult
    phrase_warnings: List[PhraseWarning] = field(default_factory=list)
    has_em_dash: bool = False

    @property
    def has_issues(self) -> bool:
        return bool(
            not self.length_check.meets
            or self.phrase_warnings
            or self.has_em_dash
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_count": self.word_count,
            "length_check": self.length_check.to_dict(),
            "phrase_warnings": [warning.to_dict() for warning in self.phrase_warnings],
            "has_em_dash": self.has_em_dash,
            "has_issues": self.has_issues,
        }


def review_letter(text: str, length) -> LetterReview:
    """
    Review a generated or hand-edited body.

    Args:
        text: Letter body
        length: LetterLength or its string value

    Returns:
        LetterReview (never raises)
    """
    return LetterReview(
        word_count=get_word_count(text),
        length_check=meets_length_target(text, length),
        phrase_warnings=lint_phrases(text),
        has_em_dash=contains_em_dash(text),
    )


@dataclass
class ThankYouRequest:
    """Raw form fields for one thank-you letter."""

    company_name: str
    job_title: str
    interviewer_names: str = ""
    interview_type: InterviewType = InterviewType.OTHER
    tone: Tone = Tone.FORMAL
    length: LetterLength = LetterLength.STANDARD
    interview_notes: str = ""
    resume_text: str = ""
    key_points_text: str = ""
    include_subject: bool = True
    include_reintro: bool = False


@dataclass
class ThankYouDraft:
    """Everything produced for one request, kept for regenerate and export."""

    request_id: str
    template_input: TemplateInput
    letter: GeneratedLetter
    review: LetterReview
    highlights: Optional[ExtractionResult] = None
    resume_impacts: List[str] = field(default_factory=list)
    key_points: List[str] = field(default_factory=list)

    @property
    def warning_message(self) -> Optional[str]:
        return self.highlights.warning_message if self.highlights else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "request_id": self.request_id,
            "letter": self.letter.to_dict(),
            "review": self.review.to_dict(),
            "highlights": self.highlights.to_dict() if self.highlights else None,
            "resume_impacts": self.resume_impacts,
            "key_points": self.key_points,
            "interview_references": list(self.template_input.interview_references),
        }


class ThankYouLetterWorkflow:
    """
    Extraction + assembly + review for the thank-you letter tool.

    Usage:
        workflow = ThankYouLetterWorkflow()
        draft = workflow.run(ThankYouRequest(company_name="Acme", job_title="EA", ...))
        draft = workflow.regenerate(draft)
    """

    def __init__(
        self,
        extractor: Optional[HighlightExtractor] = None,
        generator: Optional[ThankYouLetterGenerator] = None,
    ):
        self.extractor = extractor or HighlightExtractor()
        self.generator = generator or ThankYouLetterGenerator()

    def build_template_input(
        self,
        request: ThankYouRequest,
        highlights: Optional[ExtractionResult],
        resume_impacts: Sequence[str],
        key_points: Sequence[str],
    ) -> TemplateInput:
        """Combine form fields and extraction output into a TemplateInput."""
        return TemplateInput(
            interviewer_names=request.interviewer_names.strip() or DEFAULT_INTERVIEWER,
            company_name=request.company_name.strip(),
            job_title=request.job_title.strip(),
            interview_type=request.interview_type,
            tone=request.tone,
            length=request.length,
            interview_references=build_interview_references(highlights, key_points),
            resume_impacts=resume_impacts,
            key_points=key_points,
            include_subject=request.include_subject,
            include_reintro=request.include_reintro,
        )

    def run(self, request: ThankYouRequest) -> ThankYouDraft:
        """Produce a reviewed draft from raw form fields."""
        request_id = uuid.uuid4().hex
        log = logger.bind(request_id=request_id)

        highlights = None
        if request.interview_notes.strip():
            highlights = self.extractor.extract_highlights(request.interview_notes)
            if highlights.warning_message:
                log.info(f"Notes warning: {highlights.warning_message}")

        resume_impacts: List[str] = []
        if request.resume_text.strip():
            resume_impacts = self.extractor.extract_resume_impact(request.resume_text)

        key_points = parse_key_points(request.key_points_text)

        template_input = self.build_template_input(
            request, highlights, resume_impacts, key_points
        )
        letter = self.generator.generate(template_input)
        review = review_letter(letter.body, template_input.length)

        log.info(
            f"Draft ready: {review.word_count} words, "
            f"{len(template_input.interview_references)} references, "
            f"{len(review.phrase_warnings)} phrase warnings"
        )
        if not review.length_check.meets:
            log.debug(review.length_check.message or "Length target missed")

        return ThankYouDraft(
            request_id=request_id,
            template_input=template_input,
            letter=letter,
            review=review,
            highlights=highlights,
            resume_impacts=resume_impacts,
            key_points=key_points,
        )

    def regenerate(self, draft: ThankYouDraft) -> ThankYouDraft:
        """Re-run assembly with the same TemplateInput for alternative phrasing."""
        letter = self.generator.generate(draft.template_input)
        review = review_letter(letter.body, draft.template_input.length)
        return ThankYouDraft(
            request_id=draft.request_id,
            template_input=draft.template_input,
            letter=letter,
            review=review,
            highlights=draft.highlights,
            resume_impacts=draft.resume_impacts,
            key_points=draft.key_points,
        )
