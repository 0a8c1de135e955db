"""
Thank You Letter Generator.

Assembles a thank-you email from tone/length/interview-type keyed template
pools, the interview references picked from the notes, and resume impact
lines. Output is always passed through the em dash sanitizer last.

Phrasing variants are chosen by an injectable selector so a caller can get
fresh wording on every regenerate (default) or reproducible output (seeded
or first-choice selector, used in tests).

Usage:
    generator = ThankYouLetterGenerator()
    letter = generator.generate(TemplateInput(
        interviewer_names="Sam",
        company_name="Acme",
        job_title="Executive Assistant",
        interview_type="recruiter",
        tone="direct",
        length="short",
    ))
"""

import random
import re
from typing import Callable, Dict, List, Optional, Sequence

from src.common.config import Config
from src.common.logger import get_logger
from src.writing import templates_thank_you as templates
from src.writing.no_em_dash import remove_em_dashes
from src.writing.types import (
    LENGTH_TARGETS,
    GeneratedLetter,
    LengthTargetResult,
    LetterLength,
    TemplateInput,
    Tone,
)

logger = get_logger(__name__, component="assembler")

Selector = Callable[[Sequence[str]], str]

# References woven into the letter per length bucket
REFERENCE_COUNTS: Dict[LetterLength, int] = {
    LetterLength.SHORT: 1,
    LetterLength.STANDARD: 2,
    LetterLength.DETAILED: 3,
}

# Resume impacts woven into the fit paragraph per length bucket
IMPACT_COUNTS: Dict[LetterLength, int] = {
    LetterLength.SHORT: 1,
    LetterLength.STANDARD: 2,
    LetterLength.DETAILED: 2,
}

_LEADING_BULLET = re.compile(r"^[-•*]\s*")
_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def first_choice(pool: Sequence[str]) -> str:
    """Deterministic selector: always the first variant."""
    return pool[0]


def seeded_selector(seed: int) -> Selector:
    """Reproducible selector backed by its own Random instance."""
    rng = random.Random(seed)
    return lambda pool: rng.choice(list(pool))


def default_selector() -> Selector:
    """Seeded when LETTER_TEMPLATE_SEED is configured, otherwise random.choice."""
    seed = Config.get_template_seed()
    if seed is not None:
        return seeded_selector(seed)
    return lambda pool: random.choice(list(pool))


def fill_template(template: str, values: Dict[str, str]) -> str:
    """Substitute {name} placeholders; unknown placeholders are left in place."""
    return _PLACEHOLDER.sub(
        lambda match: values.get(match.group(1), match.group(0)),
        template,
    )


def get_word_count(text: str) -> int:
    """Count whitespace-delimited words."""
    return len((text or "").split())


def meets_length_target(text: str, length) -> LengthTargetResult:
    """
    Check a draft against the word range for its length bucket.

    Args:
        text: Letter body
        length: LetterLength or its string value

    Returns:
        LengthTargetResult with a message naming the violated bound
    """
    length = LetterLength(length)
    target = LENGTH_TARGETS[length]
    word_count = get_word_count(text)

    if word_count < target.min_words:
        return LengthTargetResult(
            meets=False,
            word_count=word_count,
            message=(
                f"Letter is {word_count} words, below the {target.min_words} "
                f"word target for {length.value} length."
            ),
        )
    if word_count > target.max_words:
        return LengthTargetResult(
            meets=False,
            word_count=word_count,
            message=(
                f"Letter is {word_count} words, exceeding the {target.max_words} "
                f"word target for {length.value} length."
            ),
        )
    return LengthTargetResult(meets=True, word_count=word_count)


class ThankYouLetterGenerator:
    """
    Builds thank-you letters from TemplateInput.

    Holds no per-letter state; the selector is the only configurable part.
    """

    def __init__(self, selector: Optional[Selector] = None):
        """
        Initialize the generator.

        Args:
            selector: Picks one phrasing from a pool. Defaults to random
                      choice (seeded if LETTER_TEMPLATE_SEED is set).
        """
        self._select = selector or default_selector()

    def generate(self, template_input: TemplateInput) -> GeneratedLetter:
        """
        Generate a letter.

        Trusts its input: empty identity fields are substituted verbatim.

        Args:
            template_input: Identity fields, enums, references and flags

        Returns:
            GeneratedLetter with no em or en dashes in any field
        """
        ti = template_input
        values = {
            "interviewerNames": ti.interviewer_names,
            "companyName": ti.company_name,
            "jobTitle": ti.job_title,
            "timeframe": templates.DEFAULT_TIMEFRAME,
        }

        subject = fill_template(self._select(templates.SUBJECT_LINES[ti.interview_type]), values)

        paragraphs: List[str] = [
            f"{self._select(templates.GREETINGS[ti.tone])} {ti.interviewer_names},"
        ]

        if ti.include_reintro:
            paragraphs.append(
                fill_template(self._select(templates.REINTRO_LINES[ti.interview_type]), values)
            )

        paragraphs.append(
            fill_template(self._select(templates.OPENING_LINES[ti.tone]), values)
        )

        reference_paragraph = self.build_reference_paragraph(
            ti.interview_references, ti.tone, ti.length
        )
        if reference_paragraph:
            paragraphs.append(reference_paragraph)

        fit_paragraph = self.build_fit_statement(ti.resume_impacts, ti.tone, ti.length)
        if fit_paragraph:
            paragraphs.append(fit_paragraph)

        if ti.key_points and ti.length != LetterLength.SHORT:
            paragraphs.append(self.build_key_points_paragraph(ti.key_points, ti.tone))

        paragraphs.append(self._select(templates.CLOSINGS[ti.tone]))
        paragraphs.append(self._select(templates.SIGNOFFS[ti.tone]))
        paragraphs.append(templates.NAME_PLACEHOLDER)

        body = "\n\n".join(paragraphs)
        full_email = f"Subject: {subject}\n\n{body}" if ti.include_subject else body

        letter = GeneratedLetter(
            subject=remove_em_dashes(subject),
            body=remove_em_dashes(body),
            full_email=remove_em_dashes(full_email),
        )

        logger.info(
            f"Generated {ti.tone.value}/{ti.length.value} letter for {ti.interview_type.value}: "
            f"{get_word_count(letter.body)} words, {len(paragraphs)} paragraphs"
        )
        return letter

    def build_reference_paragraph(
        self, references: Sequence[str], tone: Tone, length: LetterLength
    ) -> str:
        """One bridge sentence per reference, up to the length's reference count."""
        selected = list(references)[:REFERENCE_COUNTS[length]]
        sentences = [
            fill_template(self._select(templates.REFERENCE_BRIDGES[tone]), {"reference": reference})
            for reference in selected
        ]
        return " ".join(sentences)

    def build_fit_statement(
        self, impacts: Sequence[str], tone: Tone, length: LetterLength
    ) -> str:
        """One bridge sentence per resume impact, bullet markers stripped."""
        selected = list(impacts)[:IMPACT_COUNTS[length]]
        sentences = [
            fill_template(
                self._select(templates.FIT_BRIDGES[tone]),
                {"impact": _LEADING_BULLET.sub("", impact).strip()},
            )
            for impact in selected
        ]
        return " ".join(sentences)

    def build_key_points_paragraph(self, key_points: Sequence[str], tone: Tone) -> str:
        """Lead-in followed by the points joined with semicolons."""
        if not key_points:
            return ""
        lead_in = templates.KEY_POINTS_LEAD_INS[tone]
        formatted = "; ".join(point.strip() for point in key_points)
        return f"{lead_in} {formatted}."


def generate_thank_you_letter(
    template_input: TemplateInput, selector: Optional[Selector] = None
) -> GeneratedLetter:
    """Convenience wrapper around ThankYouLetterGenerator.generate."""
    return ThankYouLetterGenerator(selector=selector).generate(template_input)
