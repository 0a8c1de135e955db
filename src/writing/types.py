"""
Data types for the thank-you letter writing engine.

These types carry data between the two stages of letter generation:
- ExtractionResult: ranked topics and verbatim key sentences from interview notes
- TemplateInput: everything the assembler needs to build one letter
- GeneratedLetter: the sanitized subject/body/full email
- LengthTargetResult, PhraseWarning: advisory style checks on a draft
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


class Tone(str, Enum):
    """Voice of the letter."""

    FORMAL = "formal"
    WARM = "warm"
    DIRECT = "direct"
    ENTHUSIASTIC = "enthusiastic"
    EXECUTIVE = "executive"


class LetterLength(str, Enum):
    """Target length bucket, each bound to a word-count range."""

    SHORT = "short"
    STANDARD = "standard"
    DETAILED = "detailed"


class InterviewType(str, Enum):
    """Who the candidate spoke with."""

    RECRUITER = "recruiter"
    HIRING_MANAGER = "hiring_manager"
    PANEL = "panel"
    PEER = "peer"
    EXEC_FINAL = "exec_final"
    OTHER = "other"


@dataclass(frozen=True)
class WordRange:
    """Inclusive word-count range."""

    min_words: int
    max_words: int


LENGTH_TARGETS: Dict[LetterLength, WordRange] = {
    LetterLength.SHORT: WordRange(110, 140),
    LetterLength.STANDARD: WordRange(160, 220),
    LetterLength.DETAILED: WordRange(230, 300),
}


@dataclass(frozen=True)
class ExtractionResult:
    """
    Highlights pulled from interview notes.

    key_sentences are verbatim (trimmed) slices of the notes, never reworded.
    """

    top_topics: Tuple[str, ...] = ()
    key_sentences: Tuple[str, ...] = ()
    has_enough_content: bool = False
    warning_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "top_topics": list(self.top_topics),
            "key_sentences": list(self.key_sentences),
            "has_enough_content": self.has_enough_content,
            "warning_message": self.warning_message,
        }


@dataclass(frozen=True)
class TemplateInput:
    """
    Immutable configuration for one letter.

    Enum fields accept their string values ("direct", "short", ...) and are
    coerced on construction; list fields are stored as tuples.
    """

    interviewer_names: str
    company_name: str
    job_title: str
    interview_type: InterviewType = InterviewType.OTHER
    tone: Tone = Tone.FORMAL
    length: LetterLength = LetterLength.STANDARD
    interview_references: Sequence[str] = ()
    resume_impacts: Sequence[str] = ()
    key_points: Sequence[str] = ()
    include_subject: bool = True
    include_reintro: bool = False

    def __post_init__(self):
        """Coerce enum strings and freeze sequences (raises ValueError on unknown values)."""
        object.__setattr__(self, "interview_type", InterviewType(self.interview_type))
        object.__setattr__(self, "tone", Tone(self.tone))
        object.__setattr__(self, "length", LetterLength(self.length))
        object.__setattr__(self, "interview_references", tuple(self.interview_references))
        object.__setattr__(self, "resume_impacts", tuple(self.resume_impacts))
        object.__setattr__(self, "key_points", tuple(self.key_points))


@dataclass(frozen=True)
class GeneratedLetter:
    """A generated letter. Never contains em or en dashes."""

    subject: str
    body: str
    full_email: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "subject": self.subject,
            "body": self.body,
            "full_email": self.full_email,
        }


@dataclass(frozen=True)
class LengthTargetResult:
    """Outcome of comparing a draft's word count to its length bucket."""

    meets: bool
    word_count: int
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meets": self.meets,
            "word_count": self.word_count,
            "message": self.message,
        }


@dataclass(frozen=True)
class PhraseWarning:
    """A cliche found in a draft, with the position of the match."""

    phrase: str
    suggestion: str
    index: int = field(default=0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phrase": self.phrase,
            "suggestion": self.suggestion,
            "index": self.index,
        }
