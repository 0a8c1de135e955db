"""
Word lists and tuning thresholds for highlight extraction.

Kept as plain immutable data so the scoring in highlight_extractor stays
generic over the vocabulary. Tests and callers can build a smaller
HighlightLexicon or different ScoringThresholds and inject them.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from src.common.config import Config


STOPWORDS: FrozenSet[str] = frozenset([
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "from", "as", "is", "was", "are", "were", "been", "be", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
    "shall", "can", "need", "dare", "ought", "used", "it", "its", "this", "that", "these",
    "those", "i", "you", "he", "she", "we", "they", "what", "which", "who", "whom",
    "whose", "where", "when", "why", "how", "all", "each", "every", "both", "few",
    "more", "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same",
    "so", "than", "too", "very", "just", "also", "now", "here", "there", "then", "once",
    "if", "because", "until", "while", "about", "into", "through", "during", "before",
    "after", "above", "below", "between", "under", "again", "further",
    "any", "being", "having", "doing", "their", "them", "your", "our", "my", "his", "her",
    "up", "down", "out", "off", "over", "got", "get", "gets",
    "getting", "go", "going", "goes", "went", "come", "coming", "came", "let", "like",
    "know", "think", "want", "see", "look", "make", "made", "say", "said", "tell", "told",
    # Filler
    "um", "uh", "yeah", "yes", "okay", "ok", "sure", "well", "right", "really",
    "actually", "basically", "definitely", "certainly", "probably", "maybe", "perhaps",
])

# Terms that signal substantive interview content. Multi-word entries are
# matched as substrings of a lowercased sentence.
IMPORTANCE_KEYWORDS: Tuple[str, ...] = (
    "we discussed", "you mentioned", "team", "role", "challenge", "challenges",
    "priorities", "priority", "timeline", "goals", "goal", "project", "projects",
    "initiative", "initiatives", "strategy", "planning", "growth", "scale", "scaling",
    "executive", "leadership", "calendar", "travel", "meetings", "stakeholders",
    "communication", "organization", "organizing", "support", "supporting",
    "expectations", "responsibilities", "culture", "values", "mission",
    "collaboration", "cross-functional", "deadline", "deadlines", "deliverables",
    "metrics", "success", "measure", "impact", "results", "outcomes",
    "process", "systems", "tools", "technology", "automation",
    "board", "investors", "clients", "customers", "partners",
    "onboarding", "training", "development", "feedback",
)

# Padding used when too few topics clear the score threshold
FILLER_TOPICS: Tuple[str, ...] = ("the role", "team dynamics", "next steps")

IMPACT_VERBS: Tuple[str, ...] = (
    "saved", "reduced", "built", "launched", "improved", "increased",
    "developed", "created", "led", "managed", "coordinated", "implemented",
    "streamlined", "optimized", "transformed", "delivered", "achieved",
    "exceeded", "grew", "expanded", "established", "designed", "executed",
)

EA_KEYWORDS: Tuple[str, ...] = (
    "executive", "calendar", "travel", "board", "meeting", "stakeholder",
    "coordination", "confidential", "c-suite", "leadership", "support",
)


@dataclass(frozen=True)
class HighlightLexicon:
    """Vocabulary the extractor scores against."""

    stopwords: FrozenSet[str] = STOPWORDS
    importance_keywords: Tuple[str, ...] = IMPORTANCE_KEYWORDS
    filler_topics: Tuple[str, ...] = FILLER_TOPICS
    impact_verbs: Tuple[str, ...] = IMPACT_VERBS
    domain_keywords: Tuple[str, ...] = EA_KEYWORDS


@dataclass(frozen=True)
class ScoringThresholds:
    """
    Cutoffs for extraction.

    The score cutoffs were picked empirically; they are tuning knobs,
    not invariants.
    """

    brief_notes_chars: int = 100       # below this: no extraction at all
    short_notes_chars: int = 400       # below this: extract, but warn
    topic_min_score: float = 2.0
    topic_candidates: int = 8
    max_topics: int = 6
    min_topics: int = 3
    min_sentence_chars: int = 20       # exclusive
    max_sentence_chars: int = 300      # exclusive
    min_sentence_words: int = 5
    max_sentences: int = 4
    min_enough_sentences: int = 2
    min_resume_line_chars: int = 10    # lines this short or shorter are dropped
    resume_min_score: float = 3.0
    max_resume_impacts: int = 4

    @classmethod
    def from_config(cls) -> "ScoringThresholds":
        """Build thresholds using the score cutoffs from Config."""
        return cls(
            topic_min_score=Config.TOPIC_MIN_SCORE,
            resume_min_score=Config.RESUME_IMPACT_MIN_SCORE,
        )


DEFAULT_LEXICON = HighlightLexicon()
