"""
Highlight Extractor.

Turns pasted interview notes and resume text into ranked snippets that the
letter assembler can reference:
- Top topics: frequent single words and repeated two-word phrases
- Key sentences: verbatim sentences scored by relevance signals
- Resume impact lines: lines with metrics, impact verbs and EA vocabulary

Fully heuristic and deterministic: no NLP dependency, every score can be
traced back to a keyword hit or a pattern match.

Usage:
    from src.writing.highlight_extractor import extract_highlights, extract_resume_impact

    highlights = extract_highlights(notes)
    impacts = extract_resume_impact(resume_text)
"""

import re
from collections import Counter
from typing import AbstractSet, Dict, List, Optional, Set, Tuple

from src.common.logger import get_logger
from src.writing.lexicon import DEFAULT_LEXICON, HighlightLexicon, ScoringThresholds
from src.writing.types import ExtractionResult

logger = get_logger(__name__, component="extractor")


BRIEF_NOTES_WARNING = (
    "Interview notes are too brief to extract meaningful highlights. "
    "Please add more details from your conversation."
)
SHORT_NOTES_WARNING = (
    "Notes are short. The letter will use what's available, "
    "but adding more detail will improve personalization."
)
SPARSE_NOTES_WARNING = (
    "Could not find enough specific details. "
    "Consider adding notes about what was discussed."
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_CAPITALIZED_WORD = re.compile(r"\b[A-Z][a-z]+")
# Whole capitalized words such as "Travel" or "Q3"
_CAPITALIZED_TOKEN = re.compile(r"\b[A-Z][a-z0-9]*\b")
_DIGIT = re.compile(r"\d")

_PERCENT = re.compile(r"\d+%")
_DOLLARS = re.compile(r"\$[\d,]+")
_DURATION = re.compile(r"\d+\+?\s*(years?|months?|weeks?|days?|hours?)", re.IGNORECASE)


def _clean_token(token: str) -> str:
    return _NON_ALNUM.sub("", token.lower())


class HighlightExtractor:
    """
    Scores interview notes and resume text.

    Stateless after construction; safe to share between callers.
    """

    def __init__(
        self,
        lexicon: Optional[HighlightLexicon] = None,
        thresholds: Optional[ScoringThresholds] = None,
    ):
        """
        Initialize the extractor.

        Args:
            lexicon: Word lists to score against (defaults to the EA lexicon)
            thresholds: Length and score cutoffs (defaults read from Config)
        """
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.thresholds = thresholds or ScoringThresholds.from_config()

    # ===== Public API =====

    def extract_highlights(self, notes: str) -> ExtractionResult:
        """
        Extract topics and key sentences from interview notes.

        Never raises: empty or brief notes produce an empty result with a
        warning message.

        Args:
            notes: Raw interview notes or transcript

        Returns:
            ExtractionResult with ranked topics and verbatim key sentences
        """
        trimmed = (notes or "").strip()
        char_count = len(trimmed)

        if char_count < self.thresholds.brief_notes_chars:
            logger.debug(f"Notes too brief ({char_count} chars), skipping extraction")
            return ExtractionResult(
                top_topics=(),
                key_sentences=(),
                has_enough_content=False,
                warning_message=BRIEF_NOTES_WARNING,
            )

        topics = self.extract_topics(trimmed)
        sentences = self.extract_key_sentences(trimmed)
        has_enough = len(sentences) >= self.thresholds.min_enough_sentences

        if char_count < self.thresholds.short_notes_chars:
            warning = SHORT_NOTES_WARNING
        elif not has_enough:
            warning = SPARSE_NOTES_WARNING
        else:
            warning = None

        logger.debug(
            f"Extracted {len(topics)} topics and {len(sentences)} key sentences "
            f"from {char_count} chars"
        )

        return ExtractionResult(
            top_topics=tuple(topics),
            key_sentences=tuple(sentences),
            has_enough_content=has_enough,
            warning_message=warning,
        )

    def extract_resume_impact(self, resume_text: str) -> List[str]:
        """
        Pick the most impactful resume lines.

        Args:
            resume_text: Raw resume text, one achievement per line

        Returns:
            Up to max_resume_impacts verbatim (trimmed) lines, best first
        """
        lines = [line.strip() for line in (resume_text or "").splitlines()]
        lines = [line for line in lines if len(line) > self.thresholds.min_resume_line_chars]

        scored = []
        for line in lines:
            score = self.score_resume_line(line)
            if score >= self.thresholds.resume_min_score:
                scored.append((line, score))

        scored.sort(key=lambda item: item[1], reverse=True)
        impacts = [line for line, _ in scored[:self.thresholds.max_resume_impacts]]

        logger.debug(f"Resume impact: {len(impacts)} of {len(lines)} lines selected")
        return impacts

    # ===== Topic scoring =====

    def extract_topics(self, text: str) -> List[str]:
        """
        Rank single words and repeated two-word phrases.

        Pads with filler topics so at least min_topics are returned.
        """
        stopwords = self.lexicon.stopwords
        raw_words = text.lower().split()
        tokens = [_clean_token(word) for word in raw_words]

        unigram_counts: Counter = Counter(
            token for token in tokens
            if len(token) > 3 and token not in stopwords
        )

        bigram_counts: Counter = Counter()
        for first, second in zip(tokens, tokens[1:]):
            if (
                len(first) > 2 and len(second) > 2
                and first not in stopwords and second not in stopwords
            ):
                bigram_counts[f"{first} {second}"] += 1

        capitalized = self.capitalized_words(text)
        topic_scores: Dict[str, float] = {}
        for word, count in unigram_counts.items():
            topic_scores[word] = self.score_unigram(word, count, capitalized)

        for bigram, count in bigram_counts.items():
            if count >= 2:
                topic_scores[bigram] = self.score_bigram(bigram, count)

        # sorted() is stable: ties keep first-seen order
        ranked = sorted(topic_scores.items(), key=lambda item: item[1], reverse=True)
        candidates = ranked[:self.thresholds.topic_candidates]
        topics = [
            topic for topic, score in candidates
            if score >= self.thresholds.topic_min_score
        ][:self.thresholds.max_topics]

        if len(topics) < self.thresholds.min_topics:
            missing = self.thresholds.min_topics - len(topics)
            topics.extend(self.lexicon.filler_topics[:missing])

        return topics

    def capitalized_words(self, text: str) -> Set[str]:
        """Lowercased forms of every word that appears capitalized in text (one pass)."""
        return {match.group(0).lower() for match in _CAPITALIZED_TOKEN.finditer(text)}

    def score_unigram(self, word: str, count: int, capitalized: AbstractSet[str]) -> float:
        """Frequency, doubled for importance keywords, x1.5 when seen capitalized."""
        score: float = count
        if any(word in keyword for keyword in self.lexicon.importance_keywords):
            score *= 2
        if word[0].isalpha() and word in capitalized:
            score *= 1.5
        return score

    def score_bigram(self, bigram: str, count: int) -> float:
        """Phrases weigh double; doubled again when related to an importance keyword."""
        score: float = count * 2
        if any(
            keyword in bigram or bigram in keyword
            for keyword in self.lexicon.importance_keywords
        ):
            score *= 2
        return score

    # ===== Sentence scoring =====

    def split_sentences(self, text: str) -> List[str]:
        """Split on terminal punctuation and keep mid-length sentences."""
        sentences = [part.strip() for part in _SENTENCE_BOUNDARY.split(text)]
        return [
            sentence for sentence in sentences
            if self.thresholds.min_sentence_chars < len(sentence) < self.thresholds.max_sentence_chars
        ]

    def score_sentence(self, sentence: str) -> int:
        """Relevance score for one candidate sentence."""
        lower = sentence.lower()
        score = 0

        for keyword in self.lexicon.importance_keywords:
            if keyword in lower:
                score += 2

        if "we discussed" in lower or "you mentioned" in lower:
            score += 3
        if "team" in lower or "role" in lower:
            score += 2
        if "challenge" in lower or "priority" in lower:
            score += 2
        if "timeline" in lower or "goal" in lower:
            score += 2

        # Specificity
        if _DIGIT.search(sentence):
            score += 2

        # Named-entity proxy: capitalized words after the first position
        score += sum(1 for match in _CAPITALIZED_WORD.finditer(sentence) if match.start() > 0)

        if len(sentence.split(" ")) < self.thresholds.min_sentence_words:
            score -= 2
        if "nice to meet" in lower or "thank you for" in lower:
            score -= 3

        return score

    def extract_key_sentences(self, text: str) -> List[str]:
        """Return the top-scoring sentences verbatim."""
        scored: List[Tuple[str, int]] = []
        for sentence in self.split_sentences(text):
            score = self.score_sentence(sentence)
            if score > 0:
                scored.append((sentence, score))

        scored.sort(key=lambda item: item[1], reverse=True)
        return [sentence for sentence, _ in scored[:self.thresholds.max_sentences]]

    # ===== Resume scoring =====

    def score_resume_line(self, line: str) -> int:
        """Metrics, impact verbs and EA vocabulary in one resume line."""
        lower = line.lower()
        score = 0

        if _PERCENT.search(line):
            score += 3
        if _DOLLARS.search(line):
            score += 3
        if _DURATION.search(line):
            score += 1
        if _DIGIT.search(line):
            score += 1

        score += 2 * sum(1 for verb in self.lexicon.impact_verbs if verb in lower)
        score += sum(1 for keyword in self.lexicon.domain_keywords if keyword in lower)

        return score


def extract_highlights(notes: str) -> ExtractionResult:
    """Convenience wrapper; thresholds are read from Config on every call."""
    return HighlightExtractor().extract_highlights(notes)


def extract_resume_impact(resume_text: str) -> List[str]:
    """Convenience wrapper around HighlightExtractor.extract_resume_impact."""
    return HighlightExtractor().extract_resume_impact(resume_text)
