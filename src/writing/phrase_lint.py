"""
Phrase linting for cliched, AI-sounding letter phrases.

Advisory only: lint_phrases reports matches with a suggested alternative and
never rewrites the text.
"""

import re
from typing import List, Pattern, Tuple

from src.writing.types import PhraseWarning


# (pattern, canonical phrase, suggestion)
CLICHE_PHRASES: Tuple[Tuple[Pattern, str, str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), phrase, suggestion)
    for pattern, phrase, suggestion in [
        (
            r"thank you for your time and consideration",
            "Thank you for your time and consideration",
            "Be more specific about what you appreciated",
        ),
        (
            r"i('m| am) (so )?thrilled to apply",
            "I am thrilled to apply",
            "Skip the excitement statement and open with what drew you to the role",
        ),
        (
            r"i('m| am) excited about (the|this) opportunity",
            "I am excited about the opportunity",
            'Show specific excitement: "The challenges you described around X resonate with me"',
        ),
        (
            r"i identified with your mission",
            "I identified with your mission",
            "Reference a specific company value or goal",
        ),
        (
            r"i believe my skills align",
            "I believe my skills align",
            "Show alignment with a concrete example",
        ),
        (
            r"my skills align well",
            "my skills align well",
            'Replace with specific skill match: "My experience doing X directly applies to Y"',
        ),
        (
            r"i would love the chance",
            "I would love the chance",
            'Be direct: "I look forward to" or state your interest plainly',
        ),
        (
            r"i('m| am) confident (that )?i('d| would) be",
            "I am confident I would be",
            "Let your experience speak for itself",
        ),
        (
            r"perfect fit for",
            "perfect fit for",
            'Avoid "perfect" and describe the specific fit instead',
        ),
        (
            r"i('m| am) a (great|perfect|strong) fit",
            "I am a great/perfect/strong fit",
            "Show fit through examples rather than stating it",
        ),
        (
            r"look(ing)? forward to hearing from you",
            "Looking forward to hearing from you",
            'More specific: "Looking forward to discussing next steps" or end with your availability',
        ),
        (
            r"please do not hesitate to",
            "Please do not hesitate to",
            'Just say "Feel free to" or remove entirely',
        ),
        (
            r"do not hesitate to reach out",
            "do not hesitate to reach out",
            "Remove, it is unnecessary filler",
        ),
        (
            r"i('m| am) very interested in",
            "I am very interested in",
            "Show interest through specific observations, not statements",
        ),
        (
            r"touched base",
            "touched base",
            'Say "connected" or "spoke" instead',
        ),
        (
            r"circle back",
            "circle back",
            'Say "follow up" or "revisit" instead',
        ),
        (
            r"at the end of the day",
            "at the end of the day",
            "Remove the filler phrase",
        ),
        (
            r"hit the ground running",
            "hit the ground running",
            "Describe your actual onboarding approach",
        ),
        (
            r"think outside the box",
            "think outside the box",
            "Give a specific example of creative problem-solving",
        ),
        (
            r"passionate about",
            "passionate about",
            "Show passion through specific examples instead",
        ),
        (
            r"utilize my skills",
            "utilize my skills",
            'Say "use" or "apply", simpler is better',
        ),
        (
            r"leverage my experience",
            "leverage my experience",
            'Say "apply" or "bring" instead',
        ),
        (
            r"synergy",
            "synergy",
            'Use plain language: "work well together" or "complement"',
        ),
        (
            r"it was a pleasure",
            "It was a pleasure",
            'Be specific: "I enjoyed learning about X" or "Our conversation about Y was valuable"',
        ),
        (
            r"dream job",
            "dream job",
            "Name what about the role fits your goals",
        ),
        (
            r"team player",
            "team player",
            "Describe a specific collaboration instead",
        ),
    ]
)


def lint_phrases(text: str) -> List[PhraseWarning]:
    """
    Lint text for cliched phrases.

    Args:
        text: Letter body or any user-edited draft

    Returns:
        One PhraseWarning per match, ordered by position in the text
    """
    if not text:
        return []

    warnings = [
        PhraseWarning(phrase=phrase, suggestion=suggestion, index=match.start())
        for pattern, phrase, suggestion in CLICHE_PHRASES
        for match in pattern.finditer(text)
    ]
    return sorted(warnings, key=lambda warning: warning.index)


def count_cliches(text: str) -> int:
    """Get count of cliche phrases found."""
    return len(lint_phrases(text))


def has_too_many_cliches(text: str, threshold: int = 2) -> bool:
    """Check if text has at least `threshold` cliches."""
    return count_cliches(text) >= threshold
