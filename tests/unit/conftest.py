"""
Global fixtures for all unit tests.

This conftest provides:
- Environment isolation (a developer's .env must not change template seeds
  or thresholds under test)
- Shared sample notes, resume text and a TemplateInput factory

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import sys
from pathlib import Path

import pytest

# Make `src` importable when running pytest from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.common.config import Config
from src.writing.types import TemplateInput


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """
    Pin configuration to its defaults.

    Config reads the environment once at import, so patch the class
    attributes rather than the environment.
    """
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "LOG_FORMAT", "simple")
    monkeypatch.setattr(Config, "LETTER_TEMPLATE_SEED_RAW", "")
    monkeypatch.setattr(Config, "TOPIC_MIN_SCORE", 2.0)
    monkeypatch.setattr(Config, "RESUME_IMPACT_MIN_SCORE", 3.0)
    monkeypatch.delenv("DEBUG_MODE", raising=False)


# ===== SAMPLE TEXT =====

EXAMPLE_NOTES = (
    "We discussed the team's priorities for Q3, including the new travel booking process. "
    "You mentioned that the executive travels internationally twice a month and the calendar "
    "needs tighter buffer times between back-to-back meetings. "
    "This is a fast-paced environment with constant stakeholder coordination."
)

LONG_NOTES = EXAMPLE_NOTES + (
    " Maria Lopez leads the board meeting preparation and wants a single owner for board decks."
    " The biggest challenge right now is the onboarding timeline for two new Directors in Chicago."
    " Um, yeah, we also chatted about the weather."
)

SAMPLE_RESUME = """Jane Doe
Executive Assistant to the CEO
- Reduced travel costs by 22% by renegotiating corporate hotel rates
- Managed calendar for 3 C-suite executives across 4 time zones
- Saved $45,000 annually by consolidating vendor contracts
- Answered phones
- Coordinated quarterly board meetings for 5 years with confidential materials
Skills: Microsoft Office, Google Workspace
"""


@pytest.fixture
def example_notes():
    """Notes from the end-to-end example (between 100 and 400 chars)."""
    return EXAMPLE_NOTES


@pytest.fixture
def long_notes():
    """Notes past the 400-char soft threshold."""
    return LONG_NOTES


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def make_input():
    """Factory for TemplateInput with sensible defaults."""
    def _make(**overrides):
        values = {
            "interviewer_names": "Sam",
            "company_name": "Acme",
            "job_title": "Executive Assistant",
            "interview_type": "recruiter",
            "tone": "direct",
            "length": "standard",
            "interview_references": [],
            "resume_impacts": [],
            "key_points": [],
            "include_subject": True,
            "include_reintro": False,
        }
        values.update(overrides)
        return TemplateInput(**values)
    return _make
