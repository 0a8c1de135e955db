"""
Configuration loader for the writing engine.

Loads tuning knobs and logging settings from environment variables (.env file).
Validates settings and provides type-safe access.
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


class Config:
    """
    Centralized configuration for extraction, assembly and export.

    All values loaded from environment variables with working defaults,
    so the engine runs without any .env file present.
    """

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")  # "simple" or "json"

    # ===== Template Selection =====
    # Unset: every regenerate picks fresh phrasing variants.
    # Set to an integer: phrasing is reproducible across runs.
    LETTER_TEMPLATE_SEED_RAW: str = os.getenv("LETTER_TEMPLATE_SEED", "")

    # ===== Scoring Thresholds =====
    TOPIC_MIN_SCORE: float = float(os.getenv("TOPIC_MIN_SCORE", "2"))
    RESUME_IMPACT_MIN_SCORE: float = float(os.getenv("RESUME_IMPACT_MIN_SCORE", "3"))

    # ===== Export =====
    LETTERS_OUTPUT_DIR: str = os.getenv("LETTERS_OUTPUT_DIR", "./letters")

    VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
    VALID_LOG_FORMATS = ("simple", "json")

    @classmethod
    def get_template_seed(cls) -> Optional[int]:
        """Seed for template selection, or None for unseeded randomness."""
        return _optional_int(cls.LETTER_TEMPLATE_SEED_RAW)

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration values.
        Raises ValueError if any setting is unusable.
        """
        problems = []

        if cls.LOG_LEVEL.upper() not in cls.VALID_LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(cls.VALID_LOG_LEVELS)}")

        if cls.LOG_FORMAT not in cls.VALID_LOG_FORMATS:
            problems.append(f"LOG_FORMAT must be one of {', '.join(cls.VALID_LOG_FORMATS)}")

        if cls.LETTER_TEMPLATE_SEED_RAW.strip() and cls.get_template_seed() is None:
            problems.append("LETTER_TEMPLATE_SEED must be an integer")

        if cls.TOPIC_MIN_SCORE < 0:
            problems.append("TOPIC_MIN_SCORE must be >= 0")

        if cls.RESUME_IMPACT_MIN_SCORE < 0:
            problems.append("RESUME_IMPACT_MIN_SCORE must be >= 0")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                f"Please check your .env file."
            )

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        seed = cls.get_template_seed()
        return f"""
Configuration Summary:
  Logging: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
  Template seed: {seed if seed is not None else 'unseeded (varied phrasing)'}
  Topic min score: {cls.TOPIC_MIN_SCORE}
  Resume impact min score: {cls.RESUME_IMPACT_MIN_SCORE}
  Letters output dir: {cls.LETTERS_OUTPUT_DIR}
"""


# Validate on import (optional - can be called explicitly)
# Config.validate()
