"""Load and validate configuration from environment."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SKILLS_DIR = Path(os.getenv("SKILLHOOK_SKILLS_DIR") or PROJECT_ROOT / "skills")

# Optional YAML file replacing the built-in extension -> formatter table
_format_rules_env = os.getenv("SKILLHOOK_FORMAT_RULES")
FORMAT_RULES_PATH: Path | None = Path(_format_rules_env) if _format_rules_env else None

# Matching: a skill is surfaced when at least this many terms overlap with the intent
MIN_SCORE = int(os.getenv("SKILLHOOK_MIN_SCORE", "1"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_min_score(min_score: int | None = None) -> None:
    """Validate that the match threshold (default: MIN_SCORE) requires at least one shared term."""
    if min_score is None:
        min_score = MIN_SCORE
    if min_score < 1:
        raise ValueError("SKILLHOOK_MIN_SCORE must be at least 1. Set it in .env.")
