"""Match a user intent to skills by term overlap with their frontmatter (name, description, keywords)."""
import re
from collections.abc import Iterable

from skillhook.config import MIN_SCORE
from skillhook.logging_utils import get_logger, log_skills_matched
from skillhook.skills.loader import SkillDescriptor

logger = get_logger(__name__)

# Words that carry no topic: articles, pronouns, and the generic verbs people
# put in front of every request ("write a ...", "help me ...").
STOP_WORDS = frozenset(
    """
    a an and are as at be by can do does for from how i in into is it its me my
    of on or our please should so that the this to use used using we what when
    where which while will with would you your
    add build change code create fix help make need new want write writing
    """.split()
)


def tokenize(text: str) -> set[str]:
    """Normalize and tokenize into words (lowercase, alphanumeric), minus stop words."""
    text = (text or "").lower()
    words = re.findall(r"[a-z0-9]+", text)
    return set(w for w in words if len(w) > 1 and w not in STOP_WORDS)


def skill_terms(skill: SkillDescriptor) -> set[str]:
    terms = tokenize(skill.name) | tokenize(skill.trigger_description)
    for k in skill.keywords:
        terms |= tokenize(k)
    return terms


def score_skills(intent: str, skills: Iterable[SkillDescriptor]) -> dict[str, int]:
    """Return {skill name: overlap} for every skill sharing at least one term with the intent."""
    intent_tokens = tokenize(intent)
    if not intent_tokens:
        return {}
    scores: dict[str, int] = {}
    for skill in skills:
        overlap = len(intent_tokens & skill_terms(skill))
        if overlap > 0:
            scores[skill.name] = overlap
    return scores


def match_skills(
    intent: str,
    skills: Iterable[SkillDescriptor],
    *,
    min_score: int = MIN_SCORE,
) -> tuple[SkillDescriptor, ...]:
    """Return every skill whose overlap with the intent reaches min_score.
    An empty tuple means no guidance applies. Highest score first, then by name.
    """
    skills = list(skills)
    scores = {name: s for name, s in score_skills(intent, skills).items() if s >= min_score}
    log_skills_matched(logger, intent, scores)
    matched = [skill for skill in skills if skill.name in scores]
    matched.sort(key=lambda skill: (-scores[skill.name], skill.name))
    return tuple(matched)


def render_context(matches: Iterable[SkillDescriptor]) -> str:
    """Join matched skill bodies verbatim, separated by a blank line."""
    return "\n\n".join(skill.body for skill in matches)
