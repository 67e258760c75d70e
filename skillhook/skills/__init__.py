"""Skills: load from YAML-frontmatter Markdown files and match to user intents."""
from functools import lru_cache

from skillhook.skills.loader import CatalogError, SkillCatalog, SkillDescriptor, load_skills
from skillhook.skills.matcher import match_skills, render_context


@lru_cache(maxsize=None)
def default_catalog() -> SkillCatalog:
    """The catalog under SKILLS_DIR, loaded once per process."""
    return load_skills()


def resolve_skills(intent: str, catalog: SkillCatalog | None = None) -> tuple[SkillDescriptor, ...]:
    """Return the skills matching the intent (possibly none)."""
    return match_skills(intent, catalog if catalog is not None else default_catalog())


__all__ = [
    "CatalogError",
    "SkillCatalog",
    "SkillDescriptor",
    "default_catalog",
    "load_skills",
    "match_skills",
    "render_context",
    "resolve_skills",
]
