"""Load skill files from a directory: YAML frontmatter + Markdown body."""
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from skillhook.config import SKILLS_DIR
from skillhook.logging_utils import get_logger, log_catalog_loaded

logger = get_logger(__name__)


class CatalogError(ValueError):
    """The skill catalog is misconfigured (e.g. two files declare the same name)."""


@dataclass(frozen=True)
class SkillDescriptor:
    """A single skill: trigger metadata from frontmatter and body text for the assistant context."""

    name: str
    trigger_description: str
    body: str
    keywords: tuple[str, ...] = ()
    path: Path | None = field(default=None, compare=False)


@dataclass(frozen=True)
class SkillCatalog:
    """Read-only set of skills with unique names. Build with from_skills()."""

    skills: tuple[SkillDescriptor, ...]
    by_name: Mapping[str, SkillDescriptor]

    @classmethod
    def from_skills(cls, skills: list[SkillDescriptor]) -> "SkillCatalog":
        by_name: dict[str, SkillDescriptor] = {}
        for skill in skills:
            existing = by_name.get(skill.name)
            if existing is not None:
                raise CatalogError(
                    f"Duplicate skill name {skill.name!r}: declared in {existing.path} and {skill.path}"
                )
            by_name[skill.name] = skill
        return cls(skills=tuple(skills), by_name=MappingProxyType(by_name))

    def get(self, name: str) -> SkillDescriptor | None:
        return self.by_name.get(name)

    def names(self) -> list[str]:
        return [s.name for s in self.skills]

    def __iter__(self) -> Iterator[SkillDescriptor]:
        return iter(self.skills)

    def __len__(self) -> int:
        return len(self.skills)


def _parse_frontmatter_and_body(content: str) -> tuple[dict, str]:
    """Split content into frontmatter dict and body. Returns ({}, content) if no valid frontmatter."""
    content = content.strip()
    if not content.startswith("---"):
        return {}, content
    parts = content.split("\n", 1)
    if len(parts) < 2:
        return {}, content
    rest = parts[1]
    idx = rest.find("\n---")
    if idx == -1:
        return {}, content
    yaml_block = rest[:idx].strip()
    body = rest[idx + 4 :].strip()
    try:
        meta = yaml.safe_load(yaml_block)
    except yaml.YAMLError as e:
        logger.warning("skill_frontmatter_parse_error", error=str(e))
        return {}, content
    if not isinstance(meta, dict):
        return {}, content
    return meta, body


def _as_str_list(value) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    return [str(v) for v in value]


def load_skill_file(path: Path) -> SkillDescriptor | None:
    """Parse one skill file. Returns None (after a warning) if the file cannot be read."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("skill_file_read_error", path=str(path), error=str(e))
        return None
    meta, body = _parse_frontmatter_and_body(text)
    name = meta.get("name") or path.stem
    description = meta.get("description") or ""
    if not str(description).strip():
        logger.warning("skill_missing_description", path=str(path), name=name)
    return SkillDescriptor(
        name=str(name),
        trigger_description=str(description),
        body=body,
        keywords=tuple(_as_str_list(meta.get("keywords"))),
        path=path,
    )


def load_skills(skills_dir: Path | None = None) -> SkillCatalog:
    """Discover *.md files in skills_dir, parse frontmatter + body, return a SkillCatalog.
    If skills_dir does not exist or is empty, the catalog is empty.
    Unreadable files are skipped with a log warning; a duplicate name raises CatalogError.
    """
    directory = Path(skills_dir or SKILLS_DIR)
    if not directory.exists() or not directory.is_dir():
        logger.warning("skills_dir_missing", skills_dir=str(directory))
        return SkillCatalog.from_skills([])
    skills: list[SkillDescriptor] = []
    for path in sorted(directory.glob("*.md")):
        skill = load_skill_file(path)
        if skill is not None:
            skills.append(skill)
    catalog = SkillCatalog.from_skills(skills)
    log_catalog_loaded(logger, directory, catalog.names())
    return catalog
