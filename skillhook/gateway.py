"""Gateway: host hook events go through here; resolve skills or run formatters."""
from pathlib import Path

from skillhook.formatters import dispatch_format, load_format_rules
from skillhook.formatters.rules import FormatRule, FormatRuleTable
from skillhook.skills import SkillCatalog, render_context, resolve_skills


def handle_prompt(intent: str, *, catalog: SkillCatalog | None = None) -> tuple[str, list[str]]:
    """Resolve skills for a user intent.
    Returns (guidance text to inject, matched skill names). Both are empty when nothing matches.
    """
    matches = resolve_skills(intent, catalog)
    return render_context(matches), [skill.name for skill in matches]


def handle_edit(
    paths: list[str | Path],
    *,
    rules: FormatRuleTable | None = None,
) -> list[FormatRule | None]:
    """Run the post-edit formatter on each path, in order. Stops at the first formatter failure."""
    table = rules if rules is not None else load_format_rules()
    return [dispatch_format(path, table) for path in paths]
