"""Static table of post-edit formatters: file extension -> formatter command."""
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

from skillhook import config
from skillhook.logging_utils import get_logger

logger = get_logger(__name__)


class FormatRuleError(ValueError):
    """The format-rule table is malformed or maps one extension twice."""


@dataclass(frozen=True)
class FormatRule:
    """Run formatter_command (shell-style words, file path appended) on files ending in file_extension."""

    file_extension: str
    formatter_command: str


DEFAULT_FORMAT_RULES: tuple[FormatRule, ...] = (
    FormatRule(".py", "ruff format"),
    FormatRule(".ts", "prettier --write"),
    FormatRule(".tsx", "prettier --write"),
    FormatRule(".md", "prettier --write"),
)

FormatRuleTable = Mapping[str, FormatRule]


def normalize_extension(extension: str) -> str:
    """'.PY' -> '.py', 'ts' -> '.ts'."""
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def build_rule_table(rules: list[FormatRule] | tuple[FormatRule, ...]) -> FormatRuleTable:
    """Index rules by normalized extension. Raises FormatRuleError on a duplicate or empty entry."""
    table: dict[str, FormatRule] = {}
    for rule in rules:
        ext = normalize_extension(rule.file_extension)
        if ext in (".", "") or not rule.formatter_command.strip():
            raise FormatRuleError(f"Invalid format rule: {rule!r}")
        if ext in table:
            raise FormatRuleError(f"Extension {ext!r} is mapped more than once")
        table[ext] = FormatRule(ext, rule.formatter_command.strip())
    return MappingProxyType(table)


def load_format_rules(path: Path | None = None) -> FormatRuleTable:
    """Load the rule table from a YAML mapping ({".py": "ruff format", ...}).
    Without a path (and no SKILLHOOK_FORMAT_RULES), the built-in defaults are used.
    """
    rules_path = path or config.FORMAT_RULES_PATH
    if not rules_path:
        return build_rule_table(DEFAULT_FORMAT_RULES)
    rules_path = Path(rules_path)
    try:
        data = yaml.safe_load(rules_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise FormatRuleError(f"Cannot read format rules from {rules_path}: {e}") from e
    if not isinstance(data, dict):
        raise FormatRuleError(f"{rules_path} must contain a mapping of extension to command")
    rules = [FormatRule(str(ext), str(cmd)) for ext, cmd in data.items()]
    table = build_rule_table(rules)
    logger.info("format_rules_loaded", path=str(rules_path), extensions=sorted(table))
    return table


def find_rule(path: str | Path, table: FormatRuleTable) -> FormatRule | None:
    """Return the rule for the file's final suffix, or None if no formatter applies."""
    return table.get(Path(path).suffix.lower())
