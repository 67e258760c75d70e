"""Post-edit formatters: a static extension table and the dispatcher that runs them."""
from skillhook.formatters.dispatch import dispatch_format
from skillhook.formatters.rules import (
    DEFAULT_FORMAT_RULES,
    FormatRule,
    FormatRuleError,
    load_format_rules,
)

__all__ = [
    "DEFAULT_FORMAT_RULES",
    "FormatRule",
    "FormatRuleError",
    "dispatch_format",
    "load_format_rules",
]
