"""Run the matching external formatter on a file that was just written."""
import shlex
import subprocess
from pathlib import Path

from skillhook.formatters.rules import FormatRule, FormatRuleTable, find_rule
from skillhook.logging_utils import (
    get_logger,
    log_formatter_failed,
    log_formatter_invoked,
    log_formatter_skipped,
)

logger = get_logger(__name__)


def formatter_argv(rule: FormatRule, path: str | Path) -> list[str]:
    return shlex.split(rule.formatter_command) + [str(path)]


def dispatch_format(path: str | Path, rules: FormatRuleTable) -> FormatRule | None:
    """Format the file in place if its extension has a rule. Returns the rule applied, or None.

    The formatter runs once, to completion. A missing executable (FileNotFoundError)
    or a non-zero exit (subprocess.CalledProcessError) propagates to the caller.
    """
    path = str(path)
    rule = find_rule(path, rules)
    if rule is None:
        log_formatter_skipped(logger, path, Path(path).suffix)
        return None
    argv = formatter_argv(rule, path)
    log_formatter_invoked(logger, path, rule.file_extension, argv)
    try:
        subprocess.run(argv, check=True)
    except FileNotFoundError as e:
        log_formatter_failed(logger, path, str(e), formatter=argv[0])
        raise
    except subprocess.CalledProcessError as e:
        log_formatter_failed(logger, path, str(e), formatter=argv[0], returncode=e.returncode)
        raise
    return rule
