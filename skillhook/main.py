"""Entry: run a hook trigger (match | format | list)."""
import sys

from skillhook.config import LOG_LEVEL, validate_min_score
from skillhook.logging_utils import configure_logging
from skillhook.skills import default_catalog
from skillhook.triggers.cli import run_format, run_list, run_match

COMMANDS = {
    "match": run_match,
    "format": run_format,
    "list": run_list,
}

USAGE = 'Usage: skillhook match "intent"  |  skillhook format <path>...  |  skillhook list'


def main(argv: list[str] | None = None) -> None:
    configure_logging(LOG_LEVEL)
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    cmd = args[0].lower()
    handler = COMMANDS.get(cmd)
    if handler is None:
        print("Unknown command. Use: match | format | list", file=sys.stderr)
        sys.exit(1)
    validate_min_score()
    # Raises CatalogError on a misconfigured catalog before any command runs
    default_catalog()
    sys.exit(handler(args[1:]))


if __name__ == "__main__":
    main()
