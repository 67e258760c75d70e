"""CLI trigger: read the intent or edited paths from args or a hook payload on stdin."""
import json
import subprocess
import sys
from typing import Any

from skillhook.gateway import handle_edit, handle_prompt
from skillhook.skills import default_catalog

# Exit status used by shells for "command not found"
EXIT_FORMATTER_MISSING = 127


def _parse_payload(raw: str) -> dict[str, Any] | None:
    """Decode a JSON hook payload. Returns None if stdin is not a JSON object."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        return None
    return payload if isinstance(payload, dict) else None


def intent_from_stdin(raw: str) -> str:
    """Prompt-submit hooks send {"prompt": ...}; anything else is taken as plain text."""
    payload = _parse_payload(raw)
    if payload is not None:
        return str(payload.get("prompt") or "").strip()
    return raw.strip()


def paths_from_stdin(raw: str) -> list[str]:
    """Post-edit hooks send {"tool_input": {"file_path": ...}}; plain text is one path per line."""
    payload = _parse_payload(raw)
    if payload is None:
        return [line.strip() for line in raw.splitlines() if line.strip()]
    tool_input = payload.get("tool_input")
    if not isinstance(tool_input, dict):
        return []
    path = tool_input.get("file_path") or tool_input.get("path")
    return [str(path)] if path else []


def run_match(args: list[str]) -> int:
    """Print guidance for the intent (argv words, else stdin). No match prints nothing.
    An empty prompt in a hook payload is a valid no-match; only a missing intent is a usage error.
    """
    if args:
        intent = " ".join(args)
    else:
        raw = sys.stdin.read()
        if not raw.strip():
            print('Usage: skillhook match "your intent" or echo \'{"prompt": "..."}\' | skillhook match', file=sys.stderr)
            return 1
        intent = intent_from_stdin(raw)
    context, skill_names = handle_prompt(intent)
    if skill_names:
        print(f"[Skills loaded: {', '.join(skill_names)}]", file=sys.stderr)
        print(context)
    return 0


def run_format(args: list[str]) -> int:
    """Format each edited path (argv, else stdin payload). A formatter failure sets the exit status."""
    paths = args or paths_from_stdin(sys.stdin.read())
    if not paths:
        return 0
    try:
        handle_edit(paths)
    except FileNotFoundError as e:
        print(f"Formatter not found: {e.filename or e}", file=sys.stderr)
        return EXIT_FORMATTER_MISSING
    except subprocess.CalledProcessError as e:
        print(str(e), file=sys.stderr)
        return e.returncode
    return 0


def run_list(args: list[str]) -> int:
    """Print 'name: description' for every skill in the catalog."""
    for skill in default_catalog():
        print(f"{skill.name}: {skill.trigger_description}")
    return 0
