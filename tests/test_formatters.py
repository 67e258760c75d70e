import subprocess
from pathlib import Path

import pytest

from skillhook.formatters import DEFAULT_FORMAT_RULES, FormatRule, FormatRuleError, dispatch_format, load_format_rules
from skillhook.formatters.rules import build_rule_table, find_rule
from tests.conftest import FakeRun


@pytest.fixture
def rules():
    return load_format_rules()


def test_default_table(rules) -> None:
    assert {ext: rule.formatter_command for ext, rule in rules.items()} == {
        ".py": "ruff format",
        ".ts": "prettier --write",
        ".tsx": "prettier --write",
        ".md": "prettier --write",
    }


def test_find_rule_uses_final_suffix_case_insensitively(rules) -> None:
    assert find_rule("src/app/FOO.PY", rules).formatter_command == "ruff format"
    assert find_rule("types.d.ts", rules).file_extension == ".ts"
    assert find_rule("Makefile", rules) is None
    assert find_rule("data.json", rules) is None


def test_python_file_invokes_formatter_exactly_once(rules, fake_run: FakeRun) -> None:
    rule = dispatch_format("foo.py", rules)

    assert rule == FormatRule(".py", "ruff format")
    assert fake_run.calls == [["ruff", "format", "foo.py"]]


def test_tsx_file_invokes_prettier(rules, fake_run: FakeRun) -> None:
    dispatch_format(Path("web/App.tsx"), rules)

    assert fake_run.calls == [["prettier", "--write", str(Path("web/App.tsx"))]]


def test_unmapped_extension_invokes_nothing(rules, fake_run: FakeRun, logs: list) -> None:
    assert dispatch_format("foo.json", rules) is None
    assert fake_run.calls == []
    assert logs[-1]["event"] == "formatter_skipped"


def test_formatter_failure_propagates(rules, monkeypatch: pytest.MonkeyPatch, logs: list) -> None:
    fake = FakeRun(returncode=2)
    monkeypatch.setattr(subprocess, "run", fake)

    with pytest.raises(subprocess.CalledProcessError) as exc_info:
        dispatch_format("foo.py", rules)

    assert exc_info.value.returncode == 2
    assert len(fake.calls) == 1
    assert logs[-1]["event"] == "formatter_failed"
    assert logs[-1]["path"] == "foo.py"
    assert logs[-1]["returncode"] == 2


def test_missing_formatter_propagates(rules, monkeypatch: pytest.MonkeyPatch, logs: list) -> None:
    fake = FakeRun(missing=True)
    monkeypatch.setattr(subprocess, "run", fake)

    with pytest.raises(FileNotFoundError):
        dispatch_format("README.md", rules)

    assert len(fake.calls) == 1
    assert logs[-1]["event"] == "formatter_failed"
    assert logs[-1]["path"] == "README.md"
    assert logs[-1]["formatter"] == "prettier"


def test_duplicate_extension_is_rejected() -> None:
    with pytest.raises(FormatRuleError, match=".py"):
        build_rule_table([FormatRule(".py", "ruff format"), FormatRule(".PY", "black")])


def test_empty_command_is_rejected() -> None:
    with pytest.raises(FormatRuleError):
        build_rule_table([FormatRule(".py", "  ")])


def test_load_rules_from_yaml(tmp_path: Path, fake_run: FakeRun) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text('".py": black -q\nrs: rustfmt\n', encoding="utf-8")

    table = load_format_rules(path)
    dispatch_format("lib.rs", table)

    assert set(table) == {".py", ".rs"}
    assert fake_run.calls == [["rustfmt", "lib.rs"]]


def test_load_rules_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "rules.yaml"
    path.write_text("- ruff format\n", encoding="utf-8")

    with pytest.raises(FormatRuleError):
        load_format_rules(path)


def test_load_rules_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FormatRuleError):
        load_format_rules(tmp_path / "nope.yaml")


def test_default_rules_are_unique() -> None:
    assert len(build_rule_table(DEFAULT_FORMAT_RULES)) == len(DEFAULT_FORMAT_RULES)
