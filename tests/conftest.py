import subprocess
from pathlib import Path
from typing import Any

import pytest
from structlog.testing import capture_logs

from skillhook.config import PROJECT_ROOT
from skillhook.skills import SkillCatalog, default_catalog, load_skills


@pytest.fixture(autouse=True)
def logs() -> Any:
    with capture_logs() as captured:
        yield captured


@pytest.fixture
def catalog() -> SkillCatalog:
    """The skill catalog shipped with the project."""
    return load_skills(PROJECT_ROOT / "skills")


def write_skill(directory: Path, filename: str, content: str) -> Path:
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path


class FakeRun:
    """Stands in for subprocess.run; records each argv and optionally fails."""

    def __init__(self, returncode: int = 0, missing: bool = False) -> None:
        self.calls: list[list[str]] = []
        self.returncode = returncode
        self.missing = missing

    def __call__(self, argv: list[str], check: bool = False, **kwargs: Any) -> subprocess.CompletedProcess:
        self.calls.append(list(argv))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        if check and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, argv)
        return subprocess.CompletedProcess(argv, self.returncode)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def fresh_catalog_cache() -> Any:
    """Clear the process-wide catalog before and after the test."""
    default_catalog.cache_clear()
    yield
    default_catalog.cache_clear()
