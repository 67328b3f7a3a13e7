"""Tests for the collect -> render -> write pipeline."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from readmegen.config import load_config
from readmegen.orchestrator import Orchestrator
from readmegen.prompts import PromptAborted, PromptCollector
from readmegen.renderer import ReadmeRenderer
from readmegen.writer import ReadmeWriteError, ReadmeWriter
from tests._fixtures.answers import ScriptedInput

DEMO_RESPONSES = ["Demo", "A demo app", "npm i", "", "", "", "ISC", "octocat", ""]


def _collector(responses) -> PromptCollector:
    return PromptCollector(input_func=ScriptedInput(responses), output=io.StringIO())


def test_run_writes_rendered_readme(tmp_path: Path) -> None:
    orchestrator = Orchestrator(collector=_collector(DEMO_RESPONSES))

    outcome = orchestrator.run(str(tmp_path))

    readme = tmp_path / "README.md"
    assert outcome.path == readme.resolve()
    assert readme.read_text(encoding="utf-8") == outcome.content
    assert outcome.content == ReadmeRenderer().render(outcome.answers)
    assert outcome.content.startswith("# Demo\n")
    assert "https://choosealicense.com/licenses/isc" in outcome.content


def test_run_honours_config_layout_and_output(tmp_path: Path) -> None:
    (tmp_path / ".readmegen.yml").write_text(
        "output: PROJECT.md\nlayout: compact\n", encoding="utf-8"
    )
    orchestrator = Orchestrator(collector=_collector(DEMO_RESPONSES))

    outcome = orchestrator.run(str(tmp_path))

    assert outcome.path.name == "PROJECT.md"
    assert not (tmp_path / "README.md").exists()
    assert "\n\n\n" not in outcome.content


def test_run_builds_collector_from_config_defaults(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".readmegen.yml").write_text(
        "defaults:\n  username: octocat\n  license: MIT\n", encoding="utf-8"
    )
    monkeypatch.setattr("builtins.input", ScriptedInput(["Demo", "Desc", "", "", "", "", "", "", ""]))
    monkeypatch.setattr("sys.stdout", io.StringIO())

    outcome = Orchestrator().run(str(tmp_path), config=load_config(tmp_path))

    assert outcome.answers.username == "octocat"
    assert "[GitHub Profile](https://github.com/octocat)" in outcome.content


def test_run_writes_nothing_when_prompts_are_cancelled(tmp_path: Path) -> None:
    orchestrator = Orchestrator(collector=_collector(["Demo", "A demo app"]))

    with pytest.raises(PromptAborted):
        orchestrator.run(str(tmp_path))

    assert not (tmp_path / "README.md").exists()


def test_run_propagates_write_failures(tmp_path: Path) -> None:
    class FailingWriter(ReadmeWriter):
        def write(self, path: Path, content: str) -> Path:
            raise ReadmeWriteError(f"Could not write {path}: disk full")

    orchestrator = Orchestrator(collector=_collector(DEMO_RESPONSES), writer=FailingWriter())

    with pytest.raises(ReadmeWriteError, match="disk full"):
        orchestrator.run(str(tmp_path))


def test_run_rejects_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Orchestrator(collector=_collector(DEMO_RESPONSES)).run(str(tmp_path / "nope"))
