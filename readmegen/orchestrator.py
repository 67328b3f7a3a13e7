"""Pipeline orchestration: collect answers, render, persist."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import ReadmeGenConfig, load_config
from .logging import get_logger
from .models import AnswerSet
from .prompts import PromptCollector
from .renderer import ReadmeRenderer
from .writer import ReadmeWriter


@dataclass
class RunOutcome:
    """Result of a README generation run."""

    path: Path
    answers: AnswerSet
    content: str


class Orchestrator:
    """Coordinates the collect -> render -> write flow for a single run."""

    def __init__(
        self,
        collector: PromptCollector | None = None,
        renderer: ReadmeRenderer | None = None,
        writer: ReadmeWriter | None = None,
    ) -> None:
        self.collector = collector
        self.renderer = renderer
        self.writer = writer or ReadmeWriter()
        self.logger = get_logger("orchestrator")

    def run(self, path: str = ".", *, config: Optional[ReadmeGenConfig] = None) -> RunOutcome:
        """Ask the questions, render the README and write it under ``path``.

        Nothing is written unless every question was answered.
        """
        root = Path(path).expanduser().resolve()
        if not root.is_dir():
            raise FileNotFoundError(f"Target directory not found: {root}")
        if config is None:
            config = load_config(root)
        self.logger.debug("Generating %s in %s (%s layout)", config.output, root, config.layout)

        collector = self.collector or PromptCollector(defaults=config.defaults)
        answers = collector.collect()

        renderer = self.renderer or ReadmeRenderer(layout=config.layout)
        content = renderer.render(answers)

        written = self.writer.write(config.output_path, content)
        return RunOutcome(path=written, answers=answers, content=content)


__all__ = ["Orchestrator", "RunOutcome"]
