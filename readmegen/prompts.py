"""Interactive question sequence that produces a validated AnswerSet."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, TextIO

from .constants import LICENSE_CHOICES
from .logging import get_logger
from .models import AnswerSet

INPUT = "input"
CHOICE = "choice"

# emailregex.com: quoted or dot-atom local part, then a bracketed IPv4 literal
# or dot-separated labels ending in a 2+ letter top-level label.
EMAIL_PATTERN = re.compile(
    r"(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))"
)

Validator = Callable[[str], Optional[str]]
InputFunc = Callable[[str], str]


class ValidationError(ValueError):
    """Raised when an answer is rejected; the question is asked again."""


class PromptAborted(RuntimeError):
    """Raised when the user cancels the question sequence."""


def required(message: str) -> Validator:
    """Return a validator rejecting empty answers with ``message``."""

    def _check(value: str) -> Optional[str]:
        return None if value else message

    return _check


def validate_email(value: str) -> Optional[str]:
    """Accept an empty answer or a syntactically valid email address."""
    if value and EMAIL_PATTERN.fullmatch(value) is None:
        return "Invalid email"
    return None


@dataclass(frozen=True)
class Question:
    """A single prompt with its validation rule."""

    name: str
    message: str
    kind: str = INPUT
    choices: tuple[str, ...] = ()
    validate: Optional[Validator] = None
    default: str = ""

    def resolve(self, value: str) -> str:
        """Return the accepted answer for ``value`` or raise ValidationError."""
        if self.kind == CHOICE:
            value = self._match_choice(value)
        if self.validate is not None:
            problem = self.validate(value)
            if problem:
                raise ValidationError(problem)
        return value

    def _match_choice(self, value: str) -> str:
        if value.isdigit():
            index = int(value)
            if 1 <= index <= len(self.choices):
                return self.choices[index - 1]
        lowered = value.lower()
        for choice in self.choices:
            if choice.lower() == lowered:
                return choice
        raise ValidationError(f"Please choose one of: {', '.join(self.choices)}")


QUESTIONS: tuple[Question, ...] = (
    Question("title", "Project title:", validate=required("A project title is required.")),
    Question(
        "description",
        "Description:",
        validate=required("A description for your project is required."),
    ),
    Question("installation", "Installation instructions:"),
    Question("usage", "Usage instructions:"),
    Question("contributing", "Contributing instructions:"),
    Question("test", "Testing instructions:"),
    Question(
        "license",
        "Choose a license:",
        kind=CHOICE,
        choices=LICENSE_CHOICES,
        default=LICENSE_CHOICES[0],
    ),
    Question("username", "GitHub username of project creator:"),
    Question("email", "Email of project creator:", validate=validate_email),
)


class PromptCollector:
    """Runs the question sequence and returns a fully validated AnswerSet."""

    def __init__(
        self,
        questions: Sequence[Question] = QUESTIONS,
        *,
        input_func: InputFunc | None = None,
        output: TextIO | None = None,
        defaults: Mapping[str, str] | None = None,
    ) -> None:
        self.questions = tuple(questions)
        self.input_func = input_func or input
        self.output = output
        self.defaults: Dict[str, str] = dict(defaults or {})
        self.logger = get_logger("prompts")

    def collect(self) -> AnswerSet:
        answers: Dict[str, str] = {}
        for question in self.questions:
            answers[question.name] = self.ask(question)
            self.logger.debug("Collected answer for %s", question.name)
        return AnswerSet.from_mapping(answers)

    def ask(self, question: Question) -> str:
        """Prompt until ``question`` receives an acceptable answer."""
        default = self.defaults.get(question.name, question.default)
        if question.kind == CHOICE:
            self._echo(question.message)
            for index, choice in enumerate(question.choices, 1):
                self._echo(f"  {index}) {choice}")
            prompt = self._format_prompt("Enter number or name:", default)
        else:
            prompt = self._format_prompt(question.message, default)

        while True:
            value = self._read(prompt).strip() or default
            try:
                return question.resolve(value)
            except ValidationError as exc:
                self.logger.debug("Rejected answer for %s: %s", question.name, exc)
                self._echo(str(exc))

    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAborted("Prompt cancelled before all questions were answered") from exc

    def _echo(self, message: str) -> None:
        stream = self.output if self.output is not None else sys.stdout
        print(message, file=stream)

    @staticmethod
    def _format_prompt(message: str, default: str) -> str:
        if default:
            return f"{message} [{default}] "
        return f"{message} "


__all__ = [
    "EMAIL_PATTERN",
    "PromptAborted",
    "PromptCollector",
    "QUESTIONS",
    "Question",
    "ValidationError",
    "required",
    "validate_email",
]
