"""Render an AnswerSet into README markdown.

The document is built as an ordered list of fragments. Each optional
fragment is guarded by a presence check and yields ``None`` when its data is
missing. The layout decides what happens to those empty slots:

* ``legacy`` keeps every slot, so an absent section collapses to an empty
  string between its separators. This reproduces the historical template
  output byte for byte, blank regions included.
* ``compact`` drops empty slots, leaving single blank lines between
  fragments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .constants import (
    CONTACT_SENTENCE,
    DESCRIPTION_TITLE,
    LICENSE_TITLE,
    OPTIONAL_SECTIONS,
    PROFILE_URL_TEMPLATE,
    QUESTIONS_TITLE,
)
from .logging import get_logger
from .models import AnswerSet
from .postproc.badges import LicenseBadge, render_license_link
from .postproc.toc import TableOfContentsBuilder

LEGACY_LAYOUT = "legacy"
COMPACT_LAYOUT = "compact"
LAYOUTS: tuple[str, ...] = (LEGACY_LAYOUT, COMPACT_LAYOUT)

_FRAGMENT_SEPARATOR = "\n\n"


def render_section(header: str, body: str) -> str:
    """Render a named section. Callers skip sections with an empty body."""
    return f"## {header}\n{body}"


def render_questions_section(username: str, email: str, *, keep_blank_lines: bool = True) -> str:
    """Render the contact section from an optional username and email.

    Calling this with neither value produces a header followed by blank
    lines; the document renderer omits the section in that case instead.
    """
    email_line = f"{CONTACT_SENTENCE}  \nEmail: {email}  " if email else ""
    username_line = (
        f"[GitHub Profile]({PROFILE_URL_TEMPLATE.format(username=username)})" if username else ""
    )
    lines = [f"## {QUESTIONS_TITLE}", email_line, username_line]
    if not keep_blank_lines:
        lines = [line for line in lines if line]
    return "\n".join(lines)


@dataclass
class ReadmeRenderer:
    """Assembles the complete README document from an answer set."""

    layout: str = LEGACY_LAYOUT
    badge: LicenseBadge = field(default_factory=LicenseBadge)
    toc_builder: TableOfContentsBuilder = field(default_factory=TableOfContentsBuilder)

    def __post_init__(self) -> None:
        if self.layout not in LAYOUTS:
            raise ValueError(
                f"Unknown README layout {self.layout!r}; expected one of {', '.join(LAYOUTS)}"
            )
        self.logger = get_logger("renderer")

    @property
    def keeps_blank_slots(self) -> bool:
        return self.layout == LEGACY_LAYOUT

    def render(self, answers: AnswerSet) -> str:
        """Return the README text for ``answers``. Performs no I/O."""
        fragments: List[Optional[str]] = [
            self._render_heading(answers),
            render_section(DESCRIPTION_TITLE, answers.description),
            self._render_toc(answers),
        ]
        for name, title in OPTIONAL_SECTIONS:
            body = getattr(answers, name)
            fragments.append(render_section(title, body) if body else None)
        fragments.append(self._render_questions(answers))
        fragments.append(render_section(LICENSE_TITLE, render_license_link(answers.license)))

        present = sum(1 for fragment in fragments if fragment)
        self.logger.debug(
            "Rendered %d of %d README fragments (%s layout)", present, len(fragments), self.layout
        )
        return self._compose(fragments)

    def _render_heading(self, answers: AnswerSet) -> str:
        return f"# {answers.title}\n{self.badge.render(answers.license)}"

    def _render_toc(self, answers: AnswerSet) -> str:
        titles: List[Optional[str]] = [
            title if getattr(answers, name) else None for name, title in OPTIONAL_SECTIONS
        ]
        titles.append(QUESTIONS_TITLE if answers.has_contact else None)
        titles.append(LICENSE_TITLE)
        return self.toc_builder.build(titles, keep_blank_slots=self.keeps_blank_slots)

    def _render_questions(self, answers: AnswerSet) -> Optional[str]:
        if not answers.has_contact:
            return None
        return render_questions_section(
            answers.username,
            answers.email,
            keep_blank_lines=self.keeps_blank_slots,
        )

    def _compose(self, fragments: Sequence[Optional[str]]) -> str:
        if self.keeps_blank_slots:
            parts = [fragment or "" for fragment in fragments]
        else:
            parts = [fragment for fragment in fragments if fragment]
        return _FRAGMENT_SEPARATOR.join(parts) + "\n"


__all__ = [
    "COMPACT_LAYOUT",
    "LAYOUTS",
    "LEGACY_LAYOUT",
    "ReadmeRenderer",
    "render_questions_section",
    "render_section",
]
