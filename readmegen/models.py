"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class LicenseInfo:
    """Presentation metadata for a supported license."""

    name: str
    color: str
    path: str


@dataclass(frozen=True)
class AnswerSet:
    """Validated project metadata collected from the user."""

    title: str
    description: str
    license: str
    installation: str = ""
    usage: str = ""
    contributing: str = ""
    test: str = ""
    username: str = ""
    email: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AnswerSet:
        """Build an answer set from a plain mapping, treating missing values as empty."""
        values = {name: _as_text(data.get(name)) for name in cls.field_names()}
        return cls(**values)

    @property
    def has_contact(self) -> bool:
        return bool(self.username or self.email)


def _as_text(value: Optional[Any]) -> str:
    if value is None:
        return ""
    return str(value)


__all__ = ["AnswerSet", "LicenseInfo"]
