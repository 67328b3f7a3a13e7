"""Shared constants for README rendering and prompting."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import LicenseInfo

README_FILENAME = "README.md"

# Optional sections in canonical document order, keyed by AnswerSet field.
OPTIONAL_SECTIONS: tuple[tuple[str, str], ...] = (
    ("installation", "Installation"),
    ("usage", "Usage"),
    ("contributing", "Contributing"),
    ("test", "Tests"),
)

QUESTIONS_TITLE = "Questions"
LICENSE_TITLE = "License"
DESCRIPTION_TITLE = "Description"
TOC_TITLE = "Table of Contents"

BADGE_URL_TEMPLATE = (
    "https://img.shields.io/static/v1?label=license&message={message}"
    "&color={color}&style=for-the-badge"
)
LICENSE_URL_TEMPLATE = "https://choosealicense.com/licenses/{path}"
PROFILE_URL_TEMPLATE = "https://github.com/{username}"

CONTACT_SENTENCE = (
    "Please feel free to contact via email if you have any questions "
    "pertaining to this project."
)

LICENSES: Mapping[str, LicenseInfo] = MappingProxyType(
    {
        "MIT": LicenseInfo(name="MIT", color="green", path="mit"),
        "ISC": LicenseInfo(name="ISC", color="blue", path="isc"),
        "Apache License 2.0": LicenseInfo(
            name="Apache License 2.0", color="blueviolet", path="apache-2.0"
        ),
        "GNU GPLv3": LicenseInfo(name="GNU GPLv3", color="red", path="gpl-3.0"),
    }
)

LICENSE_CHOICES: tuple[str, ...] = tuple(LICENSES)


__all__ = [
    "BADGE_URL_TEMPLATE",
    "CONTACT_SENTENCE",
    "DESCRIPTION_TITLE",
    "LICENSES",
    "LICENSE_CHOICES",
    "LICENSE_TITLE",
    "LICENSE_URL_TEMPLATE",
    "OPTIONAL_SECTIONS",
    "PROFILE_URL_TEMPLATE",
    "QUESTIONS_TITLE",
    "README_FILENAME",
    "TOC_TITLE",
]
