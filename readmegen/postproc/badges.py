"""License badge and link fragments for generated README files."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from ..constants import BADGE_URL_TEMPLATE
from ..licenses import license_url, lookup_license

# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass
class LicenseBadge:
    """Builds the shields.io badge shown under the README title."""

    alt_text: str = "license"

    def url(self, license_name: str) -> str:
        info = lookup_license(license_name)
        return BADGE_URL_TEMPLATE.format(
            message=encode_uri_component(license_name),
            color=info.color,
        )

    def render(self, license_name: str) -> str:
        """Return the Markdown image reference for the license badge."""
        return f"![{self.alt_text}]({self.url(license_name)})"


def render_license_link(license_name: str) -> str:
    """Return a Markdown link whose text is the license name."""
    return f"[{license_name}]({license_url(license_name)})"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


__all__ = ["LicenseBadge", "encode_uri_component", "render_license_link"]
