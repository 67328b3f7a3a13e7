"""License lookup for rendered README files."""

from __future__ import annotations

from .constants import LICENSE_URL_TEMPLATE, LICENSES
from .models import LicenseInfo


class UnknownLicenseError(KeyError):
    """Raised when a license outside the supported set reaches the renderer."""


def lookup_license(name: str) -> LicenseInfo:
    """Return badge color and reference path for a supported license."""
    try:
        return LICENSES[name]
    except KeyError:
        raise UnknownLicenseError(
            f"Unsupported license {name!r}; expected one of {', '.join(LICENSES)}"
        ) from None


def license_url(name: str) -> str:
    """Return the choosealicense.com reference page for a license."""
    info = lookup_license(name)
    return LICENSE_URL_TEMPLATE.format(path=info.path)


__all__ = ["UnknownLicenseError", "license_url", "lookup_license"]
