"""Persist rendered README content to disk."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .logging import get_logger


class ReadmeWriteError(OSError):
    """Raised when the README could not be written."""


@dataclass
class ReadmeWriter:
    """Writes a rendered document completely or not at all."""

    encoding: str = "utf-8"

    def write(self, path: Path, content: str) -> Path:
        """Stage ``content`` next to ``path`` and atomically replace ``path`` with it."""
        target = Path(path)
        staged: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self.encoding,
                newline="",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                staged = Path(handle.name)
                handle.write(content)
            os.chmod(staged, _file_mode(target))
            os.replace(staged, target)
        except (OSError, UnicodeError) as exc:
            if staged is not None:
                staged.unlink(missing_ok=True)
            reason = getattr(exc, "strerror", None) or exc
            raise ReadmeWriteError(f"Could not write {target}: {reason}") from exc
        get_logger("writer").info("Wrote %d characters to %s", len(content), target)
        return target


def _file_mode(target: Path) -> int:
    # Temporary files are created 0600; keep the existing mode or apply the umask.
    try:
        return target.stat().st_mode & 0o777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


__all__ = ["ReadmeWriteError", "ReadmeWriter"]
