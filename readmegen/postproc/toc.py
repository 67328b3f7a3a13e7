"""Table-of-contents generation for rendered README sections."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..constants import TOC_TITLE


class TableOfContentsBuilder:
    """Builds the ordered ToC block linking to in-document anchors."""

    def entry(self, title: str) -> str:
        return f"- [{title}](#{self._slugify(title)})"

    def build(self, titles: Sequence[Optional[str]], *, keep_blank_slots: bool = False) -> str:
        """Return the ToC block for the given section titles.

        A ``None`` title marks an absent section. With ``keep_blank_slots`` the
        slot is kept as an empty line, otherwise it is dropped.
        """
        lines: List[str] = [f"## {TOC_TITLE}"]
        for title in titles:
            if title:
                lines.append(self.entry(title))
            elif keep_blank_slots:
                lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _slugify(title: str) -> str:
        slug = title.lower()
        slug = re.sub(r"[^a-z0-9\s-]", "", slug)
        slug = re.sub(r"\s+", "-", slug)
        slug = re.sub(r"-+", "-", slug)
        return slug.strip("-")


__all__ = ["TableOfContentsBuilder"]
