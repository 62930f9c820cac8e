"""Section catalog: which recognized list sections a resume offers."""

from __future__ import annotations

import logging
from typing import Any

from resume_curator.models.document import SECTION_SHAPES
from resume_curator.models.selection import Section, SectionItem

logger = logging.getLogger(__name__)


def build_sections(document: dict[str, Any]) -> list[Section]:
    """Build the ordered catalog of non-empty recognized sections.

    Item indexes are positions in the source list; labels never fail on
    missing members. The document is not modified.
    """
    sections: list[Section] = []
    for key, (label, shape) in SECTION_SHAPES.items():
        entries = document.get(key)
        if not isinstance(entries, list) or not entries:
            continue
        items = [
            SectionItem(index=index, label=shape.view(entry).display_label())
            for index, entry in enumerate(entries)
        ]
        sections.append(Section(key=key, label=label, items=items))

    logger.debug("Catalog: %s", ", ".join(f"{s.key}({len(s.items)})" for s in sections))
    return sections
