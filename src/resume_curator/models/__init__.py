"""Data models for resume curation."""

from resume_curator.models.document import (
    SECTION_ORDER,
    SECTION_SHAPES,
    Basics,
    Location,
    Profile,
    SectionEntry,
)
from resume_curator.models.selection import (
    BasicsSelection,
    ContactField,
    Section,
    SectionItem,
    SelectionState,
)

__all__ = [
    "SECTION_ORDER",
    "SECTION_SHAPES",
    "Basics",
    "BasicsSelection",
    "ContactField",
    "Location",
    "Profile",
    "Section",
    "SectionEntry",
    "SectionItem",
    "SelectionState",
]
