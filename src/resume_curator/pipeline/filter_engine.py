"""Build the filtered resume from a document and a SelectionState."""

from __future__ import annotations

import logging
from typing import Any

from resume_curator.models.document import SECTION_SHAPES, is_present
from resume_curator.models.selection import (
    SIMPLE_BASICS_FIELDS,
    BasicsSelection,
    SelectionState,
)

logger = logging.getLogger(__name__)

STREET_LEVEL_MEMBERS = ("address", "postalCode")


def filter_basics(raw_basics: Any, selection: BasicsSelection) -> dict[str, Any]:
    """Return the surviving members of ``basics`` (possibly empty)."""
    if not isinstance(raw_basics, dict):
        return {}

    basics: dict[str, Any] = {}
    for name in SIMPLE_BASICS_FIELDS:
        if selection.includes(name) and is_present(raw_basics.get(name)):
            basics[name] = raw_basics[name]

    location = raw_basics.get("location")
    if selection.include_location and isinstance(location, dict):
        location = dict(location)
        # Without a street address there is no street-level detail to keep.
        keep_street = selection.include_street_address and is_present(location.get("address"))
        if not keep_street:
            for member in STREET_LEVEL_MEMBERS:
                location.pop(member, None)
        basics["location"] = location

    profiles = raw_basics.get("profiles")
    if isinstance(profiles, list) and profiles:
        indexes = selection.selected_profile_indexes
        kept = [profile for index, profile in enumerate(profiles) if index in indexes]
        if kept:
            basics["profiles"] = kept

    return basics


def filter_entries(entries: Any, indexes: set[int]) -> list[Any]:
    """Keep the entries at *indexes*, in source order. Unknown indexes match nothing."""
    if not isinstance(entries, list):
        return []
    return [entry for index, entry in enumerate(entries) if index in indexes]


def build_filtered_resume(document: dict[str, Any], state: SelectionState) -> dict[str, Any]:
    """Produce the reduced document.

    Only ``basics`` and the recognized list sections can appear in the
    result. ``basics`` is emitted only when at least one member survived;
    every active section is emitted, even when all its items were dropped.
    Kept entries are the source objects themselves.
    """
    result: dict[str, Any] = {}

    basics = filter_basics(document.get("basics"), state.basics)
    if basics:
        result["basics"] = basics

    for key, indexes in state.sections.items():
        if key not in SECTION_SHAPES:
            logger.debug("Ignoring unrecognized section key %r", key)
            continue
        result[key] = filter_entries(document.get(key), indexes)

    logger.debug(
        "Filtered resume: basics=%s sections=%s",
        sorted(basics),
        {key: len(value) for key, value in result.items() if key != "basics"},
    )
    return result
