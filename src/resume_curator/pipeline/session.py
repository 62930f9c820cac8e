"""Selection session - walks the user through contacts, sections and items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from resume_curator.clients.prompt_client import Choice, Prompter
from resume_curator.errors import NoSectionsError, UserAbort
from resume_curator.models.selection import BasicsSelection, Section, SelectionState
from resume_curator.pipeline.catalog import build_sections
from resume_curator.pipeline.contacts import apply_contact_choices, build_contact_fields
from resume_curator.pipeline.filter_engine import build_filtered_resume

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Outcome of a completed selection session."""

    document: dict[str, Any]
    sections: list[Section]
    state: SelectionState = field(default_factory=SelectionState)

    def filtered(self) -> dict[str, Any]:
        return build_filtered_resume(self.document, self.state)


class SelectionSession:
    """Owns the SelectionState and fills it through a fixed prompt sequence.

    1. contact details (only when ``basics`` has something to offer)
    2. sections
    3. items, once per chosen section
    """

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def run(self, document: dict[str, Any]) -> SessionResult:
        """Run all prompts.

        Raises:
            UserAbort: the contact prompt was cancelled, or no section was chosen.
            NoSectionsError: the document has no recognized sections.
        """
        basics = self.choose_basics(document.get("basics"))

        sections = build_sections(document)
        if not sections:
            raise NoSectionsError("No recognizable sections found in the resume.")

        active = self.choose_sections(sections)
        state = SelectionState(basics=basics)
        for section in active:
            state.sections[section.key] = self.choose_items(section)

        logger.info(
            "Selection complete: %s",
            {key: sorted(indexes) for key, indexes in state.sections.items()},
        )
        return SessionResult(document=document, sections=sections, state=state)

    def choose_basics(self, raw_basics: Any) -> BasicsSelection:
        fields = build_contact_fields(raw_basics)
        if not fields:
            return BasicsSelection()

        chosen = self.prompter.multiselect(
            "Select which contact details to include",
            [Choice(title=f.title, value=f.value, selected=f.selected_by_default) for f in fields],
        )
        if chosen is None:
            raise UserAbort("No contact details selection made.")
        return apply_contact_choices(chosen, raw_basics)

    def choose_sections(self, sections: list[Section]) -> list[Section]:
        chosen = self.prompter.multiselect(
            "Select sections to include in the generated resume",
            [Choice(title=s.label, value=s.key) for s in sections],
        )
        if not chosen:
            raise UserAbort("No sections selected.")
        return [s for s in sections if s.key in chosen]

    def choose_items(self, section: Section) -> set[int]:
        chosen = self.prompter.multiselect(
            f"Select items to include from {section.label}",
            [Choice(title=item.label, value=item.index) for item in section.items],
        )
        # A chosen section with nothing picked stays in the output as an empty list.
        return set(chosen or ())
