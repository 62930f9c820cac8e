"""Pydantic models for the catalog and the user's inclusion choices."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from resume_curator.models.document import SECTION_ORDER, Basics, is_present


class SectionItem(BaseModel):
    index: int  # position in the source list
    label: str


class Section(BaseModel):
    key: str
    label: str
    items: list[SectionItem]


class ContactField(BaseModel):
    """One selectable entry of the contact-details prompt."""

    value: str  # "name", "location", "locationAddress", "profile-0", ...
    title: str
    selected_by_default: bool = True


SIMPLE_BASICS_FIELDS: tuple[str, ...] = (
    "name",
    "label",
    "image",
    "email",
    "phone",
    "url",
    "summary",
)


class BasicsSelection(BaseModel):
    """Which members of ``basics`` survive filtering.

    Defaults describe a run where the contact prompt was never shown.
    """

    include_name: bool = True
    include_label: bool = True
    include_image: bool = False
    include_email: bool = True
    include_phone: bool = True
    include_url: bool = True
    include_summary: bool = True
    include_location: bool = True
    include_street_address: bool = True
    selected_profile_indexes: set[int] = Field(default_factory=set)

    @model_validator(mode="after")
    def _street_address_needs_location(self) -> BasicsSelection:
        if not self.include_location and self.include_street_address:
            self.include_street_address = False
        return self

    def includes(self, field_name: str) -> bool:
        return getattr(self, f"include_{field_name}")


class SelectionState(BaseModel):
    """Everything the user chose for one run.

    ``sections`` maps each active section key to its selected item indexes;
    its insertion order is catalog order.
    """

    sections: dict[str, set[int]] = Field(default_factory=dict)
    basics: BasicsSelection = Field(default_factory=BasicsSelection)

    @classmethod
    def select_all(cls, document: dict[str, Any]) -> SelectionState:
        """A state keeping every recognized section, entry and basics member.

        Recognized sections present as empty lists stay active, so filtering
        a filtered document with this state gives the same document back.
        """
        sections: dict[str, set[int]] = {}
        for key in SECTION_ORDER:
            entries = document.get(key)
            if isinstance(entries, list):
                sections[key] = set(range(len(entries)))

        basics = Basics.view(document.get("basics"))
        if basics is None:
            return cls(sections=sections)

        location = basics.location
        return cls(
            sections=sections,
            basics=BasicsSelection(
                include_name=True,
                include_label=True,
                include_image=True,
                include_email=True,
                include_phone=True,
                include_url=True,
                include_summary=True,
                include_location=location is not None,
                include_street_address=(
                    location is not None and is_present(location.address)
                ),
                selected_profile_indexes=set(range(len(basics.profiles))),
            ),
        )
