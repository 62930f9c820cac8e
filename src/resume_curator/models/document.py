"""Read-only Pydantic views over JSON Resume fields.

The loaded document stays a plain ``dict``; these models are only built to
produce display labels and to inspect the ``basics`` block. Every member is
optional and extra members are allowed, so a view can be built from any
partial or oddly-typed entry without raising.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def first_text(*candidates: Any, default: str) -> str:
    """Return the first non-empty string among *candidates*, else *default*."""
    for value in candidates:
        if isinstance(value, str) and value:
            return value
    return default


def is_present(value: Any) -> bool:
    """Whether a source member counts as filled in (``None``/``""``/``False`` do not)."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class _TextRecord(BaseModel):
    """Record whose declared members are all optional text."""

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @classmethod
    def view(cls, raw: Any):
        """Build a view from a raw entry; non-objects give an empty record."""
        return cls.model_validate(raw if isinstance(raw, dict) else {})


class Location(_TextRecord):
    address: str | None = None
    postalCode: str | None = None
    city: str | None = None
    countryCode: str | None = None
    region: str | None = None

    @property
    def summary_parts(self) -> list[str]:
        return [part for part in (self.city, self.region, self.countryCode) if part]


class Profile(_TextRecord):
    network: str | None = None
    username: str | None = None
    url: str | None = None


class Basics(BaseModel):
    """The contact/identity block."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str | None = None
    label: str | None = None
    image: str | None = None
    email: str | None = None
    phone: str | None = None
    url: str | None = None
    summary: str | None = None
    location: Location | None = None
    profiles: list[Profile] = []

    @field_validator("name", "label", "image", "email", "phone", "url", "summary", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator("location", mode="before")
    @classmethod
    def _coerce_location(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("profiles", mode="before")
    @classmethod
    def _coerce_profiles(cls, value: Any) -> list:
        # Positions must line up with the raw list, so non-objects become
        # empty profiles instead of being dropped.
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, dict) else {} for item in value]

    @classmethod
    def view(cls, raw: Any) -> Basics | None:
        if not isinstance(raw, dict):
            return None
        return cls.model_validate(raw)


class SectionEntry(_TextRecord, ABC):
    """Base for one entry of a list section."""

    @abstractmethod
    def display_label(self) -> str: ...


class WorkEntry(SectionEntry):
    name: str | None = None
    position: str | None = None

    def display_label(self) -> str:
        role = first_text(self.position, default="Role")
        company = first_text(self.name, default="Company")
        return f"{role} @ {company}"


class EducationEntry(SectionEntry):
    institution: str | None = None
    area: str | None = None
    studyType: str | None = None

    def display_label(self) -> str:
        study = first_text(self.studyType, default="Study")
        area = first_text(self.area, default="Area")
        institution = first_text(self.institution, default="Institution")
        return f"{study} in {area} @ {institution}"


class PublicationEntry(SectionEntry):
    name: str | None = None
    publisher: str | None = None

    def display_label(self) -> str:
        name = first_text(self.name, default="Publication")
        publisher = first_text(self.publisher, default="Publisher")
        return f"{name} ({publisher})"


class ProjectEntry(SectionEntry):
    name: str | None = None
    type: str | None = None

    def display_label(self) -> str:
        name = first_text(self.name, default="Project")
        kind = first_text(self.type, default="Project")
        return f"{name} ({kind})"


class SkillEntry(SectionEntry):
    name: str | None = None
    level: str | None = None

    def display_label(self) -> str:
        name = first_text(self.name, default="Skill")
        level = first_text(self.level, default="level unknown")
        return f"{name} ({level})"


class LanguageEntry(SectionEntry):
    language: str | None = None
    fluency: str | None = None

    def display_label(self) -> str:
        language = first_text(self.language, default="Language")
        fluency = first_text(self.fluency, default="fluency unknown")
        return f"{language} – {fluency}"


class InterestEntry(SectionEntry):
    name: str | None = None

    def display_label(self) -> str:
        return first_text(self.name, default="Interest")


# Recognized list sections, in catalog order. Any other top-level field is
# never inspected and never emitted.
SECTION_SHAPES: dict[str, tuple[str, type[SectionEntry]]] = {
    "work": ("Experiences", WorkEntry),
    "education": ("Education", EducationEntry),
    "publications": ("Publications", PublicationEntry),
    "projects": ("Projects", ProjectEntry),
    "skills": ("Skills", SkillEntry),
    "languages": ("Languages", LanguageEntry),
    "interests": ("Interests", InterestEntry),
}

SECTION_ORDER: tuple[str, ...] = tuple(SECTION_SHAPES)
