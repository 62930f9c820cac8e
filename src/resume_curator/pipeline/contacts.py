"""Contact-details choices derived from the ``basics`` block."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from resume_curator.models.document import Basics, Profile, is_present
from resume_curator.models.selection import BasicsSelection, ContactField

LOCATION_VALUE = "location"
STREET_ADDRESS_VALUE = "locationAddress"
PROFILE_PREFIX = "profile-"

# (value, title prefix, show value in title, selected by default)
_SIMPLE_FIELDS: tuple[tuple[str, str, bool, bool], ...] = (
    ("name", "Name", True, True),
    ("label", "Label", True, True),
    ("image", "Image", False, False),
    ("email", "Email", True, True),
    ("phone", "Phone", True, True),
    ("url", "Website", True, True),
    ("summary", "Summary", False, True),
)


def profile_title(profile: Profile, index: int) -> str:
    parts = [part for part in (profile.network, profile.username, profile.url) if part]
    if not parts:
        return f"Profile #{index + 1}"
    return f"Profile: {' – '.join(parts)}"


def build_contact_fields(raw_basics: Any) -> list[ContactField]:
    """List the selectable contact fields of *raw_basics* in prompt order.

    Returns an empty list when ``basics`` is absent or has nothing to offer.
    """
    basics = Basics.view(raw_basics)
    if basics is None:
        return []

    fields: list[ContactField] = []
    for value, prefix, show_value, default in _SIMPLE_FIELDS:
        source = getattr(basics, value)
        if not is_present(source):
            continue
        title = f"{prefix}: {source}" if show_value else prefix
        fields.append(ContactField(value=value, title=title, selected_by_default=default))

    location = basics.location
    if location is not None:
        parts = location.summary_parts
        suffix = f" ({', '.join(parts)})" if parts else ""
        fields.append(ContactField(value=LOCATION_VALUE, title=f"Location{suffix}"))
        if is_present(location.address):
            fields.append(
                ContactField(
                    value=STREET_ADDRESS_VALUE,
                    title=f"Street address: {location.address}",
                )
            )

    for index, profile in enumerate(basics.profiles):
        fields.append(
            ContactField(value=f"{PROFILE_PREFIX}{index}", title=profile_title(profile, index))
        )
    return fields


def _profile_index(value: str) -> int | None:
    suffix = value[len(PROFILE_PREFIX):]
    if not suffix.isdigit():
        return None
    return int(suffix)


def apply_contact_choices(chosen: Iterable[str], raw_basics: Any) -> BasicsSelection:
    """Turn the values picked in the contact prompt into a BasicsSelection."""
    values = set(chosen)
    basics = Basics.view(raw_basics)
    location = basics.location if basics is not None else None

    profile_indexes = set()
    for value in values:
        if value.startswith(PROFILE_PREFIX):
            index = _profile_index(value)
            if index is not None:
                profile_indexes.add(index)

    has_street_address = location is not None and is_present(location.address)
    return BasicsSelection(
        include_name="name" in values,
        include_label="label" in values,
        include_image="image" in values,
        include_email="email" in values,
        include_phone="phone" in values,
        include_url="url" in values,
        include_summary="summary" in values,
        include_location=LOCATION_VALUE in values,
        include_street_address=STREET_ADDRESS_VALUE in values and has_street_address,
        selected_profile_indexes=profile_indexes,
    )
