"""Error taxonomy shared by the loader, session and CLI."""

from __future__ import annotations


class FatalInputError(Exception):
    """The input document cannot be used; the run aborts with exit code 1."""


class ResumeLoadError(FatalInputError):
    """Resume file is missing, unreadable or not a JSON object."""


class NoSectionsError(FatalInputError):
    """The document has none of the recognized list sections."""


class UserAbort(Exception):
    """The user declined a required top-level selection (clean exit)."""


class CollaboratorUnavailable(RuntimeError):
    """An external tool (theme listing, exporter) is missing or failed."""
