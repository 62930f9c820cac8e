"""Shared test fixtures."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

from resume_curator.clients.prompt_client import Choice

SAMPLE_RESUME: dict[str, Any] = {
    "$schema": "https://raw.githubusercontent.com/jsonresume/resume-schema/v1.0.0/schema.json",
    "basics": {
        "name": "Ada Lovelace",
        "label": "Analyst",
        "image": "https://example.com/ada.png",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000",
        "url": "https://ada.example.com",
        "summary": "Writes programs for engines that do not exist yet.",
        "location": {
            "address": "12 St James's Square",
            "postalCode": "SW1Y 4JH",
            "city": "London",
            "countryCode": "GB",
            "region": "Greater London",
        },
        "profiles": [
            {"network": "GitHub", "username": "ada", "url": "https://github.com/ada"},
            {"network": "Mastodon", "username": "@ada@hachyderm.io"},
        ],
    },
    "work": [
        {"name": "Analytical Engines Ltd", "position": "Programmer", "startDate": "1842-01-01"},
        {"name": "Royal Society", "position": "Translator"},
        {"position": "Consultant"},
    ],
    "education": [
        {"institution": "Home tutoring", "area": "Mathematics", "studyType": "Private"},
    ],
    "publications": [
        {"name": "Sketch of the Analytical Engine", "publisher": "Taylor's Scientific Memoirs"},
    ],
    "projects": [
        {"name": "Bernoulli numbers", "type": "algorithm"},
    ],
    "skills": [
        {"name": "Mathematics", "level": "Master", "keywords": ["calculus"]},
        {"name": "Poetry"},
    ],
    "languages": [
        {"language": "English", "fluency": "Native speaker"},
        {"language": "French"},
    ],
    "interests": [
        {"name": "Horses"},
    ],
    "volunteer": [
        {"organization": "Not recognized"},
    ],
    "meta": {"version": "v1.0.0"},
}


@pytest.fixture
def sample_resume() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESUME)


@pytest.fixture
def sample_resume_file(tmp_path, sample_resume) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_resume, indent=2), encoding="utf-8")
    return path


class ScriptedPrompter:
    """Prompter that replays canned answers and records what it was asked.

    Multi-select answers are lists of values, or ``None`` to cancel; the
    string ``"defaults"`` picks every pre-selected choice.
    """

    def __init__(self, multiselect=(), select=(), text=()):
        self._multiselect = list(multiselect)
        self._select = list(select)
        self._text = list(text)
        self.asked: list[tuple[str, str, list[Choice]]] = []

    def multiselect(self, message, choices):
        self.asked.append(("multiselect", message, choices))
        answer = self._multiselect.pop(0)
        if answer == "defaults":
            return [c.value for c in choices if c.selected]
        return answer

    def select(self, message, choices):
        self.asked.append(("select", message, choices))
        return self._select.pop(0)

    def text(self, message, default=""):
        self.asked.append(("text", message, []))
        return self._text.pop(0)


@pytest.fixture
def scripted_prompter():
    return ScriptedPrompter
