"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from resume_curator.export.theme_exporter import (
    DEFAULT_EXPORT_COMMAND,
    DEFAULT_LIST_COMMAND,
    DEFAULT_THEME_PREFIX,
)

CONFIG_ENV_VAR = "RESUME_CURATOR_CONFIG"
MAX_TIMEOUT = 3600


def _check_timeout(name: str, value: int) -> None:
    if not 1 <= value <= MAX_TIMEOUT:
        raise ValueError(f"{name} must be between 1 and {MAX_TIMEOUT}, got {value}")


@dataclass(frozen=True)
class PathsConfig:
    resume: str = "resume.json"
    output: str = "resume.generated.json"
    export: str = "resume.pdf"

    def __post_init__(self) -> None:
        for name in ("resume", "output", "export"):
            if not getattr(self, name):
                raise ValueError(f"paths.{name} must not be empty")


@dataclass(frozen=True)
class ThemesConfig:
    prefix: str = DEFAULT_THEME_PREFIX
    list_command: tuple[str, ...] = DEFAULT_LIST_COMMAND
    timeout: int = 30

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("themes.prefix must not be empty")
        if not self.list_command:
            raise ValueError("themes.list_command must not be empty")
        object.__setattr__(self, "list_command", tuple(self.list_command))
        _check_timeout("themes.timeout", self.timeout)


@dataclass(frozen=True)
class ExporterConfig:
    command: tuple[str, ...] = DEFAULT_EXPORT_COMMAND
    timeout: int = 300

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("exporter.command must not be empty")
        object.__setattr__(self, "command", tuple(self.command))
        _check_timeout("exporter.timeout", self.timeout)


@dataclass(frozen=True)
class AppConfig:
    paths: PathsConfig = field(default_factory=PathsConfig)
    themes: ThemesConfig = field(default_factory=ThemesConfig)
    exporter: ExporterConfig = field(default_factory=ExporterConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        candidates.append(Path.cwd() / "config.yaml")
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        paths=PathsConfig(**raw.get("paths", {})),
        themes=ThemesConfig(**raw.get("themes", {})),
        exporter=ExporterConfig(**raw.get("exporter", {})),
    )
