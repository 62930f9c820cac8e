"""Theme discovery and export through external JSON Resume tooling.

Both operations shell out once, never retry, and never raise: a missing or
failing tool degrades to an empty theme list or an unsuccessful
``ExportResult`` carrying the command the user can run by hand.
"""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from resume_curator.errors import CollaboratorUnavailable

logger = logging.getLogger(__name__)

DEFAULT_THEME_PREFIX = "jsonresume-theme-"
DEFAULT_LIST_COMMAND = ("npm", "ls", "--json", "--depth=0")
DEFAULT_EXPORT_COMMAND = (
    "npx", "resume", "export", "{output}", "--resume", "{resume}", "--theme", "{theme}",
)


@dataclass
class ExportResult:
    success: bool
    command: list[str]
    stdout: str = ""
    stderr: str = ""
    returncode: int | None = None

    @property
    def manual_command(self) -> str:
        return shlex.join(self.command)


def _run(cmd: Sequence[str], timeout: int, cwd: str | Path | None) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise CollaboratorUnavailable(f"Command not found: {cmd[0]}") from e
    except subprocess.TimeoutExpired as e:
        raise CollaboratorUnavailable(f"Command timed out after {timeout}s: {cmd[0]}") from e
    except OSError as e:
        raise CollaboratorUnavailable(f"Could not run {cmd[0]}: {e}") from e


def list_themes(
    command: Sequence[str] = DEFAULT_LIST_COMMAND,
    prefix: str = DEFAULT_THEME_PREFIX,
    *,
    timeout: int = 30,
    cwd: str | Path | None = None,
) -> list[str]:
    """Return installed theme package names starting with *prefix*, sorted."""
    try:
        result = _run(command, timeout, cwd)
    except CollaboratorUnavailable:
        logger.warning("Theme listing unavailable", exc_info=True)
        return []

    # npm exits non-zero on peer-dependency problems but still prints the tree.
    try:
        data = json.loads(result.stdout or "{}")
    except json.JSONDecodeError:
        logger.warning("Could not parse theme listing output (exit %s)", result.returncode)
        return []

    dependencies = data.get("dependencies") if isinstance(data, dict) else None
    if not isinstance(dependencies, dict):
        return []
    return sorted(name for name in dependencies if name.startswith(prefix))


def build_export_command(
    resume_path: str | Path,
    theme: str,
    output_path: str | Path,
    command: Sequence[str] = DEFAULT_EXPORT_COMMAND,
) -> list[str]:
    values = {"resume": str(resume_path), "theme": theme, "output": str(output_path)}
    return [part.format(**values) for part in command]


def export_document(
    resume_path: str | Path,
    theme: str,
    output_path: str | Path,
    command: Sequence[str] = DEFAULT_EXPORT_COMMAND,
    *,
    timeout: int = 300,
    cwd: str | Path | None = None,
) -> ExportResult:
    """Render *resume_path* with *theme* into *output_path*."""
    cmd = build_export_command(resume_path, theme, output_path, command)
    logger.info("Exporting: %s", shlex.join(cmd))
    try:
        result = _run(cmd, timeout, cwd)
    except CollaboratorUnavailable as e:
        logger.warning("Export failed: %s", e)
        return ExportResult(success=False, command=cmd, stderr=str(e))

    return ExportResult(
        success=result.returncode == 0,
        command=cmd,
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )
