import json
from pathlib import Path
from typing import Any

from resume_curator.errors import ResumeLoadError


def resolve_path(file_path: str | Path, base_dir: str | Path | None = None) -> Path:
    """Resolve *file_path* against *base_dir* (default: current directory)."""
    path = Path(file_path).expanduser()
    if not path.is_absolute():
        path = Path(base_dir or Path.cwd()) / path
    return path.resolve()


def load_resume(file_path: str | Path, base_dir: str | Path | None = None) -> dict[str, Any]:
    """Load a JSON Resume document and return it as a plain dict."""
    path = resolve_path(file_path, base_dir)
    if not path.exists():
        raise ResumeLoadError(f"Resume file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ResumeLoadError(f"Could not read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ResumeLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ResumeLoadError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data
