import json
from pathlib import Path
from typing import Any

from resume_curator.parsers.resume_parser import resolve_path


def save_resume(document: dict[str, Any], output_path: str | Path) -> Path:
    """Write *document* as 2-space indented JSON and return the absolute path."""
    path = resolve_path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
