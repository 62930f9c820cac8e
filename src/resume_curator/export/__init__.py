"""Output writing and theme export for resume-curator."""
from resume_curator.export.json_writer import save_resume
from resume_curator.export.theme_exporter import (
    ExportResult,
    export_document,
    list_themes,
)

__all__ = ["save_resume", "list_themes", "export_document", "ExportResult"]
