"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from resume_curator.clients.prompt_client import Choice, Prompter, RichPrompter
from resume_curator.config import AppConfig, load_config
from resume_curator.errors import FatalInputError, NoSectionsError, UserAbort
from resume_curator.export.json_writer import save_resume
from resume_curator.export.theme_exporter import ExportResult, export_document, list_themes
from resume_curator.models.selection import SelectionState
from resume_curator.parsers.resume_parser import load_resume, resolve_path
from resume_curator.pipeline.catalog import build_sections
from resume_curator.pipeline.contacts import build_contact_fields
from resume_curator.pipeline.session import SelectionSession, SessionResult

app = typer.Typer(
    name="resume-curator",
    help="Build a trimmed-down JSON Resume by picking sections, entries and contact details.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _config() -> AppConfig:
    try:
        return load_config()
    except (ValueError, TypeError, yaml.YAMLError, OSError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _load(resume: Path) -> dict:
    try:
        return load_resume(resume)
    except FatalInputError as e:
        console.print(f"[red]Error while loading resume: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _themes(config: AppConfig) -> list[str]:
    return list_themes(
        config.themes.list_command,
        config.themes.prefix,
        timeout=config.themes.timeout,
    )


def _report_export(result: ExportResult, target: Path) -> None:
    if result.stdout:
        console.print(result.stdout, markup=False, highlight=False, end="")
    if result.stderr:
        err_console.print(result.stderr, markup=False, highlight=False, end="")

    if result.success:
        console.print(f"[green]Exported resume to: {escape(str(target))}[/green]")
        return
    console.print("[red]Export failed.[/red]")
    console.print(f"[yellow]Run it manually:[/yellow] {escape(result.manual_command)}", highlight=False)


def _export_flow(
    prompter: Prompter,
    config: AppConfig,
    generated: Path,
    theme: str | None,
    export_path: Path | None,
    *,
    interactive: bool,
) -> None:
    if theme is None:
        if not interactive:
            return
        themes = _themes(config)
        if not themes:
            console.print(
                f"[dim]No {config.themes.prefix}* packages found, skipping export.[/dim]"
            )
            return
        theme = prompter.select(
            "Select a theme to export with",
            [Choice(title=name, value=name, selected=i == 0) for i, name in enumerate(themes)],
        )
        if theme is None:
            return

    if export_path is None:
        answer = config.paths.export
        if interactive:
            answer = prompter.text("Path for exported resume", default=config.paths.export)
            if answer is None:
                return
        export_path = Path(answer or config.paths.export)

    target = resolve_path(export_path)
    result = export_document(
        generated,
        theme,
        target,
        config.exporter.command,
        timeout=config.exporter.timeout,
    )
    _report_export(result, target)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def generate(
    resume: Path = typer.Option(None, "--resume", "-r", help="Source resume JSON (default from config)"),
    output: Path = typer.Option(None, "--output", "-o", help="Path for the generated resume JSON"),
    select_all: bool = typer.Option(False, "--all", help="Keep everything, no prompts"),
    theme: str = typer.Option(None, "--theme", "-t", help="Theme package to export with"),
    export_path: Path = typer.Option(None, "--export", "-e", help="Path for the exported file"),
    no_export: bool = typer.Option(False, "--no-export", help="Only write the JSON"),
) -> None:
    """Interactively pick what goes into the generated resume."""
    config = _config()
    document = _load(resume or Path(config.paths.resume))
    prompter = RichPrompter(console)

    try:
        if select_all:
            sections = build_sections(document)
            if not sections:
                raise NoSectionsError("No recognizable sections found in the resume.")
            result = SessionResult(
                document=document,
                sections=sections,
                state=SelectionState.select_all(document),
            )
        else:
            result = SelectionSession(prompter).run(document)
    except UserAbort as e:
        console.print(f"[yellow]{escape(str(e))} Exiting without generating a resume.[/yellow]")
        raise typer.Exit(0)
    except NoSectionsError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    filtered = result.filtered()

    if output is None:
        answer = config.paths.output
        if not select_all:
            answer = prompter.text("Path for generated resume JSON", default=config.paths.output)
        output = Path(answer or config.paths.output)

    try:
        written = save_resume(filtered, output)
    except OSError as e:
        console.print(f"[red]Error while writing resume: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Generated resume written to: {escape(str(written))}[/green]")

    if no_export:
        return
    _export_flow(prompter, config, written, theme, export_path, interactive=not select_all)


@app.command()
def sections(
    resume: Path = typer.Option(None, "--resume", "-r", help="Source resume JSON (default from config)"),
) -> None:
    """Show the sections and contact details a resume offers, without prompting."""
    config = _config()
    document = _load(resume or Path(config.paths.resume))

    fields = build_contact_fields(document.get("basics"))
    if fields:
        table = Table(title="Contact details", title_justify="left")
        table.add_column("Value", style="dim")
        table.add_column("Title")
        table.add_column("Default")
        for f in fields:
            table.add_row(f.value, escape(f.title), "yes" if f.selected_by_default else "no")
        console.print(table)

    catalog = build_sections(document)
    if not catalog:
        console.print("[red]No recognizable sections found in the resume.[/red]")
        raise typer.Exit(1)

    for section in catalog:
        table = Table(title=f"{section.label} [dim]({section.key})[/dim]", title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Item")
        for item in section.items:
            table.add_row(str(item.index), escape(item.label))
        console.print(table)


@app.command()
def themes() -> None:
    """List installed JSON Resume themes."""
    config = _config()
    names = _themes(config)
    if not names:
        console.print(f"[yellow]No {config.themes.prefix}* packages found.[/yellow]")
        console.print(f"[dim]Tip: npm install {config.themes.prefix}even[/dim]")
        return

    for name in names:
        console.print(f"  [bold]{escape(name)}[/bold]")


@app.command("export")
def export_cmd(
    resume: Path = typer.Argument(help="Resume JSON to render"),
    theme: str = typer.Option(..., "--theme", "-t", help="Theme package to export with"),
    output: Path = typer.Option(None, "--output", "-o", help="Path for the exported file"),
) -> None:
    """Render an existing resume JSON with an installed theme."""
    config = _config()
    source = resolve_path(resume)
    if not source.exists():
        console.print(f"[red]Resume file not found: {escape(str(source))}[/red]")
        raise typer.Exit(1)

    target = resolve_path(output or config.paths.export)
    result = export_document(
        source,
        theme,
        target,
        config.exporter.command,
        timeout=config.exporter.timeout,
    )
    _report_export(result, target)
    if not result.success:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
