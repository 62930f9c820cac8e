"""Interactive prompts on top of rich.

The session only talks to the ``Prompter`` protocol, so tests can swap in a
scripted implementation. ``None`` from any prompt means the user cancelled
(Ctrl-C or end of input); an empty list is a deliberate "nothing".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

logger = logging.getLogger(__name__)

_RANGE = re.compile(r"^(\d+)-(\d+)$")


@dataclass(frozen=True)
class Choice:
    title: str
    value: Any
    selected: bool = True


class Prompter(Protocol):
    def multiselect(self, message: str, choices: list[Choice]) -> list[Any] | None: ...

    def select(self, message: str, choices: list[Choice]) -> Any | None: ...

    def text(self, message: str, default: str = "") -> str | None: ...


def parse_selection(answer: str, choices: list[Choice]) -> list[int] | None:
    """Parse a multi-select answer into zero-based positions.

    Accepts comma or space separated numbers and ranges (``1,3-5``), ``all``
    and ``none``. An empty answer keeps the pre-selected choices. Returns
    ``None`` when the answer cannot be understood.
    """
    answer = answer.strip().lower()
    count = len(choices)
    if not answer:
        return [i for i, choice in enumerate(choices) if choice.selected]
    if answer == "all":
        return list(range(count))
    if answer == "none":
        return []

    picked: set[int] = set()
    for token in re.split(r"[,\s]+", answer):
        if not token:
            continue
        match = _RANGE.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
        elif token.isdigit():
            start = end = int(token)
        else:
            return None
        if start < 1 or end > count or start > end:
            return None
        picked.update(range(start - 1, end))
    return sorted(picked)


class RichPrompter:
    """Terminal prompts rendered with rich tables."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def _show(self, message: str, choices: list[Choice], *, marks: bool) -> None:
        table = Table(title=escape(message), title_justify="left", show_header=False, box=None)
        table.add_column(justify="right", style="bold")
        if marks:
            table.add_column()
        table.add_column()
        for number, choice in enumerate(choices, 1):
            row = [f"{number}."]
            if marks:
                row.append("[green]●[/green]" if choice.selected else "[dim]○[/dim]")
            row.append(escape(choice.title))
            table.add_row(*row)
        self.console.print(table)

    def multiselect(self, message: str, choices: list[Choice]) -> list[Any] | None:
        self._show(message, choices, marks=True)
        while True:
            try:
                answer = Prompt.ask(
                    "[dim]Numbers or ranges (1,3-5), 'all', 'none'; Enter keeps ●[/dim]",
                    default="",
                    show_default=False,
                    console=self.console,
                )
            except (EOFError, KeyboardInterrupt):
                logger.debug("Multi-select cancelled: %s", message)
                return None
            positions = parse_selection(answer, choices)
            if positions is not None:
                return [choices[i].value for i in positions]
            self.console.print(f"[red]Invalid selection: {escape(answer)!r}[/red]")

    def select(self, message: str, choices: list[Choice]) -> Any | None:
        if not choices:
            return None
        self._show(message, choices, marks=False)
        default = next((i for i, c in enumerate(choices, 1) if c.selected), 1)
        try:
            answer = Prompt.ask(
                "[dim]Number[/dim]",
                choices=[str(i) for i in range(1, len(choices) + 1)],
                default=str(default),
                console=self.console,
            )
        except (EOFError, KeyboardInterrupt):
            logger.debug("Select cancelled: %s", message)
            return None
        return choices[int(answer) - 1].value

    def text(self, message: str, default: str = "") -> str | None:
        try:
            return Prompt.ask(message, default=default, console=self.console)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Text prompt cancelled: %s", message)
            return None
