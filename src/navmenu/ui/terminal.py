"""Rich + readchar implementation of the display and input ports."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import readchar
from rich.console import Console, Group
from rich.control import Control
from rich.markup import escape
from rich.segment import ControlType
from rich.text import Text

from navmenu.config import Config
from navmenu.exceptions import InputClosedError
from navmenu.keys import KeyEvent, translate_key
from navmenu.parsing import strip_line_ending

from .formatting import SELECT_HINT, format_breadcrumb, format_item, format_legend

if TYPE_CHECKING:
    from navmenu.exceptions import ParseFailure
    from navmenu.models import Menu, TypedPrompt

logger = logging.getLogger("navmenu.terminal")

# Move to the row above and clear it
_ERASE_ROW = Control((ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2))


class RichDisplay:
    """Draws frames inline (no screen clear) so erase can overwrite them in place."""

    def __init__(self, console: Console | None = None, config: Config | None = None):
        self.console = console or Console()
        self.config = config or Config.load()

    def _emit(self, lines: list[str]) -> int:
        """Print markup lines and return how many terminal rows they took."""
        renderable = Group(*(Text.from_markup(line) for line in lines))
        rows = len(self.console.render_lines(renderable, pad=False))
        self.console.print(renderable)
        return rows

    def _header(self, path: list[str], explanation: str | None) -> list[str]:
        lines = [format_breadcrumb(path)]
        if explanation and self.config.show_explanations:
            lines.append(escape(explanation))
        lines.append("")
        return lines

    def render(self, path: list[str], menu: Menu, hover: int) -> int:
        lines = self._header(path, menu.explanation)
        for i, item in enumerate(menu.items):
            lines.append(
                format_item(
                    i,
                    item,
                    selected=i == hover,
                    hover_marker=self.config.hover_marker,
                    accent=self.config.accent_style,
                    show_explanation=self.config.show_explanations,
                )
            )
        if self.config.show_legend:
            lines.extend(format_legend(menu, at_root=len(path) == 1))
        lines.append("")
        lines.append(f"[dim]{SELECT_HINT}[/dim]")
        return self._emit(lines) - len(menu.items)

    def _prompt_line(self, prompt: TypedPrompt) -> str:
        return f"Enter [bold]{escape(prompt.name)}[/bold] [dim]({prompt.kind.hint})[/dim]:"

    def render_prompt(self, path: list[str], prompt: TypedPrompt) -> int:
        lines = self._header(path, prompt.explanation)
        lines.append(self._prompt_line(prompt))
        return self._emit(lines)

    def render_parse_error(self, prompt: TypedPrompt, error: ParseFailure) -> int:
        return self._emit([f"[red]✗ {escape(str(error))}[/red]", self._prompt_line(prompt)])

    def erase(self, item_count: int, extra_lines: int) -> None:
        rows = item_count + extra_lines
        logger.debug("erasing %d rows", rows)
        if rows <= 0:
            return
        self.console.control(Control.move_to_column(0), *([_ERASE_ROW] * rows))


class ReadcharInput:
    """Key input via readchar, line input via the Rich console."""

    def __init__(self, console: Console | None = None, config: Config | None = None):
        self.console = console or Console()
        self.config = config or Config.load()

    def next_key(self) -> KeyEvent:
        raw = readchar.readkey()
        event = translate_key(raw, vi_keys=self.config.vi_keys)
        logger.debug("key %r -> %s", raw, event.kind.value)
        return event

    def read_line(self) -> str:
        try:
            line = self.console.input(self.config.prompt_symbol, markup=False)
        except EOFError as e:
            raise InputClosedError("Input closed while waiting for a line") from e
        return strip_line_ending(line)
