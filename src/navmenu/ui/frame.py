"""Scoped terminal frame: whatever is drawn inside the context is erased on exit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from navmenu.exceptions import ParseFailure
    from navmenu.models import Menu, TypedPrompt

    from .base import DisplayPort

# Rows added by a line of typed input echoed by the terminal
ECHO_ROWS = 1


class Frame:
    """Tracks the rows currently drawn through a DisplayPort.

    Every draw erases the previous content first, and leaving the
    ``with`` block erases whatever is left, on success, back, exit
    or exception alike.
    """

    def __init__(self, display: DisplayPort):
        self._display = display
        self._items = 0
        self._extra = 0

    def __enter__(self) -> Frame:
        return self

    def __exit__(self, *exc_info) -> None:
        self.clear()

    @property
    def drawn(self) -> bool:
        return bool(self._items or self._extra)

    def clear(self) -> None:
        """Erase the current rows, if any."""
        if not self.drawn:
            return
        self._display.erase(self._items, self._extra)
        self._items = 0
        self._extra = 0

    def draw_menu(self, path: list[str], menu: Menu, hover: int) -> None:
        self.clear()
        self._extra = self._display.render(path, menu, hover)
        self._items = len(menu.items)

    def draw_prompt(self, path: list[str], prompt: TypedPrompt) -> None:
        self.clear()
        self._extra = self._display.render_prompt(path, prompt)

    def draw_parse_error(self, prompt: TypedPrompt, error: ParseFailure) -> None:
        """Append an error below the current content."""
        self.grow(self._display.render_parse_error(prompt, error))

    def grow(self, rows: int) -> None:
        """Account for rows written below the frame by someone else (echoed input)."""
        self._extra += rows
