"""Port protocols for swappable display and input backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from navmenu.exceptions import ParseFailure
    from navmenu.keys import KeyEvent
    from navmenu.models import Menu, TypedPrompt


class DisplayPort(Protocol):
    """Protocol for rendering menu frames."""

    def render(self, path: list[str], menu: Menu, hover: int) -> int:
        """Draw breadcrumb, items and legend. Return number of non-item rows drawn."""
        ...

    def render_prompt(self, path: list[str], prompt: TypedPrompt) -> int:
        """Draw the typed prompt frame. Return rows drawn."""
        ...

    def render_parse_error(self, prompt: TypedPrompt, error: ParseFailure) -> int:
        """Draw an inline parse error and repeat the prompt hint. Return rows drawn."""
        ...

    def erase(self, item_count: int, extra_lines: int) -> None:
        """Remove the previously drawn rows so the next frame overwrites them."""
        ...


class InputPort(Protocol):
    """Protocol for blocking key and line input."""

    def next_key(self) -> KeyEvent:
        """Block until one key is pressed and return it."""
        ...

    def read_line(self) -> str:
        """Block until a line of text is entered. Returned without line terminator."""
        ...
