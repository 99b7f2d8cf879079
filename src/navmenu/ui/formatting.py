"""Shared formatting utilities for menu rows and legends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from navmenu.models import SubMenu, TypedPrompt

if TYPE_CHECKING:
    from navmenu.models import Item, Menu

SUBMENU_MARKER = "+"
PROMPT_MARKER = "?"
SELECT_HINT = "Press an index number or a hotkey to select:"


def format_breadcrumb(path: list[str]) -> str:
    """Format path as 'Root/Sub/' in bold."""
    return "[bold]" + "".join(f"{escape(p)}/" for p in path) + "[/bold]"


def format_hotkey(hotkey: str | None) -> str:
    """Format hotkey as '(A)', or padding of equal width when absent."""
    if not hotkey:
        return "   "
    return escape(f"({hotkey.upper()})")


def item_marker(item: Item) -> str:
    if isinstance(item, SubMenu):
        return SUBMENU_MARKER
    if isinstance(item, TypedPrompt):
        return PROMPT_MARKER
    return " "


def format_item(
    index: int,
    item: Item,
    selected: bool,
    hover_marker: str = ">",
    accent: str = "cyan",
    show_explanation: bool = True,
) -> str:
    """Format one menu row.

    Args:
        index: Zero-based position of the item
        item: The menu item
        selected: Whether the row carries the hover indicator
        hover_marker: Indicator drawn in front of the hovered row
        accent: Rich style for the hovered row
        show_explanation: Append the item's explanation

    Returns:
        Rich markup string for the row
    """
    cursor = hover_marker if selected else " " * len(hover_marker)
    row = f"{index}.{format_hotkey(item.hotkey)} {item_marker(item)}{escape(item.name)}"
    if show_explanation and item.explanation:
        row += f'[dim]: "{escape(item.explanation)}"[/dim]'
    if selected:
        return f"[{accent} bold]{escape(cursor)} {row}[/{accent} bold]"
    return f"{escape(cursor)} {row}"


def format_legend(menu: Menu, at_root: bool) -> list[str]:
    """Legend lines for the keys available at this level."""
    lines = ["[dim]↑↓ move · Enter select[/dim]"]
    if not at_root:
        lines.append("[dim](Bksp) Back[/dim]")
    if menu.allow_exit:
        lines.append("[dim](Esc Esc) Exit[/dim]")
    return lines
