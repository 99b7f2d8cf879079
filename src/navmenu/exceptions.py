"""Custom exceptions for navmenu.

This module defines a hierarchy of exceptions for different error types:
- NavmenuError: Base exception for all navmenu errors
- MenuExited: The user cancelled navigation with the exit key
- EmptyMenuError: A menu with no items was activated
- ParseFailure: Typed input did not parse as the requested kind
- InputClosedError: The input source cannot deliver more keys or lines
- ConfigurationError: Configuration related errors
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from navmenu.models import ValueKind


class NavmenuError(Exception):
    """Base exception for all navmenu errors.

    All navmenu-specific exceptions inherit from this class, allowing
    callers to catch all navmenu errors with a single except clause.
    """

    pass


class MenuExited(NavmenuError):
    """The user left the menu without making a selection.

    Attributes:
        path: Breadcrumb of the level at which exit was pressed
    """

    def __init__(self, path: list[str]):
        super().__init__(f"Menu exited at {'/'.join(path)}")
        self.path = list(path)


class EmptyMenuError(NavmenuError):
    """A menu or sub-menu without items was activated."""

    def __init__(self, name: str):
        super().__init__(f"Menu '{name}' has no items")
        self.name = name


class ParseFailure(NavmenuError, ValueError):
    """Raw text could not be parsed as the requested value kind.

    Attributes:
        kind: The kind that was requested
        raw: The rejected input line
    """

    def __init__(self, kind: ValueKind, raw: str, reason: str = ""):
        message = f"'{raw}' is not a valid {kind.hint}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.kind = kind
        self.raw = raw


class InputClosedError(NavmenuError):
    """The input source was closed (end of stream)."""

    pass


class ConfigurationError(NavmenuError):
    """Configuration related errors.

    Raised when a setting is unknown or a value cannot be coerced
    to the setting's type.
    """

    pass
