"""Data models for navmenu."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class ValueKind(Enum):
    """Scalar kinds a typed prompt can collect."""

    BOOL = "bool"
    CHAR = "char"
    STRING = "string"
    F64 = "f64"
    I64 = "i64"
    U64 = "u64"

    @property
    def hint(self) -> str:
        """Short description shown next to a typed prompt."""
        return {
            ValueKind.BOOL: "boolean (true/false)",
            ValueKind.CHAR: "single character",
            ValueKind.STRING: "text",
            ValueKind.F64: "decimal number",
            ValueKind.I64: "integer",
            ValueKind.U64: "non-negative integer",
        }[self]


class Outcome(Enum):
    """Non-success termination of one menu level."""

    EXITED = "exited"
    BACKED = "backed"


@dataclass(frozen=True)
class TypedValue:
    """A parsed value together with the kind it was parsed as."""

    kind: ValueKind
    value: bool | str | float | int

    def __str__(self) -> str:
        """Canonical text form, accepted back by the parser."""
        if self.kind is ValueKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is ValueKind.F64:
            return repr(self.value)
        return str(self.value)


def _check_hotkey(name: str, hotkey: str | None) -> None:
    if hotkey is not None and len(hotkey) != 1:
        raise ValueError(f"Hotkey for '{name}' must be a single character, got {hotkey!r}")


@dataclass(frozen=True)
class Action:
    """Terminal menu entry. Selecting it finishes navigation."""

    name: str
    hotkey: str | None = None
    explanation: str | None = None

    def __post_init__(self) -> None:
        _check_hotkey(self.name, self.hotkey)


@dataclass(frozen=True)
class TypedPrompt:
    """Leaf entry that asks for a line of text parsed as ``kind``."""

    kind: ValueKind
    name: str
    hotkey: str | None = None
    explanation: str | None = None

    def __post_init__(self) -> None:
        _check_hotkey(self.name, self.hotkey)


@dataclass(frozen=True)
class SubMenu:
    """Entry that opens a nested list of items.

    ``allow_exit`` of None inherits the parent level's setting.
    """

    name: str
    items: Sequence[Item] = ()
    hotkey: str | None = None
    explanation: str | None = None
    allow_exit: bool | None = None

    def __post_init__(self) -> None:
        _check_hotkey(self.name, self.hotkey)
        object.__setattr__(self, "items", tuple(self.items))

    def as_menu(self, inherited_allow_exit: bool) -> Menu:
        """Child menu view for one descent. Shares this node's items."""
        allow_exit = inherited_allow_exit if self.allow_exit is None else self.allow_exit
        return Menu(
            name=self.name,
            items=self.items,
            explanation=self.explanation,
            allow_exit=allow_exit,
        )


Item = Union[Action, SubMenu, TypedPrompt]


@dataclass(frozen=True)
class Menu:
    """Root of a menu tree."""

    name: str
    items: Sequence[Item] = ()
    explanation: str | None = None
    allow_exit: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class Selection:
    """Result of a successful navigation."""

    name: str
    path: list[str] = field(default_factory=list)
    value: TypedValue | None = None
    attempts: int | None = None

    def to_dict(self) -> dict:
        """Serialize to dict for display."""
        return {
            "name": self.name,
            "path": list(self.path),
            "value": self.value.value if self.value else None,
            "kind": self.value.kind.value if self.value else None,
            "attempts": self.attempts,
        }
