"""Navigation engine: drives a menu tree through the display and input ports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from navmenu.exceptions import EmptyMenuError, MenuExited, ParseFailure
from navmenu.keys import KeyEvent, KeyKind
from navmenu.models import Action, Menu, Outcome, Selection, TypedPrompt
from navmenu.parsing import parse_value
from navmenu.ui.frame import ECHO_ROWS, Frame

if TYPE_CHECKING:
    from navmenu.config import Config
    from navmenu.ui.base import DisplayPort, InputPort

logger = logging.getLogger("navmenu.engine")


class Transition(Enum):
    """What a key press does at the current level."""

    MOVE = "move"
    SELECT = "select"
    BACK = "back"
    EXIT = "exit"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Step:
    """Result of interpreting one key. ``index`` is the new hover or the selected item."""

    transition: Transition
    index: int = 0


IGNORE = Step(Transition.IGNORE)


def match_char(menu: Menu, char: str) -> int | None:
    """Index of the first item whose hotkey or position matches ``char``."""
    folded = char.casefold()
    for i, item in enumerate(menu.items):
        if item.hotkey is not None and item.hotkey.casefold() == folded:
            return i
        if str(i) == char:
            return i
    return None


def resolve_key(event: KeyEvent, menu: Menu, hover: int, *, at_root: bool) -> Step:
    """Map a key press to a transition without side effects.

    Args:
        event: The key that was pressed
        menu: Menu shown at the current level
        hover: Current hover index
        at_root: Whether the current level is the root (Back is ignored there)

    Returns:
        Step describing the transition
    """
    kind = event.kind
    if kind is KeyKind.UP:
        return Step(Transition.MOVE, hover - 1) if hover > 0 else IGNORE
    if kind is KeyKind.DOWN:
        return Step(Transition.MOVE, hover + 1) if hover < len(menu.items) - 1 else IGNORE
    if kind is KeyKind.ENTER:
        return Step(Transition.SELECT, hover)
    if kind is KeyKind.BACK:
        return IGNORE if at_root else Step(Transition.BACK)
    if kind is KeyKind.EXIT:
        return Step(Transition.EXIT) if menu.allow_exit else IGNORE
    if kind is KeyKind.CHAR and event.char:
        index = match_char(menu, event.char)
        if index is not None:
            return Step(Transition.SELECT, index)
    return IGNORE


class Navigator:
    """Runs a menu tree to a single Selection.

    Example:
        nav = Navigator(RichDisplay(), ReadcharInput())
        try:
            selection = nav.run(menu)
        except MenuExited:
            ...
    """

    def __init__(self, display: DisplayPort, keys: InputPort):
        self.display = display
        self.keys = keys

    def run(self, menu: Menu) -> Selection:
        """Navigate from the root of ``menu``.

        Returns:
            The user's Selection

        Raises:
            MenuExited: The user pressed exit where it was allowed
            EmptyMenuError: The root or an opened sub-menu has no items
        """
        path = [menu.name]
        result = self._activate(menu, path)
        if isinstance(result, Selection):
            logger.debug("selected %s", "/".join(result.path))
            return result
        # Back is ignored at the root, so only EXITED reaches here
        logger.debug("exited at %s", "/".join(path))
        raise MenuExited(path)

    def _activate(self, menu: Menu, path: list[str]) -> Selection | Outcome:
        """Run one menu level until it selects, backs out or exits."""
        if not menu.items:
            raise EmptyMenuError(menu.name)

        at_root = len(path) == 1
        hover = 0
        with Frame(self.display) as frame:
            frame.draw_menu(path, menu, hover)
            while True:
                event = self.keys.next_key()
                step = resolve_key(event, menu, hover, at_root=at_root)
                logger.debug(
                    "%s: %s -> %s %d",
                    "/".join(path),
                    event.kind.value,
                    step.transition.value,
                    step.index,
                )

                if step.transition is Transition.IGNORE:
                    continue
                if step.transition is Transition.MOVE:
                    hover = step.index
                    frame.draw_menu(path, menu, hover)
                    continue
                if step.transition is Transition.BACK:
                    return Outcome.BACKED
                if step.transition is Transition.EXIT:
                    return Outcome.EXITED

                item = menu.items[step.index]
                path.append(item.name)
                frame.clear()

                if isinstance(item, Action):
                    return Selection(name=item.name, path=list(path))
                if isinstance(item, TypedPrompt):
                    return self._collect(item, path)

                result = self._activate(item.as_menu(menu.allow_exit), path)
                if result is not Outcome.BACKED:
                    return result
                path.pop()
                frame.draw_menu(path, menu, hover)

    def _collect(self, prompt: TypedPrompt, path: list[str]) -> Selection:
        """Read lines until one parses as the prompt's kind."""
        attempts = 0
        with Frame(self.display) as frame:
            frame.draw_prompt(path, prompt)
            while True:
                raw = self.keys.read_line()
                frame.grow(ECHO_ROWS)
                attempts += 1
                try:
                    value = parse_value(prompt.kind, raw)
                except ParseFailure as e:
                    logger.debug("attempt %d rejected: %s", attempts, e)
                    frame.draw_parse_error(prompt, e)
                    continue
                return Selection(name=prompt.name, path=list(path), value=value, attempts=attempts)


def run(
    menu: Menu,
    *,
    display: DisplayPort | None = None,
    keys: InputPort | None = None,
    config: Config | None = None,
) -> Selection:
    """Run ``menu`` on the terminal, or on the given ports.

    Missing ports are built from the Rich/readchar backend using ``config``
    (or the loaded config when omitted).
    """
    if display is None or keys is None:
        from navmenu.config import Config
        from navmenu.ui.terminal import ReadcharInput, RichDisplay

        cfg = config or Config.load()
        display = display or RichDisplay(config=cfg)
        keys = keys or ReadcharInput(config=cfg)
    return Navigator(display, keys).run(menu)
