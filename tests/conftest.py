"""Pytest fixtures for navmenu tests."""

from collections.abc import Iterable

import pytest

from navmenu.engine import Navigator
from navmenu.exceptions import InputClosedError
from navmenu.keys import KeyEvent


@pytest.fixture(autouse=True)
def clear_caches(tmp_path, monkeypatch):
    """Clear module-level caches and isolate the config dir for each test."""
    from navmenu.config import clear_config_cache

    monkeypatch.setenv("NAVMENU_CONFIG_DIR", str(tmp_path / "navmenu"))
    clear_config_cache()

    yield

    clear_config_cache()


# Rows a RecordingDisplay reports for header/footer and prompt frames
MENU_EXTRA_ROWS = 4
PROMPT_ROWS = 3
ERROR_ROWS = 2


class RecordingDisplay:
    """DisplayPort that records frames and tracks how many rows are on screen."""

    def __init__(self):
        self.frames: list[tuple[list[str], str, int]] = []
        self.prompts: list[list[str]] = []
        self.errors: list[str] = []
        self.erase_calls = 0
        self.on_screen = 0

    def render(self, path, menu, hover):
        self.frames.append((list(path), menu.name, hover))
        self.on_screen += len(menu.items) + MENU_EXTRA_ROWS
        return MENU_EXTRA_ROWS

    def render_prompt(self, path, prompt):
        self.prompts.append(list(path))
        self.on_screen += PROMPT_ROWS
        return PROMPT_ROWS

    def render_parse_error(self, prompt, error):
        self.errors.append(error.raw)
        self.on_screen += ERROR_ROWS
        return ERROR_ROWS

    def erase(self, item_count, extra_lines):
        self.erase_calls += 1
        self.on_screen -= item_count + extra_lines

    @property
    def hovers(self) -> list[int]:
        return [hover for _, _, hover in self.frames]


class ScriptedInput:
    """InputPort fed from lists. Raises InputClosedError when a list runs out."""

    def __init__(
        self,
        keys: Iterable[KeyEvent | str] = (),
        lines: Iterable[str] = (),
        display: RecordingDisplay | None = None,
    ):
        self.keys = [KeyEvent.of(k) if isinstance(k, str) else k for k in keys]
        self.lines = list(lines)
        self.display = display

    def next_key(self) -> KeyEvent:
        if not self.keys:
            raise InputClosedError("no more scripted keys")
        return self.keys.pop(0)

    def read_line(self) -> str:
        if not self.lines:
            raise InputClosedError("no more scripted lines")
        if self.display is not None:
            # The terminal echoes the typed line below the prompt
            self.display.on_screen += 1
        return self.lines.pop(0)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def navigate(display):
    """Run a menu against scripted keys/lines and the recording display."""

    def _navigate(menu, keys=(), lines=()):
        keys_in = ScriptedInput(keys, lines, display)
        return Navigator(display, keys_in).run(menu)

    return _navigate


@pytest.fixture
def scripted(display):
    """Factory for ScriptedInput bound to the recording display."""

    def _scripted(keys=(), lines=()):
        return ScriptedInput(keys, lines, display)

    return _scripted
