"""navmenu - data-driven nested terminal menus navigated with hotkeys."""

from importlib.metadata import version

__version__ = version("navmenu")

from navmenu.engine import Navigator, run
from navmenu.exceptions import EmptyMenuError, MenuExited, NavmenuError, ParseFailure
from navmenu.models import Action, Menu, Selection, SubMenu, TypedPrompt, TypedValue, ValueKind

__all__ = [
    "Action",
    "EmptyMenuError",
    "Menu",
    "MenuExited",
    "Navigator",
    "NavmenuError",
    "ParseFailure",
    "Selection",
    "SubMenu",
    "TypedPrompt",
    "TypedValue",
    "ValueKind",
    "run",
]
