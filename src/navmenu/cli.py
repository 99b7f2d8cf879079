"""CLI commands."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from navmenu.models import Action, Menu, SubMenu, TypedPrompt, ValueKind

if TYPE_CHECKING:
    from navmenu.config import Config

app = typer.Typer(
    name="navmenu",
    help="Nested terminal menus navigated with hotkeys.",
    no_args_is_help=True,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from navmenu.config import Config

    return Config.load()


def _setup_logging(cfg: Config) -> None:
    """Send debug logging to a file so it never lands inside a menu frame."""
    if not cfg.debug:
        return
    cfg.config_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(cfg.config_dir / "debug.log")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(message)s"))
    root = logging.getLogger("navmenu")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)


def build_demo_menu(allow_exit: bool = True) -> Menu:
    """Sample tree with nested sub-menus and one prompt of every value kind."""
    return Menu(
        name="Main Menu",
        explanation="Main menu explanation.",
        allow_exit=allow_exit,
        items=[
            Action("Action0", hotkey="a", explanation="Assigned to a hotkey."),
            Action("Action1", explanation="Has no hotkey."),
            SubMenu(
                "Submenu0",
                hotkey="s",
                explanation="Nested actions.",
                items=[
                    Action("Sub0 Action0", hotkey="a", explanation="Same hotkey, other level."),
                    SubMenu(
                        "Deepermenu0",
                        hotkey="d",
                        explanation="Exit is disabled down here.",
                        allow_exit=False,
                        items=[
                            Action("Deeper Action0", hotkey="f"),
                            Action("Deeper Action1", hotkey="g", explanation="Back still works."),
                        ],
                    ),
                ],
            ),
            SubMenu(
                "Values",
                hotkey="v",
                explanation="Typed input.",
                items=[
                    TypedPrompt(ValueKind.BOOL, "Enabled", hotkey="b"),
                    TypedPrompt(ValueKind.CHAR, "Initial", hotkey="c"),
                    TypedPrompt(ValueKind.STRING, "Title", hotkey="t"),
                    TypedPrompt(ValueKind.F64, "Ratio", hotkey="r"),
                    TypedPrompt(ValueKind.I64, "Offset", hotkey="o"),
                    TypedPrompt(ValueKind.U64, "Count", hotkey="n"),
                ],
            ),
        ],
    )


@app.command()
def demo(
    locked: Annotated[
        bool, typer.Option("--locked", help="Disable exit at the root menu")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print selection as JSON")] = False,
):
    """Run the demo menu and print the selection."""
    from navmenu.engine import run
    from navmenu.exceptions import MenuExited, NavmenuError

    cfg = _get_config()
    _setup_logging(cfg)

    try:
        selection = run(build_demo_menu(allow_exit=not locked), config=cfg)
    except MenuExited:
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(1)
    except NavmenuError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(selection.to_dict()))
        return

    path = "/".join(selection.path)
    console.print(f"[green]✓[/green] {escape(selection.name)} [dim]({escape(path)})[/dim]")
    if selection.value is not None:
        kind = selection.value.kind.value
        console.print(f"  value: [cyan]{escape(str(selection.value))}[/cyan] [dim]({kind})[/dim]")
        console.print(f"  [dim]attempts: {selection.attempts}[/dim]")


@app.command()
def config():
    """Show settings and their current values."""
    cfg = _get_config()

    table = Table(title="navmenu config", border_style="blue")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_column("Description", style="dim")
    for name, desc, enabled in cfg.get_toggles():
        table.add_row(name, "[green]on[/green]" if enabled else "[dim]off[/dim]", desc)
    for name, desc, value in cfg.get_settings():
        table.add_row(name, repr(value), desc)

    console.print(table)
    console.print(f"[dim]{cfg.config_dir / 'config.json'}[/dim]")


@app.command(name="set")
def set_(
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="New value (true/false for toggles)")],
):
    """Persist a setting."""
    from navmenu.exceptions import ConfigurationError

    cfg = _get_config()
    try:
        cfg.set_from_string(key, value)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {key} = {getattr(cfg, key)!r}")
