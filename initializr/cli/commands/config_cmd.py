"""Config commands for managing initializr settings.

Provides set, get, and list operations for the settings stored
in ``~/.initializr/config``.
"""

from rich import box
from rich.markup import escape
from rich.table import Table

from initializr.cli._console import get_console
from initializr.config.settings import (
    VALID_KEYS,
    get_setting_value,
    list_settings,
    parse_flag,
    resolve_key,
    set_setting_value,
)


def _print_unknown_key(key: str) -> None:
    console = get_console()
    console.print(f"[red]Unknown config key: '{escape(key)}'[/red]")
    console.print(f"[dim]Valid keys: {', '.join(VALID_KEYS)}[/dim]")


def _is_positive_number(value: str) -> bool:
    try:
        return float(value) > 0
    except ValueError:
        return False


def do_config_set(key: str, value: str) -> None:
    """Set a setting value.

    Args:
        key: The CLI key name (e.g. "service-url", "timeout").
        value: The value to store.
    """
    internal_key = resolve_key(key)
    if internal_key is None:
        _print_unknown_key(key)
        return

    if internal_key == "timeout" and not _is_positive_number(value):
        get_console().print(f"[red]Timeout must be a positive number of seconds, got '{escape(value)}'[/red]")
        return

    set_setting_value(internal_key, value)
    get_console().print(f"[green]Set '{escape(key)}' = '{escape(value)}'[/green]")


def do_config_get(key: str) -> None:
    """Get a setting value and display it with its source."""
    internal_key = resolve_key(key)
    if internal_key is None:
        _print_unknown_key(key)
        return

    entry = get_setting_value(internal_key)
    display_value = entry.value or "(empty)"
    if internal_key == "extract":
        display_value += " (extract after download)" if parse_flag(entry.value) else " (keep the zip)"
    get_console().print(f"[bold]{escape(key)}[/bold] = {escape(display_value)}  [dim](source: {entry.source})[/dim]")


def do_config_list() -> None:
    """List all setting values with their sources."""
    table = Table(title="initializr configuration", box=box.ROUNDED, show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_column("Source", style="dim")

    for entry in list_settings():
        table.add_row(escape(entry.cli_key), escape(entry.value or "(empty)"), str(entry.source))

    get_console().print(table)
