from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

_console: Console | None = None


def get_console() -> Console:
    """Return the shared Rich console instance for CLI output."""
    global _console  # noqa: PLW0603
    if _console is None:
        _console = Console(stderr=True)
    return _console


def resolve_output_dir(directory: str | None) -> Path:
    """Resolve the --output-dir option to a directory path.

    The directory does not need to exist yet, but must not be a file.

    Raises:
        typer.Exit: If the path exists and is not a directory.
    """
    if directory is None:
        return Path.cwd()

    resolved = Path(directory).resolve()
    if resolved.exists() and not resolved.is_dir():
        get_console().print(f"[red]Not a directory: {escape(str(resolved))}[/red]")
        raise typer.Exit(code=1)
    return resolved


def abort(message: str) -> NoReturn:
    """Print an error message and exit with code 1."""
    get_console().print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)
