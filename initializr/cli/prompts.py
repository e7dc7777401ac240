"""Inline questionary prompts used by the interactive ``new`` flow.

Every prompt aborts the CLI (exit code 1) when the user cancels with Ctrl-C,
which questionary reports as a ``None`` answer.
"""

from collections.abc import Sequence
from typing import Any, NoReturn

import questionary
import typer
from questionary import Choice, Style

from initializr.cli._console import abort, get_console
from initializr.metadata.dependencies import DependencyChoice
from initializr.metadata.models import MetadataOption

_PROMPT_STYLE = Style(
    [
        ("pointer", "ansiyellow bold"),
        ("selected", "ansicyan bold"),
        ("highlighted", "ansicyan bold"),
        ("instruction", "ansibrightblack"),
    ]
)


def _abort_interactive() -> NoReturn:
    get_console().print("[red]Aborted by user.[/red]")
    raise typer.Exit(code=1)


def _ask(question: questionary.Question) -> Any:
    try:
        answer = question.ask()
    except KeyboardInterrupt:
        _abort_interactive()
    if answer is None:
        _abort_interactive()
    return answer


def select_option(message: str, options: Sequence[MetadataOption], default: str | None = None) -> str:
    """Ask the user to pick one metadata option; returns the option id."""
    if not options:
        abort(f"The service offered no choices for '{message}'")
    choices = [Choice(title=option.name, value=option.id) for option in options]
    known_ids = {option.id for option in options}
    question = questionary.select(
        message,
        choices=choices,
        default=default if default in known_ids else None,
        use_shortcuts=False,
        pointer="▶",
        style=_PROMPT_STYLE,
    )
    return str(_ask(question))


def select_value(message: str, choices: Sequence[tuple[str, str]], default: str | None = None) -> str:
    """Ask the user to pick one of ``(title, value)`` pairs; returns the value."""
    question = questionary.select(
        message,
        choices=[Choice(title=title, value=value) for title, value in choices],
        default=default,
        use_shortcuts=False,
        pointer="▶",
        style=_PROMPT_STYLE,
    )
    return str(_ask(question))


def ask_text(message: str, default: str = "") -> str:
    question = questionary.text(message, default=default, style=_PROMPT_STYLE)
    return str(_ask(question))


def ask_confirm(message: str, default: bool = True) -> bool:
    question = questionary.confirm(message, default=default, style=_PROMPT_STYLE)
    return bool(_ask(question))


def select_dependencies(dependencies: Sequence[DependencyChoice]) -> list[str]:
    """Ask the user to tick any number of dependencies; returns the selected ids.

    Choices are titled ``Group: Name`` so related dependencies stay together.
    An empty catalogue returns an empty selection without prompting.
    """
    if not dependencies:
        return []

    choices = [
        Choice(title=f"{dependency.group}: {dependency.name}", value=dependency.id, description=dependency.description)
        for dependency in dependencies
    ]
    question = questionary.checkbox(
        "Select dependencies (type to search, space to select, enter to finish):",
        choices=choices,
        use_search_filter=True,
        use_jk_keys=False,
        pointer="▶",
        style=_PROMPT_STYLE,
    )
    return [str(value) for value in _ask(question)]
