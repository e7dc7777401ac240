"""initializr CLI.

Provides the interactive project generator, dependency and version listings,
and configuration commands.
"""

from typing import Annotated

import typer

from initializr.cli._logging import setup_logging
from initializr.cli.commands.config_cmd import do_config_get, do_config_list, do_config_set
from initializr.cli.commands.dependencies_cmd import do_dependencies
from initializr.cli.commands.new_cmd import do_new
from initializr.cli.commands.versions_cmd import do_versions

app = typer.Typer(
    name="initializr",
    no_args_is_help=True,
    help="Generate Spring Boot projects from a Spring Initializr service.",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    setup_logging(verbose)


# ── Config subcommand group ──────────────────────────────────────────
config_app = typer.Typer(
    name="config",
    no_args_is_help=True,
    help="Manage initializr settings.",
)
app.add_typer(config_app, name="config")


@config_app.command("set", help="Set a configuration value")
def config_set_cmd(
    key: Annotated[
        str,
        typer.Argument(help="Configuration key (e.g. 'service-url', 'timeout', 'extract')"),
    ],
    value: Annotated[
        str,
        typer.Argument(help="Value to set"),
    ],
) -> None:
    do_config_set(key=key, value=value)


@config_app.command("get", help="Get a configuration value")
def config_get_cmd(
    key: Annotated[
        str,
        typer.Argument(help="Configuration key (e.g. 'service-url', 'timeout', 'extract')"),
    ],
) -> None:
    do_config_get(key=key)


@config_app.command("list", help="List all configuration values")
def config_list_cmd() -> None:
    do_config_list()


# ── Top-level commands ───────────────────────────────────────────────


@app.command("new", help="Interactively generate a new project")
def new_cmd(
    output_dir: Annotated[
        str | None,
        typer.Option("--output-dir", "-o", help="Directory to write the project into (defaults to current directory)"),
    ] = None,
    extract: Annotated[
        bool | None,
        typer.Option("--extract/--no-extract", help="Extract the downloaded archive (asks when omitted)"),
    ] = None,
) -> None:
    """Generate a project through interactive prompts."""
    do_new(output_dir=output_dir, extract=extract)


@app.command("dependencies", help="List the dependencies compatible with a Spring Boot version")
def dependencies_cmd(
    boot_version: Annotated[
        str,
        typer.Argument(help="Spring Boot version (e.g. '3.3.4')"),
    ],
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Also list incompatible dependencies"),
    ] = False,
) -> None:
    do_dependencies(boot_version=boot_version, show_all=show_all)


@app.command("versions", help="List the available Spring Boot versions")
def versions_cmd() -> None:
    do_versions()
