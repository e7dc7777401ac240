"""List the dependencies available for a given boot version."""

from rich import box
from rich.markup import escape
from rich.table import Table

from initializr.cli._console import get_console
from initializr.cli.commands._service_helpers import fetch_metadata_or_exit
from initializr.metadata.dependencies import DependencyChoice, flatten_dependencies
from initializr.versioning.ranges import satisfies


def render_dependency_table(boot_version: str, dependencies: list[DependencyChoice], show_all: bool) -> Table:
    """Build the dependency table for a boot version.

    Args:
        boot_version: The boot version to check compatibility against.
        dependencies: The flattened dependency catalogue.
        show_all: Include incompatible dependencies, with a compatibility column.

    Returns:
        The Rich table, ready to print.
    """
    table = Table(title=f"Dependencies for Spring Boot {escape(boot_version)}", box=box.ROUNDED, show_header=True)
    table.add_column("Id", style="cyan")
    table.add_column("Name")
    table.add_column("Group", style="dim")
    table.add_column("Version range", style="dim")
    if show_all:
        table.add_column("Compatible")

    for dependency in dependencies:
        compatible = satisfies(boot_version, dependency.version_range)
        if not compatible and not show_all:
            continue
        row = [
            escape(dependency.id),
            escape(dependency.name),
            escape(dependency.group),
            escape(dependency.version_range or "any"),
        ]
        if show_all:
            row.append("[green]yes[/green]" if compatible else "[red]no[/red]")
        table.add_row(*row)

    return table


def do_dependencies(boot_version: str, show_all: bool = False) -> None:
    """Print the dependencies compatible with a boot version.

    Args:
        boot_version: The boot version (e.g. "3.3.4").
        show_all: Also list incompatible dependencies.
    """
    metadata = fetch_metadata_or_exit()
    get_console().print(render_dependency_table(boot_version, flatten_dependencies(metadata), show_all))
