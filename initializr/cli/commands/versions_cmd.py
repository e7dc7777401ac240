"""List the boot versions offered by the service."""

from rich.markup import escape

from initializr.cli._console import get_console
from initializr.cli.commands._service_helpers import fetch_metadata_or_exit
from initializr.metadata.models import InitializrMetadata, MetadataOption
from initializr.versioning.ordering import version_sort_key
from initializr.versioning.version import parse_version


def sorted_boot_versions(metadata: InitializrMetadata) -> list[MetadataOption]:
    """Return the boot version options, newest first."""
    return sorted(metadata.boot_versions(), key=lambda option: version_sort_key(parse_version(option.id)), reverse=True)


def do_versions() -> None:
    """Print the available boot versions, marking the service default."""
    console = get_console()
    metadata = fetch_metadata_or_exit()
    default = metadata.default_boot_version()

    for option in sorted_boot_versions(metadata):
        if option.id == default:
            console.print(f"[bold green]{escape(option.id)}[/bold green]  [dim](default)[/dim]")
        else:
            console.print(escape(option.id))
