"""Interactive project generation for 'initializr new'.

Fetches the service metadata, asks for the project settings, offers only the
dependencies compatible with the chosen boot version, then downloads the
generated archive and optionally extracts it.
"""

import logging
from pathlib import Path

from rich.markup import escape

from initializr.cli._console import abort, get_console, resolve_output_dir
from initializr.cli.commands._service_helpers import download_starter_or_exit, fetch_metadata_or_exit
from initializr.cli.prompts import ask_confirm, ask_text, select_dependencies, select_option, select_value
from initializr.config.settings import is_extract_enabled
from initializr.exceptions import ArchiveError
from initializr.metadata.dependencies import compatible_dependencies
from initializr.metadata.models import InitializrMetadata
from initializr.project.archive import archive_filename, extract_archive, write_archive
from initializr.project.request import ProjectRequest, default_package_name

logger = logging.getLogger(__name__)

CONFIGURATION_FORMATS: list[tuple[str, str]] = [("Properties", "properties"), ("Yaml", "yaml")]


def prompt_project_request(metadata: InitializrMetadata) -> ProjectRequest:
    """Ask the user for every project setting, then for compatible dependencies.

    Args:
        metadata: The service metadata providing choices and defaults.

    Returns:
        The completed ProjectRequest.
    """
    project_type = select_option("Select project type:", metadata.project_types(), default=metadata.type.default)
    language = select_option("Select language:", metadata.language.values, default=metadata.language.default)
    boot_version = select_option(
        "Select Spring Boot version:",
        metadata.boot_versions(),
        default=metadata.default_boot_version(),
    )
    group_id = ask_text("Group:", default=metadata.group_id.default)
    artifact_id = ask_text("Artifact:", default=metadata.artifact_id.default)
    name = ask_text("Name:", default=artifact_id)
    description = ask_text("Description:", default=metadata.description.default)
    package_name = ask_text("Package name:", default=default_package_name(group_id, artifact_id))
    packaging = select_option("Packaging:", metadata.packaging.values, default=metadata.packaging.default)
    configuration_file_format = select_value("Configuration:", CONFIGURATION_FORMATS, default="properties")
    java_version = select_option("Java:", metadata.java_version.values, default=metadata.java_version.default)

    candidates = compatible_dependencies(metadata, boot_version)
    logger.debug("%d dependencies compatible with boot version %s", len(candidates), boot_version)
    dependencies = select_dependencies(candidates)

    return ProjectRequest(
        type=project_type,
        language=language,
        boot_version=boot_version,
        group_id=group_id,
        artifact_id=artifact_id,
        name=name,
        description=description,
        package_name=package_name,
        packaging=packaging,
        java_version=java_version,
        configuration_file_format=configuration_file_format,  # type: ignore[arg-type]
        dependencies=dependencies,
    )


def save_project(content: bytes, request: ProjectRequest, output_dir: Path, extract: bool) -> None:
    """Write the downloaded archive and extract it when requested."""
    console = get_console()

    zip_path = write_archive(content, output_dir, request.artifact_id)
    if not extract:
        console.print(f"Project not extracted. You can manually extract '{escape(archive_filename(request.artifact_id))}'.")
        return

    project_dir = extract_archive(zip_path, output_dir, request.artifact_id)
    console.print(f"[green]Project extracted successfully to: {escape(str(project_dir))}[/green]")
    console.print("[dim]Zip file removed.[/dim]")


def do_new(output_dir: str | None = None, extract: bool | None = None) -> None:
    """Run the interactive project generation flow.

    Args:
        output_dir: Directory to write the project into (defaults to current directory).
        extract: Whether to extract the archive. Asked interactively when None.
    """
    console = get_console()
    target_dir = resolve_output_dir(output_dir)

    console.print("[dim]Fetching project metadata...[/dim]")
    metadata = fetch_metadata_or_exit()

    request = prompt_project_request(metadata)
    should_extract = extract
    if should_extract is None:
        should_extract = ask_confirm("Do you want to extract the project after downloading?", default=is_extract_enabled())

    content = download_starter_or_exit(request)
    try:
        save_project(content, request, target_dir, should_extract)
    except ArchiveError as exc:
        abort(exc.message)
