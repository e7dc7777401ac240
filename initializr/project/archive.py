"""Writing and unpacking the generated project archive."""

import logging
import zipfile
from pathlib import Path

from initializr.exceptions import ArchiveError

logger = logging.getLogger(__name__)


def archive_filename(artifact_id: str) -> str:
    return f"{artifact_id}.zip"


def write_archive(content: bytes, output_dir: Path, artifact_id: str) -> Path:
    """Write the downloaded archive as ``<artifact_id>.zip`` in the output directory.

    Args:
        content: The raw zip bytes.
        output_dir: Directory to write into (created if missing).
        artifact_id: The project's artifact id.

    Returns:
        Path to the written zip file.

    Raises:
        ArchiveError: If the file cannot be written.
    """
    zip_path = output_dir / archive_filename(artifact_id)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        zip_path.write_bytes(content)
    except OSError as exc:
        msg = f"Failed to write '{zip_path}': {exc}"
        raise ArchiveError(msg) from exc
    logger.debug("Wrote %d bytes to %s", len(content), zip_path)
    return zip_path


def _check_members(archive: zipfile.ZipFile, output_dir: Path) -> None:
    root = output_dir.resolve()
    for member in archive.namelist():
        if not (root / member).resolve().is_relative_to(root):
            msg = f"Archive entry '{member}' would be extracted outside '{root}'"
            raise ArchiveError(msg)


def extract_archive(zip_path: Path, output_dir: Path, artifact_id: str) -> Path:
    """Extract the archive into the output directory, then delete it.

    Existing files are overwritten.

    Args:
        zip_path: The zip file written by :func:`write_archive`.
        output_dir: Directory to extract into.
        artifact_id: The project's artifact id (the archive's base directory).

    Returns:
        Path to the extracted project directory.

    Raises:
        ArchiveError: If the archive is corrupt, unsafe, or cannot be extracted.
    """
    try:
        with zipfile.ZipFile(zip_path) as archive:
            _check_members(archive, output_dir)
            archive.extractall(output_dir)
    except zipfile.BadZipFile as exc:
        msg = f"'{zip_path}' is not a valid zip archive"
        raise ArchiveError(msg) from exc
    except OSError as exc:
        msg = f"Failed to extract '{zip_path}': {exc}"
        raise ArchiveError(msg) from exc

    try:
        zip_path.unlink()
    except OSError as exc:
        msg = f"Extracted project but failed to remove '{zip_path}': {exc}"
        raise ArchiveError(msg) from exc

    return output_dir / artifact_id
