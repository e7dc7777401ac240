from initializr.project.archive import extract_archive, write_archive
from initializr.project.request import ProjectRequest, default_package_name

__all__ = ["ProjectRequest", "default_package_name", "extract_archive", "write_archive"]
