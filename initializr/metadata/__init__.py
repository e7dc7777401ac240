from initializr.metadata.dependencies import DependencyChoice, compatible_dependencies, flatten_dependencies
from initializr.metadata.models import InitializrMetadata, MetadataOption, normalize_boot_version

__all__ = [
    "DependencyChoice",
    "InitializrMetadata",
    "MetadataOption",
    "compatible_dependencies",
    "flatten_dependencies",
    "normalize_boot_version",
]
