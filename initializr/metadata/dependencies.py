from pydantic import BaseModel, ConfigDict

from initializr.metadata.models import InitializrMetadata
from initializr.versioning.ranges import filter_compatible


class DependencyChoice(BaseModel):
    """A dependency flattened out of its catalogue group."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group: str
    description: str | None = None
    version_range: str | None = None


def flatten_dependencies(metadata: InitializrMetadata) -> list[DependencyChoice]:
    """List every dependency of every group, in catalogue order."""
    return [
        DependencyChoice(
            id=option.id,
            name=option.name,
            group=group.name,
            description=option.description,
            version_range=option.version_range,
        )
        for group in metadata.dependencies.values
        for option in group.values
    ]


def compatible_dependencies(metadata: InitializrMetadata, boot_version: str) -> list[DependencyChoice]:
    """List the dependencies whose version range accepts the given boot version.

    Args:
        metadata: The client metadata.
        boot_version: The selected (normalized) boot version.

    Returns:
        The compatible dependencies, in catalogue order.
    """
    return filter_compatible(flatten_dependencies(metadata), boot_version)
