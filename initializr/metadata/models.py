"""Pydantic models for the service's ``/metadata/client`` document.

Only the sections the CLI needs are modelled; unknown keys (``_links``,
``bootVersion`` descriptions, ...) are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

PROJECT_FORMAT_TAG = "project"

_BUILD_SNAPSHOT_SUFFIX = ".BUILD-SNAPSHOT"
_RELEASE_SUFFIX = ".RELEASE"


def normalize_boot_version(version_id: str) -> str:
    """Rewrite legacy boot version ids into the form the service expects.

    ``2.7.0.BUILD-SNAPSHOT`` becomes ``2.7.0-SNAPSHOT`` and ``2.7.0.RELEASE``
    becomes ``2.7.0``; other ids are returned unchanged.
    """
    if version_id.endswith(_BUILD_SNAPSHOT_SUFFIX):
        return version_id.removesuffix(_BUILD_SNAPSHOT_SUFFIX) + "-SNAPSHOT"
    if version_id.endswith(_RELEASE_SUFFIX):
        return version_id.removesuffix(_RELEASE_SUFFIX)
    return version_id


class _MetadataModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MetadataOption(_MetadataModel):
    """A selectable value: a project type, a language, a dependency, ..."""

    id: str
    name: str
    description: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)
    version_range: str | None = Field(default=None, alias="versionRange")


class SingleSelectField(_MetadataModel):
    type: str = "single-select"
    default: str | None = None
    values: list[MetadataOption] = Field(default_factory=list)


class TextField(_MetadataModel):
    type: str = "text"
    default: str = ""


class DependencyGroup(_MetadataModel):
    name: str
    values: list[MetadataOption] = Field(default_factory=list)


class DependencyCatalogue(_MetadataModel):
    type: str = "hierarchical-multi-select"
    values: list[DependencyGroup] = Field(default_factory=list)


class InitializrMetadata(_MetadataModel):
    """The client metadata published by the project generation service."""

    type: SingleSelectField = Field(default_factory=SingleSelectField)
    language: SingleSelectField = Field(default_factory=SingleSelectField)
    boot_version: SingleSelectField = Field(default_factory=SingleSelectField, alias="bootVersion")
    packaging: SingleSelectField = Field(default_factory=SingleSelectField)
    java_version: SingleSelectField = Field(default_factory=SingleSelectField, alias="javaVersion")
    group_id: TextField = Field(default_factory=TextField, alias="groupId")
    artifact_id: TextField = Field(default_factory=TextField, alias="artifactId")
    name: TextField = Field(default_factory=TextField)
    description: TextField = Field(default_factory=TextField)
    package_name: TextField = Field(default_factory=TextField, alias="packageName")
    dependencies: DependencyCatalogue = Field(default_factory=DependencyCatalogue)

    def project_types(self) -> list[MetadataOption]:
        """Return the project types that generate a full project (not a lone build file)."""
        return [option for option in self.type.values if option.tags.get("format") == PROJECT_FORMAT_TAG]

    def boot_versions(self) -> list[MetadataOption]:
        """Return the boot version options with normalized ids."""
        return [option.model_copy(update={"id": normalize_boot_version(option.id)}) for option in self.boot_version.values]

    def default_boot_version(self) -> str | None:
        default = self.boot_version.default
        if default is None:
            return None
        return normalize_boot_version(default)
