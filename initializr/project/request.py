from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ConfigurationFileFormat = Literal["properties", "yaml"]


def default_package_name(group_id: str, artifact_id: str) -> str:
    """Build the default base package: ``<group>.<artifact>``."""
    return f"{group_id}.{artifact_id}"


class ProjectRequest(BaseModel):
    """The answers needed to generate a project, as sent to ``/starter.zip``."""

    model_config = ConfigDict(extra="forbid")

    type: str
    language: str
    boot_version: str
    group_id: str
    artifact_id: str
    name: str
    description: str
    package_name: str
    packaging: str
    java_version: str
    configuration_file_format: ConfigurationFileFormat = "properties"
    dependencies: list[str] = Field(default_factory=list)

    def to_query_params(self) -> dict[str, str]:
        """Render the request as the service's query parameters.

        The archive's base directory is the artifact id, and ``dependencies``
        is only sent when at least one dependency was selected.
        """
        params = {
            "type": self.type,
            "language": self.language,
            "bootVersion": self.boot_version,
            "baseDir": self.artifact_id,
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "name": self.name,
            "description": self.description,
            "packageName": self.package_name,
            "packaging": self.packaging,
            "javaVersion": self.java_version,
            "configurationFileFormat": self.configuration_file_format,
        }
        if self.dependencies:
            params["dependencies"] = ",".join(self.dependencies)
        return params
