import io
import zipfile
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from initializr.metadata.models import InitializrMetadata


@pytest.fixture
def metadata_payload() -> dict[str, Any]:
    """A trimmed-down ``/metadata/client`` document."""
    return {
        "_links": {"maven-project": {"href": "https://start.example.test/starter.zip?type=maven-project", "templated": True}},
        "dependencies": {
            "type": "hierarchical-multi-select",
            "values": [
                {
                    "name": "Developer Tools",
                    "values": [
                        {
                            "id": "native",
                            "name": "GraalVM Native Support",
                            "description": "Support for compiling Spring applications to native executables.",
                            "versionRange": "[3.0.0,3.4.0-M1)",
                        },
                        {"id": "lombok", "name": "Lombok", "description": "Java annotation library."},
                    ],
                },
                {
                    "name": "Web",
                    "values": [
                        {"id": "web", "name": "Spring Web", "description": "Build web applications."},
                        {"id": "graphql", "name": "Spring for GraphQL", "versionRange": "3.3.0"},
                    ],
                },
                {
                    "name": "Ops",
                    "values": [
                        {"id": "legacy-actuator", "name": "Legacy Actuator", "versionRange": "[2.0.0.RELEASE,3.0.0.M1)"},
                    ],
                },
            ],
        },
        "type": {
            "type": "action",
            "default": "maven-project",
            "values": [
                {"id": "gradle-project", "name": "Gradle - Groovy", "tags": {"build": "gradle", "dialect": "groovy", "format": "project"}},
                {"id": "maven-project", "name": "Maven", "tags": {"build": "maven", "format": "project"}},
                {"id": "maven-build", "name": "Maven POM", "tags": {"build": "maven", "format": "build"}},
            ],
        },
        "packaging": {"type": "single-select", "default": "jar", "values": [{"id": "jar", "name": "Jar"}, {"id": "war", "name": "War"}]},
        "javaVersion": {"type": "single-select", "default": "17", "values": [{"id": "21", "name": "21"}, {"id": "17", "name": "17"}]},
        "language": {
            "type": "single-select",
            "default": "java",
            "values": [{"id": "java", "name": "Java"}, {"id": "kotlin", "name": "Kotlin"}],
        },
        "bootVersion": {
            "type": "single-select",
            "default": "3.3.4",
            "values": [
                {"id": "3.4.0-SNAPSHOT", "name": "3.4.0 (SNAPSHOT)"},
                {"id": "3.4.0-M3", "name": "3.4.0 (M3)"},
                {"id": "3.3.4", "name": "3.3.4"},
                {"id": "2.7.18.RELEASE", "name": "2.7.18"},
                {"id": "2.7.19.BUILD-SNAPSHOT", "name": "2.7.19 (SNAPSHOT)"},
            ],
        },
        "groupId": {"type": "text", "default": "com.example"},
        "artifactId": {"type": "text", "default": "demo"},
        "version": {"type": "text", "default": "0.0.1-SNAPSHOT"},
        "name": {"type": "text", "default": "demo"},
        "description": {"type": "text", "default": "Demo project for Spring Boot"},
        "packageName": {"type": "text", "default": "com.example.demo"},
    }


@pytest.fixture
def metadata(metadata_payload: dict[str, Any]) -> InitializrMetadata:
    return InitializrMetadata.model_validate(metadata_payload)


@pytest.fixture
def starter_zip_bytes() -> bytes:
    """A minimal generated project archive rooted at ``demo/``."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("demo/pom.xml", "<project/>")
        archive.writestr("demo/src/main/java/com/example/demo/DemoApplication.java", "class DemoApplication {}")
    return buffer.getvalue()


@pytest.fixture
def isolated_settings(tmp_path: Path, mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect settings I/O to a temporary directory and clear INITIALIZR_* env vars."""
    config_dir = tmp_path / ".initializr"
    config_dir.mkdir()
    config_path = config_dir / "config"

    mocker.patch("initializr.config.settings.CONFIG_DIR", config_dir)
    mocker.patch("initializr.config.settings.CONFIG_PATH", config_path)
    for env_name in ("INITIALIZR_SERVICE_URL", "INITIALIZR_TIMEOUT", "INITIALIZR_EXTRACT"):
        monkeypatch.delenv(env_name, raising=False)
    return config_path
