"""Integration tests for the interactive 'initializr new' flow with prompts stubbed out."""

from pathlib import Path

import pytest
import typer
from pytest_mock import MockerFixture

from initializr.cli.commands.new_cmd import do_new, prompt_project_request
from initializr.metadata.dependencies import DependencyChoice
from initializr.metadata.models import InitializrMetadata, MetadataOption


class _PromptRecorder:
    """Answers prompts with their defaults, except for explicit overrides."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.offered_options: dict[str, list[str]] = {}
        self.offered_dependencies: list[str] = []

    def select_option(self, message: str, options: list[MetadataOption], default: str | None = None) -> str:
        self.offered_options[message] = [option.id for option in options]
        return self.overrides.get(message, default or options[0].id)

    def select_value(self, message: str, choices: list[tuple[str, str]], default: str | None = None) -> str:
        return self.overrides.get(message, default or choices[0][1])

    def ask_text(self, message: str, default: str = "") -> str:
        return self.overrides.get(message, default)

    def select_dependencies(self, dependencies: list[DependencyChoice]) -> list[str]:
        self.offered_dependencies = [dependency.id for dependency in dependencies]
        return [dependency_id for dependency_id in ("web", "legacy-actuator") if dependency_id in self.offered_dependencies]


def _install_recorder(mocker: MockerFixture, overrides: dict[str, str]) -> _PromptRecorder:
    recorder = _PromptRecorder(overrides)
    for name in ("select_option", "select_value", "ask_text", "select_dependencies"):
        mocker.patch(f"initializr.cli.commands.new_cmd.{name}", side_effect=getattr(recorder, name))
    return recorder


class TestPromptProjectRequest:
    """prompt_project_request asks every question and filters dependencies by boot version."""

    def test_defaults(self, mocker: MockerFixture, metadata: InitializrMetadata) -> None:
        recorder = _install_recorder(mocker, {})

        request = prompt_project_request(metadata)

        assert request.type == "maven-project"
        assert request.boot_version == "3.3.4"
        assert request.name == "demo"
        assert request.package_name == "com.example.demo"
        assert request.configuration_file_format == "properties"
        assert request.dependencies == ["web"]
        assert recorder.offered_options["Select project type:"] == ["gradle-project", "maven-project"]
        assert recorder.offered_dependencies == ["native", "lombok", "web", "graphql"]

    def test_only_compatible_dependencies_are_offered(self, mocker: MockerFixture, metadata: InitializrMetadata) -> None:
        recorder = _install_recorder(
            mocker,
            {
                "Select Spring Boot version:": "2.7.18",
                "Group:": "org.acme",
                "Artifact:": "billing",
                "Configuration:": "yaml",
            },
        )

        request = prompt_project_request(metadata)

        assert recorder.offered_options["Select Spring Boot version:"][3] == "2.7.18"
        assert recorder.offered_dependencies == ["lombok", "web", "legacy-actuator"]
        assert request.dependencies == ["web", "legacy-actuator"]
        assert request.name == "billing"
        assert request.package_name == "org.acme.billing"
        assert request.configuration_file_format == "yaml"


class TestDoNew:
    """End-to-end runs of do_new with the service and prompts stubbed."""

    @pytest.fixture(autouse=True)
    def _stub_service(self, mocker: MockerFixture, metadata: InitializrMetadata, starter_zip_bytes: bytes, isolated_settings: Path) -> None:
        _install_recorder(mocker, {})
        mocker.patch("initializr.cli.commands.new_cmd.fetch_metadata_or_exit", return_value=metadata)
        self.download = mocker.patch("initializr.cli.commands.new_cmd.download_starter_or_exit", return_value=starter_zip_bytes)
        self.confirm = mocker.patch("initializr.cli.commands.new_cmd.ask_confirm", return_value=True)
        mocker.patch("initializr.cli.commands.new_cmd.get_console")

    def test_extracts_project(self, tmp_path: Path) -> None:
        do_new(output_dir=str(tmp_path), extract=True)

        assert (tmp_path / "demo" / "pom.xml").is_file()
        assert not (tmp_path / "demo.zip").exists()
        self.confirm.assert_not_called()
        sent_request = self.download.call_args.args[0]
        assert sent_request.dependencies == ["web"]

    def test_keeps_archive_when_not_extracting(self, tmp_path: Path) -> None:
        do_new(output_dir=str(tmp_path), extract=False)

        assert (tmp_path / "demo.zip").is_file()
        assert not (tmp_path / "demo").exists()

    def test_asks_whether_to_extract(self, tmp_path: Path) -> None:
        self.confirm.return_value = False

        do_new(output_dir=str(tmp_path))

        self.confirm.assert_called_once()
        assert self.confirm.call_args.kwargs["default"] is True
        assert (tmp_path / "demo.zip").is_file()

    def test_output_dir_must_not_be_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(typer.Exit):
            do_new(output_dir=str(blocker), extract=True)
