"""Data models for the JSON report written by dotnet-outdated."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class Severity(Enum):
    """Severity of a required upgrade."""

    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"

    def __str__(self) -> str:
        return _SEVERITY_NAMES[self]


class IndicatedUpdateRequirement(Enum):
    """What the exit code of dotnet-outdated indicated about required updates."""

    UP_TO_DATE = "up-to-date"
    UPDATE_REQUIRED = "update-required"

    def __str__(self) -> str:
        return _REQUIREMENT_NAMES[self]


_SEVERITY_NAMES = {
    Severity.MAJOR: "Major",
    Severity.MINOR: "Minor",
    Severity.PATCH: "Patch",
}

_REQUIREMENT_NAMES = {
    IndicatedUpdateRequirement.UP_TO_DATE: "up-to-date",
    IndicatedUpdateRequirement.UPDATE_REQUIRED: "update-required",
}


class ReportModel(BaseModel):
    """Base for report models, mapping snake_case fields to PascalCase keys."""

    model_config = ConfigDict(
        alias_generator=to_pascal, validate_by_alias=True, validate_by_name=True
    )


class Dependency(ReportModel):
    """An outdated dependency."""

    name: str
    resolved_version: str  # the version currently in use
    latest_version: str  # the latest version allowed by the version lock
    upgrade_severity: Severity


class Framework(ReportModel):
    """Dependencies of a project when built for one target framework, e.g. net6.0."""

    name: str
    dependencies: list[Dependency]


class Project(ReportModel):
    """A single .csproj file (binaries, tests, ...)."""

    name: str
    file_path: str  # absolute path to the .csproj file
    target_frameworks: list[Framework]


class DotnetOutdatedData(ReportModel):
    """Root of the dotnet-outdated report."""

    projects: list[Project]

    def dependencies(self) -> list[tuple[Project, Framework, Dependency]]:
        """Flatten the report into (project, framework, dependency) rows."""
        return [
            (project, framework, dependency)
            for project in self.projects
            for framework in project.target_frameworks
            for dependency in framework.dependencies
        ]
