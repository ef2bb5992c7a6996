"""Errors raised while running dotnet-outdated and reading its report.

A non-zero exit status of dotnet-outdated is not an error; it is reported as
``IndicatedUpdateRequirement.UPDATE_REQUIRED``.
"""


class DotnetParserError(Exception):
    """Base exception for dotnet-outdated invocations."""


class CommandError(DotnetParserError):
    """The external command could not be started."""


class OutputDecodeError(DotnetParserError):
    """Captured stdout/stderr of the command is not valid UTF-8."""


class FilesystemError(DotnetParserError):
    """The temporary output directory could not be created."""


class ReportReadError(FilesystemError):
    """The report file could not be read."""


class PathConversionError(DotnetParserError):
    """The report path cannot be represented as text."""


class ReportParseError(DotnetParserError):
    """The report does not match the expected structure.

    ``path`` names the field at which deserialization failed, e.g.
    ``Projects[0].TargetFrameworks[0].Dependencies[0].UpgradeSeverity``.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
