"""Run dotnet-outdated and parse the report it writes."""

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from .errors import (
    FilesystemError,
    OutputDecodeError,
    PathConversionError,
    ReportParseError,
    ReportReadError,
)
from .models import DotnetOutdatedData, IndicatedUpdateRequirement
from .options import DotnetOutdatedOptions
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

REPORT_FILENAME = "outdated.json"


def build_arguments(options: DotnetOutdatedOptions, output_file: str) -> list[str]:
    """Build the dotnet command line arguments for a dotnet-outdated run.

    Args:
        options: Update policy to pass on
        output_file: Path the JSON report should be written to

    Returns:
        Arguments following the ``dotnet`` executable
    """
    args = [
        "outdated",
        "--fail-on-updates",
        "--output",
        output_file,
        "--output-format",
        "json",
    ]

    if options.include_auto_references:
        args.append("--include-auto-references")

    args.extend(["--pre-release", str(options.pre_release)])

    for name in options.include:
        args.extend(["--include", name])

    for name in options.exclude:
        args.extend(["--exclude", name])

    if options.transitive:
        args.extend(
            ["--transitive", "--transitive-depth", str(options.transitive_depth)]
        )

    args.extend(["--version-lock", str(options.version_lock)])

    if options.input_dir is not None:
        args.append(os.fspath(options.input_dir))

    return args


def parse_report(content: str) -> DotnetOutdatedData:
    """Parse the JSON report of dotnet-outdated.

    Args:
        content: Full text of the report file

    Returns:
        Parsed report

    Raises:
        ReportParseError: naming the field path where parsing failed
    """
    try:
        return DotnetOutdatedData.model_validate_json(content, by_name=False)
    except ValidationError as e:
        error = e.errors()[0]
        raise ReportParseError(_format_location(error["loc"]), error["msg"]) from e


def outdated(
    options: DotnetOutdatedOptions, runner: CommandRunner | None = None
) -> tuple[IndicatedUpdateRequirement, DotnetOutdatedData]:
    """Run dotnet-outdated and return its verdict together with the report.

    The verdict only depends on the exit status of dotnet-outdated, which is
    called with ``--fail-on-updates``.

    Args:
        options: Update policy to pass on
        runner: Runs the external command, defaults to running ``dotnet``

    Returns:
        Tuple of the indicated update requirement and the parsed report
    """
    if runner is None:
        runner = SubprocessRunner()

    try:
        output_dir = tempfile.TemporaryDirectory(
            prefix="dotnet-outdated-", ignore_cleanup_errors=True
        )
    except OSError as e:
        raise FilesystemError(f"Could not create output directory: {e}") from e

    with output_dir as output_dir_name:
        output_file = _path_to_text(Path(output_dir_name) / REPORT_FILENAME)

        output = runner.run(build_arguments(options, output_file))

        if not output.success:
            logger.warning(
                "dotnet outdated did not return with a successful exit code: %s",
                output.returncode,
            )
            logger.debug("stdout:\n%s", _decode(output.stdout, "stdout"))
            if output.stderr:
                logger.warning("stderr:\n%s", _decode(output.stderr, "stderr"))

        if output.success:
            update_requirement = IndicatedUpdateRequirement.UP_TO_DATE
        else:
            update_requirement = IndicatedUpdateRequirement.UPDATE_REQUIRED

        try:
            content = Path(output_file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReportReadError(f"Could not read {output_file}: {e}") from e

        logger.debug("Read output file content:\n%s", content)

        return update_requirement, parse_report(content)


def _path_to_text(path: Path) -> str:
    """Convert a path to text that can be passed on the command line."""
    text = str(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathConversionError(f"Path {text!r} is not valid UTF-8") from e
    return text


def _decode(stream: bytes, stream_name: str) -> str:
    try:
        return stream.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodeError(
            f"{stream_name} of dotnet outdated is not valid UTF-8"
        ) from e


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Render a validation error location like ``Projects[0].Name``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "."
