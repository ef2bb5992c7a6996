"""CLI application for dotnet-parser."""

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dotnet_parser.errors import DotnetParserError
from dotnet_parser.models import DotnetOutdatedData, IndicatedUpdateRequirement
from dotnet_parser.options import DotnetOutdatedOptions, PreRelease, VersionLock
from dotnet_parser.outdated import outdated

console = Console()
err_console = Console(stderr=True)

# exit codes
EXIT_UP_TO_DATE = 0
EXIT_ERROR = 1
EXIT_UPDATE_REQUIRED = 2


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def format_table_output(data: DotnetOutdatedData) -> Table:
    """One row per outdated dependency."""
    table = Table(title="Outdated dependencies")
    table.add_column("Project")
    table.add_column("Framework")
    table.add_column("Package")
    table.add_column("Resolved")
    table.add_column("Latest")
    table.add_column("Severity")

    for project, framework, dependency in data.dependencies():
        table.add_row(
            project.name,
            framework.name,
            dependency.name,
            dependency.resolved_version,
            dependency.latest_version,
            str(dependency.upgrade_severity),
        )

    return table


def format_json_output(
    requirement: IndicatedUpdateRequirement, data: DotnetOutdatedData
) -> str:
    """Format JSON output."""
    return json.dumps(
        {
            "verdict": str(requirement),
            "report": data.model_dump(mode="json", by_alias=True),
        },
        indent=2,
    )


app = typer.Typer(
    name="dotnet-parser",
    help="dotnet-parser - Run dotnet outdated and report outdated dependencies",
    add_completion=False,
)


@app.command()
def check(
    include_auto_references: bool = typer.Option(
        False, "--include-auto-references", "-i", help="Include auto-referenced packages"
    ),
    pre_release: PreRelease = typer.Option(
        PreRelease.AUTO,
        "--pre-release",
        metavar="VALUE",
        case_sensitive=False,
        help="Should dotnet-outdated look for pre-release versions of packages",
    ),
    include: list[str] | None = typer.Option(
        None,
        "--include",
        metavar="PACKAGE_NAME",
        help="Dependencies that should be included in the consideration",
    ),
    exclude: list[str] | None = typer.Option(
        None,
        "--exclude",
        metavar="PACKAGE_NAME",
        help="Dependencies that should be excluded from consideration",
    ),
    transitive: bool = typer.Option(
        False, "--transitive", "-t", help="Should dotnet-outdated consider transitive dependencies"
    ),
    transitive_depth: int | None = typer.Option(
        None,
        "--transitive-depth",
        metavar="DEPTH",
        min=0,
        help="If transitive dependencies are considered, to which depth in the dependency tree [default: 1]",
    ),
    version_lock: VersionLock = typer.Option(
        VersionLock.NONE,
        "--version-lock",
        metavar="LOCK",
        case_sensitive=False,
        help="Should we consider all updates or just minor versions and/or patch levels",
    ),
    input_dir: Path | None = typer.Option(
        None,
        "--input-dir",
        metavar="DIRECTORY",
        file_okay=False,
        help="The input directory to pass to dotnet outdated",
    ),
    format_type: str = typer.Option("table", "--format", help="Output format: table or json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Check a .NET solution for outdated dependencies with dotnet outdated.

    Exits with 0 if everything is up to date and 2 if updates are required.
    """
    configure_logging(verbose)

    if transitive_depth is not None and not transitive:
        console.print("Error: --transitive-depth requires --transitive", style="red")
        raise typer.Exit(EXIT_ERROR)

    if format_type not in ("table", "json"):
        console.print(f"Error: Unsupported format: {format_type}", style="red")
        raise typer.Exit(EXIT_ERROR)

    options = DotnetOutdatedOptions(
        include_auto_references=include_auto_references,
        pre_release=pre_release,
        include=list(include or []),
        exclude=list(exclude or []),
        transitive=transitive,
        transitive_depth=1 if transitive_depth is None else transitive_depth,
        version_lock=version_lock,
        input_dir=input_dir,
    )

    try:
        requirement, data = outdated(options)
    except DotnetParserError as e:
        console.print(f"Error: {e}", style="red")
        raise typer.Exit(EXIT_ERROR)

    if format_type == "json":
        typer.echo(format_json_output(requirement, data))
    else:
        if data.projects:
            console.print(format_table_output(data))
        console.print(f"Result: {requirement}")

    if requirement is IndicatedUpdateRequirement.UPDATE_REQUIRED:
        raise typer.Exit(EXIT_UPDATE_REQUIRED)


if __name__ == "__main__":
    app()
