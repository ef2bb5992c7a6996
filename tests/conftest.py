"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from dotnet_parser.runner import CommandOutput


class FakeRunner:
    """Stands in for dotnet: writes a canned report and returns a canned status."""

    def __init__(self, report=None, returncode=0, stdout=b"", stderr=b""):
        self.report = report
        self.output = CommandOutput(returncode=returncode, stdout=stdout, stderr=stderr)
        self.args = None

    @property
    def output_file(self) -> Path:
        return Path(self.args[self.args.index("--output") + 1])

    def run(self, args):
        self.args = list(args)
        if self.report is not None:
            self.output_file.write_text(self.report, encoding="utf-8")
        return self.output


@pytest.fixture
def sample_report_data():
    """Report with one project, one framework and one outdated dependency."""
    return {
        "Projects": [
            {
                "Name": "MyApp",
                "FilePath": "/src/MyApp/MyApp.csproj",
                "TargetFrameworks": [
                    {
                        "Name": "net6.0",
                        "Dependencies": [
                            {
                                "Name": "Foo",
                                "ResolvedVersion": "1.0.0",
                                "LatestVersion": "2.0.0",
                                "UpgradeSeverity": "Major",
                            }
                        ],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def sample_report(sample_report_data):
    """Sample report file content."""
    return json.dumps(sample_report_data, indent=2)


@pytest.fixture
def empty_report():
    """Report of a solution without outdated dependencies."""
    return '{"Projects": []}'


@pytest.fixture
def make_runner():
    """Factory for fake dotnet runners."""
    return FakeRunner
