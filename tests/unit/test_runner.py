"""Tests for the subprocess command runner."""

import sys

import pytest

from dotnet_parser.errors import CommandError
from dotnet_parser.runner import CommandOutput, SubprocessRunner


class TestSubprocessRunner:
    """Test running real processes."""

    def test_captures_output_and_status(self):
        runner = SubprocessRunner(executable=sys.executable)

        output = runner.run(
            ["-c", "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)"]
        )

        assert output.returncode == 3
        assert output.stdout == b"out"
        assert output.stderr == b"err"
        assert not output.success

    def test_success(self):
        output = SubprocessRunner(executable=sys.executable).run(["-c", "pass"])
        assert output.success

    def test_missing_executable(self, tmp_path):
        runner = SubprocessRunner(executable=str(tmp_path / "no-such-dotnet"))

        with pytest.raises(CommandError, match="no-such-dotnet"):
            runner.run(["outdated"])

    def test_unrunnable_arguments(self):
        """Arguments the OS rejects are reported as command errors."""
        runner = SubprocessRunner(executable=sys.executable)

        with pytest.raises(CommandError):
            runner.run(["-c", "pass", "a\x00b"])

    def test_default_executable(self):
        assert SubprocessRunner().executable == "dotnet"


def test_command_output_success():
    assert CommandOutput(returncode=0).success
    assert not CommandOutput(returncode=1).success
