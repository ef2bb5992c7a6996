"""Running external commands."""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .errors import CommandError


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a finished command."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Anything that can run the external tool with the given arguments."""

    def run(self, args: Sequence[str]) -> CommandOutput: ...


class SubprocessRunner:
    """Runs an executable with ``subprocess`` and waits for it to exit."""

    def __init__(self, executable: str = "dotnet"):
        self.executable = executable

    def run(self, args: Sequence[str]) -> CommandOutput:
        """Run the executable with ``args``, capturing stdout and stderr.

        Args:
            args: Arguments passed after the executable

        Returns:
            Exit status and raw captured output
        """
        try:
            completed = subprocess.run(
                [self.executable, *args], capture_output=True, check=False
            )
        except (OSError, ValueError) as e:
            raise CommandError(f"Could not run {self.executable}: {e}") from e

        return CommandOutput(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
