"""Options controlling how dotnet-outdated looks for upgrades."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class VersionLock(Enum):
    """Should upgrades be locked to a specific major/minor level only."""

    NONE = "none"  # consider all upgrades
    MAJOR = "major"  # minor versions and patch levels only
    MINOR = "minor"  # patch levels only

    def __str__(self) -> str:
        return _VERSION_LOCK_NAMES[self]


class PreRelease(Enum):
    """Should dotnet-outdated look for pre-release versions of packages."""

    NEVER = "never"
    AUTO = "auto"  # let dotnet-outdated decide
    ALWAYS = "always"

    def __str__(self) -> str:
        return _PRE_RELEASE_NAMES[self]


# dotnet-outdated expects exactly this casing
_VERSION_LOCK_NAMES = {
    VersionLock.NONE: "None",
    VersionLock.MAJOR: "Major",
    VersionLock.MINOR: "Minor",
}

_PRE_RELEASE_NAMES = {
    PreRelease.NEVER: "Never",
    PreRelease.AUTO: "Auto",
    PreRelease.ALWAYS: "Always",
}


@dataclass
class DotnetOutdatedOptions:
    """Options to modify the behaviour of a dotnet-outdated run."""

    include_auto_references: bool = False
    pre_release: PreRelease = PreRelease.AUTO
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    transitive: bool = False
    transitive_depth: int = 1  # only used when transitive is set
    version_lock: VersionLock = VersionLock.NONE
    input_dir: Path | None = None  # defaults to the current directory
