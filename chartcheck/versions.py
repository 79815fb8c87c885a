"""Semantic version parsing and precedence for chart versions."""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import NamedTuple

# Loose semver: optional "v" prefix, minor and patch may be omitted.
_SEMVER_PATTERN = re.compile(
    r"v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)


class _Identifier(NamedTuple):
    """Pre-release identifier; numeric identifiers sort before alphanumeric."""

    is_alpha: bool
    number: int
    text: str

    @classmethod
    def parse(cls, part: str) -> "_Identifier":
        if part.isdecimal():
            return cls(False, int(part), "")
        return cls(True, 0, part)


@total_ordering
@dataclass(frozen=True, eq=False)
class SemVer:
    """Semantic version representation.

    Equality and ordering follow semver precedence, so build metadata is
    ignored when comparing.
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            base = f"{base}-{self.prerelease}"
        if self.build:
            base = f"{base}+{self.build}"
        return base

    @property
    def precedence(self) -> tuple:
        # A release sorts after every pre-release of the same core version.
        if not self.prerelease:
            return (self.major, self.minor, self.patch, True, ())
        identifiers = tuple(_Identifier.parse(p) for p in self.prerelease.split("."))
        return (self.major, self.minor, self.patch, False, identifiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.precedence == other.precedence

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.precedence < other.precedence

    def __hash__(self) -> int:
        return hash(self.precedence)


def parse_semver(version: str) -> SemVer | None:
    """Parse a version string into SemVer components.

    Returns None for anything that is not a semantic version, such as
    "latest", "abc" or a constraint like "^1.2.0".
    """
    match = _SEMVER_PATTERN.fullmatch(version or "")
    if not match:
        return None

    return SemVer(
        major=int(match.group(1)),
        minor=int(match.group(2) or 0),
        patch=int(match.group(3) or 0),
        prerelease=match.group(4) or "",
        build=match.group(5) or "",
    )
