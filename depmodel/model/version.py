"""Version classification and comparison.

Version strings are either semantic (``MAJOR.MINOR.PATCH`` with optional
build and pre-release suffixes) or opaque. Opaque is a valid terminal state:
the original text is kept unchanged and only compares equal to itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

_IDENT = r"[0-9A-Za-z]+(?:\.[0-9A-Za-z]+)*"

# Build before pre-release is the documented form; SemVer order is accepted too.
_SEMVER_PATTERNS = (
    re.compile(
        rf"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
        rf"(?:\+(?P<build>{_IDENT}))?(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
    ),
    re.compile(
        rf"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
        rf"(?:-(?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?(?:\+(?P<build>{_IDENT}))?$"
    ),
)


class VersionOrdering(str, Enum):
    """Outcome of comparing two versions."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    UNORDERED = "unordered"


@dataclass(frozen=True, eq=False)
class SemanticVersion:
    """Version matching the semantic grammar.

    Equality and hashing follow precedence, so build metadata and the raw
    text do not distinguish two versions.
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None
    raw: str = ""

    @property
    def is_semantic(self) -> bool:
        return True

    def _precedence(self) -> Tuple[int, int, int, int]:
        # Releases sort above pre-releases of the same triple.
        return (self.major, self.minor, self.patch, 0 if self.prerelease else 1)

    def compare(self, other: "SemanticVersion") -> VersionOrdering:
        left, right = self._precedence(), other._precedence()
        if left != right:
            return VersionOrdering.LESS if left < right else VersionOrdering.GREATER
        if self.prerelease and other.prerelease:
            return _compare_prerelease(self.prerelease, other.prerelease)
        return VersionOrdering.EQUAL

    def _identity(self) -> Tuple[int, int, int, Optional[str]]:
        return (self.major, self.minor, self.patch, self.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is VersionOrdering.LESS

    def __le__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is not VersionOrdering.GREATER

    def __gt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is VersionOrdering.GREATER

    def __ge__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) is not VersionOrdering.LESS

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True)
class OpaqueVersion:
    """Version string outside the semantic grammar, kept verbatim."""

    raw: str

    @property
    def is_semantic(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.raw


VersionSpec = Union[SemanticVersion, OpaqueVersion]


def parse_version(text: str) -> VersionSpec:
    """Classify a version string as semantic or opaque.

    Args:
        text: Version string as written in the configuration.

    Returns:
        SemanticVersion on a strict grammar match, otherwise an
        OpaqueVersion wrapping ``text`` unchanged.
    """
    for pattern in _SEMVER_PATTERNS:
        match = pattern.match(text)
        if match:
            return SemanticVersion(
                major=int(match.group("major")),
                minor=int(match.group("minor")),
                patch=int(match.group("patch")),
                prerelease=match.group("pre"),
                build=match.group("build"),
                raw=text,
            )
    return OpaqueVersion(raw=text)


def compare_versions(left: VersionSpec, right: VersionSpec) -> VersionOrdering:
    """Compare two versions.

    Semantic versions are totally ordered with build metadata ignored.
    Opaque versions are equal only when byte-identical; any other pairing
    involving an opaque version is UNORDERED.
    """
    if isinstance(left, SemanticVersion) and isinstance(right, SemanticVersion):
        return left.compare(right)
    if isinstance(left, OpaqueVersion) and isinstance(right, OpaqueVersion):
        if left.raw == right.raw:
            return VersionOrdering.EQUAL
    return VersionOrdering.UNORDERED


def _compare_prerelease(left: str, right: str) -> VersionOrdering:
    left_parts = left.split(".")
    right_parts = right.split(".")
    for a, b in zip(left_parts, right_parts):
        if a == b:
            continue
        a_num, b_num = a.isdigit(), b.isdigit()
        if a_num and b_num and int(a) != int(b):
            less = int(a) < int(b)
        elif a_num != b_num:
            # Numeric identifiers have lower precedence.
            less = a_num
        else:
            less = a < b
        return VersionOrdering.LESS if less else VersionOrdering.GREATER
    if len(left_parts) == len(right_parts):
        return VersionOrdering.EQUAL
    return (
        VersionOrdering.LESS
        if len(left_parts) < len(right_parts)
        else VersionOrdering.GREATER
    )


__all__ = [
    "SemanticVersion",
    "OpaqueVersion",
    "VersionSpec",
    "VersionOrdering",
    "parse_version",
    "compare_versions",
]
