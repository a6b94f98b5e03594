"""Dependency coordinate parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from depmodel.errors import EmptySegment, MalformedCoordinate, MissingVersion
from depmodel.model.version import VersionSpec, parse_version

_SEGMENT_NAMES = ("group", "artifact", "version", "classifier")


@dataclass(frozen=True)
class Coordinate:
    """Normalized (group, artifact, version, classifier) record."""

    group: str
    artifact: str
    version: Optional[VersionSpec] = None
    classifier: Optional[str] = None

    @property
    def module(self) -> str:
        """``group:artifact`` without version information."""
        return f"{self.group}:{self.artifact}"

    @property
    def notation(self) -> str:
        """Colon-delimited form accepted by ``parse_coordinate``."""
        parts = [self.group, self.artifact]
        if self.version is not None:
            parts.append(self.version.raw)
        if self.version is not None and self.classifier is not None:
            parts.append(self.classifier)
        return ":".join(parts)

    def __str__(self) -> str:
        return self.notation


def parse_coordinate(
    text: str,
    *,
    require_version: bool = False,
    block: Optional[str] = None,
) -> Coordinate:
    """Parse ``group:artifact[:version[:classifier]]``.

    Args:
        text: Coordinate string.
        require_version: Fail with MissingVersion when no version segment.
        block: Name of the enclosing block, used for error context.

    Raises:
        MalformedCoordinate: Fewer than two or more than four segments.
        EmptySegment: A present segment is blank.
        MissingVersion: No version while ``require_version`` is set.
    """
    segments = text.split(":")
    if len(segments) < 2:
        raise MalformedCoordinate(
            f"expected at least group and artifact, got {len(segments)} segment(s)",
            block=block,
            coordinate=text,
        )
    if len(segments) > len(_SEGMENT_NAMES):
        raise MalformedCoordinate(
            f"expected at most {len(_SEGMENT_NAMES)} segments, got {len(segments)}",
            block=block,
            coordinate=text,
        )

    for name, value in zip(_SEGMENT_NAMES, segments):
        if not value.strip():
            raise EmptySegment(f"{name} segment is blank", block=block, coordinate=text)

    padded = segments + [None] * (len(_SEGMENT_NAMES) - len(segments))
    group, artifact, version, classifier = padded
    return _build(
        group,
        artifact,
        version,
        classifier,
        require_version=require_version,
        block=block,
        source=text,
    )


def coordinate_from_fields(
    group: Optional[str],
    artifact: Optional[str],
    version: Optional[str] = None,
    classifier: Optional[str] = None,
    *,
    require_version: bool = False,
    block: Optional[str] = None,
) -> Coordinate:
    """Build a Coordinate from discrete named fields.

    Same validation as ``parse_coordinate``; a missing group or artifact is
    reported as EmptySegment.
    """
    source = ":".join(part for part in (group, artifact, version, classifier) if part is not None)
    for name, value in (("group", group), ("artifact", artifact)):
        if value is None or not value.strip():
            raise EmptySegment(f"{name} field is blank", block=block, coordinate=source)
    for name, value in (("version", version), ("classifier", classifier)):
        if value is not None and not value.strip():
            raise EmptySegment(f"{name} field is blank", block=block, coordinate=source)

    if classifier is not None and version is None:
        raise MissingVersion(
            "classifier given without a version", block=block, coordinate=source
        )

    return _build(
        group.strip(),
        artifact.strip(),
        version.strip() if version is not None else None,
        classifier.strip() if classifier is not None else None,
        require_version=require_version,
        block=block,
        source=source,
    )


def _build(
    group: str,
    artifact: str,
    version: Optional[str],
    classifier: Optional[str],
    *,
    require_version: bool,
    block: Optional[str],
    source: str,
) -> Coordinate:
    if version is None and require_version:
        raise MissingVersion("coordinate has no version", block=block, coordinate=source)
    return Coordinate(
        group=group,
        artifact=artifact,
        version=parse_version(version) if version is not None else None,
        classifier=classifier,
    )


__all__ = ["Coordinate", "parse_coordinate", "coordinate_from_fields"]
