"""Error hierarchy for configuration model construction.

Every error here is fatal to the parse that raised it. Errors carry enough
context (the offending block name and coordinate text) to render a precise
diagnostic for the caller.
"""

from __future__ import annotations

from typing import Optional


class ConfigurationModelError(ValueError):
    """Base class for structural errors raised while building a model.

    Attributes:
        block: Name of the block being processed when the error occurred.
        coordinate: Offending coordinate text, when one is involved.
    """

    def __init__(
        self,
        message: str,
        *,
        block: Optional[str] = None,
        coordinate: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.block = block
        self.coordinate = coordinate

    def __str__(self) -> str:
        context = []
        if self.block is not None:
            context.append(f"block={self.block!r}")
        if self.coordinate is not None:
            context.append(f"coordinate={self.coordinate!r}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class MalformedCoordinate(ConfigurationModelError):
    """Coordinate string does not have between 2 and 4 colon-delimited segments."""
    pass


class EmptySegment(ConfigurationModelError):
    """A required coordinate segment is blank."""
    pass


class MissingVersion(ConfigurationModelError):
    """A coordinate has no version while the caller requires one."""
    pass


class UnknownDeclarationShape(ConfigurationModelError):
    """A declaration entry matches none of the supported shapes.

    Raised e.g. when a dependency entry supplies neither a coordinate string
    nor the discrete group/name field set.
    """
    pass


class ScriptSyntaxError(ConfigurationModelError):
    """Raw build script or tree document bytes could not be read."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        block: Optional[str] = None,
    ) -> None:
        super().__init__(message, block=block)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        text = super().__str__()
        if self.line is not None:
            return f"{text} at line {self.line}, column {self.column}"
        return text


__all__ = [
    "ConfigurationModelError",
    "MalformedCoordinate",
    "EmptySegment",
    "MissingVersion",
    "UnknownDeclarationShape",
    "ScriptSyntaxError",
]
