"""Build a declarative tree from JSON/JSON5 document bytes."""

from __future__ import annotations

import logging

import json5

from depmodel.errors import ScriptSyntaxError
from depmodel.model.tree import Node, from_python

logger = logging.getLogger("depmodel.parsers.document")


def read_tree_document(data: bytes) -> Node:
    """Parse a JSON5 (or plain JSON) document into a declarative tree.

    Args:
        data: Raw UTF-8 document bytes.

    Raises:
        ScriptSyntaxError: When the bytes cannot be decoded or parsed.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ScriptSyntaxError(f"document is not valid UTF-8: {exc.reason}") from exc

    try:
        payload = json5.loads(text)
    except ValueError as exc:
        raise ScriptSyntaxError(f"document could not be parsed: {exc}") from exc

    logger.debug("Read tree document of type %s", type(payload).__name__)
    return from_python(payload)


__all__ = ["read_tree_document"]
