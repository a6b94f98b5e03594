"""Build a declarative tree from Gradle Kotlin DSL script bytes.

Each statement becomes one entry of the enclosing MapNode, in source order:

* ``name = expr`` and ``val name = expr`` -> ``(name, value)``
* ``import a.b.C`` -> ``("import", Scalar("a.b.C"))``
* ``name { ... }`` -> ``(name, MapNode(<body entries>))``
* ``name(arg)`` -> ``(name, <arg value>)``
* ``name`` / ``name()`` / ```plugin-id``` -> ``(name, Scalar(None))``
* any other call -> ``(name, MapNode)`` holding ``type`` for type
  arguments, ``value`` or ``args`` for positional arguments, the named
  arguments, the infix pairs (``version``, ``apply``) and ``body`` for a
  trailing lambda.

String, number and boolean literals become Scalars; any other expression
becomes an OpaqueNode carrying its source text.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from lark import Token, Tree
from lark.exceptions import LarkError, UnexpectedInput

from depmodel.errors import ScriptSyntaxError
from depmodel.model.tree import ListNode, MapNode, Node, OpaqueNode, Scalar
from depmodel.parsers.kotlin_dsl.grammar import get_parser

logger = logging.getLogger("depmodel.parsers.kotlin_dsl.reader")

_LITERALS = {"true": True, "false": False, "null": None}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", '"': '"', "\\": "\\", "$": "$", "'": "'"}


def read_kotlin_dsl(data: bytes) -> MapNode:
    """Parse script bytes into a declarative tree.

    Args:
        data: Raw UTF-8 bytes of a ``*.gradle.kts`` script.

    Returns:
        MapNode with one entry per top-level statement.

    Raises:
        ScriptSyntaxError: When the bytes are not UTF-8 or the script uses
            syntax outside the supported declarative subset.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ScriptSyntaxError(f"script is not valid UTF-8: {exc.reason}") from exc

    try:
        parse_tree = get_parser().parse(text)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", -1)
        column = getattr(exc, "column", -1)
        # end-of-input errors carry no position
        raise ScriptSyntaxError(
            "unsupported or invalid script syntax",
            line=line if line > 0 else None,
            column=column if column > 0 else None,
        ) from exc
    except LarkError as exc:
        raise ScriptSyntaxError(f"script could not be parsed: {exc}") from exc

    root = _ScriptTreeBuilder(text).statements(parse_tree.children)
    logger.debug("Read %d top-level statement(s)", len(root))
    return root


class _ScriptTreeBuilder:
    """Walk a lark parse tree and emit declarative tree nodes."""

    def __init__(self, text: str) -> None:
        self.text = text

    def statements(self, children) -> MapNode:
        entries = [self.statement(child) for child in children if isinstance(child, Tree)]
        return MapNode(tuple(entries))

    def statement(self, stmt: Tree) -> Tuple[str, Node]:
        kind = stmt.data
        if kind == "import_stmt":
            return "import", Scalar(self._source(stmt.children[0]))
        if kind == "property_decl":
            name = str(stmt.children[1])
            return name, self.value(stmt.children[-1])
        if kind == "assignment":
            target, _op, expr = stmt.children
            return self._source(target), self.value(expr)
        return self.expression_entry(stmt.children[0])

    def expression_entry(self, expr) -> Tuple[str, Node]:
        if isinstance(expr, Tree) and expr.data == "infix_call":
            base, pairs = expr.children[0], expr.children[1:]
            infix = [
                (str(pairs[i]), self.value(pairs[i + 1])) for i in range(0, len(pairs), 2)
            ]
            if isinstance(base, Tree) and base.data == "call":
                return self._call_entry(base, infix)
            return self._key(base), _call_value(None, [], [], infix, None)
        if isinstance(expr, Tree) and expr.data == "call":
            return self._call_entry(expr, [])
        if isinstance(expr, Tree) and expr.data in ("name", "member"):
            return self._key(expr), Scalar(None)
        return "expression", self.value(expr)

    def _call_entry(self, call: Tree, infix: List[Tuple[str, Node]]) -> Tuple[str, Node]:
        callee = call.children[0]
        type_text: Optional[str] = None
        positional: List[Node] = []
        named: List[Tuple[str, Node]] = []
        body: Optional[MapNode] = None

        for part in call.children[1:]:
            if part.data == "type_args":
                type_text = ", ".join(self._source(ref) for ref in part.children)
            elif part.data == "call_args":
                for arg in part.children:
                    if arg.data == "named_arg":
                        named.append((str(arg.children[0]), self.value(arg.children[-1])))
                    else:
                        positional.append(self.value(arg.children[0]))
            elif part.data == "lambda":
                body = self.statements(part.children)

        return self._key(callee), _call_value(type_text, positional, named, infix, body)

    def value(self, expr) -> Node:
        if isinstance(expr, Tree):
            if expr.data == "string":
                return Scalar(_unescape(str(expr.children[0])[1:-1]))
            if expr.data == "number":
                return Scalar(_number(str(expr.children[0])))
            if expr.data == "name":
                token = str(expr.children[0])
                if token in _LITERALS:
                    return Scalar(_LITERALS[token])
            return OpaqueNode(source=self._source(expr))
        return OpaqueNode(source=str(expr))

    def _key(self, callee) -> str:
        if isinstance(callee, Tree) and callee.data == "name":
            return str(callee.children[0]).strip("`")
        if isinstance(callee, Tree) and callee.data == "string":
            # "configurationName"(...) invokes a configuration by name
            return _unescape(str(callee.children[0])[1:-1])
        return self._source(callee)

    def _source(self, node) -> str:
        if isinstance(node, Token):
            return str(node)
        meta = node.meta
        return self.text[meta.start_pos:meta.end_pos]


def _call_value(
    type_text: Optional[str],
    positional: List[Node],
    named: List[Tuple[str, Node]],
    infix: List[Tuple[str, Node]],
    body: Optional[MapNode],
) -> Node:
    if type_text is None and not named and not infix:
        if not positional:
            return body if body is not None else Scalar(None)
        if len(positional) == 1 and body is None:
            return positional[0]

    entries: List[Tuple[str, Node]] = []
    if type_text is not None:
        entries.append(("type", Scalar(type_text)))
    if len(positional) == 1:
        entries.append(("value", positional[0]))
    elif positional:
        entries.append(("args", ListNode(tuple(positional))))
    entries.extend(named)
    entries.extend(infix)
    if body is not None:
        entries.append(("body", body))
    return MapNode(tuple(entries))


def _number(text: str):
    digits = text.rstrip("LlFf")
    if "." in digits or text[-1:] in ("F", "f"):
        return float(digits)
    return int(digits)


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text
    out: List[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            out.append(_ESCAPES.get(nxt, "\\" + nxt))
            i += 2
            continue
        out.append(char)
        i += 1
    return "".join(out)


__all__ = ["read_kotlin_dsl"]
