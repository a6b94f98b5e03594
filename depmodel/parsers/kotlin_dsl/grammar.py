"""Lark grammar for the declarative subset of the Gradle Kotlin DSL.

Covers what build scripts use to declare configuration: imports, property
declarations, assignments, calls with positional/named arguments, type
arguments and trailing lambdas, member and index access, and the
``version``/``apply`` infix forms of the plugins block.
"""

from __future__ import annotations

from functools import lru_cache

from lark import Lark

KOTLIN_DSL_GRAMMAR = r"""
start: _sep* (_stmt (_sep+ _stmt)*)? _sep*

_sep: _NL | ";"

_stmt: import_stmt
     | property_decl
     | assignment
     | expr_stmt

import_stmt: _IMPORT dotted_name ("." "*")?
property_decl: DECL_KW NAME (":" type_ref)? ("=" expr | _BY expr)
assignment: dotted_name ASSIGN_OP expr
expr_stmt: expr

dotted_name: NAME ("." NAME)*

?expr: postfix
     | postfix (INFIX_NAME postfix)+                 -> infix_call

?postfix: callable
        | callable type_args? call_args lambda?     -> call
        | callable type_args? lambda                -> call

?callable: primary
         | postfix "." NAME                          -> member
         | postfix "[" expr "]"                      -> index

?primary: STRING                                     -> string
        | NUMBER                                     -> number
        | NAME                                       -> name
        | BACKTICK_NAME                              -> name
        | "(" expr ")"

type_args: "<" type_ref ("," type_ref)* ">"
type_ref: NAME ("." NAME)* type_args? "?"?

call_args: "(" _NL* (_arg_list _NL*)? ")"
_arg_list: arg (_NL* "," _NL* arg)* (_NL* ",")?
arg: NAME _NL* "=" _NL* expr                         -> named_arg
   | expr                                            -> positional_arg

lambda: "{" _sep* (_stmt (_sep+ _stmt)*)? _sep* "}"

_IMPORT: /import\b/
_BY: /by\b/
DECL_KW: /(val|var)\b/
INFIX_NAME: /(version|apply)\b/
ASSIGN_OP: "=" | "+=" | "-="

NAME: /[A-Za-z_][A-Za-z0-9_]*/
BACKTICK_NAME: /`[^`\n]+`/
STRING: /"(?:[^"\\\n]|\\.)*"/
NUMBER: /\d+(\.\d+)?[LlFf]?/

_NL: /\n/
LINE_COMMENT: /\/\/[^\n]*/
BLOCK_COMMENT: /\/\*[\s\S]*?\*\//

%ignore /[ \t\f\r]+/
%ignore LINE_COMMENT
%ignore BLOCK_COMMENT
"""


@lru_cache(maxsize=None)
def get_parser() -> Lark:
    """Return the shared script parser, compiling the grammar on first use."""
    return Lark(
        KOTLIN_DSL_GRAMMAR,
        parser="earley",
        propagate_positions=True,
    )


__all__ = ["KOTLIN_DSL_GRAMMAR", "get_parser"]
