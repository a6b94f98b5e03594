"""Readers turning raw configuration bytes into declarative trees.

Readers never touch the filesystem; callers hand them the bytes.
"""

from depmodel.parsers.document import read_tree_document
from depmodel.parsers.kotlin_dsl import read_kotlin_dsl

__all__ = ["read_kotlin_dsl", "read_tree_document"]
