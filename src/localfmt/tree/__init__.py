"""Locale trees: schema, nodes, builder and consistency checker.

Python 3.13+.
"""

from .builder import build_tree, compile_message
from .checker import ConsistencyChecker
from .hierarchy import Hierarchy
from .nodes import MessageGroup, TreeNode
from .schema import GroupSpec, LeafSpec, MessageSchema, SchemaNode

__all__ = [
    "ConsistencyChecker",
    "GroupSpec",
    "Hierarchy",
    "LeafSpec",
    "MessageGroup",
    "MessageSchema",
    "SchemaNode",
    "TreeNode",
    "build_tree",
    "compile_message",
]
