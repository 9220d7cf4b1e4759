"""Validated messages: the static and allocated encodings.

Python 3.13+.
"""

from .alloc import AllocMessage
from .base import Argument, Message
from .constants import ConstantValue, resolve_named_references, resolve_reference
from .static import StaticMessage

__all__ = [
    "AllocMessage",
    "Argument",
    "ConstantValue",
    "Message",
    "StaticMessage",
    "resolve_named_references",
    "resolve_reference",
]
