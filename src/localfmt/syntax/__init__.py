"""Template syntax: segments, parser and serializer.

Public API:
    parse_template      - Template text to segments
    serialize_segments  - Segments back to template text
    Literal, Placeholder, NamedReference, NumericConstant - Segment types

Python 3.13+. Zero external dependencies.
"""

from .cursor import Cursor
from .parser import parse_placeholder_content, parse_template
from .segments import (
    Literal,
    NamedReference,
    NumericConstant,
    Placeholder,
    ReferenceKind,
    Segment,
    merge_literals,
)
from .serializer import escape_literal, serialize_segments

__all__ = [
    "Cursor",
    "Literal",
    "NamedReference",
    "NumericConstant",
    "Placeholder",
    "ReferenceKind",
    "Segment",
    "escape_literal",
    "merge_literals",
    "parse_placeholder_content",
    "parse_template",
    "serialize_segments",
]
