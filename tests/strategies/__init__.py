"""Hypothesis strategies for localfmt property-based testing.

Usage:
    from tests.strategies import valid_templates, segment_sequences
    from tests.strategies.trees import source_trees
"""

from .templates import (
    identifiers,
    literal_texts,
    placeholder_indices,
    segment_sequences,
    valid_templates,
)
from .trees import source_trees

__all__ = [
    "identifiers",
    "literal_texts",
    "placeholder_indices",
    "segment_sequences",
    "source_trees",
    "valid_templates",
]
