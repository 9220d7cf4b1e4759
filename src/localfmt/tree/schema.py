"""Explicit description of the message-key hierarchy.

A MessageSchema lists, once for all languages, which keys exist, which of
them are groups and which are messages, and optionally the arity of each
message. Every language tree is checked against it.

    schema = MessageSchema.from_mapping({
        "hello": 1,                 # message taking one argument
        "bye": None,                # message, arity agreed across languages
        "words": {"ownership": 0},  # group
    })

Field order is preserved and is the order in which the consistency
checker reports problems.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from localfmt.constants import MAX_DEPTH
from localfmt.core.depth_guard import DepthGuard
from localfmt.message.base import Message
from localfmt.syntax.parser import parse_template
from localfmt.validation.arguments import infer_arity

from .hierarchy import Hierarchy

__all__ = ["GroupSpec", "LeafSpec", "MessageSchema", "SchemaNode"]


@dataclass(frozen=True, slots=True)
class LeafSpec:
    """A message field.

    Attributes:
        arity: Declared argument count, or None when every language only
            has to agree with the others
    """

    arity: int | None = None

    def __post_init__(self) -> None:
        """Reject negative arities.

        Raises:
            ValueError: If arity is negative
        """
        if self.arity is not None and self.arity < 0:
            msg = f"LeafSpec.arity must be >= 0, got {self.arity}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class GroupSpec:
    """A group of fields.

    Attributes:
        fields: Ordered, read-only mapping from field name to child spec
    """

    fields: Mapping[str, "SchemaNode"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mapping so a schema cannot change after construction
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupSpec):
            return NotImplemented
        return list(self.fields.items()) == list(other.fields.items())

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))


type SchemaNode = LeafSpec | GroupSpec


class MessageSchema:
    """Root of the message-key hierarchy.

    Example:
        >>> schema = MessageSchema.from_mapping({"hello": 1, "words": {"rust": 0}})
        >>> [(str(path), spec.arity) for path, spec in schema.leaves()]
        [('hello', 1), ('words.rust', 0)]
    """

    __slots__ = ("_root",)

    def __init__(self, root: GroupSpec) -> None:
        self._root = root

    @property
    def root(self) -> GroupSpec:
        """Top-level group."""
        return self._root

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, object], *, max_depth: int = MAX_DEPTH
    ) -> "MessageSchema":
        """Build a schema from a nested mapping.

        Leaves are an int arity, None (arity agreed across languages) or a
        ready-made LeafSpec. Nested mappings and GroupSpec values are groups.

        Raises:
            ValueError: Non-string key, negative arity, or a value that is
                neither a leaf nor a group
            DepthLimitExceededError: Nesting deeper than max_depth
        """
        return cls(_group_from_mapping(mapping, Hierarchy(), DepthGuard(max_depth=max_depth)))

    @classmethod
    def infer(
        cls, tree: Mapping[str, object], *, max_depth: int = MAX_DEPTH
    ) -> "MessageSchema":
        """Derive a schema from one language's messages.

        Leaves may be template text or built Message objects; each becomes
        a LeafSpec with the arity the template uses.

        Raises:
            TemplateSyntaxError: A template cannot be parsed
            ValueError: A value is neither text, Message nor mapping
            DepthLimitExceededError: Nesting deeper than max_depth
        """
        return cls(_group_from_tree(tree, Hierarchy(), DepthGuard(max_depth=max_depth)))

    def leaves(self) -> Iterator[tuple[Hierarchy, LeafSpec]]:
        """Every message field with its key path, depth first in field order."""
        yield from _walk_leaves(self._root, Hierarchy())

    def get(self, dotted: str) -> SchemaNode | None:
        """Spec at a dotted key path, or None."""
        node: SchemaNode = self._root
        for key in Hierarchy.parse(dotted).parts:
            if not isinstance(node, GroupSpec) or key not in node.fields:
                return None
            node = node.fields[key]
        return node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageSchema):
            return NotImplemented
        return self._root == other._root

    def __hash__(self) -> int:
        return hash(self._root)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"MessageSchema(leaves={sum(1 for _ in self.leaves())})"


def _group_from_mapping(
    mapping: Mapping[str, object], path: Hierarchy, guard: DepthGuard
) -> GroupSpec:
    guard.check(str(path) or None)
    with guard:
        fields: dict[str, SchemaNode] = {}
        for key, value in mapping.items():
            if not isinstance(key, str):
                msg = f"Schema keys must be str, got {type(key).__name__} at '{path}'"
                raise ValueError(msg)
            match value:
                case LeafSpec() | GroupSpec():
                    fields[key] = value
                case None:
                    fields[key] = LeafSpec()
                case bool():
                    msg = f"Invalid schema value for '{path.join(key)}': bool"
                    raise ValueError(msg)
                case int():
                    fields[key] = LeafSpec(value)
                case Mapping():
                    fields[key] = _group_from_mapping(value, path.child(key), guard)
                case _:
                    msg = f"Invalid schema value for '{path.join(key)}': {type(value).__name__}"
                    raise ValueError(msg)
        return GroupSpec(fields)


def _group_from_tree(tree: Mapping[str, object], path: Hierarchy, guard: DepthGuard) -> GroupSpec:
    guard.check(str(path) or None)
    with guard:
        fields: dict[str, SchemaNode] = {}
        for key, value in tree.items():
            match value:
                case Message():
                    fields[key] = LeafSpec(value.arity)
                case str():
                    fields[key] = LeafSpec(infer_arity(parse_template(value)))
                case Mapping():
                    fields[key] = _group_from_tree(value, path.child(key), guard)
                case _:
                    msg = f"Cannot infer schema for '{path.join(key)}': {type(value).__name__}"
                    raise ValueError(msg)
        return GroupSpec(fields)


def _walk_leaves(group: GroupSpec, path: Hierarchy) -> Iterator[tuple[Hierarchy, LeafSpec]]:
    for key, node in group.fields.items():
        if isinstance(node, LeafSpec):
            yield path.child(key), node
        else:
            yield from _walk_leaves(node, path.child(key))
