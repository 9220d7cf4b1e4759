"""Locale tree nodes.

A language's messages form a tree of MessageGroup nodes whose leaves are
Message objects. Groups are read-only mappings that also expose their
children as attributes, so both spellings work:

    tree["words"]["ownership"].format()
    tree.words.ownership.format()

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from localfmt.message.base import Message

from .hierarchy import Hierarchy

__all__ = ["MessageGroup", "TreeNode"]

type TreeNode = Message | MessageGroup


class MessageGroup(Mapping[str, TreeNode]):
    """Immutable group of messages and nested groups.

    Attributes:
        path: Key path of this group from the root of its tree

    Example:
        >>> group = MessageGroup({"hello": AllocMessage.parse("Hello, {0}!")})
        >>> group.hello.format("World")
        'Hello, World!'
        >>> group["hello"] is group.hello
        True
    """

    __slots__ = ("_children", "_path")

    def __init__(self, children: Mapping[str, TreeNode], path: Hierarchy | None = None) -> None:
        object.__setattr__(self, "_children", MappingProxyType(dict(children)))
        object.__setattr__(self, "_path", path or Hierarchy())

    @property
    def path(self) -> Hierarchy:
        """Key path of this group."""
        return self._path

    def __getitem__(self, key: str) -> TreeNode:
        return self._children[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __getattr__(self, name: str) -> TreeNode:
        # Only called when normal lookup fails; slots and methods win
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._children[name]
        except KeyError:
            where = f" in group '{self._path}'" if not self._path.is_root else ""
            msg = f"No message or group named '{name}'{where}"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | {k for k in self._children if k.isidentifier()})

    def resolve(self, dotted: str) -> TreeNode:
        """Node at a dotted key path below this group.

        Raises:
            KeyError: If any key on the path is missing or not a group
        """
        node: TreeNode = self
        for key in Hierarchy.parse(dotted).parts:
            if not isinstance(node, MessageGroup):
                raise KeyError(dotted)
            node = node[key]
        return node

    def messages(self) -> Iterator[tuple[Hierarchy, Message]]:
        """Every message below this group with its key path, in key order."""
        for key, child in self._children.items():
            if isinstance(child, MessageGroup):
                yield from child.messages()
            else:
                yield self._path.child(key), child

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"MessageGroup(path={str(self._path)!r}, keys={list(self._children)!r})"
