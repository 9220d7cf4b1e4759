"""Key paths inside nested message trees.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from localfmt.constants import KEY_PATH_SEPARATOR

__all__ = ["Hierarchy"]


@dataclass(frozen=True, slots=True)
class Hierarchy:
    """Position of a node in a message tree, as the keys leading to it.

    Example:
        >>> path = Hierarchy().child("words").child("ownership")
        >>> str(path)
        'words.ownership'
        >>> path.depth
        2
    """

    parts: tuple[str, ...] = ()

    def child(self, key: str) -> "Hierarchy":
        """Path one level below this one."""
        return Hierarchy((*self.parts, key))

    @property
    def depth(self) -> int:
        """Number of keys in the path (0 for the root)."""
        return len(self.parts)

    @property
    def is_root(self) -> bool:
        """True for the empty path."""
        return not self.parts

    def join(self, key: str | None = None) -> str:
        """Dotted path, optionally extended by one more key."""
        parts = self.parts if key is None else (*self.parts, key)
        return KEY_PATH_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.join()

    @classmethod
    def parse(cls, dotted: str) -> "Hierarchy":
        """Split a dotted key path ("" is the root)."""
        if not dotted:
            return cls()
        return cls(tuple(dotted.split(KEY_PATH_SEPARATOR)))
