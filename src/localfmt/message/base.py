"""Validated message shared by the static and allocated encodings.

A Message is a segment tuple whose placeholder indices are proven to be
exactly ``0..arity-1``. Messages are only created by the validating
factories of StaticMessage and AllocMessage; calling the constructor
directly raises TypeError. Once created a Message never changes, so one
instance can be shared by any number of threads.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from typing import Self

from localfmt.diagnostics import ErrorTemplate, FormatArgumentError
from localfmt.syntax.segments import Literal, NumericConstant, Placeholder, Segment
from localfmt.syntax.serializer import serialize_segments

__all__ = ["Argument", "Message"]

type Argument = str | int

# Only the factories below hold this object
_CONSTRUCTION_TOKEN = object()


class Message:
    """Validated template ready for formatting.

    Attributes:
        arity: Number of arguments format() takes
        segments: Validated segments in output order

    Example:
        >>> msg = AllocMessage.parse("Hello, {0}!")
        >>> msg.arity
        1
        >>> msg.format("World")
        'Hello, World!'
    """

    __slots__ = ("_arity", "_segments")

    def __init__(self, segments: tuple[Segment, ...], arity: int, *, _token: object = None) -> None:
        """Reject direct construction.

        Raises:
            TypeError: Unless called through a validating factory
        """
        if _token is not _CONSTRUCTION_TOKEN:
            msg = (
                f"{type(self).__name__} cannot be constructed directly; "
                f"use {type(self).__name__}.parse() or .from_segments()"
            )
            raise TypeError(msg)
        self._segments = segments
        self._arity = arity

    @classmethod
    def _create(cls, segments: tuple[Segment, ...], arity: int) -> Self:
        """Wrap segments the caller has already validated."""
        return cls(segments, arity, _token=_CONSTRUCTION_TOKEN)

    @property
    def arity(self) -> int:
        """Number of arguments format() takes."""
        return self._arity

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Validated segments in output order."""
        return self._segments

    def __len__(self) -> int:
        """Number of segments."""
        return len(self._segments)

    def is_empty(self) -> bool:
        """True when the message has no segments at all."""
        return not self._segments

    def format(self, *args: Argument) -> str:
        """Substitute arguments into the message.

        Args:
            *args: Exactly ``arity`` arguments; str is inserted as is and
                int rendered as a decimal numeral

        Returns:
            Formatted text

        Raises:
            FormatArgumentError: Wrong argument count or type

        Example:
            >>> AllocMessage.parse("{0} World! {0}").format("Beautiful")
            'Beautiful World! Beautiful'
        """
        return self.format_sequence(args)

    def format_sequence(self, args: Sequence[Argument]) -> str:
        """Same as format(), taking the arguments as one sequence."""
        if len(args) != self._arity:
            raise FormatArgumentError(ErrorTemplate.format_argument_count(self._arity, len(args)))

        rendered: list[str] = []
        for position, arg in enumerate(args):
            if isinstance(arg, str):
                rendered.append(arg)
            elif isinstance(arg, int) and not isinstance(arg, bool):
                rendered.append(str(arg))
            else:
                raise FormatArgumentError(
                    ErrorTemplate.format_argument_type(position, type(arg).__name__)
                )

        parts: list[str] = []
        for segment in self._segments:
            match segment:
                case Literal(text=text):
                    parts.append(text)
                case Placeholder(index=index):
                    parts.append(rendered[index])
                case NumericConstant():
                    parts.append(segment.render())
        return "".join(parts)

    def __str__(self) -> str:
        """Template text of the message."""
        return serialize_segments(self._segments, strict=False)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"{type(self).__name__}({str(self)!r}, arity={self._arity})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message) or type(other) is not type(self):
            return NotImplemented
        return self._arity == other._arity and self._segments == other._segments

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._arity, self._segments))
