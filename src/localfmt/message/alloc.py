"""Allocated (runtime) message encoding.

An AllocMessage is built from text that only exists at run time: loaded
from a message file or composed by the program. Only positional
placeholders are allowed; there are no constants to resolve.

Python 3.13+.
"""

from collections.abc import Iterable

from localfmt.constants import MAX_ARITY, MAX_TEMPLATE_LENGTH
from localfmt.diagnostics import ArgumentError, ErrorTemplate, TemplateSyntaxError
from localfmt.syntax.parser import parse_template
from localfmt.syntax.segments import NamedReference, NumericConstant, Segment, merge_literals
from localfmt.validation.arguments import validate_arguments

from .base import Message

__all__ = ["AllocMessage"]


class AllocMessage(Message):
    """Message built from runtime text.

    Example:
        >>> AllocMessage.parse("{0} has {1} new messages").format("Ann", 3)
        'Ann has 3 new messages'
        >>> AllocMessage.parse("Hi {name}")
        Traceback (most recent call last):
        ...
        localfmt.diagnostics.errors.TemplateSyntaxError: error[NAMED_REFERENCE_UNSUPPORTED]: ...
    """

    __slots__ = ()

    @classmethod
    def parse(
        cls,
        text: str,
        arity: int | None = None,
        *,
        max_length: int = MAX_TEMPLATE_LENGTH,
        max_arity: int = MAX_ARITY,
    ) -> "AllocMessage":
        """Parse and validate a runtime template.

        Args:
            text: Template text
            arity: Declared argument count, or None to infer it
            max_length: Maximum template length in characters
            max_arity: Maximum argument count

        Returns:
            Validated AllocMessage

        Raises:
            TemplateSyntaxError: Malformed template or named placeholder
            ArgumentError: Invalid placeholder indices
        """
        segments = parse_template(text, max_length=max_length)
        return cls.from_segments(segments, arity, max_arity=max_arity)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Segment],
        arity: int | None = None,
        *,
        max_arity: int = MAX_ARITY,
    ) -> "AllocMessage":
        """Validate an already-built segment sequence.

        Raises:
            TemplateSyntaxError: A named reference is present
            ArgumentError: A numeric constant is present, or invalid
                placeholder indices
        """
        collected = list(segments)
        for segment in collected:
            if isinstance(segment, NamedReference):
                raise TemplateSyntaxError(ErrorTemplate.named_reference_unsupported(segment.source))
            if isinstance(segment, NumericConstant):
                raise ArgumentError(ErrorTemplate.numeric_constant_unsupported())
        merged = tuple(merge_literals(collected))
        n = validate_arguments(merged, arity, max_arity=max_arity)
        return cls._create(merged, n)
