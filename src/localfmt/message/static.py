"""Static message encoding.

A StaticMessage is built once from process-lifetime text and constants,
typically at import time:

    GREETING = StaticMessage.parse("Hello from {APP} v{u:MAJOR}, {0}!",
                                   constants={"APP": "demo", "MAJOR": 3})

Named references are resolved through the constants mapping before the
template is validated, so the result may contain NumericConstant segments.

Python 3.13+.
"""

import logging
from collections.abc import Iterable, Mapping

from localfmt.constants import MAX_ARITY, MAX_TEMPLATE_LENGTH
from localfmt.syntax.parser import parse_template
from localfmt.syntax.segments import Segment
from localfmt.validation.arguments import validate_arguments

from .base import Message
from .constants import ConstantValue, resolve_named_references

__all__ = ["StaticMessage"]

logger = logging.getLogger(__name__)


class StaticMessage(Message):
    """Message built from constants known when the program starts.

    Example:
        >>> StaticMessage.parse("Hello, {0}!").format("World")
        'Hello, World!'
        >>> StaticMessage.parse("{NAME} {u:N}", constants={"NAME": "x", "N": 7}).text
        'x 7'
    """

    __slots__ = ()

    @classmethod
    def parse(
        cls,
        text: str,
        arity: int | None = None,
        *,
        constants: Mapping[str, ConstantValue] | None = None,
        max_length: int = MAX_TEMPLATE_LENGTH,
        max_arity: int = MAX_ARITY,
    ) -> "StaticMessage":
        """Parse, resolve constants and validate a template.

        Args:
            text: Template text
            arity: Declared argument count, or None to infer it
            constants: Values for ``{NAME}``, ``{u:NAME}`` and ``{i:NAME}``
            max_length: Maximum template length in characters
            max_arity: Maximum argument count

        Returns:
            Validated StaticMessage

        Raises:
            TemplateSyntaxError: Malformed template
            ArgumentError: Unknown constant or invalid placeholder indices
        """
        segments = parse_template(text, max_length=max_length)
        return cls.from_segments(segments, arity, constants=constants, max_arity=max_arity)

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Segment],
        arity: int | None = None,
        *,
        constants: Mapping[str, ConstantValue] | None = None,
        max_arity: int = MAX_ARITY,
    ) -> "StaticMessage":
        """Validate an already-built segment sequence.

        Raises:
            ArgumentError: Unknown constant or invalid placeholder indices
        """
        resolved = resolve_named_references(segments, constants)
        n = validate_arguments(resolved, arity, max_arity=max_arity)
        message = cls._create(resolved, n)
        logger.debug("Compiled static message with arity %d", n)
        return message

    @property
    def text(self) -> str:
        """Rendered text of an argument-less message.

        Raises:
            FormatArgumentError: If the message takes arguments
        """
        return self.format()
