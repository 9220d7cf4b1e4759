"""Template parser.

Turns template text into an ordered tuple of segments. One left-to-right
pass over the text with an immutable Cursor.

Grammar:
    template    := (escape | placeholder | text)*
    escape      := "\\{"                      -> literal "{"
    placeholder := "{" content "}"
    content     := digits                     -> Placeholder
                 | identifier                 -> NamedReference (text)
                 | "u:" identifier            -> NamedReference (unsigned)
                 | "i:" identifier            -> NamedReference (signed)

A backslash before anything other than ``{`` is kept verbatim together
with the following character; a trailing backslash is kept as is. A ``}``
outside a placeholder is ordinary text.

Parsing only checks syntax. Whether placeholder indices form 0..N-1 is the
argument validator's job (see :mod:`localfmt.validation.arguments`).

Python 3.13+. Zero external dependencies.
"""

import logging

from localfmt.constants import MAX_INDEX_DIGITS, MAX_TEMPLATE_LENGTH
from localfmt.diagnostics import ErrorTemplate, SourceSpan, TemplateSyntaxError

from .cursor import Cursor
from .segments import (
    Literal,
    NamedReference,
    Placeholder,
    ReferenceKind,
    Segment,
    merge_literals,
)

__all__ = ["parse_placeholder_content", "parse_template"]

logger = logging.getLogger(__name__)

_PREFIXES: dict[str, ReferenceKind] = {
    "u:": ReferenceKind.UNSIGNED,
    "i:": ReferenceKind.SIGNED,
}


def _span(content: str, cursor: Cursor | None) -> SourceSpan | None:
    # From the opening brace to just past the closing one
    return cursor.span_to(cursor.pos + len(content) + 2) if cursor is not None else None


def parse_placeholder_content(content: str, cursor: Cursor | None = None) -> Segment:
    """Classify the text between a pair of braces.

    Args:
        content: Non-empty text between ``{`` and ``}``
        cursor: Cursor at the opening brace, used for the error span

    Returns:
        Placeholder for ASCII digits, NamedReference for an identifier

    Raises:
        TemplateSyntaxError: If content is neither, or if a numeric index
            has more than MAX_INDEX_DIGITS significant digits

    Example:
        >>> parse_placeholder_content("2")
        Placeholder(index=2)
        >>> parse_placeholder_content("u:MAX").kind
        <ReferenceKind.UNSIGNED: 'u'>
    """
    if content.isascii() and content.isdigit():
        significant = content.lstrip("0")
        digits = len(significant)
        if digits > MAX_INDEX_DIGITS:
            raise TemplateSyntaxError(
                ErrorTemplate.index_too_long(digits, MAX_INDEX_DIGITS, _span(content, cursor))
            )
        return Placeholder(int(significant or "0"))

    name = content
    kind = ReferenceKind.TEXT
    prefix = content[:2]
    if prefix in _PREFIXES:
        name = content[2:]
        kind = _PREFIXES[prefix]

    if name.isidentifier():
        return NamedReference(name, kind)

    raise TemplateSyntaxError(ErrorTemplate.invalid_placeholder(content, _span(content, cursor)))


def parse_template(text: str, *, max_length: int = MAX_TEMPLATE_LENGTH) -> tuple[Segment, ...]:
    """Parse template text into segments.

    Adjacent literal runs are merged and empty literals dropped, so two
    templates with the same meaning produce equal segment tuples.

    Args:
        text: Template text
        max_length: Maximum accepted length in characters

    Returns:
        Tuple of Literal, Placeholder and NamedReference segments

    Raises:
        TemplateSyntaxError: On an empty or unterminated placeholder, on
            invalid placeholder content, or when text exceeds max_length

    Example:
        >>> parse_template("Hello, {0}!")
        (Literal(text='Hello, '), Placeholder(index=0), Literal(text='!'))
        >>> parse_template("a\\\\{b")
        (Literal(text='a{b'),)
    """
    if len(text) > max_length:
        raise TemplateSyntaxError(ErrorTemplate.template_too_long(len(text), max_length))

    segments: list[Segment] = []
    buffer: list[str] = []
    cursor = Cursor(text, 0)

    while not cursor.is_eof:
        char = cursor.current

        if char == "\\":
            following = cursor.peek()
            if following == "{":
                buffer.append("{")
                cursor = cursor.advance(2)
            elif following is None:
                buffer.append("\\")
                cursor = cursor.advance()
            else:
                buffer.append("\\" + following)
                cursor = cursor.advance(2)
            continue

        if char == "{":
            if buffer:
                segments.append(Literal("".join(buffer)))
                buffer.clear()
            close = cursor.advance().find("}")
            content = cursor.advance().slice_to(close.pos)
            if close.is_eof or not content:
                raise TemplateSyntaxError(
                    ErrorTemplate.empty_placeholder(cursor.span_to(close.pos))
                )
            segments.append(parse_placeholder_content(content, cursor))
            cursor = close.advance()
            continue

        # Copy the plain run up to the next significant character in one step
        next_pos = cursor.pos + 1
        while next_pos < len(text) and text[next_pos] not in "\\{":
            next_pos += 1
        buffer.append(cursor.slice_to(next_pos))
        cursor = Cursor(text, next_pos)

    if buffer:
        segments.append(Literal("".join(buffer)))

    result = tuple(merge_literals(segments))
    logger.debug("Parsed template of length %d into %d segment(s)", len(text), len(result))
    return result
