"""Serialize segments back to template text.

The inverse of :func:`localfmt.syntax.parser.parse_template` for segments
the parser can produce: ``parse_template(serialize_segments(s)) == s``.

The parser always consumes a backslash together with the character after
it, so escaping walks each literal the same way: a backslash is written
with its partner, and ``{`` is written as ``\\{``. A backslash whose
partner would be ``{`` (in the literal, or the brace of a following
placeholder) has no template spelling. Segments built by hand can contain
one; the parser never produces them.

Numeric constants have no template syntax of their own; they serialize
as their numeral, so a static message with constants round-trips to the
text it renders, not to the template it was written as.

Python 3.13+.
"""

from .segments import Literal, NamedReference, NumericConstant, Placeholder, Segment

__all__ = ["escape_literal", "serialize_segments"]


def escape_literal(text: str, *, before_brace: bool = False, strict: bool = True) -> str:
    """Escape literal text so the parser reads it back unchanged.

    Args:
        text: Literal text
        before_brace: The serialized output continues with ``{``
        strict: Raise on text with no template spelling; when False the
            offending backslash is written as is

    Raises:
        ValueError: If strict and a backslash would pair with ``{``

    Example:
        >>> escape_literal("{x}")
        '\\\\{x}'
    """
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "{":
            parts.append("\\{")
            pos += 1
            continue
        if char == "\\":
            partner = text[pos + 1] if pos + 1 < len(text) else None
            if partner is None:
                if before_brace and strict:
                    msg = f"Literal {text!r} ends in a backslash before a placeholder"
                    raise ValueError(msg)
                parts.append("\\")
                pos += 1
                continue
            if partner == "{":
                if strict:
                    msg = f"Literal {text!r} has a backslash directly before '{{'"
                    raise ValueError(msg)
                parts.append("\\")
                pos += 1
                continue
            parts.append("\\" + partner)
            pos += 2
            continue
        parts.append(char)
        pos += 1
    return "".join(parts)


def serialize_segments(
    segments: tuple[Segment, ...] | list[Segment], *, strict: bool = True
) -> str:
    """Render segments as template text.

    Args:
        segments: Segments to serialize
        strict: Raise on literal text with no template spelling

    Returns:
        Template text

    Raises:
        ValueError: If strict and a literal cannot be written as a template

    Example:
        >>> serialize_segments((Literal("Hi "), Placeholder(0)))
        'Hi {0}'
    """
    parts: list[str] = []
    for position, segment in enumerate(segments):
        match segment:
            case Literal(text=text):
                following = segments[position + 1] if position + 1 < len(segments) else None
                before_brace = isinstance(following, Placeholder | NamedReference)
                parts.append(escape_literal(text, before_brace=before_brace, strict=strict))
            case Placeholder(index=index):
                parts.append(f"{{{index}}}")
            case NamedReference():
                parts.append(f"{{{segment.source}}}")
            case NumericConstant():
                parts.append(segment.render())
    return "".join(parts)
