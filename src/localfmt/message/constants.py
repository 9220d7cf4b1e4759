"""Named constant resolution for static messages.

A static template may refer to process-lifetime constants by name:

    {NAME}    text constant, substituted as literal text
    {u:NAME}  unsigned integer constant, rendered as a numeral
    {i:NAME}  signed integer constant, rendered as a numeral

The caller supplies the constants as a mapping; resolution replaces every
NamedReference before the template is validated.

Python 3.13+.
"""

from collections.abc import Iterable, Mapping

from localfmt.diagnostics import ArgumentError, ErrorTemplate
from localfmt.syntax.segments import (
    Literal,
    NamedReference,
    NumericConstant,
    ReferenceKind,
    Segment,
    merge_literals,
)

__all__ = ["ConstantValue", "resolve_named_references", "resolve_reference"]

type ConstantValue = str | int


def resolve_reference(reference: NamedReference, value: ConstantValue) -> Segment:
    """Turn one named reference and its constant into a concrete segment.

    Args:
        reference: The reference found in the template
        value: The constant bound to its name

    Returns:
        Literal for a text constant, NumericConstant for an integer

    Raises:
        ArgumentError: CONSTANT_TYPE_MISMATCH if value does not fit the
            reference kind, NUMERIC_OUT_OF_RANGE if it exceeds 128 bits
    """
    # bool is an int subclass, but True is not a numeral
    is_int = isinstance(value, int) and not isinstance(value, bool)

    match reference.kind:
        case ReferenceKind.TEXT:
            if isinstance(value, str):
                return Literal(value)
            if is_int:
                return NumericConstant.of(value)
            raise ArgumentError(
                ErrorTemplate.constant_type_mismatch(
                    reference.name, "str or int", type(value).__name__
                )
            )
        case ReferenceKind.UNSIGNED:
            if not is_int:
                raise ArgumentError(
                    ErrorTemplate.constant_type_mismatch(
                        reference.name, "unsigned int", type(value).__name__
                    )
                )
            return NumericConstant(value, signed=False)
        case ReferenceKind.SIGNED:
            if not is_int:
                raise ArgumentError(
                    ErrorTemplate.constant_type_mismatch(
                        reference.name, "signed int", type(value).__name__
                    )
                )
            return NumericConstant(value, signed=True)


def resolve_named_references(
    segments: Iterable[Segment],
    constants: Mapping[str, ConstantValue] | None = None,
) -> tuple[Segment, ...]:
    """Replace every NamedReference using the constants mapping.

    Text constants are merged into the neighbouring literal text.

    Args:
        segments: Parsed segments
        constants: Name to constant mapping (None means no constants)

    Returns:
        Segments without named references

    Raises:
        ArgumentError: UNKNOWN_CONSTANT for a name not in constants, or the
            errors of resolve_reference()

    Example:
        >>> resolve_named_references(parse_template("v{VERSION}"), {"VERSION": "1.2"})
        (Literal(text='v1.2'),)
    """
    lookup: Mapping[str, ConstantValue] = constants or {}
    resolved: list[Segment] = []
    for segment in segments:
        if isinstance(segment, NamedReference):
            if segment.name not in lookup:
                raise ArgumentError(ErrorTemplate.unknown_constant(segment.name))
            resolved.append(resolve_reference(segment, lookup[segment.name]))
        else:
            resolved.append(segment)
    return tuple(merge_literals(resolved))
