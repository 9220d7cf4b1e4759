"""Segment types produced by the template parser.

A compiled template is an ordered tuple of segments. All segment classes
are frozen, slotted dataclasses: immutable once constructed.

    Literal          literal text, copied to the output verbatim
    Placeholder      positional argument slot {N}
    NamedReference   {name}, {u:name}, {i:name}; resolved to Literal or
                     NumericConstant before validation
    NumericConstant  integer constant rendered as a numeral (static only)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from localfmt.constants import SIGNED_MAX, SIGNED_MIN, UNSIGNED_MAX
from localfmt.diagnostics import ArgumentError, ErrorTemplate

__all__ = [
    "Literal",
    "NamedReference",
    "NumericConstant",
    "Placeholder",
    "ReferenceKind",
    "Segment",
    "merge_literals",
]


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal text.

    Attributes:
        text: Text copied to the output unchanged
    """

    text: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Positional argument slot ``{index}``.

    Attributes:
        index: Zero-based argument index
    """

    index: int

    def __post_init__(self) -> None:
        """Reject negative indices.

        Raises:
            ValueError: If index is negative
        """
        if self.index < 0:
            msg = f"Placeholder index must be >= 0, got {self.index}"
            raise ValueError(msg)


class ReferenceKind(StrEnum):
    """What a named reference expects its constant to be.

    The prefix inside the braces selects the kind: ``{name}`` is text,
    ``{u:name}`` an unsigned integer and ``{i:name}`` a signed integer.
    """

    TEXT = "text"
    UNSIGNED = "u"
    SIGNED = "i"


@dataclass(frozen=True, slots=True)
class NamedReference:
    """Reference ``{name}`` to a constant supplied by the caller.

    Attributes:
        name: Identifier between the braces (without prefix)
        kind: Constant kind selected by the prefix
    """

    name: str
    kind: ReferenceKind = ReferenceKind.TEXT

    @property
    def source(self) -> str:
        """Placeholder text as written in a template, without braces."""
        if self.kind is ReferenceKind.TEXT:
            return self.name
        return f"{self.kind.value}:{self.name}"


@dataclass(frozen=True, slots=True)
class NumericConstant:
    """Integer constant embedded in a static message.

    Attributes:
        value: The integer
        signed: True for a signed 128-bit value, False for unsigned
    """

    value: int
    signed: bool = False

    def __post_init__(self) -> None:
        """Enforce the 128-bit range of the declared signedness.

        Raises:
            ArgumentError: If value does not fit
        """
        if self.signed:
            in_range = SIGNED_MIN <= self.value <= SIGNED_MAX
        else:
            in_range = 0 <= self.value <= UNSIGNED_MAX
        if not in_range:
            raise ArgumentError(ErrorTemplate.numeric_out_of_range(self.value, signed=self.signed))

    @classmethod
    def of(cls, value: int) -> NumericConstant:
        """Constant with signedness inferred from the sign of value."""
        return cls(value, signed=value < 0)

    def render(self) -> str:
        """Decimal numeral of the value."""
        return str(self.value)


type Segment = Literal | Placeholder | NamedReference | NumericConstant


def merge_literals(segments: list[Segment]) -> list[Segment]:
    """Merge adjacent Literal segments and drop empty ones.

    Escapes split a literal run into pieces; merging keeps the compiled
    form canonical so equal templates compare equal.
    """
    merged: list[Segment] = []
    for segment in segments:
        if isinstance(segment, Literal):
            if not segment.text:
                continue
            if merged and isinstance(merged[-1], Literal):
                merged[-1] = Literal(merged[-1].text + segment.text)
                continue
        merged.append(segment)
    return merged
