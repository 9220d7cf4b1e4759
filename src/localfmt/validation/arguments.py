"""Argument validation for parsed templates.

Checks that the placeholder indices of a segment sequence form exactly the
argument list ``0..N-1``: no index at or above N, and no index below N left
unused. Duplicate uses of one index are fine.

Validation is strict. A template declared with N arguments must consume
every one of them; unused trailing slots are a defect, not silently
allowed. When N is inferred from the highest index, a skipped lower index
(including 0) is reported the same way.

The lowest offending index is always the one reported, so diagnostics are
stable across runs.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from localfmt.constants import MAX_ARITY
from localfmt.diagnostics import ArgumentError, ErrorTemplate
from localfmt.syntax.segments import NamedReference, Placeholder, Segment

__all__ = ["infer_arity", "validate_arguments"]


def infer_arity(segments: Iterable[Segment]) -> int:
    """Highest placeholder index + 1, or 0 without placeholders.

    Example:
        >>> infer_arity([Placeholder(0), Literal(" and "), Placeholder(2)])
        3
    """
    return max(
        (segment.index + 1 for segment in segments if isinstance(segment, Placeholder)),
        default=0,
    )


def validate_arguments(
    segments: tuple[Segment, ...] | list[Segment],
    arity: int | None = None,
    *,
    max_arity: int = MAX_ARITY,
) -> int:
    """Validate placeholder usage against an arity.

    Args:
        segments: Parsed segments with named references already resolved
        arity: Declared argument count, or None to infer it
        max_arity: Upper bound on the declared or inferred arity

    Returns:
        The validated arity N

    Raises:
        ValueError: If arity is negative
        ArgumentError: INVALID_NUMBER for an index >= N, WITHOUT_NUMBER for
            the lowest unused index, UNRESOLVED_NAMED_REFERENCE when a named
            reference is still present, ARITY_TOO_LARGE above max_arity

    Example:
        >>> validate_arguments(parse_template("{0} World! {0}"), 1)
        1
        >>> validate_arguments(parse_template("Hello {1}"), 1)
        Traceback (most recent call last):
        ...
        localfmt.diagnostics.errors.ArgumentError: error[INVALID_NUMBER]: ...
    """
    if arity is not None and arity < 0:
        msg = f"arity must be >= 0, got {arity}"
        raise ValueError(msg)

    for segment in segments:
        if isinstance(segment, NamedReference):
            raise ArgumentError(ErrorTemplate.unresolved_named_reference(segment.source))

    n = infer_arity(segments) if arity is None else arity
    if n > max_arity:
        raise ArgumentError(ErrorTemplate.arity_too_large(n, max_arity), n=n)

    present = [False] * n
    for segment in segments:
        if not isinstance(segment, Placeholder):
            continue
        if segment.index >= n:
            raise ArgumentError(
                ErrorTemplate.invalid_number(segment.index, n), index=segment.index, n=n
            )
        present[segment.index] = True

    for index, used in enumerate(present):
        if not used:
            raise ArgumentError(ErrorTemplate.without_number(index, n), index=index, n=n)

    return n
