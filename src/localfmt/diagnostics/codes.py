"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization used by the exception hierarchy.

    Categories:
        PARSE: Template syntax failure (one template)
        ARGUMENT: Placeholder/arity failure (one template)
        CONSISTENCY: Cross-language shape or arity failure (whole table)
        SOURCE: Source file or source tree failure (loader)
    """

    PARSE = "parse"
    ARGUMENT = "argument"
    CONSISTENCY = "consistency"
    SOURCE = "source"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse errors (template syntax)
        2000-2999: Argument errors (placeholder indices, arity, constants)
        3000-3999: Consistency errors (cross-language shape and arity)
        4000-4999: Source errors (files, readers, source trees)
    """

    # Parse errors (1000-1999)
    EMPTY_PLACEHOLDER = 1001
    TEMPLATE_TOO_LONG = 1002
    NAMED_REFERENCE_UNSUPPORTED = 1003
    INVALID_PLACEHOLDER = 1004

    # Argument errors (2000-2999)
    INVALID_NUMBER = 2001
    WITHOUT_NUMBER = 2002
    UNRESOLVED_NAMED_REFERENCE = 2003
    UNKNOWN_CONSTANT = 2004
    NUMERIC_CONSTANT_UNSUPPORTED = 2005
    NUMERIC_OUT_OF_RANGE = 2006
    ARITY_TOO_LARGE = 2007
    FORMAT_ARGUMENT_COUNT = 2008
    FORMAT_ARGUMENT_TYPE = 2009
    CONSTANT_TYPE_MISMATCH = 2010

    # Consistency errors (3000-3999)
    MISSING_KEY = 3001
    UNEXPECTED_KEY = 3002
    UNEXPECTED_NESTING = 3003
    ARITY_MISMATCH = 3004
    MISSING_LANGUAGE = 3005
    UNKNOWN_LANGUAGE = 3006
    NESTING_DEPTH_EXCEEDED = 3007

    # Source errors (4000-4999)
    FILE_NOT_FOUND = 4001
    WRONG_EXTENSION = 4002
    SOURCE_PARSE_FAILED = 4003
    SOURCE_NOT_MAPPING = 4004
    INVALID_ENCODING = 4005
    INVALID_LEAF = 4006
    UNSUPPORTED_FORMAT = 4007
    MERGE_CONFLICT = 4008
    SOURCE_TOO_LARGE = 4009

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.PARSE
            case 2:
                return ErrorCategory.ARGUMENT
            case 3:
                return ErrorCategory.CONSISTENCY
            case _:
                return ErrorCategory.SOURCE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a template string for error reporting.

    Note:
        Positions are measured in characters (Unicode code points), not
        bytes. Only ASCII characters are significant to the template
        grammar, so character and byte scanning find the same tokens.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line
                or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Every setup failure is described
    by one Diagnostic so that a build can report all defects at once.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the template (parse errors only)
        hint: Suggestion for fixing the error
        language: Language name the defect was found in
        key_path: Dotted message key path ("words.ownership")
        expected: Expected value (arity, kind) for mismatch errors
        actual: Actual value found for mismatch errors
        source_path: File the defect came from (loader errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    language: str | None = None
    key_path: str | None = None
    expected: str | None = None
    actual: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def with_location(
        self,
        *,
        language: str | None = None,
        key_path: str | None = None,
        source_path: str | None = None,
    ) -> "Diagnostic":
        """Return a copy with location fields filled in.

        Fields already set on this diagnostic are kept; only missing
        location information is added. Used when a template-level error
        bubbles up through the tree builder, which knows the language and
        key path the template itself does not.
        """
        return Diagnostic(
            code=self.code,
            message=self.message,
            span=self.span,
            hint=self.hint,
            language=self.language or language,
            key_path=self.key_path or key_path,
            expected=self.expected,
            actual=self.actual,
            source_path=self.source_path or source_path,
            severity=self.severity,
        )

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[ARITY_MISMATCH]: Message 'hello' expects 1 argument(s) but 'JA' uses 2
              --> JA: hello
              = expected: 1
              = actual: 2
              = help: Use the same placeholders {0}..{N-1} in every language

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
