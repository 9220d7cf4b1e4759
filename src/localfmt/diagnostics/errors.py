"""localfmt exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Hierarchy:
    LocalFmtError
    ├─ TemplateSyntaxError      (one template: braces, length)
    ├─ ArgumentError            (one template: placeholder indices, constants)
    ├─ ConsistencyError         (cross-language: shape, arity, languages)
    ├─ SourceError              (loader: files, readers, source trees)
    ├─ LocaleSetupError         (aggregate of every setup defect)
    ├─ SelectorModeError        (set_selector on a static facade)
    └─ FormatArgumentError      (format() contract violation; also TypeError)

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "ArgumentError",
    "ConsistencyError",
    "FormatArgumentError",
    "LocalFmtError",
    "LocaleSetupError",
    "SelectorModeError",
    "SourceError",
    "TemplateSyntaxError",
]


class LocalFmtError(Exception):
    """Base exception for all localfmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalFmtError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def category(self) -> ErrorCategory | None:
        """Error category derived from the diagnostic code, if any."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.code.category


class TemplateSyntaxError(LocalFmtError):
    """Template string is not well formed.

    Raised for an empty ``{}``, an unterminated ``{``, an over-long template,
    or a named placeholder in a runtime message.
    """


class ArgumentError(LocalFmtError):
    """Placeholder indices do not form the argument list ``0..N-1``.

    Attributes:
        index: Offending placeholder index (None for constant errors)
        n: Declared or inferred arity (None for constant errors)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        index: int | None = None,
        n: int | None = None,
    ) -> None:
        """Initialize ArgumentError.

        Args:
            message: Error message string OR Diagnostic object
            index: Offending placeholder index
            n: Declared or inferred arity
        """
        super().__init__(message)
        self.index = index
        self.n = n


class ConsistencyError(LocalFmtError):
    """Languages disagree on message shape or arity."""


class SourceError(LocalFmtError):
    """Source file or source tree cannot be turned into messages."""


class LocaleSetupError(LocalFmtError):
    """Building a locale table failed.

    Carries every diagnostic found during setup so that all defects in the
    message sources can be fixed in one pass.

    Attributes:
        diagnostics: All defects found, in discovery order
    """

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Initialize LocaleSetupError.

        Args:
            diagnostics: Non-empty iterable of defects

        Raises:
            ValueError: If diagnostics is empty
        """
        collected = tuple(diagnostics)
        if not collected:
            msg = "LocaleSetupError requires at least one diagnostic"
            raise ValueError(msg)
        self.diagnostics: tuple[Diagnostic, ...] = collected
        if len(collected) == 1:
            super().__init__(collected[0])
        else:
            summary = f"Locale setup failed with {len(collected)} errors:\n\n" + "\n\n".join(
                d.format_error() for d in collected
            )
            super().__init__(summary)
            self.diagnostic = collected[0]


class SelectorModeError(LocalFmtError):
    """Selector replacement attempted on a facade built with a static selector."""


class FormatArgumentError(LocalFmtError, TypeError):
    """format() called with the wrong number or type of arguments.

    Subclasses TypeError: passing the wrong arguments to a message is the
    same class of mistake as calling a function with the wrong signature.
    """
