"""Diagnostic system for localfmt errors.

Provides structured error diagnostics with codes, spans, key paths and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    ArgumentError,
    ConsistencyError,
    FormatArgumentError,
    LocaleSetupError,
    LocalFmtError,
    SelectorModeError,
    SourceError,
    TemplateSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentError",
    "ConsistencyError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormatArgumentError",
    "LocalFmtError",
    "LocaleSetupError",
    "OutputFormat",
    "SelectorModeError",
    "SourceError",
    "SourceSpan",
    "TemplateSyntaxError",
]
