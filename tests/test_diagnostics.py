"""Tests for diagnostics/: codes, templates, exceptions and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localfmt.diagnostics import (
    ArgumentError,
    ConsistencyError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    FormatArgumentError,
    LocaleSetupError,
    LocalFmtError,
    OutputFormat,
    SelectorModeError,
    SourceError,
    SourceSpan,
    TemplateSyntaxError,
)


class TestDiagnosticCode:
    """Codes and categories."""

    @pytest.mark.parametrize(
        ("code", "category"),
        [
            (DiagnosticCode.EMPTY_PLACEHOLDER, ErrorCategory.PARSE),
            (DiagnosticCode.INVALID_NUMBER, ErrorCategory.ARGUMENT),
            (DiagnosticCode.ARITY_MISMATCH, ErrorCategory.CONSISTENCY),
            (DiagnosticCode.FILE_NOT_FOUND, ErrorCategory.SOURCE),
        ],
    )
    def test_category_from_range(self, code: DiagnosticCode, category: ErrorCategory) -> None:
        assert code.category is category

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid(self) -> None:
        span = SourceSpan(start=0, end=3, line=1, column=1)

        assert (span.start, span.end) == (0, 3)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (3, 2, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestDiagnostic:
    """Diagnostic helpers."""

    def test_str_is_message(self) -> None:
        diagnostic = ErrorTemplate.unknown_constant("APP")

        assert str(diagnostic) == "Unknown constant 'APP'"

    def test_with_location_fills_missing_fields_only(self) -> None:
        diagnostic = ErrorTemplate.missing_key("JA", "hello")

        located = diagnostic.with_location(language="EN", key_path="x", source_path="ja.toml")

        assert (located.language, located.key_path) == ("JA", "hello")
        assert located.source_path == "ja.toml"

    def test_frozen(self) -> None:
        diagnostic = ErrorTemplate.unknown_constant("APP")

        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]


class TestErrorTemplate:
    """Template wording used in assertions elsewhere."""

    def test_invalid_number(self) -> None:
        diagnostic = ErrorTemplate.invalid_number(1, 1)

        assert diagnostic.message == (
            "Invalid argument number: 1 is out of the allowed range (0 <= number < 1)."
        )
        assert diagnostic.hint == "Use placeholders {0} to {0}"

    def test_invalid_number_zero_arity_hint(self) -> None:
        assert ErrorTemplate.invalid_number(0, 0).hint == "Remove the placeholder"

    def test_without_number(self) -> None:
        diagnostic = ErrorTemplate.without_number(1, 3)

        assert diagnostic.message == (
            "Missing argument number: 1 is not found within the allowed range (0 <= number < 3)."
        )

    def test_arity_mismatch(self) -> None:
        diagnostic = ErrorTemplate.arity_mismatch("JA", "hello", 1, 2)

        assert diagnostic.message == "Message 'hello' expects 1 argument(s) but 'JA' uses 2"
        assert (diagnostic.expected, diagnostic.actual) == ("1", "2")

    def test_unexpected_nesting(self) -> None:
        diagnostic = ErrorTemplate.unexpected_nesting(
            "EN", "words", expected="group", actual="message"
        )

        assert "Expected a group for key 'words'" in diagnostic.message


class TestExceptions:
    """Exception hierarchy."""

    @pytest.mark.parametrize(
        "cls",
        [
            TemplateSyntaxError,
            ArgumentError,
            ConsistencyError,
            SourceError,
            SelectorModeError,
            FormatArgumentError,
        ],
    )
    def test_subclasses_base(self, cls: type[LocalFmtError]) -> None:
        assert issubclass(cls, LocalFmtError)

    def test_plain_message(self) -> None:
        error = LocalFmtError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None
        assert error.category is None

    def test_diagnostic_message(self) -> None:
        error = SourceError(ErrorTemplate.file_not_found("x.toml"))

        assert str(error).startswith("error[FILE_NOT_FOUND]: Source not found: x.toml")
        assert error.category is ErrorCategory.SOURCE

    def test_argument_error_fields(self) -> None:
        error = ArgumentError(ErrorTemplate.invalid_number(4, 2), index=4, n=2)

        assert (error.index, error.n) == (4, 2)

    def test_locale_setup_error_requires_diagnostics(self) -> None:
        with pytest.raises(ValueError, match="at least one diagnostic"):
            LocaleSetupError([])

    def test_locale_setup_error_single(self) -> None:
        diagnostic = ErrorTemplate.missing_language("JA")
        error = LocaleSetupError([diagnostic])

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_locale_setup_error_many(self) -> None:
        diagnostics = [ErrorTemplate.missing_language("JA"), ErrorTemplate.missing_key("EN", "a")]
        error = LocaleSetupError(diagnostics)

        assert error.diagnostics == tuple(diagnostics)
        assert error.diagnostic is diagnostics[0]
        assert str(error).startswith("Locale setup failed with 2 errors:")
        assert "MISSING_KEY" in str(error)


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust(self) -> None:
        text = DiagnosticFormatter().format(ErrorTemplate.arity_mismatch("JA", "hello", 1, 2))

        assert text.splitlines() == [
            "error[ARITY_MISMATCH]: Message 'hello' expects 1 argument(s) but 'JA' uses 2",
            "  --> JA: hello",
            "  = expected: 1",
            "  = actual: 2",
            "  = help: Use the same placeholders {0}..{N-1} in every language",
        ]

    def test_rust_with_span_and_path(self) -> None:
        span = SourceSpan(start=6, end=7, line=2, column=4)
        diagnostic = ErrorTemplate.empty_placeholder(span).with_location(
            language="EN", key_path="a", source_path="en.toml"
        )

        lines = DiagnosticFormatter().format(diagnostic).splitlines()

        assert lines[1] == "  --> en.toml, EN: a"
        assert lines[2] == "  --> line 2, column 4"

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.missing_key("JA", "hello")) == (
            "MISSING_KEY: Language 'JA' does not define message 'hello'"
        )

    def test_json(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(ErrorTemplate.missing_key("JA", "こんにちは")))

        assert data["code"] == "MISSING_KEY"
        assert data["code_value"] == 3001
        assert data["category"] == "consistency"
        assert data["key_path"] == "こんにちは"
        assert "span" not in data

    def test_color(self) -> None:
        formatter = DiagnosticFormatter(color=True)

        assert formatter.format(ErrorTemplate.unknown_constant("A")).startswith("\033[1;31merror")

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(ErrorTemplate.unknown_constant("LONG_NAME")) == (
            "UNKNOWN_CONSTANT: Unknown co..."
        )

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.missing_language("EN"), ErrorTemplate.missing_language("JA")]

        assert formatter.format_all(diagnostics).count("\n\n") == 1

    @given(
        output_format=st.sampled_from(OutputFormat),
        code=st.sampled_from(DiagnosticCode),
        message=st.text(max_size=50),
    )
    def test_any_diagnostic_formats(
        self, output_format: OutputFormat, code: DiagnosticCode, message: str
    ) -> None:
        """PROPERTY: every code formats in every output style."""
        text = DiagnosticFormatter(output_format=output_format).format(
            Diagnostic(code=code, message=message)
        )

        assert code.name in text
