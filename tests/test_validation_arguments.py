"""Tests for validation/arguments.py.

The validator accepts a template only when its placeholder indices are
exactly 0..N-1; the lowest offending index is the one reported.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from localfmt.diagnostics import ArgumentError, DiagnosticCode
from localfmt.syntax import Literal, NamedReference, Placeholder, parse_template
from localfmt.validation import infer_arity, validate_arguments
from tests.strategies import valid_templates


class TestInferArity:
    """infer_arity() examples."""

    def test_no_placeholders(self) -> None:
        assert infer_arity([Literal("plain")]) == 0

    def test_highest_index_plus_one(self) -> None:
        assert infer_arity([Placeholder(0), Literal(" "), Placeholder(2)]) == 3

    def test_empty(self) -> None:
        assert infer_arity([]) == 0


class TestValidateArguments:
    """validate_arguments() examples."""

    def test_single_argument(self) -> None:
        assert validate_arguments(parse_template("Hello, {0}!"), 1) == 1

    def test_repeated_index(self) -> None:
        assert validate_arguments(parse_template("{0} World! {0}"), 1) == 1

    def test_inferred_arity(self) -> None:
        assert validate_arguments(parse_template("{1} then {0}")) == 2

    def test_zero_arity(self) -> None:
        assert validate_arguments(parse_template("No arguments"), 0) == 0

    def test_index_out_of_range(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template("Hello {1}"), 1)

        error = exc_info.value
        assert (error.index, error.n) == (1, 1)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.INVALID_NUMBER

    def test_skipped_index(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template("{0} and {2}"))

        error = exc_info.value
        assert (error.index, error.n) == (1, 3)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.WITHOUT_NUMBER

    def test_unused_declared_argument(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template("{0}"), 2)

        assert (exc_info.value.index, exc_info.value.n) == (1, 2)

    def test_inferred_arity_missing_zero(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template("{1}"))

        assert exc_info.value.index == 0

    def test_invalid_number_reported_before_gaps(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments([Placeholder(5)], 2)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_NUMBER

    def test_lowest_unused_index_reported(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments([Placeholder(3)], 4)

        assert exc_info.value.index == 0

    def test_named_reference_rejected(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments([NamedReference("APP")])

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNRESOLVED_NAMED_REFERENCE

    def test_arity_above_limit(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments([Placeholder(0)], 20, max_arity=10)

        assert exc_info.value.n == 20
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.ARITY_TOO_LARGE

    def test_negative_arity(self) -> None:
        with pytest.raises(ValueError, match="arity"):
            validate_arguments([], -1)

    def test_argument_errors_are_argument_category(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments([Placeholder(1)], 1)

        assert exc_info.value.category == "argument"


class TestValidateProperties:
    """Properties over generated templates."""

    @given(case=valid_templates())
    def test_valid_templates_accepted(self, case: tuple[str, int]) -> None:
        """PROPERTY: a template using exactly 0..N-1 validates with arity N."""
        text, arity = case

        assert validate_arguments(parse_template(text), arity) == arity

    @given(case=valid_templates(), extra=st.integers(min_value=1, max_value=5))
    def test_larger_declared_arity_rejected(self, case: tuple[str, int], extra: int) -> None:
        """PROPERTY: declaring more arguments than used reports the first unused one."""
        text, arity = case

        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template(text), arity + extra)

        assert exc_info.value.index == arity

    @given(case=valid_templates())
    def test_smaller_declared_arity_rejected(self, case: tuple[str, int]) -> None:
        """PROPERTY: declaring fewer arguments than used is INVALID_NUMBER."""
        text, arity = case
        assume(arity > 0)

        with pytest.raises(ArgumentError) as exc_info:
            validate_arguments(parse_template(text), arity - 1)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_NUMBER
