"""Tests for config.py, constants.py, core/depth_guard.py and syntax/cursor.py.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from localfmt import DEFAULT_CONFIG, LocalFmtConfig, MessageEncoding
from localfmt.constants import MAX_ARITY, MAX_DEPTH, MAX_TEMPLATE_LENGTH
from localfmt.core import DepthGuard, DepthLimitExceededError, depth_clamp
from localfmt.diagnostics import ConsistencyError, DiagnosticCode
from localfmt.syntax import Cursor

# ============================================================================
# Configuration
# ============================================================================


class TestLocalFmtConfig:
    """LocalFmtConfig defaults and validation."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG == LocalFmtConfig(
            max_template_length=MAX_TEMPLATE_LENGTH,
            max_depth=MAX_DEPTH,
            max_arity=MAX_ARITY,
            collect_all_errors=True,
        )

    @pytest.mark.parametrize("field", ["max_template_length", "max_depth", "max_arity"])
    def test_limits_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            LocalFmtConfig(**{field: 0})  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_depth = 5  # type: ignore[misc]

    def test_encoding_is_str(self) -> None:
        assert str(MessageEncoding.STATIC) == "static"
        assert MessageEncoding("alloc") is MessageEncoding.ALLOC


# ============================================================================
# Depth guard
# ============================================================================


class TestDepthGuard:
    """DepthGuard context manager."""

    def test_enter_and_exit(self) -> None:
        guard = DepthGuard(max_depth=5)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_limit(self) -> None:
        guard = DepthGuard(max_depth=2)

        with guard, guard, pytest.raises(DepthLimitExceededError) as exc_info:
            with guard:
                pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert guard.depth == 0

    def test_check_names_key_path(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard, pytest.raises(DepthLimitExceededError) as exc_info:
            guard.check("words.deep")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.key_path == "words.deep"

    def test_is_consistency_error(self) -> None:
        assert issubclass(DepthLimitExceededError, ConsistencyError)

    def test_clamp(self, caplog: pytest.LogCaptureFixture) -> None:
        limit = sys.getrecursionlimit()

        with caplog.at_level(logging.WARNING, logger="localfmt.core.depth_guard"):
            assert depth_clamp(limit + 100) == limit - 50

        assert "Clamping" in caplog.text
        assert depth_clamp(10) == 10


# ============================================================================
# Cursor
# ============================================================================


class TestCursor:
    """Immutable cursor."""

    def test_advance_returns_new_cursor(self) -> None:
        cursor = Cursor("{0}", 0)

        assert cursor.advance().current == "0"
        assert cursor.current == "{"

    def test_eof(self) -> None:
        cursor = Cursor("a", 1)

        assert cursor.is_eof
        assert cursor.peek() is None
        with pytest.raises(EOFError):
            _ = cursor.current

    def test_find(self) -> None:
        assert Cursor("ab}c", 0).find("}").pos == 2
        assert Cursor("abc", 0).find("}").is_eof

    def test_line_col(self) -> None:
        assert Cursor("ab\ncd", 4).compute_line_col() == (2, 2)
        assert Cursor("abc", 0).compute_line_col() == (1, 1)

    @given(source=st.text(max_size=50), pos=st.integers(min_value=0, max_value=60))
    def test_advance_clamped(self, source: str, pos: int) -> None:
        """PROPERTY: advancing never passes the end of the source."""
        assume(pos <= len(source))

        assert Cursor(source, pos).advance(10).pos <= len(source)
