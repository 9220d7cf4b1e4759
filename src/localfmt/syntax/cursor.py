"""Immutable cursor for template scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor
    - Line:column computed on demand (only for errors)

Only ``{``, ``}`` and ``\\`` are significant to the template grammar. All
three are ASCII, so advancing one code point at a time finds exactly the
tokens a byte scanner would; multi-byte UTF-8 characters are copied through
untouched either way.
"""

from dataclasses import dataclass

from localfmt.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position inside a template string.

    Example:
        >>> cursor = Cursor("{0}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '0'
        >>> cursor.current  # Original unchanged
        '{'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of template at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str | None:
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def find(self, char: str) -> "Cursor":
        """Return a cursor at the next occurrence of char, or at EOF.

        Example:
            >>> Cursor("ab}c", 0).find("}").pos
            2
            >>> Cursor("abc", 0).find("}").is_eof
            True
        """
        index = self.source.find(char, self.pos)
        if index < 0:
            return Cursor(self.source, len(self.source))
        return Cursor(self.source, index)

    def slice_to(self, end_pos: int) -> str:
        """Source substring from the current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute (line, column) of the current position, both 1-indexed.

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return line, col

    def span_to(self, end_pos: int) -> SourceSpan:
        """SourceSpan from the current position to end_pos."""
        line, column = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=column)
