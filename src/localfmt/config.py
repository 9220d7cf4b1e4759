"""Build configuration for LocalFmt.

A single frozen dataclass that encapsulates the limits and policies applied
while compiling message sources, plus the MessageEncoding selector.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from localfmt.constants import MAX_ARITY, MAX_DEPTH, MAX_TEMPLATE_LENGTH

__all__ = ["DEFAULT_CONFIG", "LocalFmtConfig", "MessageEncoding"]


class MessageEncoding(StrEnum):
    """Which message representation the tree builder produces.

    StrEnum provides automatic string conversion: str(MessageEncoding.STATIC) == "static"
    """

    STATIC = "static"
    """StaticMessage: named constants and numeric constants allowed."""

    ALLOC = "alloc"
    """AllocMessage: numeric placeholders only."""


@dataclass(frozen=True, slots=True)
class LocalFmtConfig:
    """Immutable configuration for building locale tables.

    All fields have sensible defaults; ``LocalFmtConfig()`` is usable as is.

    Attributes:
        max_template_length: Maximum characters per template (default: 10000).
        max_depth: Maximum nesting of message groups (default: 100).
        max_arity: Maximum arguments per message (default: 1000).
        collect_all_errors: Report every setup defect instead of stopping at
            the first one (default: True). Setup fails either way.

    Example:
        >>> config = LocalFmtConfig(max_depth=8, collect_all_errors=False)
        >>> fmt = LocalFmt.build(Lang, schema, sources, StaticSelector(Lang.EN), config=config)
    """

    max_template_length: int = MAX_TEMPLATE_LENGTH
    max_depth: int = MAX_DEPTH
    max_arity: int = MAX_ARITY
    collect_all_errors: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If any limit is not positive.
        """
        if self.max_template_length <= 0:
            msg = "max_template_length must be positive"
            raise ValueError(msg)
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if self.max_arity <= 0:
            msg = "max_arity must be positive"
            raise ValueError(msg)


DEFAULT_CONFIG = LocalFmtConfig()
