"""Language selectors.

A selector decides which language is current each time a message is
looked up:

    StaticSelector(Lang.EN)              always Lang.EN
    DynamicSelector(lambda: state.lang)  whatever the callback returns now

A dynamic callback may read shared mutable state. The facade neither owns
nor locks that state; SharedLanguage (see :mod:`localfmt.table.shared`)
is a ready-made thread-safe cell for it.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

__all__ = ["DynamicSelector", "LanguageSelector", "StaticSelector"]


@dataclass(frozen=True, slots=True)
class StaticSelector[L: Enum]:
    """Selector fixed to one language.

    Attributes:
        language: The language current_language() always returns
    """

    language: L

    @property
    def is_dynamic(self) -> bool:
        return False

    def current(self) -> L:
        """The fixed language."""
        return self.language


@dataclass(frozen=True, slots=True)
class DynamicSelector[L: Enum]:
    """Selector asking a callback on every lookup.

    Attributes:
        callback: Zero-argument callable returning the current language.
            Must be safe to call from every thread that formats messages.
    """

    callback: Callable[[], L]

    @property
    def is_dynamic(self) -> bool:
        return True

    def current(self) -> L:
        """Whatever the callback returns right now."""
        return self.callback()


type LanguageSelector[L: Enum] = StaticSelector[L] | DynamicSelector[L]
