"""Thread-safe current-language cell.

    current = SharedLanguage(Lang.EN)
    fmt = LocalFmt.build(Lang, schema, sources, current.selector())
    ...
    current.set(Lang.JA)   # next lookup in any thread uses JA

Python 3.13+.
"""

import logging
from enum import Enum

from .rwlock import RWLock
from .selector import DynamicSelector

__all__ = ["SharedLanguage"]

logger = logging.getLogger(__name__)


class SharedLanguage[L: Enum]:
    """Current language shared between threads.

    Reads take the shared side of an RWLock, so concurrent lookups never
    wait on each other; set() takes the exclusive side.

    Example:
        >>> current = SharedLanguage(Lang.EN)
        >>> selector = current.selector()
        >>> current.set(Lang.JA)
        >>> selector.current()
        <Lang.JA: 'ja'>
    """

    __slots__ = ("_language", "_lock", "_timeout")

    def __init__(self, language: L, *, timeout: float | None = None) -> None:
        """Initialize SharedLanguage.

        Args:
            language: Initial language
            timeout: Lock acquisition timeout in seconds (None waits forever)
        """
        self._language = language
        self._lock = RWLock()
        self._timeout = timeout

    def get(self) -> L:
        """Current language.

        Raises:
            TimeoutError: If the lock is not acquired within the timeout
        """
        with self._lock.read(timeout=self._timeout):
            return self._language

    def set(self, language: L) -> None:
        """Replace the current language.

        Raises:
            TypeError: If language is not a member of the same enumeration
            TimeoutError: If the lock is not acquired within the timeout
        """
        if type(language) is not type(self._language):
            msg = (
                f"Expected a {type(self._language).__name__} member, "
                f"got {type(language).__name__}"
            )
            raise TypeError(msg)
        with self._lock.write(timeout=self._timeout):
            previous, self._language = self._language, language
        logger.debug("Current language changed from %s to %s", previous.name, language.name)

    def selector(self) -> DynamicSelector[L]:
        """Dynamic selector reading this cell."""
        return DynamicSelector(self.get)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"SharedLanguage({self.get()!r})"
