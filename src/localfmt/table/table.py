"""Locale table: every language mapped to its locale tree.

A LocaleTable is total over its language enumeration. Building one checks
that every member has a tree and that no tree belongs to an unknown
language, so a lookup on a built table cannot fail.

Python 3.13+.
"""

import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from localfmt.diagnostics import Diagnostic, ErrorTemplate, LocaleSetupError
from localfmt.tree.nodes import MessageGroup

from .languages import resolve_language

__all__ = ["LocaleTable", "match_sources"]

logger = logging.getLogger(__name__)


def match_sources[L: Enum, V](
    languages: type[L], sources: Mapping[str | L, V]
) -> tuple[dict[L, V], list[Diagnostic]]:
    """Key sources by enum member.

    Keys may be members or names (see resolve_language). Members missing
    from sources and keys matching no member are both reported.

    Returns:
        (matched sources in enum order, diagnostics)
    """
    matched: dict[L, V] = {}
    diagnostics: list[Diagnostic] = []
    known = tuple(member.name for member in languages)

    for key, value in sources.items():
        if isinstance(key, languages):
            member: L | None = key
        elif isinstance(key, str):
            member = resolve_language(languages, key)
        else:
            member = None
        if member is None:
            diagnostics.append(ErrorTemplate.unknown_language(str(key), known))
            continue
        matched[member] = value

    for member in languages:
        if member not in matched:
            diagnostics.append(ErrorTemplate.missing_language(member.name))

    ordered = {member: matched[member] for member in languages if member in matched}
    return ordered, diagnostics


class LocaleTable[L: Enum](Mapping[L, MessageGroup]):
    """Immutable, total mapping from language to locale tree.

    Example:
        >>> table = LocaleTable.build(Lang, {"EN": en_tree, "JA": ja_tree})
        >>> table[Lang.JA] is ja_tree
        True
    """

    __slots__ = ("_languages", "_trees")

    def __init__(self, languages: type[L], trees: Mapping[L, MessageGroup]) -> None:
        """Wrap trees already known to cover every member of languages.

        Use build() for checked construction.
        """
        self._languages = languages
        self._trees: Mapping[L, MessageGroup] = MappingProxyType(dict(trees))

    @classmethod
    def build(
        cls, languages: type[L], trees: Mapping[str | L, MessageGroup]
    ) -> "LocaleTable[L]":
        """Build a table, checking it covers exactly the enumeration.

        Raises:
            LocaleSetupError: MISSING_LANGUAGE / UNKNOWN_LANGUAGE diagnostics
        """
        matched, diagnostics = match_sources(languages, trees)
        if diagnostics:
            raise LocaleSetupError(diagnostics)
        logger.info("Built locale table with %d language(s)", len(matched))
        return cls(languages, matched)

    @property
    def languages(self) -> type[L]:
        """The language enumeration."""
        return self._languages

    def __getitem__(self, language: L) -> MessageGroup:
        return self._trees[language]

    def __iter__(self) -> Iterator[L]:
        return iter(self._trees)

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        names = ", ".join(member.name for member in self._trees)
        return f"LocaleTable({self._languages.__name__}: {names})"
