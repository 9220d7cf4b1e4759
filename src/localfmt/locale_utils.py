"""Locale helpers: BCP-47 codes, system locale detection, language matching.

Maps locale codes from the environment ("ja_JP.UTF-8", "en-US") onto the
members of a language enumeration, so an application can start in the
user's language:

    fmt = LocalFmt.build(Lang, schema, sources, system_selector(Lang, Lang.EN))

Display names come from Babel's CLDR data and need the optional ``babel``
extra; everything else works without it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from localfmt.table.selector import StaticSelector

if TYPE_CHECKING:
    from enum import Enum

    from babel import Locale

__all__ = [
    "BabelImportError",
    "display_name",
    "get_babel_locale",
    "get_system_locale",
    "language_subtag",
    "match_language",
    "normalize_locale",
    "system_selector",
]

logger = logging.getLogger(__name__)


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self) -> None:
        super().__init__(
            "Babel is required for locale display names. "
            "Install with: pip install localfmt[babel]"
        )


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 code to POSIX form and drop any encoding suffix.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("ja_JP.UTF-8")
        'ja_JP'
    """
    return locale_code.split(".")[0].split("@")[0].replace("-", "_")


def language_subtag(locale_code: str) -> str:
    """Lower-case language part of a locale code.

    Example:
        >>> language_subtag("pt-BR")
        'pt'
    """
    return normalize_locale(locale_code).split("_")[0].lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Babel Locale for a code, cached.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If the locale is not recognized
        ValueError: If the code is malformed
    """
    try:
        # Lazy import: Babel loads CLDR data at import time; defer until needed
        from babel import Locale  # noqa: PLC0415
    except ImportError as e:
        raise BabelImportError from e
    return Locale.parse(normalize_locale(locale_code))


def display_name(locale_code: str, in_locale: str | None = None) -> str:
    """Human-readable name of a language, as used in a language menu.

    Args:
        locale_code: Language to name ("ja", "pt_BR")
        in_locale: Language to write the name in; defaults to locale_code
            itself (an endonym, "日本語")

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> display_name("ja", "en")
        'Japanese'
    """
    locale = get_babel_locale(locale_code)
    target = get_babel_locale(in_locale) if in_locale is not None else locale
    name = locale.get_display_name(target)
    return name if name is not None else locale_code


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect the user's locale from the OS and the environment.

    Detection order: locale.getlocale(), then LC_ALL, LC_MESSAGES, LANG.
    "C" and "POSIX" are ignored.

    Args:
        raise_on_failure: Raise instead of returning "en_US" when nothing
            usable is set

    Returns:
        Locale code in POSIX form

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None
    if system_locale and system_locale not in ("C", "POSIX"):
        return normalize_locale(system_locale)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)
    return "en_US"


def match_language[L: Enum](
    languages: type[L], locale_code: str, default: L | None = None
) -> L | None:
    """Member of languages best matching a locale code.

    A member matches when its name or string value equals the full code
    ("pt_BR", case-insensitive), or else equals the language subtag ("pt").

    Example:
        >>> match_language(Lang, "ja_JP.UTF-8")
        <Lang.JA: 'ja'>
        >>> match_language(Lang, "fr-FR", Lang.EN)
        <Lang.EN: 'en'>
    """
    full = normalize_locale(locale_code).lower()
    subtag = language_subtag(locale_code)

    def spellings(member: L) -> set[str]:
        names = {member.name.lower()}
        if isinstance(member.value, str):
            names.add(normalize_locale(member.value).lower())
        return names

    for wanted in (full, subtag):
        for member in languages:
            if wanted in spellings(member):
                return member
    return default


def system_selector[L: Enum](languages: type[L], default: L) -> StaticSelector[L]:
    """StaticSelector for the system language, or default when unsupported."""
    code = get_system_locale()
    language = match_language(languages, code)
    if language is None:
        language = default
    logger.debug("System locale %s selects %s", code, language.name)
    return StaticSelector(language)
