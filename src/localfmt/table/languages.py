"""Language enumerations.

The set of supported languages is a plain ``enum.Enum``. Source files name
languages with strings; a string matches a member by member name first
(``"EN"`` -> ``Lang.EN``) and then by value (``"en"`` -> ``Lang.EN`` when
``Lang.EN.value == "en"``).

Python 3.13+. Zero external dependencies.
"""

from enum import Enum

__all__ = ["resolve_language"]


def resolve_language[L: Enum](languages: type[L], name: str) -> L | None:
    """Member of languages named by a source key, or None.

    Example:
        >>> class Lang(Enum):
        ...     EN = "en"
        ...     JA = "ja"
        >>> resolve_language(Lang, "JA")
        <Lang.JA: 'ja'>
        >>> resolve_language(Lang, "en")
        <Lang.EN: 'en'>
        >>> resolve_language(Lang, "fr") is None
        True
    """
    member = languages.__members__.get(name)
    if member is not None:
        return member
    for candidate in languages:
        if isinstance(candidate.value, str) and candidate.value == name:
            return candidate
    return None
