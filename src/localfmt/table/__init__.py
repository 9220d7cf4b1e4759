"""Locale tables and language selection.

Python 3.13+.
"""

from .languages import resolve_language
from .rwlock import RWLock
from .selector import DynamicSelector, LanguageSelector, StaticSelector
from .shared import SharedLanguage
from .table import LocaleTable, match_sources

__all__ = [
    "DynamicSelector",
    "LanguageSelector",
    "LocaleTable",
    "RWLock",
    "SharedLanguage",
    "StaticSelector",
    "match_sources",
    "resolve_language",
]
