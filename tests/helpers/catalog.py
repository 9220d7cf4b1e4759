"""Shared test data: a language enumeration and a consistent catalog.

Imported by conftest fixtures and by tests that need the enum itself
(for selectors and table lookups).
"""

from enum import Enum

__all__ = ["CATALOG", "SCHEMA_MAPPING", "Lang", "catalog_copy"]


class Lang(Enum):
    """Languages used throughout the test suite."""

    EN = "en"
    JA = "ja"


CATALOG: dict[str, dict[str, object]] = {
    "EN": {
        "hello": "Hello, {0}!",
        "farewell": "Goodbye",
        "words": {"ownership": "Ownership", "borrow": "{0} borrows {1}"},
    },
    "JA": {
        "hello": "こんにちは、{0}!",
        "farewell": "さようなら",
        "words": {"ownership": "所有権", "borrow": "{0}は{1}を借用"},
    },
}

SCHEMA_MAPPING: dict[str, object] = {
    "hello": 1,
    "farewell": 0,
    "words": {"ownership": 0, "borrow": None},
}


def catalog_copy() -> dict[str, dict[str, object]]:
    """Deep copy of CATALOG that a test may mutate."""
    return {
        language: {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in tree.items()
        }
        for language, tree in CATALOG.items()
    }
