"""Overlay one set of message sources onto another.

Typical use is a shipped base catalog plus a deployment-specific file that
rewords a few messages or adds a language:

    sources = merge_sources(load_path("lang"), load_path("overrides.toml"))

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from localfmt.constants import KEY_PATH_SEPARATOR
from localfmt.diagnostics import ErrorTemplate, SourceError

__all__ = ["merge_sources"]

logger = logging.getLogger(__name__)


def _merge_tree(
    base: Mapping[str, object],
    overlay: Mapping[str, object],
    language: str,
    parts: tuple[str, ...],
) -> dict[str, object]:
    merged: dict[str, object] = dict(base)
    for key, value in overlay.items():
        if key not in merged:
            merged[key] = value
            continue
        current = merged[key]
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _merge_tree(current, value, language, (*parts, key))
        elif isinstance(current, Mapping) or isinstance(value, Mapping):
            key_path = KEY_PATH_SEPARATOR.join((*parts, key))
            diagnostic = ErrorTemplate.merge_conflict(key_path)
            raise SourceError(diagnostic.with_location(language=language))
        else:
            merged[key] = value
    return merged


def merge_sources[T: Mapping[str, object]](
    base: Mapping[str, T], overlay: Mapping[str, T]
) -> dict[str, dict[str, object]]:
    """Deep-merge overlay onto base, per language.

    Rules:
        - a language only in one side is taken as is
        - text in the overlay replaces text in the base
        - nested tables merge recursively
        - text on one side and a table on the other is a conflict

    Neither input is modified.

    Raises:
        SourceError: MERGE_CONFLICT naming the language and key path

    Example:
        >>> merge_sources({"EN": {"a": "1", "b": "2"}}, {"EN": {"b": "B"}, "JA": {"a": "一"}})
        {'EN': {'a': '1', 'b': 'B'}, 'JA': {'a': '一'}}
    """
    merged: dict[str, dict[str, object]] = {language: dict(tree) for language, tree in base.items()}
    for language, tree in overlay.items():
        if language in merged:
            merged[language] = _merge_tree(merged[language], tree, language, ())
        else:
            merged[language] = dict(tree)
    logger.debug("Merged overlay with %d language(s) onto %d", len(overlay), len(base))
    return merged
