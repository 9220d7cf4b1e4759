"""Load message sources from files and folders.

Two layouts are supported:

    File    one file, top-level tables keyed by language name

                # messages.toml
                [EN]
                hello = "Hello, {0}!"
                [JA]
                hello = "こんにちは、{0}!"

    Folder  one file per language, the file stem is the language name

                lang/EN.toml   hello = "Hello, {0}!"
                lang/JA.toml   hello = "こんにちは、{0}!"

Either way the result maps language names to plain nested dicts of
template text, ready for :func:`localfmt.tree.builder.build_tree`.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from localfmt.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from localfmt.core.depth_guard import DepthGuard, DepthLimitExceededError
from localfmt.diagnostics import ErrorTemplate, SourceError

from .merge import merge_sources
from .readers import READERS, SourceReader, reader_for

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Types
    "SourceTree",
    "LanguageSources",
    # Single files
    "read_source",
    "load_file",
    # Folders and dispatch
    "load_folder",
    "load_path",
]

logger = logging.getLogger(__name__)

type SourceTree = dict[str, str | SourceTree]
type LanguageSources = dict[str, SourceTree]


def _reader_for_path(path: Path, reader: SourceReader | None) -> SourceReader:
    extension = path.suffix.lower()
    if reader is None:
        return reader_for(extension or path.name)
    if extension not in reader.extensions:
        raise SourceError(ErrorTemplate.wrong_extension(str(path), reader.extensions[0], extension))
    return reader


def read_source(path: str | Path, reader: SourceReader | None = None) -> object:
    """Read and parse one source file.

    Args:
        path: File to read
        reader: Reader to use; chosen from the file extension when None

    Returns:
        The parsed value tree

    Raises:
        SourceError: FILE_NOT_FOUND, WRONG_EXTENSION, UNSUPPORTED_FORMAT,
            SOURCE_TOO_LARGE, INVALID_ENCODING or SOURCE_PARSE_FAILED
    """
    path = Path(path)
    if not path.is_file():
        raise SourceError(ErrorTemplate.file_not_found(str(path)))
    reader = _reader_for_path(path, reader)

    size = path.stat().st_size
    if size > MAX_SOURCE_SIZE:
        raise SourceError(ErrorTemplate.source_too_large(str(path), size, MAX_SOURCE_SIZE))

    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceError(ErrorTemplate.invalid_encoding(str(path), str(e))) from e

    try:
        value = reader.parse(text)
    except SourceError as e:
        if e.diagnostic is None:
            raise
        raise SourceError(
            ErrorTemplate.source_parse_failed(reader.name, str(e.__cause__ or e), str(path))
        ) from e

    logger.debug("Read %s source %s (%d bytes)", reader.name, path, size)
    return value


def _to_tree(
    reader: SourceReader,
    mapping: Mapping[str, object],
    language: str,
    parts: tuple[str, ...],
    guard: DepthGuard,
    source_path: str,
) -> SourceTree:
    guard.check(".".join(parts) or None)
    tree: SourceTree = {}
    with guard:
        for key, value in reader.iterate(mapping):
            key_parts = (*parts, key)
            text = reader.as_text(value)
            if text is not None:
                tree[key] = text
                continue
            nested = reader.is_nested(value)
            if nested is not None:
                tree[key] = _to_tree(reader, nested, language, key_parts, guard, source_path)
                continue
            diagnostic = ErrorTemplate.invalid_leaf(
                language, ".".join(key_parts), type(value).__name__
            )
            raise SourceError(diagnostic.with_location(source_path=source_path))
    return tree


def _language_tree(
    reader: SourceReader,
    value: object,
    language: str,
    source_path: str,
    *,
    keyed: bool = True,
) -> SourceTree:
    nested = reader.is_nested(value)
    if nested is None:
        key_path = language if keyed else None
        raise SourceError(ErrorTemplate.source_not_mapping(reader.name, source_path, key_path))
    try:
        return _to_tree(reader, nested, language, (), DepthGuard(max_depth=MAX_DEPTH), source_path)
    except DepthLimitExceededError as e:
        if e.diagnostic is None:
            raise
        diagnostic = e.diagnostic.with_location(language=language, source_path=source_path)
        raise SourceError(diagnostic) from e


def load_file(path: str | Path, reader: SourceReader | None = None) -> LanguageSources:
    """Load a file whose top-level tables are keyed by language name.

    Raises:
        SourceError: Any read_source() error, SOURCE_NOT_MAPPING when the
            top level or a language entry is not a table, INVALID_LEAF for
            a value that is neither text nor a table, NESTING_DEPTH_EXCEEDED
            for tables nested deeper than MAX_DEPTH
    """
    path = Path(path)
    if not path.is_file():
        raise SourceError(ErrorTemplate.file_not_found(str(path)))
    reader = _reader_for_path(path, reader)
    value = read_source(path, reader)
    top = reader.is_nested(value)
    if top is None:
        raise SourceError(ErrorTemplate.source_not_mapping(reader.name, str(path)))

    sources: LanguageSources = {}
    for language, entry in reader.iterate(top):
        sources[language] = _language_tree(reader, entry, language, str(path))
    logger.info("Loaded %d language(s) from %s", len(sources), path)
    return sources


def load_folder(path: str | Path, reader: SourceReader | None = None) -> LanguageSources:
    """Load one file per language from a folder.

    The file stem names the language. Files whose extension the reader
    does not handle (any registered reader when reader is None) are
    skipped; subdirectories are ignored.

    Raises:
        SourceError: FILE_NOT_FOUND when path is not a directory, or any
            error of the individual files
    """
    path = Path(path)
    if not path.is_dir():
        raise SourceError(ErrorTemplate.file_not_found(str(path)))

    sources: LanguageSources = {}
    for entry in sorted(path.iterdir()):
        if not entry.is_file():
            continue
        extension = entry.suffix.lower()
        if reader is not None:
            entry_reader: SourceReader | None = reader if extension in reader.extensions else None
        else:
            entry_reader = READERS.get(extension.removeprefix("."))
        if entry_reader is None:
            logger.warning("Skipping %s: not a message source", entry)
            continue
        language = entry.stem
        value = read_source(entry, entry_reader)
        sources[language] = _language_tree(entry_reader, value, language, str(entry), keyed=False)
        logger.debug("Loaded language %s from %s", language, entry)

    logger.info("Loaded %d language(s) from folder %s", len(sources), path)
    return sources


def load_path(
    path: str | Path,
    reader: SourceReader | None = None,
    *,
    overlay: str | Path | None = None,
) -> LanguageSources:
    """Load a file or a folder, optionally merging an overlay on top.

    Args:
        path: Source file or folder
        reader: Reader to use; chosen per file extension when None
        overlay: Second file or folder whose messages replace or extend
            those of path (see merge_sources)

    Raises:
        SourceError: Any loading error, or MERGE_CONFLICT
    """
    path = Path(path)
    sources = load_folder(path, reader) if path.is_dir() else load_file(path, reader)
    if overlay is None:
        return sources
    return merge_sources(sources, load_path(overlay, reader))
