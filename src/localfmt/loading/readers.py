"""Source readers for hierarchical message files.

A reader turns the text of one file into a tree of nested mappings whose
leaves are template strings. Readers are small and stateless; the loader
(:mod:`localfmt.loading.loader`) decides which files to read and how their
trees map to languages.

Supported formats:
    toml    tomllib (standard library)
    json    json (standard library)
    yaml    PyYAML ``safe_load``

Python 3.13+.
"""

import json
import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

import yaml

from localfmt.diagnostics import ErrorTemplate, SourceError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "SourceReader",
    # Readers
    "TomlReader",
    "JsonReader",
    "YamlReader",
    # Registry
    "READERS",
    "reader_for",
]


class SourceReader(Protocol):
    """Protocol for message file readers.

    A Protocol (structural typing) rather than a base class, so readers for
    other formats can be plugged in without importing this module.

    Example:
        >>> class IniReader:
        ...     name = "ini"
        ...     extensions = (".ini",)
        ...     def parse(self, text: str) -> object: ...
        ...     def is_nested(self, value: object) -> Mapping[str, object] | None: ...
        ...     def as_text(self, value: object) -> str | None: ...
        ...     def iterate(self, mapping): ...
    """

    @property
    def name(self) -> str:
        """Format name used in diagnostics ("toml")."""
        ...

    @property
    def extensions(self) -> tuple[str, ...]:
        """File extensions handled, with the dot; the first one is canonical."""
        ...

    def parse(self, text: str) -> object:
        """Parse file text into a value tree.

        Raises:
            SourceError: SOURCE_PARSE_FAILED on a syntax error or nesting
                too deep for the parser
        """
        ...

    def is_nested(self, value: object) -> Mapping[str, object] | None:
        """value as a mapping, or None when it is not one."""
        ...

    def as_text(self, value: object) -> str | None:
        """value as template text, or None when it is not text."""
        ...

    def iterate(self, mapping: Mapping[str, object]) -> Iterable[tuple[str, object]]:
        """(key, value) pairs of a mapping in file order."""
        ...


class _MappingReaderMixin:
    """is_nested/as_text/iterate shared by readers producing dicts and strs."""

    __slots__ = ()

    def is_nested(self, value: object) -> Mapping[str, object] | None:
        return value if isinstance(value, Mapping) else None

    def as_text(self, value: object) -> str | None:
        return value if isinstance(value, str) else None

    def iterate(self, mapping: Mapping[str, object]) -> Iterable[tuple[str, object]]:
        return ((str(key), value) for key, value in mapping.items())


@dataclass(frozen=True, slots=True)
class TomlReader(_MappingReaderMixin):
    """TOML message files (``[words]`` tables become groups)."""

    name: str = "toml"
    extensions: tuple[str, ...] = (".toml",)

    def parse(self, text: str) -> object:
        try:
            return tomllib.loads(text)
        except (tomllib.TOMLDecodeError, RecursionError) as e:
            raise SourceError(ErrorTemplate.source_parse_failed(self.name, str(e))) from e


@dataclass(frozen=True, slots=True)
class JsonReader(_MappingReaderMixin):
    """JSON message files (nested objects become groups)."""

    name: str = "json"
    extensions: tuple[str, ...] = (".json",)

    def parse(self, text: str) -> object:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise SourceError(ErrorTemplate.source_parse_failed(self.name, str(e))) from e


@dataclass(frozen=True, slots=True)
class YamlReader(_MappingReaderMixin):
    """YAML message files, read with ``yaml.safe_load``.

    An empty document reads as an empty mapping.
    """

    name: str = "yaml"
    extensions: tuple[str, ...] = (".yaml", ".yml")

    def parse(self, text: str) -> object:
        try:
            data = yaml.safe_load(text)
        except (yaml.YAMLError, RecursionError) as e:
            raise SourceError(ErrorTemplate.source_parse_failed(self.name, str(e))) from e
        return {} if data is None else data


READERS: Mapping[str, SourceReader] = {
    "toml": TomlReader(),
    "json": JsonReader(),
    "yaml": YamlReader(),
    "yml": YamlReader(),
}


def reader_for(file_type: str) -> SourceReader:
    """Reader registered for a format name or file extension.

    Example:
        >>> reader_for("toml").name
        'toml'
        >>> reader_for(".yml").name
        'yaml'

    Raises:
        SourceError: UNSUPPORTED_FORMAT for an unknown format
    """
    key = file_type.lower().removeprefix(".")
    reader = READERS.get(key)
    if reader is None:
        raise SourceError(ErrorTemplate.unsupported_format(file_type, tuple(READERS)))
    return reader
