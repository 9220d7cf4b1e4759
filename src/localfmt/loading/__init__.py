"""Loading message sources from TOML, JSON and YAML files.

Python 3.13+.
"""

from .loader import LanguageSources, SourceTree, load_file, load_folder, load_path, read_source
from .merge import merge_sources
from .readers import READERS, JsonReader, SourceReader, TomlReader, YamlReader, reader_for

__all__ = [
    "READERS",
    "JsonReader",
    "LanguageSources",
    "SourceReader",
    "SourceTree",
    "TomlReader",
    "YamlReader",
    "load_file",
    "load_folder",
    "load_path",
    "merge_sources",
    "read_source",
    "reader_for",
]
