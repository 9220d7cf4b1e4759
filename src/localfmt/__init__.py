"""localfmt - validated, multi-language message formatting.

Compiles parameterized templates ("Hello, {0}!") for a closed set of
languages, proves every language defines the same messages with the same
arguments, and formats them in whichever language is current.

Public API:
    LocalFmt - Validated table of messages plus language selection
    MessageSchema - Declared message keys, groups and arities
    StaticMessage - Message built from process-lifetime constants
    AllocMessage - Message built from runtime text
    StaticSelector / DynamicSelector - Fixed or callback language choice
    SharedLanguage - Thread-safe current-language cell
    parse_template / serialize_segments - Template syntax
    validate_arguments - Placeholder index validation

Exceptions:
    LocalFmtError - Base exception class
    TemplateSyntaxError - Malformed template
    ArgumentError - Placeholder indices are not 0..N-1
    ConsistencyError - Languages disagree on shape or arity
    SourceError - Message files cannot be read
    LocaleSetupError - Every defect found while building
    FormatArgumentError - format() called with wrong arguments

Submodules:
    localfmt.syntax - Parser, segments and serializer
    localfmt.message - Static and allocated messages
    localfmt.tree - Schema, locale trees and consistency checker
    localfmt.table - Locale table, selectors and shared language
    localfmt.loading - TOML, JSON and YAML sources
    localfmt.diagnostics - Error codes, templates and formatting
    localfmt.locale_utils - System locale detection and Babel display names
"""

from .config import DEFAULT_CONFIG, LocalFmtConfig, MessageEncoding
from .diagnostics import (
    ArgumentError,
    ConsistencyError,
    FormatArgumentError,
    LocaleSetupError,
    LocalFmtError,
    SelectorModeError,
    SourceError,
    TemplateSyntaxError,
)
from .facade import LocalFmt
from .message import AllocMessage, Message, StaticMessage
from .syntax import parse_template, serialize_segments
from .table import DynamicSelector, LocaleTable, SharedLanguage, StaticSelector
from .tree import MessageGroup, MessageSchema
from .validation import validate_arguments

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "AllocMessage",
    "ArgumentError",
    "ConsistencyError",
    "DynamicSelector",
    "FormatArgumentError",
    "LocalFmt",
    "LocalFmtConfig",
    "LocalFmtError",
    "LocaleSetupError",
    "LocaleTable",
    "Message",
    "MessageEncoding",
    "MessageGroup",
    "MessageSchema",
    "SelectorModeError",
    "SharedLanguage",
    "SourceError",
    "StaticMessage",
    "StaticSelector",
    "TemplateSyntaxError",
    "__version__",
    "parse_template",
    "serialize_segments",
    "validate_arguments",
]
