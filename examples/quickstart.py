"""Quickstart example for localfmt.

This example demonstrates building a validated message table, formatting
messages, switching the current language and reading build diagnostics.

Note: Run from the repository root so the messages/ folder is found.
"""

from enum import Enum
from pathlib import Path

from localfmt import (
    LocaleSetupError,
    LocalFmt,
    MessageEncoding,
    MessageSchema,
    SharedLanguage,
    StaticSelector,
)
from localfmt.diagnostics import DiagnosticFormatter, OutputFormat


class Lang(Enum):
    EN = "en"
    JA = "ja"


SCHEMA = MessageSchema.from_mapping(
    {"hello": 1, "farewell": 0, "words": {"ownership": 0, "borrow": 2}}
)

SOURCES = {
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

# Example 1: Static selection
print("=" * 50)
print("Example 1: Static Selection")
print("=" * 50)

fmt = LocalFmt.build(Lang, SCHEMA, SOURCES, StaticSelector(Lang.EN))

print(fmt.hello.format("World"))
# Output: Hello, World!

print(fmt.words.borrow.format("x", "y"))
# Output: x borrows y

print(fmt.get(Lang.JA).words.ownership.format())
# Output: 所有権

# Example 2: Dynamic selection through a shared language
print("\n" + "=" * 50)
print("Example 2: Switching Languages")
print("=" * 50)

current = SharedLanguage(Lang.EN)
fmt = LocalFmt.build(Lang, SCHEMA, SOURCES, current.selector())

print(fmt.farewell.format())
# Output: Goodbye

current.set(Lang.JA)
print(fmt.farewell.format())
# Output: さようなら

# Example 3: Named constants in static messages
print("\n" + "=" * 50)
print("Example 3: Named Constants")
print("=" * 50)

about = LocalFmt.build(
    Lang,
    None,
    {
        "EN": {"about": "{APP} allows {u:MAX} retries, {0}"},
        "JA": {"about": "{APP}の再試行は{u:MAX}回まで、{0}"},
    },
    StaticSelector(Lang.EN),
    encoding=MessageEncoding.STATIC,
    constants={"APP": "localfmt", "MAX": 3},
)

print(about.about.format("friend"))
# Output: localfmt allows 3 retries, friend

# Example 4: Loading a folder of mixed formats
print("\n" + "=" * 50)
print("Example 4: Loading Files")
print("=" * 50)

folder = Path(__file__).parent / "messages"
loaded = LocalFmt.from_path(Lang, SCHEMA, folder, StaticSelector(Lang.JA))

print(loaded.hello.format("世界"))
# Output: こんにちは、世界!

# Example 5: Every defect is reported at once
print("\n" + "=" * 50)
print("Example 5: Build Diagnostics")
print("=" * 50)

broken = {
    "EN": {"hello": "Hello, {1}!", "farewell": "Goodbye", "words": SOURCES["EN"]["words"]},
    "JA": {"hello": "こんにちは、{0}!", "words": SOURCES["JA"]["words"]},
}

try:
    LocalFmt.build(Lang, SCHEMA, broken, StaticSelector(Lang.EN))
except LocaleSetupError as e:
    formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    print(formatter.format_all(e.diagnostics))
