"""LocalFmt: validated locale table plus language selection.

Building a LocalFmt is one atomic step: every language's sources are
compiled, the table is checked for totality, and every tree is checked
against the schema. Nothing is exposed unless all of it passes; a single
bad language fails the whole build.

    class Lang(Enum):
        EN = "en"
        JA = "ja"

    schema = MessageSchema.from_mapping({"hello": 1, "words": {"rust": 0}})
    fmt = LocalFmt.build(Lang, schema, {
        "EN": {"hello": "Hello, {0}!", "words": {"rust": "Rust"}},
        "JA": {"hello": "こんにちは、{0}!", "words": {"rust": "ラスト"}},
    }, StaticSelector(Lang.EN))

    fmt.hello.format("World")       # 'Hello, World!'
    fmt.get(Lang.JA).words.rust.text

Python 3.13+.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import NoReturn

from localfmt.config import DEFAULT_CONFIG, LocalFmtConfig, MessageEncoding
from localfmt.diagnostics import Diagnostic, LocaleSetupError, SelectorModeError
from localfmt.loading.loader import load_path
from localfmt.loading.readers import SourceReader
from localfmt.message.constants import ConstantValue
from localfmt.table.selector import DynamicSelector, LanguageSelector, StaticSelector
from localfmt.table.table import LocaleTable, match_sources
from localfmt.tree.builder import build_tree
from localfmt.tree.checker import ConsistencyChecker
from localfmt.tree.nodes import MessageGroup, TreeNode
from localfmt.tree.schema import MessageSchema

__all__ = ["LocalFmt"]

logger = logging.getLogger(__name__)


class LocalFmt[L: Enum]:
    """Messages for every language, and the rule picking the current one.

    Attribute access is forwarded to the current language's tree, so
    ``fmt.hello`` is ``fmt.messages.hello``. The selector is consulted on
    every access; a Message already obtained never changes when the
    current language does.

    Keys named like a LocalFmt member (``get``, ``table``, ``messages``,
    ``selector``, ``is_dynamic``, ``current_language``, ``set_selector``)
    resolve to the member; reach those messages with
    ``fmt.messages["table"]``.

    Thread Safety:
        The table is immutable. Lookups only call the selector, whose
        callback must itself be thread-safe (see SharedLanguage).
    """

    __slots__ = ("_selector", "_table")

    def __init__(self, table: LocaleTable[L], selector: LanguageSelector[L]) -> None:
        """Wrap an already-built table.

        Use build() or from_path() to compile and check sources.

        Raises:
            TypeError: If a static selector names a language outside the table
        """
        if isinstance(selector, StaticSelector) and not isinstance(
            selector.language, table.languages
        ):
            msg = (
                f"Selector language {selector.language!r} is not a "
                f"{table.languages.__name__} member"
            )
            raise TypeError(msg)
        self._table = table
        self._selector: LanguageSelector[L] = selector

    @classmethod
    def build(
        cls,
        languages: type[L],
        schema: MessageSchema | None,
        sources: Mapping[str | L, Mapping[str, object]],
        selector: LanguageSelector[L],
        *,
        encoding: MessageEncoding = MessageEncoding.STATIC,
        constants: Mapping[str, ConstantValue] | None = None,
        config: LocalFmtConfig = DEFAULT_CONFIG,
    ) -> "LocalFmt[L]":
        """Compile and check every language, then wrap the result.

        Args:
            languages: The language enumeration
            schema: Message keys and arities; None derives it from the
                first language in enumeration order
            sources: Language (member or name) -> nested source mapping
            selector: StaticSelector or DynamicSelector
            encoding: Message encoding for text leaves
            constants: Named constants for the static encoding
            config: Limits and error collection policy

        Returns:
            Built LocalFmt

        Raises:
            LocaleSetupError: Listing every defect found (the first one only
                when config.collect_all_errors is False)
        """
        matched, diagnostics = match_sources(languages, sources)
        if diagnostics and not config.collect_all_errors:
            raise LocaleSetupError(diagnostics[:1])

        trees: dict[L, MessageGroup] = {}
        for language, source in matched.items():
            try:
                trees[language] = build_tree(
                    language.name,
                    source,
                    encoding=encoding,
                    constants=constants,
                    config=config,
                )
            except LocaleSetupError as e:
                if not config.collect_all_errors:
                    raise
                diagnostics.extend(e.diagnostics)

        if diagnostics:
            _fail(languages, diagnostics)

        if schema is None:
            schema = MessageSchema.infer(next(iter(trees.values())), max_depth=config.max_depth)

        checker = ConsistencyChecker(schema, config=config)
        problems: tuple[Diagnostic, ...] = checker.check(
            {language.name: tree for language, tree in trees.items()}
        )
        if problems:
            _fail(languages, list(problems))

        table = LocaleTable(languages, trees)
        logger.info(
            "Built %s messages for %d language(s)", languages.__name__, len(table)
        )
        return cls(table, selector)

    @classmethod
    def from_path(
        cls,
        languages: type[L],
        schema: MessageSchema | None,
        path: str | Path,
        selector: LanguageSelector[L],
        *,
        reader: SourceReader | None = None,
        overlay: str | Path | None = None,
        encoding: MessageEncoding = MessageEncoding.ALLOC,
        constants: Mapping[str, ConstantValue] | None = None,
        config: LocalFmtConfig = DEFAULT_CONFIG,
    ) -> "LocalFmt[L]":
        """Load a message file or folder and build from it.

        Text read from files is runtime text, so the allocated encoding is
        the default here.

        Raises:
            SourceError: The files cannot be read
            LocaleSetupError: The messages are inconsistent
        """
        sources = load_path(path, reader, overlay=overlay)
        return cls.build(
            languages,
            schema,
            sources,
            selector,
            encoding=encoding,
            constants=constants,
            config=config,
        )

    @property
    def table(self) -> LocaleTable[L]:
        """The validated table."""
        return self._table

    @property
    def selector(self) -> LanguageSelector[L]:
        """The active selector."""
        return self._selector

    @property
    def is_dynamic(self) -> bool:
        """True when built with a DynamicSelector."""
        return self._selector.is_dynamic

    def current_language(self) -> L:
        """Ask the selector for the current language.

        Raises:
            TypeError: If a dynamic callback returns something that is not
                a member of the language enumeration
        """
        language = self._selector.current()
        if not isinstance(language, self._table.languages):
            msg = (
                f"Language selector returned {language!r}, expected a "
                f"{self._table.languages.__name__} member"
            )
            raise TypeError(msg)
        return language

    def get(self, language: L) -> MessageGroup:
        """Tree of one language."""
        return self._table[language]

    @property
    def messages(self) -> MessageGroup:
        """Tree of the current language."""
        return self._table[self.current_language()]

    def __getattr__(self, name: str) -> TreeNode:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.messages, name)

    def set_selector(self, selector: DynamicSelector[L] | Callable[[], L]) -> None:
        """Replace the dynamic selector's callback.

        The table is not touched.

        Raises:
            SelectorModeError: If built with a StaticSelector
            TypeError: If selector is a StaticSelector
        """
        if not self._selector.is_dynamic:
            msg = "Cannot replace the selector of a LocalFmt built with a StaticSelector"
            raise SelectorModeError(msg)
        if isinstance(selector, StaticSelector):
            msg = "set_selector() takes a DynamicSelector or a callable"
            raise TypeError(msg)
        if not isinstance(selector, DynamicSelector):
            selector = DynamicSelector(selector)
        self._selector = selector
        logger.debug("Replaced language selector")

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        mode = "dynamic" if self.is_dynamic else "static"
        return f"LocalFmt({self._table.languages.__name__}, languages={len(self._table)}, {mode})"


def _fail(languages: type[Enum], diagnostics: list[Diagnostic]) -> NoReturn:
    logger.error(
        "Building %s messages failed with %d error(s)", languages.__name__, len(diagnostics)
    )
    raise LocaleSetupError(diagnostics)
