"""Build one language's locale tree from its source mapping.

Walks a nested mapping of key -> template text (or nested mapping) and
compiles every template into a Message. Errors are tagged with the language
and dotted key path they were found at, and either collected or raised at
the first one depending on LocalFmtConfig.collect_all_errors.

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from localfmt.config import DEFAULT_CONFIG, LocalFmtConfig, MessageEncoding
from localfmt.core.depth_guard import DepthGuard, DepthLimitExceededError
from localfmt.diagnostics import (
    ArgumentError,
    Diagnostic,
    ErrorTemplate,
    LocaleSetupError,
    TemplateSyntaxError,
)
from localfmt.message.alloc import AllocMessage
from localfmt.message.base import Message
from localfmt.message.constants import ConstantValue
from localfmt.message.static import StaticMessage

from .hierarchy import Hierarchy
from .nodes import MessageGroup, TreeNode

__all__ = ["build_tree", "compile_message"]

logger = logging.getLogger(__name__)


def compile_message(
    text: str,
    *,
    encoding: MessageEncoding = MessageEncoding.STATIC,
    constants: Mapping[str, ConstantValue] | None = None,
    config: LocalFmtConfig = DEFAULT_CONFIG,
) -> Message:
    """Compile one template with the configured encoding and limits.

    The arity is inferred from the template; agreement across languages is
    the consistency checker's job.

    Raises:
        TemplateSyntaxError: Malformed template
        ArgumentError: Invalid placeholder indices or constants
    """
    match encoding:
        case MessageEncoding.STATIC:
            return StaticMessage.parse(
                text,
                constants=constants,
                max_length=config.max_template_length,
                max_arity=config.max_arity,
            )
        case MessageEncoding.ALLOC:
            return AllocMessage.parse(
                text, max_length=config.max_template_length, max_arity=config.max_arity
            )


class _TreeBuilder:
    """Recursive walk over one language's source mapping."""

    __slots__ = (
        "_config",
        "_constants",
        "_diagnostics",
        "_encoding",
        "_guard",
        "_language",
        "_source_path",
    )

    def __init__(
        self,
        language: str,
        *,
        encoding: MessageEncoding,
        constants: Mapping[str, ConstantValue] | None,
        config: LocalFmtConfig,
        source_path: str | None,
    ) -> None:
        self._language = language
        self._encoding = encoding
        self._constants = constants
        self._config = config
        self._source_path = source_path
        self._guard = DepthGuard(max_depth=config.max_depth)
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def _report(self, diagnostic: Diagnostic, path: Hierarchy) -> None:
        located = diagnostic.with_location(
            language=self._language,
            key_path=str(path) or None,
            source_path=self._source_path,
        )
        self._diagnostics.append(located)
        if not self._config.collect_all_errors:
            raise LocaleSetupError(self._diagnostics)

    def build_group(self, source: Mapping[str, object], path: Hierarchy) -> MessageGroup:
        try:
            self._guard.check(str(path) or None)
        except DepthLimitExceededError as e:
            if e.diagnostic is None:
                raise
            self._report(e.diagnostic, path)
            return MessageGroup({}, path)

        children: dict[str, TreeNode] = {}
        with self._guard:
            for key, value in source.items():
                child_path = path.child(str(key))
                if not isinstance(key, str):
                    self._report(
                        ErrorTemplate.invalid_leaf(
                            self._language, str(child_path), type(key).__name__
                        ),
                        child_path,
                    )
                    continue
                match value:
                    case Message():
                        children[key] = value
                    case str():
                        message = self._build_leaf(value, child_path)
                        if message is not None:
                            children[key] = message
                    case Mapping():
                        children[key] = self.build_group(value, child_path)
                    case _:
                        self._report(
                            ErrorTemplate.invalid_leaf(
                                self._language, str(child_path), type(value).__name__
                            ),
                            child_path,
                        )
        return MessageGroup(children, path)

    def _build_leaf(self, text: str, path: Hierarchy) -> Message | None:
        try:
            message = compile_message(
                text, encoding=self._encoding, constants=self._constants, config=self._config
            )
        except (TemplateSyntaxError, ArgumentError) as e:
            if e.diagnostic is None:
                raise
            self._report(e.diagnostic, path)
            return None
        logger.debug("Compiled %s:%s (arity %d)", self._language, path, message.arity)
        return message


def build_tree(
    language: str,
    source: Mapping[str, object],
    *,
    encoding: MessageEncoding = MessageEncoding.STATIC,
    constants: Mapping[str, ConstantValue] | None = None,
    config: LocalFmtConfig = DEFAULT_CONFIG,
    source_path: str | None = None,
) -> MessageGroup:
    """Compile a language's source mapping into a MessageGroup tree.

    Leaves may be template text or ready-made Message objects. Nested
    mappings become nested groups.

    Args:
        language: Language name, used in diagnostics
        source: Nested mapping of key -> text or mapping
        encoding: Message encoding for text leaves
        constants: Named constants for the static encoding
        config: Limits and error collection policy
        source_path: File the source came from, used in diagnostics

    Returns:
        The language's root MessageGroup

    Raises:
        LocaleSetupError: Carrying every defect found (or the first one when
            config.collect_all_errors is False)

    Example:
        >>> tree = build_tree("EN", {"hello": "Hello, {0}!", "words": {"rust": "Rust"}})
        >>> tree.words.rust.text
        'Rust'
    """
    builder = _TreeBuilder(
        language,
        encoding=encoding,
        constants=constants,
        config=config,
        source_path=source_path,
    )
    tree = builder.build_group(source, Hierarchy())
    if builder.diagnostics:
        logger.error(
            "Language %s has %d invalid message(s)", language, len(builder.diagnostics)
        )
        raise LocaleSetupError(builder.diagnostics)
    return tree
