"""Cross-language consistency checking.

Diffs every language's locale tree against the message schema in one
synchronized walk. A language passes when it has exactly the schema's
fields, with the same nesting, and every message has the agreed arity:

    - the arity declared by the schema's LeafSpec, or
    - for a LeafSpec without arity, the arity of the first language (in
      checking order) that defines the message.

Problems are reported in a stable order: languages in the order given,
fields in schema order, undeclared fields after declared ones.

Python 3.13+.
"""

import logging
from collections.abc import Mapping

from localfmt.config import DEFAULT_CONFIG, LocalFmtConfig
from localfmt.diagnostics import Diagnostic, ErrorTemplate, LocaleSetupError
from localfmt.message.base import Message

from .hierarchy import Hierarchy
from .nodes import MessageGroup
from .schema import GroupSpec, LeafSpec, MessageSchema

__all__ = ["ConsistencyChecker"]

logger = logging.getLogger(__name__)

_GROUP = "group"
_MESSAGE = "message"


class _StopChecking(Exception):
    """Internal: first problem found with collect_all_errors disabled."""


class ConsistencyChecker:
    """Checks locale trees against a schema and against each other.

    Example:
        >>> checker = ConsistencyChecker(MessageSchema.from_mapping({"hello": None}))
        >>> en = build_tree("EN", {"hello": "Hello, {0}!"})
        >>> ja = build_tree("JA", {"hello": "{0}{1}"})
        >>> [d.code.name for d in checker.check({"EN": en, "JA": ja})]
        ['ARITY_MISMATCH']
    """

    __slots__ = ("_config", "_diagnostics", "_reference", "_schema")

    def __init__(self, schema: MessageSchema, *, config: LocalFmtConfig = DEFAULT_CONFIG) -> None:
        self._schema = schema
        self._config = config
        self._diagnostics: list[Diagnostic] = []
        # key path -> arity agreed by the first language defining it
        self._reference: dict[str, int] = {}

    @property
    def schema(self) -> MessageSchema:
        """Schema the trees are checked against."""
        return self._schema

    def check(self, trees: Mapping[str, MessageGroup]) -> tuple[Diagnostic, ...]:
        """Check every language tree.

        Args:
            trees: Language name -> root MessageGroup, in checking order

        Returns:
            Every problem found (only the first one when
            collect_all_errors is disabled); empty when consistent
        """
        self._diagnostics = []
        self._reference = {}
        try:
            for language, tree in trees.items():
                self._check_group(language, self._schema.root, tree, Hierarchy())
        except _StopChecking:
            pass
        if self._diagnostics:
            logger.error("Consistency check found %d problem(s)", len(self._diagnostics))
        else:
            logger.debug("Consistency check passed for %d language(s)", len(trees))
        return tuple(self._diagnostics)

    def check_or_raise(self, trees: Mapping[str, MessageGroup]) -> None:
        """Run check() and raise if anything was found.

        Raises:
            LocaleSetupError: With every problem found
        """
        diagnostics = self.check(trees)
        if diagnostics:
            raise LocaleSetupError(diagnostics)

    def _report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)
        if not self._config.collect_all_errors:
            raise _StopChecking

    def _check_group(
        self, language: str, spec: GroupSpec, group: MessageGroup, path: Hierarchy
    ) -> None:
        for key, child_spec in spec.fields.items():
            key_path = path.join(key)
            if key not in group:
                self._report(ErrorTemplate.missing_key(language, key_path))
                continue
            node = group[key]
            match child_spec:
                case GroupSpec():
                    if isinstance(node, MessageGroup):
                        self._check_group(language, child_spec, node, path.child(key))
                    else:
                        self._report(
                            ErrorTemplate.unexpected_nesting(
                                language, key_path, expected=_GROUP, actual=_MESSAGE
                            )
                        )
                case LeafSpec():
                    if isinstance(node, Message):
                        self._check_arity(language, child_spec, node, key_path)
                    else:
                        self._report(
                            ErrorTemplate.unexpected_nesting(
                                language, key_path, expected=_MESSAGE, actual=_GROUP
                            )
                        )

        for key in group:
            if key not in spec.fields:
                self._report(ErrorTemplate.unexpected_key(language, path.join(key)))

    def _check_arity(self, language: str, spec: LeafSpec, message: Message, key_path: str) -> None:
        expected = spec.arity
        if expected is None:
            expected = self._reference.setdefault(key_path, message.arity)
        if message.arity != expected:
            self._report(ErrorTemplate.arity_mismatch(language, key_path, expected, message.arity))
