"""Tests for table/: LocaleTable, language matching and selectors.

Python 3.13+.
"""

from __future__ import annotations

from enum import Enum

import pytest

from localfmt import DynamicSelector, LocaleSetupError, LocaleTable, StaticSelector
from localfmt.diagnostics import DiagnosticCode
from localfmt.table import match_sources, resolve_language
from localfmt.tree import build_tree
from tests.helpers.catalog import CATALOG, Lang


class Numbered(Enum):
    """Members whose values are not strings."""

    ONE = 1
    TWO = 2


class TestResolveLanguage:
    """Source keys to enum members."""

    def test_by_name(self) -> None:
        assert resolve_language(Lang, "JA") is Lang.JA

    def test_by_value(self) -> None:
        assert resolve_language(Lang, "ja") is Lang.JA

    def test_unknown(self) -> None:
        assert resolve_language(Lang, "fr") is None

    def test_non_string_values_match_by_name_only(self) -> None:
        assert resolve_language(Numbered, "ONE") is Numbered.ONE
        assert resolve_language(Numbered, "1") is None


class TestMatchSources:
    """match_sources() totality checks."""

    def test_members_and_names(self) -> None:
        matched, diagnostics = match_sources(Lang, {"ja": 2, Lang.EN: 1})

        assert diagnostics == []
        assert list(matched.items()) == [(Lang.EN, 1), (Lang.JA, 2)]

    def test_missing_and_unknown(self) -> None:
        matched, diagnostics = match_sources(Lang, {"EN": 1, "FR": 3})

        assert list(matched) == [Lang.EN]
        assert [(d.code, d.language) for d in diagnostics] == [
            (DiagnosticCode.UNKNOWN_LANGUAGE, "FR"),
            (DiagnosticCode.MISSING_LANGUAGE, "JA"),
        ]


class TestLocaleTable:
    """LocaleTable construction and lookup."""

    def test_build(self) -> None:
        en = build_tree("EN", CATALOG["EN"])
        ja = build_tree("JA", CATALOG["JA"])

        table = LocaleTable.build(Lang, {"EN": en, "JA": ja})

        assert table[Lang.JA] is ja
        assert list(table) == [Lang.EN, Lang.JA]
        assert len(table) == 2
        assert table.languages is Lang

    def test_build_rejects_missing_language(self) -> None:
        with pytest.raises(LocaleSetupError) as exc_info:
            LocaleTable.build(Lang, {"EN": build_tree("EN", CATALOG["EN"])})

        assert exc_info.value.diagnostics[0].code is DiagnosticCode.MISSING_LANGUAGE

    def test_repr(self) -> None:
        table = LocaleTable.build(
            Lang, {lang.name: build_tree(lang.name, CATALOG[lang.name]) for lang in Lang}
        )

        assert repr(table) == "LocaleTable(Lang: EN, JA)"

    def test_table_is_read_only(self) -> None:
        table = LocaleTable.build(
            Lang, {lang.name: build_tree(lang.name, CATALOG[lang.name]) for lang in Lang}
        )

        with pytest.raises(TypeError):
            table[Lang.EN] = table[Lang.JA]  # type: ignore[index]


class TestSelectors:
    """StaticSelector and DynamicSelector."""

    def test_static(self) -> None:
        selector = StaticSelector(Lang.JA)

        assert not selector.is_dynamic
        assert selector.current() is Lang.JA
        assert selector.current() is selector.current()

    def test_dynamic_asks_every_time(self) -> None:
        answers = iter([Lang.EN, Lang.JA])
        selector = DynamicSelector(lambda: next(answers))

        assert selector.is_dynamic
        assert selector.current() is Lang.EN
        assert selector.current() is Lang.JA

    def test_selectors_are_frozen(self) -> None:
        selector = StaticSelector(Lang.EN)

        with pytest.raises(AttributeError):
            selector.language = Lang.JA  # type: ignore[misc]
