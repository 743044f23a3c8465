"""Tests for resolver.py - plural form counts and indices with base-language fallback.

Covers the plural-forms contract (count_forms / form_index), the single
base-language fallback step, error paths, and the process-wide default table.

Python 3.11+.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

import pytest
from babel import Locale

from cldrplurals import count_forms, form_index, plural_categories
from cldrplurals.constants import CORPUS_ENV_VAR
from cldrplurals.diagnostics import (
    CorpusInitializationError,
    DiagnosticCode,
    PluralIntegrityError,
    UnknownLocaleError,
    UnresolvableLocaleKeyError,
)
from cldrplurals.runtime import PluralForms, PluralRuleTable, build_table
from cldrplurals.runtime import resolver as resolver_module


class _RecordingEvaluator:
    """Rule evaluator double that records calls and returns a fixed category."""

    def __init__(self, category: str) -> None:
        self.category = category
        self.calls: list[tuple[object, str]] = []

    def __call__(self, n: object, locale: Locale | str) -> str:
        self.calls.append((n, str(locale)))
        return self.category


# ============================================================================
# count_forms
# ============================================================================


class TestCountForms:
    """Test PluralForms.count_forms."""

    def test_polish(self, forms: PluralForms) -> None:
        """Polish has four forms."""
        assert forms.count_forms("pl") == 4

    def test_english(self, forms: PluralForms) -> None:
        """English has two forms."""
        assert forms.count_forms("en") == 2

    def test_arabic(self, forms: PluralForms) -> None:
        """Arabic has six forms."""
        assert forms.count_forms("ar") == 6

    def test_japanese(self, forms: PluralForms) -> None:
        """Japanese has one form."""
        assert forms.count_forms("ja") == 1

    def test_matches_table_for_every_locale(self, forms: PluralForms, babel_table: PluralRuleTable) -> None:
        """count_forms equals the category list length for every tabled locale."""
        for locale_key in babel_table:
            assert forms.count_forms(locale_key) == len(babel_table[locale_key])

    def test_accepts_locale_object(self, forms: PluralForms) -> None:
        """babel.Locale input uses its identifier."""
        assert forms.count_forms(Locale("pl")) == 4

    def test_bcp47_text_normalized(self, forms: PluralForms) -> None:
        """BCP-47 text and POSIX text resolve alike."""
        assert forms.count_forms("pt-PT") == forms.count_forms("pt_PT")

    def test_region_falls_back_to_language(self, forms: PluralForms) -> None:
        """en_GB has no entry; English answers."""
        assert forms.count_forms("en_GB") == forms.count_forms("en")

    def test_locale_object_falls_back(self, forms: PluralForms) -> None:
        """Fallback applies to babel.Locale input too."""
        assert forms.count_forms(Locale("en", "GB")) == 2

    def test_text_is_not_validated(self, small_table: PluralRuleTable) -> None:
        """Unknown-to-Babel region still falls back to its tabled language."""
        assert PluralForms(small_table).count_forms("pl_XX") == 4

    def test_bare_unknown_key_raises(self, small_table: PluralRuleTable) -> None:
        """A bare language with no entry has nothing to fall back to."""
        with pytest.raises(UnresolvableLocaleKeyError) as exc_info:
            PluralForms(small_table).count_forms("de")
        assert exc_info.value.locale_code == "de"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_KEY_NOT_FOUND

    def test_unknown_base_language_raises(self, small_table: PluralRuleTable) -> None:
        """Fallback is tried once; a missing base language is an error."""
        with pytest.raises(UnresolvableLocaleKeyError) as exc_info:
            PluralForms(small_table).count_forms("de_AT")
        assert exc_info.value.locale_code == "de"

    def test_unresolvable_is_lookup_error(self, small_table: PluralRuleTable) -> None:
        """UnresolvableLocaleKeyError can be caught as LookupError."""
        with pytest.raises(LookupError):
            PluralForms(small_table).count_forms("fr")

    def test_no_partial_script_match(self) -> None:
        """Fallback truncates to the language, never to language_script."""
        table = build_table({"zh_Hant": ["other"]})
        with pytest.raises(UnresolvableLocaleKeyError) as exc_info:
            PluralForms(table).count_forms("zh_Hant_TW")
        assert exc_info.value.locale_code == "zh"


# ============================================================================
# form_index
# ============================================================================


class TestFormIndex:
    """Test PluralForms.form_index."""

    @pytest.mark.parametrize(("n", "expected"), [(1, 0), (2, 1), (5, 2), (112, 2)])
    def test_polish(self, forms: PluralForms, n: int, expected: int) -> None:
        """Polish form indices."""
        assert forms.form_index("pl", n) == expected

    @pytest.mark.parametrize(("n", "expected"), [(1, 0), (2, 1), (112, 1)])
    def test_english(self, forms: PluralForms, n: int, expected: int) -> None:
        """English form indices."""
        assert forms.form_index("en", n) == expected

    def test_english_gb_falls_back(self, forms: PluralForms) -> None:
        """en_GB has no entry; English rules answer."""
        assert forms.form_index("en_GB", 112) == 1
        assert forms.form_index("en_GB", 1) == 0

    def test_polish_fraction(self, forms: PluralForms) -> None:
        """Polish fractions take the 'other' form."""
        assert forms.form_index("pl", Decimal("1.5")) == 3

    @pytest.mark.parametrize(("n", "expected"), [(0, 0), (1, 1), (2, 2), (3, 3), (11, 4), (100, 5)])
    def test_arabic(self, forms: PluralForms, n: int, expected: int) -> None:
        """Arabic uses all six indices."""
        assert forms.form_index("ar", n) == expected

    def test_accepts_locale_object(self, forms: PluralForms) -> None:
        """babel.Locale input."""
        assert forms.form_index(Locale("pl", "PL"), 5) == 2

    def test_regional_rule_owner_uses_own_entry(self, forms: PluralForms) -> None:
        """pt_PT resolves to its own entry, not to pt."""
        assert forms.resolve_key("pt_PT") == "pt_PT"
        assert forms.form_index("pt_PT", 1) == 0

    def test_malformed_locale_raises_unknown_locale(self) -> None:
        """Malformed text raises UnknownLocaleError before evaluation."""
        evaluator = _RecordingEvaluator("one")
        forms = PluralForms(build_table({"en": ["one", "other"]}), evaluator=evaluator)

        with pytest.raises(UnknownLocaleError):
            forms.form_index("not a locale!", 1)
        assert evaluator.calls == []

    def test_unknown_language_raises_unknown_locale(self, forms: PluralForms) -> None:
        """Text naming no known locale raises UnknownLocaleError."""
        with pytest.raises(UnknownLocaleError):
            forms.form_index("xyzzy", 1)

    def test_bare_unknown_key_raises(self, small_table: PluralRuleTable) -> None:
        """A valid locale absent from the table, with no base language, raises."""
        with pytest.raises(UnresolvableLocaleKeyError) as exc_info:
            PluralForms(small_table).form_index("de", 1)
        assert exc_info.value.locale_code == "de"

    def test_unknown_base_language_raises(self, small_table: PluralRuleTable) -> None:
        """A valid regional locale whose language is absent raises."""
        with pytest.raises(UnresolvableLocaleKeyError):
            PluralForms(small_table).form_index("de_AT", 1)

    def test_exact_hit_evaluates_with_structured_locale(self) -> None:
        """On an exact hit the evaluator sees the locale itself."""
        evaluator = _RecordingEvaluator("other")
        forms = PluralForms(build_table({"en_GB": ["one", "other"]}), evaluator=evaluator)

        assert forms.form_index("en-GB", 7) == 1
        assert evaluator.calls == [(7, "en_GB")]

    def test_fallback_re_evaluates_under_base_language(self) -> None:
        """After fallback the evaluator runs once, under the base language."""
        evaluator = _RecordingEvaluator("few")
        forms = PluralForms(build_table({"pl": ["one", "few", "many", "other"]}), evaluator=evaluator)

        assert forms.form_index("pl_PL", 3) == 1
        assert evaluator.calls == [(3, "pl")]

    def test_category_missing_from_table_raises(self) -> None:
        """Evaluator/table disagreement raises, never defaults to 0."""
        evaluator = _RecordingEvaluator("few")
        forms = PluralForms(build_table({"en": ["one", "other"]}), evaluator=evaluator)

        with pytest.raises(PluralIntegrityError) as exc_info:
            forms.form_index("en", 3)
        assert exc_info.value.locale_code == "en"
        assert exc_info.value.category == "few"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CATEGORY_NOT_IN_TABLE

    def test_fallback_is_logged(self, forms: PluralForms, caplog: pytest.LogCaptureFixture) -> None:
        """Taking the fallback emits a DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="cldrplurals.runtime.resolver"):
            forms.form_index("en_GB", 2)
        assert "base language 'en'" in caplog.text


# ============================================================================
# Introspection
# ============================================================================


class TestIntrospection:
    """Test categories / resolve_key / known_locales."""

    def test_categories_after_fallback(self, forms: PluralForms) -> None:
        """categories() answers for the resolved key."""
        assert forms.categories("en_GB") == ("one", "other")
        assert forms.categories("pl") == ("one", "few", "many", "other")

    def test_resolve_key(self, forms: PluralForms) -> None:
        """resolve_key() names the answering table key."""
        assert forms.resolve_key("en") == "en"
        assert forms.resolve_key("en-GB") == "en"
        assert forms.resolve_key(Locale.parse("zh_TW")) == "zh"

    def test_known_locales(self, forms: PluralForms, babel_table: PluralRuleTable) -> None:
        """known_locales() lists every table key, sorted."""
        known = forms.known_locales()
        assert known == tuple(sorted(babel_table))
        assert "en" in known
        assert "en_GB" not in known

    def test_repr(self, small_table: PluralRuleTable) -> None:
        """repr names the table."""
        assert "PluralRuleTable" in repr(PluralForms(small_table))
        assert "default" in repr(PluralForms())


# ============================================================================
# Process-wide default table and module functions
# ============================================================================


class TestDefaultTable:
    """Test the lazily built process-wide table."""

    def test_module_functions(self, default_table: PluralRuleTable) -> None:
        """Module functions resolve against the default table."""
        assert count_forms("pl") == 4
        assert form_index("pl", 5) == 2
        assert plural_categories("ar") == ("zero", "one", "two", "few", "many", "other")

    def test_default_table_is_shared(self, default_table: PluralRuleTable) -> None:
        """Every caller sees the same instance."""
        assert resolver_module.get_default_table() is default_table
        assert PluralForms().table is default_table

    def test_lazy_build_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """With no table installed, the first use builds from the configured corpus."""
        path = tmp_path / "plurals.json"
        path.write_text(json.dumps({"en": ["one", "other"]}), encoding="utf-8")
        monkeypatch.setenv(CORPUS_ENV_VAR, str(path))
        monkeypatch.setattr(resolver_module, "_default_table", None)

        table = resolver_module.get_default_table()

        assert table.source == str(path)
        assert resolver_module.get_default_table() is table

    def test_failed_build_installs_nothing(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Initialization failure propagates and leaves no table behind."""
        monkeypatch.setenv(CORPUS_ENV_VAR, str(tmp_path / "missing.json"))
        monkeypatch.setattr(resolver_module, "_default_table", None)

        with pytest.raises(CorpusInitializationError):
            count_forms("en")
        assert resolver_module._default_table is None

    def test_set_default_table(self, monkeypatch: pytest.MonkeyPatch, small_table: PluralRuleTable) -> None:
        """An explicitly installed table is used by module functions."""
        monkeypatch.setattr(resolver_module, "_default_table", None)
        resolver_module.set_default_table(small_table)

        assert resolver_module.get_default_table() is small_table
        with pytest.raises(UnresolvableLocaleKeyError):
            count_forms("ar")
