"""Plural form resolution: form counts and form indices per locale.

Answers the two questions a gettext-style localization framework asks of a
plural-forms provider:

    count_forms(locale)        -> how many plural forms the locale has
    form_index(locale, number) -> which form (zero-based) a number takes

Both consult an immutable PluralRuleTable. When the exact locale key has no
table entry, resolution falls back exactly once, to the leading language
subtag ("en_GB" -> "en"). There is no further fallback: a bare language key
that is missing, or a base language that is missing, is an error.

Architecture:
    - PluralForms: resolver bound to one table and one rule evaluator
    - Process-wide default table: built lazily on first use, once
    - Module functions: delegate to a PluralForms over the default table

Thread Safety:
    Resolution reads only immutable state and takes no locks. The default
    table is initialized under a lock with double-checked locking.

Python 3.11+. Uses Babel for CLDR rule evaluation.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from cldrplurals.config import CorpusConfig
from cldrplurals.diagnostics import (
    ErrorTemplate,
    PluralIntegrityError,
    UnresolvableLocaleKeyError,
)
from cldrplurals.locale_utils import base_language, normalize_locale, validate_locale
from cldrplurals.runtime.plural_rules import select_plural_category
from cldrplurals.runtime.table import PluralRuleTable, load_table

if TYPE_CHECKING:
    from babel import Locale

    from cldrplurals.runtime.plural_rules import Number, PluralRuleEvaluator

__all__ = [
    "PluralForms",
    "count_forms",
    "form_index",
    "get_default_table",
    "plural_categories",
    "set_default_table",
]

logger = logging.getLogger(__name__)

_default_table: PluralRuleTable | None = None
_default_table_lock = threading.Lock()


def get_default_table() -> PluralRuleTable:
    """Return the process-wide plural rule table, building it on first use.

    The corpus is chosen by CorpusConfig.from_env(). Concurrent first calls
    build the table once; every caller receives the same instance.

    Returns:
        The process-wide PluralRuleTable

    Raises:
        CorpusInitializationError: If the corpus cannot be read or is invalid.
            No table is installed and the next call tries again.
    """
    global _default_table  # noqa: PLW0603
    table = _default_table
    if table is not None:
        return table
    with _default_table_lock:
        if _default_table is None:
            _default_table = load_table(CorpusConfig.from_env())
        return _default_table


def set_default_table(table: PluralRuleTable | None) -> None:
    """Install an explicitly built table as the process-wide default.

    Args:
        table: Table to install, or None to rebuild lazily on next use
    """
    global _default_table  # noqa: PLW0603
    with _default_table_lock:
        _default_table = table


class PluralForms:
    """CLDR plural forms provider for one plural rule table.

    Implements the plural-forms contract of gettext-style frameworks. Locales
    may be given as text ("pl", "en-GB", "pt_BR") or as babel.Locale objects.

    Examples:
        >>> forms = PluralForms()
        >>> forms.count_forms("pl")
        4
        >>> [forms.form_index("pl", n) for n in (1, 2, 5, 112)]
        [0, 1, 2, 2]
        >>> forms.form_index("en_GB", 112)
        1
    """

    __slots__ = ("_evaluator", "_table")

    def __init__(
        self,
        table: PluralRuleTable | None = None,
        *,
        evaluator: PluralRuleEvaluator = select_plural_category,
    ) -> None:
        """Initialize PluralForms.

        Args:
            table: Plural rule table (default: the process-wide default table,
                resolved at first use)
            evaluator: Cardinal rule evaluator, called as evaluator(number, locale)
        """
        self._table = table
        self._evaluator = evaluator

    def __repr__(self) -> str:
        table = "default" if self._table is None else repr(self._table)
        return f"{type(self).__name__}(table={table})"

    @property
    def table(self) -> PluralRuleTable:
        """The plural rule table this provider resolves against."""
        if self._table is None:
            return get_default_table()
        return self._table

    def count_forms(self, locale: Locale | str) -> int:
        """Return the number of plural forms for a locale.

        Text input is normalized, not validated: the table decides.

        Args:
            locale: Locale code or babel.Locale

        Returns:
            Number of plural forms (1 to 6)

        Raises:
            UnresolvableLocaleKeyError: If neither the locale nor its base
                language has a table entry
        """
        return len(self.categories(locale))

    def form_index(self, locale: Locale | str, number: Number) -> int:
        """Return the plural form index of a number for a locale.

        The category is always evaluated under the rules of the locale that
        answers from the table: the locale itself, or after fallback its base
        language.

        Args:
            locale: Locale code or babel.Locale
            number: Number to select a form for

        Returns:
            Zero-based plural form index, less than count_forms(locale)

        Raises:
            UnknownLocaleError: If locale text fails validation (the rule
                evaluator is not called)
            UnresolvableLocaleKeyError: If neither the locale nor its base
                language has a table entry
            PluralIntegrityError: If the evaluator returns a category the
                table does not list for the resolved locale
        """
        structured = validate_locale(locale)
        locale_key = normalize_locale(str(structured))
        resolved = self._resolve(locale_key)

        if resolved == locale_key:
            category = self._evaluator(number, structured)
        else:
            category = self._evaluator(number, resolved)

        categories = self.table[resolved]
        try:
            return categories.index(category)
        except ValueError:
            raise PluralIntegrityError(
                ErrorTemplate.category_not_in_table(resolved, category, categories),
                locale_code=resolved,
                category=category,
            ) from None

    def categories(self, locale: Locale | str) -> tuple[str, ...]:
        """Return the ordered plural categories for a locale, after fallback.

        Args:
            locale: Locale code or babel.Locale

        Returns:
            Category names; position is the plural form index

        Raises:
            UnresolvableLocaleKeyError: If neither the locale nor its base
                language has a table entry
        """
        return self.table[self.resolve_key(locale)]

    def resolve_key(self, locale: Locale | str) -> str:
        """Return the table key that answers for a locale.

        Args:
            locale: Locale code or babel.Locale

        Returns:
            The locale's own key, or its base language after fallback

        Raises:
            UnresolvableLocaleKeyError: If neither the locale nor its base
                language has a table entry
        """
        if isinstance(locale, str):
            locale_key = normalize_locale(locale)
        else:
            locale_key = normalize_locale(str(validate_locale(locale)))
        return self._resolve(locale_key)

    def known_locales(self) -> tuple[str, ...]:
        """Return every locale key with its own table entry, sorted."""
        return self.table.locales()

    def _resolve(self, locale_key: str) -> str:
        """Exact key, else base language, else error. Never more than two lookups."""
        table = self.table
        if locale_key in table:
            return locale_key

        language = base_language(locale_key)
        if language is None:
            raise UnresolvableLocaleKeyError(
                ErrorTemplate.locale_key_not_found(locale_key),
                locale_code=locale_key,
            )
        if language not in table:
            raise UnresolvableLocaleKeyError(
                ErrorTemplate.locale_key_not_found(language),
                locale_code=language,
            )

        logger.debug("No plural rules for '%s'; using base language '%s'", locale_key, language)
        return language


_default_forms = PluralForms()


def count_forms(locale: Locale | str) -> int:
    """Return the number of plural forms for a locale (default table).

    Example:
        >>> count_forms("en")
        2
    """
    return _default_forms.count_forms(locale)


def form_index(locale: Locale | str, number: Number) -> int:
    """Return the plural form index of a number for a locale (default table).

    Example:
        >>> form_index("pl", 5)
        2
    """
    return _default_forms.form_index(locale, number)


def plural_categories(locale: Locale | str) -> tuple[str, ...]:
    """Return the ordered plural categories for a locale (default table).

    Example:
        >>> plural_categories("ar")
        ('zero', 'one', 'two', 'few', 'many', 'other')
    """
    return _default_forms.categories(locale)
