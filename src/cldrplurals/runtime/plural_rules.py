"""CLDR cardinal plural rule evaluation using Babel.

Provides plural category selection for all locales using Babel's CLDR data.
This module does not implement the CLDR rule grammar; it only asks Babel
which category a number falls into.

Python 3.11+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import TypeAlias

from babel import Locale

from cldrplurals.locale_utils import validate_locale

__all__ = ["Number", "PluralRuleEvaluator", "select_plural_category"]

Number: TypeAlias = int | float | Decimal
"""Numeric value accepted by Babel's plural rules."""

PluralRuleEvaluator: TypeAlias = Callable[[Number, Locale | str], str]
"""Callable mapping (number, locale) to a CLDR plural category name."""


def select_plural_category(n: Number, locale: Locale | str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Babel Locale, or locale code (e.g., "lv_LV", "en_US", "ar-SA")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Raises:
        UnknownLocaleError: If the locale code is malformed or unknown

    Examples:
        >>> select_plural_category(0, "lv_LV")
        'zero'
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "ar_SA")
        'two'
        >>> select_plural_category(42, "ja_JP")
        'other'

    Performance:
        Uses cached locale parsing via get_babel_locale() to avoid
        repeated Locale.parse() overhead in hot paths.
    """
    locale_obj = validate_locale(locale)

    # Babel always provides plural_form for valid locales
    return locale_obj.plural_form(n)
