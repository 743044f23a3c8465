"""gettext integration: CLDR plural forms for gettext translation catalogs.

A gettext catalog selects plural translations through its ``plural``
callable, normally compiled from the catalog's ``Plural-Forms`` header
expression. bind_plural_forms() replaces that callable with CLDR resolution,
so ``ngettext`` picks ``msgstr[form_index(locale, n)]``.

Catalogs bound this way must list their plural translations in the order of
plural_categories(locale) (for Polish: one, few, many, other).

Python 3.11+. Uses Babel for catalog loading.
"""

from __future__ import annotations

import gettext
import logging
import os
from typing import TYPE_CHECKING, Protocol, TypeVar

from babel.support import Translations

from cldrplurals.runtime.resolver import PluralForms

if TYPE_CHECKING:
    from babel import Locale

    from cldrplurals.runtime.plural_rules import Number

__all__ = [
    "PluralFormsProvider",
    "bind_plural_forms",
    "load_translations",
    "plural_forms_header",
]

logger = logging.getLogger(__name__)

_TranslationsT = TypeVar("_TranslationsT", bound=gettext.NullTranslations)


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class PluralFormsProvider(Protocol):
    """Plural-forms contract consumed by gettext integration.

    PluralForms implements it; any object with these two methods can be
    bound instead.
    """

    def count_forms(self, locale: Locale | str) -> int:
        """Number of plural forms for the locale."""
        ...

    def form_index(self, locale: Locale | str, number: Number) -> int:
        """Zero-based plural form index of number for the locale."""
        ...
# pylint: enable=unnecessary-ellipsis


def bind_plural_forms(
    translations: _TranslationsT,
    locale: Locale | str,
    provider: PluralFormsProvider | None = None,
) -> _TranslationsT:
    """Make a gettext catalog select plural forms by CLDR rules.

    Only GNUTranslations instances (including babel.support.Translations)
    have a plural callable; other translations objects, such as the
    NullTranslations returned when no catalog file exists, are returned
    unchanged.

    Args:
        translations: Loaded gettext catalog
        locale: Locale whose CLDR rules select the plural form
        provider: Plural-forms provider (default: PluralForms over the
            process-wide table)

    Returns:
        The same translations object

    Example:
        >>> catalog = bind_plural_forms(Translations.load("locale", ["pl"]), "pl")
        >>> catalog.ngettext("file", "files", 5)  # msgstr[2]
        'plików'
    """
    if not isinstance(translations, gettext.GNUTranslations):
        logger.debug("Not binding plural forms to %s: no plural selector", type(translations).__name__)
        return translations

    forms = provider if provider is not None else PluralForms()

    def plural(n: Number) -> int:
        return forms.form_index(locale, n)

    translations.plural = plural  # type: ignore[attr-defined]
    logger.debug("Bound CLDR plural forms for '%s' to %s", locale, type(translations).__name__)
    return translations


def load_translations(
    dirname: str | os.PathLike[str],
    locale: Locale | str,
    domain: str | None = None,
    provider: PluralFormsProvider | None = None,
) -> gettext.NullTranslations:
    """Load a gettext catalog with Babel and bind CLDR plural forms to it.

    Args:
        dirname: Directory containing <locale>/LC_MESSAGES/<domain>.mo
        locale: Catalog locale
        domain: Message domain (default: "messages")
        provider: Plural-forms provider (default: PluralForms over the
            process-wide table)

    Returns:
        The bound catalog, or NullTranslations if no catalog file exists
    """
    translations = Translations.load(dirname, [locale], domain)
    return bind_plural_forms(translations, locale, provider)


def plural_forms_header(locale: Locale | str, provider: PluralFormsProvider | None = None) -> str:
    """Return the nplurals part of a catalog's Plural-Forms header.

    Args:
        locale: Catalog locale
        provider: Plural-forms provider (default: PluralForms over the
            process-wide table)

    Returns:
        Header fragment such as "nplurals=4;"
    """
    forms = provider if provider is not None else PluralForms()
    return f"nplurals={forms.count_forms(locale)};"
