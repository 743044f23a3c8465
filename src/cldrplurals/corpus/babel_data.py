"""CLDR plural rule corpus backed by Babel's bundled locale data.

Babel ships one pickled data file per CLDR locale. A file carries a
``plural_form`` entry only when CLDR assigns plural rules to that locale
directly (base languages, plus a handful of regional or script locales such
as ``pt_PT``); every other locale inherits its rules. Those own-rule locales
are exactly the locales of the CLDR cardinal plural corpus.

Data files are read directly instead of through
``babel.localedata.load(name, merge_inherited=False)``: that call stores the
unmerged dict in Babel's process-wide locale cache, after which ``Locale``
objects for the same identifier would miss all inherited data.

Python 3.11+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import logging
import pickle
from typing import TYPE_CHECKING, Any

from babel import localedata
from babel.core import get_cldr_version

from cldrplurals.constants import FALLBACK_CATEGORY, PLURAL_CATEGORIES, ROOT_LOCALE
from cldrplurals.diagnostics import CorpusInitializationError, ErrorTemplate

if TYPE_CHECKING:
    from babel.plural import PluralRule

__all__ = ["BABEL_SOURCE", "babel_source_label", "load_babel_corpus", "plural_rule_categories"]

logger = logging.getLogger(__name__)

BABEL_SOURCE = "babel"

# Cheap pre-filter: a data file whose raw bytes lack the key cannot define it.
_PLURAL_FORM_KEY = "plural_form"
_PLURAL_FORM_MARKER = _PLURAL_FORM_KEY.encode("ascii")


def babel_source_label() -> str:
    """Return a label naming Babel and the CLDR release it bundles.

    Returns:
        Label such as "babel (CLDR 47)"
    """
    return f"{BABEL_SOURCE} (CLDR {get_cldr_version()})"


def plural_rule_categories(rule: PluralRule) -> dict[str, str]:
    """Return a Babel plural rule as an ordered category -> rule text mapping.

    Babel's PluralRule keeps its rules sorted alphabetically by tag. CLDR's
    plurals data lists the categories a locale defines in the fixed order
    zero, one, two, few, many, other; this restores that order. The implicit
    "other" category, which Babel does not store, is always present.

    Args:
        rule: Babel PluralRule

    Returns:
        Ordered mapping of category name to CLDR rule text ("" for "other")

    Example:
        >>> from babel.plural import PluralRule
        >>> plural_rule_categories(PluralRule({"one": "n is 1", "few": "n in 2..4"}))
        {'one': 'n is 1', 'few': 'n in 2..4', 'other': ''}
    """
    rules = rule.rules
    categories = {
        category: rules[category]
        for category in PLURAL_CATEGORIES
        if category in rules
    }
    categories.setdefault(FALLBACK_CATEGORY, "")
    return categories


def _read_locale_data(locale_id: str) -> dict[str, Any] | None:
    """Read one locale's own (non-inherited) data, or None if it has no plural rules."""
    filename = localedata.resolve_locale_filename(locale_id)
    with open(filename, "rb") as fileobj:
        raw = fileobj.read()
    if _PLURAL_FORM_MARKER not in raw:
        return None
    return pickle.loads(raw)  # noqa: S301 - Babel's own bundled data files


def load_babel_corpus() -> dict[str, dict[str, str]]:
    """Read the CLDR cardinal plural corpus from Babel's locale data.

    Reads every bundled locale data file once. Intended to run once per
    process, at plural rule table initialization.

    Returns:
        Mapping of Babel locale identifier to ordered category -> rule text

    Raises:
        CorpusInitializationError: If the locale data cannot be listed,
            read or unpickled, or defines no plural rules at all
    """
    source = babel_source_label()
    corpus: dict[str, dict[str, str]] = {}
    try:
        for locale_id in sorted(localedata.locale_identifiers()):
            if locale_id == ROOT_LOCALE:
                continue
            data = _read_locale_data(locale_id)
            if data is None or _PLURAL_FORM_KEY not in data:
                continue
            corpus[locale_id] = plural_rule_categories(data[_PLURAL_FORM_KEY])
    except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ValueError) as e:
        logger.error("Failed to read Babel locale data: %s", e)
        raise CorpusInitializationError(
            ErrorTemplate.corpus_unreadable(source, str(e)),
            source=source,
        ) from e

    if not corpus:
        logger.error("Babel locale data defines no plural rules")
        raise CorpusInitializationError(ErrorTemplate.corpus_empty(source), source=source)

    logger.debug("Read %d plural rule sets from %s", len(corpus), source)
    return corpus
