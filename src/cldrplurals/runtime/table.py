"""Plural rule table: locale key -> ordered plural categories.

The table is built once from a plural rule corpus and never mutated. Each
category's position in a locale's tuple is its plural form index, the value
gettext-style frameworks select translations by. Category order is exactly
the corpus enumeration order; nothing here sorts or reorders categories.

Python 3.11+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from cldrplurals.constants import MAX_PLURAL_FORMS, PLURAL_CATEGORIES
from cldrplurals.corpus import babel_source_label, load_babel_corpus, load_json_corpus
from cldrplurals.diagnostics import CorpusInitializationError, ErrorTemplate
from cldrplurals.enums import CorpusSource
from cldrplurals.locale_utils import normalize_locale

if TYPE_CHECKING:
    from cldrplurals.config import CorpusConfig
    from cldrplurals.corpus import PluralCorpus

__all__ = ["PluralRuleTable", "build_table", "load_table"]

logger = logging.getLogger(__name__)

_VOCABULARY = frozenset(PLURAL_CATEGORIES)


class PluralRuleTable(Mapping[str, tuple[str, ...]]):
    """Immutable mapping of canonical locale key to ordered plural categories.

    Use build_table() or load_table() to construct instances; the constructor
    trusts its input.

    Thread Safety:
        Read-only after construction. Any number of threads may share one
        instance without synchronization.

    Example:
        >>> table = build_table({"pl": ["one", "few", "many", "other"]})
        >>> table["pl"]
        ('one', 'few', 'many', 'other')
        >>> table.index_of("pl", "many")
        2
    """

    __slots__ = ("_entries", "_source")

    def __init__(self, entries: Mapping[str, tuple[str, ...]], *, source: str = "custom") -> None:
        """Wrap validated entries.

        Args:
            entries: Canonical locale key -> validated category tuple
            source: Label of the corpus the entries were built from
        """
        self._entries: Mapping[str, tuple[str, ...]] = MappingProxyType(dict(entries))
        self._source = source

    def __getitem__(self, locale_key: str) -> tuple[str, ...]:
        return self._entries[locale_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locales={len(self)}, source={self._source!r})"

    @property
    def source(self) -> str:
        """Label of the corpus this table was built from."""
        return self._source

    def categories(self, locale_key: str) -> tuple[str, ...]:
        """Ordered plural categories for an exact locale key.

        Raises:
            KeyError: If the key is not in the table
        """
        return self._entries[locale_key]

    def index_of(self, locale_key: str, category: str) -> int:
        """Form index of a category within an exact locale key's categories.

        Raises:
            KeyError: If the key is not in the table
            ValueError: If the locale does not define the category
        """
        return self._entries[locale_key].index(category)

    def locales(self) -> tuple[str, ...]:
        """All locale keys, sorted."""
        return tuple(sorted(self._entries))


def _category_names(locale_key: str, rules: Any, source: str) -> tuple[str, ...]:
    """Extract and validate one locale's ordered category names."""
    if isinstance(rules, Mapping):
        names = list(rules.keys())
    elif isinstance(rules, Sequence) and not isinstance(rules, str):
        names = list(rules)
    else:
        detail = f"rules for '{locale_key}' are {type(rules).__name__}, expected mapping or sequence"
        raise CorpusInitializationError(ErrorTemplate.corpus_malformed(source, detail), source=source)

    if len(names) > MAX_PLURAL_FORMS:
        raise CorpusInitializationError(
            ErrorTemplate.corpus_too_many_forms(locale_key, len(names), MAX_PLURAL_FORMS),
            source=source,
        )
    if not names:
        detail = f"locale '{locale_key}' defines no plural categories"
        raise CorpusInitializationError(ErrorTemplate.corpus_malformed(source, detail), source=source)

    seen: set[str] = set()
    for name in names:
        if not isinstance(name, str) or name not in _VOCABULARY:
            raise CorpusInitializationError(
                ErrorTemplate.corpus_unknown_category(locale_key, name),
                source=source,
            )
        if name in seen:
            raise CorpusInitializationError(
                ErrorTemplate.corpus_duplicate_category(locale_key, name),
                source=source,
            )
        seen.add(name)
    return tuple(names)


def build_table(corpus: PluralCorpus, *, source: str = "custom") -> PluralRuleTable:
    """Build the plural rule table from a corpus.

    For every corpus locale, the table holds that locale's category names in
    corpus enumeration order. Rule texts are discarded. Locale identifiers are
    normalized (``pt-PT`` -> ``pt_PT``) so keys match normalized lookups.

    Args:
        corpus: Locale identifier -> ordered categories (mapping keys or sequence)
        source: Label of the corpus, used in errors and logs

    Returns:
        Immutable PluralRuleTable

    Raises:
        CorpusInitializationError: If the corpus is not a mapping, is empty,
            or any entry has unknown, duplicate, or too many categories

    Example:
        >>> table = build_table({"en": {"one": "i = 1 and v = 0", "other": ""}})
        >>> table["en"]
        ('one', 'other')
    """
    if not isinstance(corpus, Mapping):
        detail = f"corpus is {type(corpus).__name__}, expected mapping"
        raise CorpusInitializationError(ErrorTemplate.corpus_malformed(source, detail), source=source)
    if not corpus:
        raise CorpusInitializationError(ErrorTemplate.corpus_empty(source), source=source)

    entries: dict[str, tuple[str, ...]] = {}
    raw_keys: dict[str, str] = {}
    for locale_id, rules in corpus.items():
        if not isinstance(locale_id, str) or not locale_id.strip():
            detail = f"invalid locale identifier {locale_id!r}"
            raise CorpusInitializationError(ErrorTemplate.corpus_malformed(source, detail), source=source)
        locale_key = normalize_locale(locale_id)
        if locale_key in entries:
            raise CorpusInitializationError(
                ErrorTemplate.corpus_duplicate_locale(locale_key, raw_keys[locale_key], locale_id),
                source=source,
            )
        entries[locale_key] = _category_names(locale_key, rules, source)
        raw_keys[locale_key] = locale_id

    table = PluralRuleTable(entries, source=source)
    logger.info("Built plural rule table: %d locales from %s", len(table), source)
    return table


def load_table(config: CorpusConfig | None = None) -> PluralRuleTable:
    """Read the configured corpus and build the plural rule table.

    Args:
        config: Corpus configuration (default: CorpusConfig(), Babel's CLDR data)

    Returns:
        Immutable PluralRuleTable

    Raises:
        CorpusInitializationError: If the corpus cannot be read or is invalid
    """
    if config is not None and config.source is CorpusSource.JSON and config.path is not None:
        return build_table(load_json_corpus(config.path), source=str(config.path))
    return build_table(load_babel_corpus(), source=babel_source_label())
