"""Plural rule corpus providers.

A corpus maps each locale identifier to an ordered mapping of the plural
categories that locale defines (category name -> CLDR rule text). Only the
category names and their order matter to the plural rule table.

Providers:
    load_babel_corpus - CLDR data bundled with Babel (default)
    load_json_corpus - CLDR-JSON plurals file on disk

Python 3.11+.
"""

from collections.abc import Mapping, Sequence
from typing import TypeAlias

from .babel_data import BABEL_SOURCE, babel_source_label, load_babel_corpus, plural_rule_categories
from .json_data import load_json_corpus, parse_json_corpus

PluralCorpus: TypeAlias = Mapping[str, Mapping[str, str] | Sequence[str]]
"""Locale identifier -> ordered plural categories (as mapping keys or a sequence)."""

__all__ = [
    "BABEL_SOURCE",
    "PluralCorpus",
    "babel_source_label",
    "load_babel_corpus",
    "load_json_corpus",
    "parse_json_corpus",
    "plural_rule_categories",
]
