"""CLDR plural rule corpus read from a JSON file.

Accepted shapes:

1. cldr-json ``supplemental/plurals.json``::

       {"supplemental": {"plurals-type-cardinal": {
           "pl": {"pluralRule-count-one": "i = 1 and v = 0 @integer 1", ...}}}}

2. A flat rule file keyed by plural type::

       {"cardinal": {"pl": {"one": "i = 1 and v = 0", ...}}}

3. A flat category list file::

       {"pl": ["one", "few", "many", "other"], ...}

JSON objects decode into insertion-ordered dicts, so each locale's category
order is exactly the order of the file.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from cldrplurals.constants import CLDR_JSON_RULE_PREFIX
from cldrplurals.diagnostics import CorpusInitializationError, ErrorTemplate

__all__ = ["load_json_corpus", "parse_json_corpus"]

logger = logging.getLogger(__name__)

_CLDR_SUPPLEMENTAL = "supplemental"
_CLDR_CARDINAL = "plurals-type-cardinal"
_FLAT_CARDINAL = "cardinal"


def _malformed(source: str, detail: str) -> CorpusInitializationError:
    logger.error("Malformed plural rule corpus %s: %s", source, detail)
    return CorpusInitializationError(ErrorTemplate.corpus_malformed(source, detail), source=source)


def _locale_table(document: Any, source: str) -> Mapping[str, Any]:
    """Locate the locale -> rules mapping inside a decoded document."""
    if not isinstance(document, Mapping):
        raise _malformed(source, f"top level is {type(document).__name__}, expected object")

    supplemental = document.get(_CLDR_SUPPLEMENTAL)
    if supplemental is not None:
        if not isinstance(supplemental, Mapping) or _CLDR_CARDINAL not in supplemental:
            raise _malformed(source, f"'{_CLDR_SUPPLEMENTAL}' has no '{_CLDR_CARDINAL}' section")
        table = supplemental[_CLDR_CARDINAL]
    elif _FLAT_CARDINAL in document:
        table = document[_FLAT_CARDINAL]
    else:
        table = document

    if not isinstance(table, Mapping):
        raise _malformed(source, "cardinal rules are not an object")
    return table


def _rule_set(locale_id: str, rules: Any, source: str) -> dict[str, str] | list[Any]:
    """Normalize one locale's rules; category validation is left to the table builder."""
    if isinstance(rules, Mapping):
        rule_set: dict[str, str] = {}
        for key, text in rules.items():
            category = str(key).removeprefix(CLDR_JSON_RULE_PREFIX)
            rule_set[category] = text if isinstance(text, str) else ""
        return rule_set
    if isinstance(rules, Sequence) and not isinstance(rules, str):
        return list(rules)
    raise _malformed(source, f"rules for '{locale_id}' are {type(rules).__name__}")


def parse_json_corpus(text: str, *, source: str = "<string>") -> dict[str, dict[str, str] | list[Any]]:
    """Parse a JSON plural rule corpus.

    Args:
        text: JSON document in one of the accepted shapes
        source: Label used in error messages

    Returns:
        Mapping of locale identifier to ordered category -> rule text (or category list)

    Raises:
        CorpusInitializationError: If the text is not JSON or has an
            unrecognized shape

    Example:
        >>> parse_json_corpus('{"en": ["one", "other"]}')
        {'en': ['one', 'other']}
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in plural rule corpus %s: %s", source, e)
        raise CorpusInitializationError(
            ErrorTemplate.corpus_unreadable(source, str(e)),
            source=source,
        ) from e

    table = _locale_table(document, source)
    return {
        str(locale_id): _rule_set(str(locale_id), rules, source)
        for locale_id, rules in table.items()
    }


def load_json_corpus(path: Path | str) -> dict[str, dict[str, str] | list[Any]]:
    """Read a JSON plural rule corpus from disk.

    Args:
        path: Path to the JSON file (UTF-8)

    Returns:
        Mapping of locale identifier to ordered category -> rule text (or category list)

    Raises:
        CorpusInitializationError: If the file cannot be read, is not JSON,
            or has an unrecognized shape
    """
    path = Path(path)
    source = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read plural rule corpus %s: %s", source, e)
        raise CorpusInitializationError(
            ErrorTemplate.corpus_unreadable(source, str(e)),
            source=source,
        ) from e

    corpus = parse_json_corpus(text, source=source)
    logger.debug("Read %d plural rule sets from %s", len(corpus), source)
    return corpus
