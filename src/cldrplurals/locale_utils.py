"""Locale utilities: normalization, validation and base-language extraction.

Centralizes locale format handling used throughout the codebase. All locale
text is normalized at the system boundary into the canonical POSIX/Babel form
("pt_PT", "zh_Hant_TW") so that plural rule table keys and lookups agree.

Python 3.11+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError as BabelUnknownLocaleError
from babel.core import get_locale_identifier, parse_locale

from cldrplurals.constants import BCP47_SEPARATOR, LOCALE_SEPARATOR
from cldrplurals.diagnostics import ErrorTemplate, UnknownLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_language",
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to the canonical table key form.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Subtag casing follows Babel's conventions: lowercase language, titlecase
    script, uppercase region. Encoding suffixes and @modifiers are dropped.

    Text Babel cannot parse is only separator-converted; deciding whether such
    a key exists is left to the table lookup.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_br", "de_DE.UTF-8")

    Returns:
        Canonical locale key (e.g., "en_US", "pt_BR", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh-hant-tw")
        'zh_Hant_TW'
        >>> normalize_locale("en")
        'en'
    """
    posix = locale_code.strip().replace(BCP47_SEPARATOR, LOCALE_SEPARATOR)
    try:
        parts = parse_locale(posix, sep=LOCALE_SEPARATOR)
    except ValueError:
        return posix
    return get_locale_identifier(parts[:4], sep=LOCALE_SEPARATOR)


def base_language(locale_key: str) -> str | None:
    """Return the leading language subtag of a canonical locale key.

    Args:
        locale_key: Canonical locale key

    Returns:
        The language subtag, or None if the key is already a bare language

    Example:
        >>> base_language("en_GB")
        'en'
        >>> base_language("zh_Hant_TW")
        'zh'
        >>> base_language("en") is None
        True
    """
    language, separator, _ = locale_key.partition(LOCALE_SEPARATOR)
    if not separator:
        return None
    return language


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def validate_locale(locale_code: str | Locale) -> Locale:
    """Turn caller-supplied locale text into a structured Babel Locale.

    Args:
        locale_code: Locale text, or an already structured Babel Locale

    Returns:
        Babel Locale object

    Raises:
        UnknownLocaleError: If the text is malformed or names no known locale

    Example:
        >>> str(validate_locale("en-GB"))
        'en_GB'
        >>> validate_locale("not a locale")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        UnknownLocaleError: Unknown locale 'not a locale': ...
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    if isinstance(locale_code, Locale):
        return locale_code
    if not isinstance(locale_code, str):
        raise UnknownLocaleError(
            ErrorTemplate.unknown_locale(repr(locale_code), "expected str or babel.Locale"),
            locale_code=repr(locale_code),
        )
    try:
        return get_babel_locale(locale_code)
    except (BabelUnknownLocaleError, ValueError) as e:
        raise UnknownLocaleError(
            ErrorTemplate.unknown_locale(locale_code, str(e)),
            locale_code=locale_code,
        ) from e
