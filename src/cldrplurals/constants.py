"""Shared constants for cldr-plurals.

Centralizes the CLDR plural category vocabulary and the limits the table
builder enforces, so the corpus providers, the builder and the resolver
agree on a single source of truth.

Constants are grouped by domain:
- Plural categories: the fixed CLDR vocabulary and its document order
- Locale keys: separator conventions for canonical identifiers
- Configuration: environment variable names

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Plural categories
    "PLURAL_CATEGORIES",
    "MAX_PLURAL_FORMS",
    "FALLBACK_CATEGORY",
    # Locale keys
    "LOCALE_SEPARATOR",
    "BCP47_SEPARATOR",
    "ROOT_LOCALE",
    # Configuration
    "CORPUS_ENV_VAR",
    "CLDR_JSON_RULE_PREFIX",
]

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================
#
# CLDR defines exactly six cardinal plural categories. supplemental/plurals.xml
# (and the plurals.json derived from it) lists the categories a locale defines
# in this order. A locale never defines a category twice, so no locale can
# have more than six plural forms.
#
# ============================================================================

PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

MAX_PLURAL_FORMS: int = len(PLURAL_CATEGORIES)

# Implicit catch-all category. Every CLDR rule set ends in it, even when the
# rule text for it is empty.
FALLBACK_CATEGORY: str = "other"

# ============================================================================
# LOCALE KEYS
# ============================================================================

# Canonical table keys use the POSIX/Babel form: "pt_PT", "zh_Hant_HK".
LOCALE_SEPARATOR: str = "_"

# Accepted on input and converted at the boundary: "pt-PT".
BCP47_SEPARATOR: str = "-"

# Babel ships data for the CLDR root locale; it is never a table key.
ROOT_LOCALE: str = "root"

# ============================================================================
# CONFIGURATION
# ============================================================================

# Path to a CLDR-JSON plural corpus. Unset means Babel's bundled CLDR data.
CORPUS_ENV_VAR: str = "CLDRPLURALS_CORPUS"

# Key prefix used by cldr-json's supplemental/plurals.json.
CLDR_JSON_RULE_PREFIX: str = "pluralRule-count-"
