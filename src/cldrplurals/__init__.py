"""cldr-plurals - CLDR cardinal plural forms for gettext-style localization.

Resolves which plural form a number takes in a locale, using the Unicode
CLDR cardinal plural rules shipped with Babel, and exposes it through the
two operations a gettext-style framework needs: how many plural forms a
locale has, and which form index a number maps to.

Locales without their own plural rules fall back once to their base
language ("en_GB" -> "en").

Public API:
    PluralForms - Plural-forms provider bound to a plural rule table
    count_forms - Number of plural forms for a locale
    form_index - Plural form index of a number for a locale
    plural_categories - Ordered plural categories for a locale
    bind_plural_forms - Make a gettext catalog use CLDR plural forms

Exceptions:
    PluralFormsError - Base exception class
    UnresolvableLocaleKeyError - Locale (and base language) not in the table
    UnknownLocaleError - Locale text failed validation
    CorpusInitializationError - Plural rule corpus unreadable or invalid
    PluralIntegrityError - Rule evaluator and table disagree

Submodules:
    cldrplurals.runtime - Table builder, resolver, rule evaluator
    cldrplurals.corpus - Babel and CLDR-JSON corpus providers
    cldrplurals.gettext_support - gettext catalog integration
    cldrplurals.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    CorpusInitializationError,
    PluralFormsError,
    PluralIntegrityError,
    UnknownLocaleError,
    UnresolvableLocaleKeyError,
)
from .enums import PluralCategory
from .gettext_support import bind_plural_forms
from .runtime import PluralForms, count_forms, form_index, plural_categories

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cldr-plurals")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CorpusInitializationError",
    "PluralCategory",
    "PluralForms",
    "PluralFormsError",
    "PluralIntegrityError",
    "UnknownLocaleError",
    "UnresolvableLocaleKeyError",
    "__version__",
    "bind_plural_forms",
    "count_forms",
    "form_index",
    "plural_categories",
]
