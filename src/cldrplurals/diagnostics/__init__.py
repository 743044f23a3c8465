"""Diagnostic system for cldr-plurals errors.

Provides structured error diagnostics with codes, messages and hints.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CorpusInitializationError,
    PluralFormsError,
    PluralIntegrityError,
    UnknownLocaleError,
    UnresolvableLocaleKeyError,
)
from .templates import ErrorTemplate

__all__ = [
    "CorpusInitializationError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "PluralFormsError",
    "PluralIntegrityError",
    "UnknownLocaleError",
    "UnresolvableLocaleKeyError",
]
