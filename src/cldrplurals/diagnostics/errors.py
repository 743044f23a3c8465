"""cldr-plurals exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information. Each
concrete error also derives from the builtin exception a caller would
naturally catch for that situation (LookupError for a missing locale key,
ValueError for a malformed locale, RuntimeError for corrupt data).

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CorpusInitializationError",
    "PluralFormsError",
    "PluralIntegrityError",
    "UnknownLocaleError",
    "UnresolvableLocaleKeyError",
]


class PluralFormsError(Exception):
    """Base exception for all cldr-plurals errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralFormsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class UnresolvableLocaleKeyError(PluralFormsError, LookupError):
    """Locale key has no plural rule table entry, even after base-language fallback.

    Raised when a canonical key is absent from the table and either has no
    base-language subtag to fall back to, or that base language is absent too.

    Attributes:
        locale_code: The canonical key that was looked up last
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize UnresolvableLocaleKeyError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The canonical key that was looked up last
        """
        super().__init__(message)
        self.locale_code = locale_code


class UnknownLocaleError(PluralFormsError, ValueError):
    """Caller-supplied locale text failed validation.

    Raised before any plural rule is evaluated. Distinct from
    UnresolvableLocaleKeyError: this concerns locale well-formedness,
    not table coverage.

    Attributes:
        locale_code: The raw locale text
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize UnknownLocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The raw locale text
        """
        super().__init__(message)
        self.locale_code = locale_code


class CorpusInitializationError(PluralFormsError, RuntimeError):
    """The plural rule corpus could not be read, decoded or validated.

    Initialization-time only. No plural rule table exists when this is raised,
    so no pluralization request can be served.

    Attributes:
        source: Corpus source label (provider name or file path)
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        """Initialize CorpusInitializationError.

        Args:
            message: Error message string OR Diagnostic object
            source: Corpus source label (provider name or file path)
        """
        super().__init__(message)
        self.source = source


class PluralIntegrityError(PluralFormsError, RuntimeError):
    """Rule evaluator returned a category the table does not list.

    Signals a corpus/evaluator mismatch. Raised instead of defaulting to
    form index 0.

    Attributes:
        locale_code: Table key that was consulted
        category: Category returned by the evaluator
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        category: str = "",
    ) -> None:
        """Initialize PluralIntegrityError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: Table key that was consulted
            category: Category returned by the evaluator
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.category = category
