"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every template returns a Diagnostic that the matching exception wraps.
    """

    _CLDR_PLURALS_URL = "https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html"

    @staticmethod
    def locale_key_not_found(locale_key: str) -> Diagnostic:
        """Locale key (and its base language) absent from the rule table.

        Args:
            locale_key: Canonical locale key that could not be resolved

        Returns:
            Diagnostic for LOCALE_KEY_NOT_FOUND
        """
        msg = f"Locale key '{locale_key}' not found in plural rule table"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_KEY_NOT_FOUND,
            message=msg,
            hint=f"Use a locale present in the CLDR plural rule corpus ({ErrorTemplate._CLDR_PLURALS_URL})",
            locale_code=locale_key,
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Caller-supplied locale text failed validation.

        Args:
            locale_code: Raw locale text as supplied by the caller
            reason: Why validation failed

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Pass a valid locale identifier such as 'en', 'pt-BR' or 'zh_Hant_TW'",
            locale_code=locale_code,
        )

    @staticmethod
    def corpus_unreadable(source: str, reason: str) -> Diagnostic:
        """Corpus could not be read or decoded.

        Args:
            source: Corpus source label (file path or provider name)
            reason: Underlying I/O or decoding error

        Returns:
            Diagnostic for CORPUS_UNREADABLE
        """
        msg = f"Cannot read plural rule corpus from {source}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_UNREADABLE,
            message=msg,
            hint="Check that the corpus file exists and contains valid CLDR data",
        )

    @staticmethod
    def corpus_malformed(source: str, detail: str) -> Diagnostic:
        """Corpus decoded but does not have the expected shape.

        Args:
            source: Corpus source label
            detail: Description of the structural problem

        Returns:
            Diagnostic for CORPUS_MALFORMED
        """
        msg = f"Malformed plural rule corpus from {source}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_MALFORMED,
            message=msg,
            hint="Expected a mapping of locale identifier to plural categories",
        )

    @staticmethod
    def corpus_empty(source: str) -> Diagnostic:
        """Corpus contains no locales.

        Args:
            source: Corpus source label

        Returns:
            Diagnostic for CORPUS_EMPTY
        """
        msg = f"Plural rule corpus from {source} contains no locales"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_EMPTY,
            message=msg,
            hint="A plural rule table cannot be built without rules",
        )

    @staticmethod
    def corpus_unknown_category(locale_key: str, category: object) -> Diagnostic:
        """Corpus entry names a category outside the CLDR vocabulary.

        Args:
            locale_key: Locale whose rule set is invalid
            category: The offending category name

        Returns:
            Diagnostic for CORPUS_UNKNOWN_CATEGORY
        """
        msg = f"Locale '{locale_key}' defines unknown plural category {category!r}"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_UNKNOWN_CATEGORY,
            message=msg,
            hint="Plural categories are: zero, one, two, few, many, other",
            locale_code=locale_key,
        )

    @staticmethod
    def corpus_duplicate_category(locale_key: str, category: str) -> Diagnostic:
        """Corpus entry lists the same category twice.

        Args:
            locale_key: Locale whose rule set is invalid
            category: The repeated category name

        Returns:
            Diagnostic for CORPUS_DUPLICATE_CATEGORY
        """
        msg = f"Locale '{locale_key}' defines plural category '{category}' more than once"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_DUPLICATE_CATEGORY,
            message=msg,
            locale_code=locale_key,
        )

    @staticmethod
    def corpus_too_many_forms(locale_key: str, count: int, limit: int) -> Diagnostic:
        """Corpus entry has an impossible number of categories.

        Args:
            locale_key: Locale whose rule set is invalid
            count: Number of categories found
            limit: Maximum allowed

        Returns:
            Diagnostic for CORPUS_TOO_MANY_FORMS
        """
        msg = f"Locale '{locale_key}' defines {count} plural categories (maximum {limit})"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_TOO_MANY_FORMS,
            message=msg,
            locale_code=locale_key,
        )

    @staticmethod
    def corpus_duplicate_locale(locale_key: str, first: str, second: str) -> Diagnostic:
        """Two corpus keys normalize to the same canonical locale key.

        Args:
            locale_key: Canonical key both entries map to
            first: First raw corpus key
            second: Second raw corpus key

        Returns:
            Diagnostic for CORPUS_DUPLICATE_LOCALE
        """
        msg = f"Corpus keys '{first}' and '{second}' both normalize to '{locale_key}'"
        return Diagnostic(
            code=DiagnosticCode.CORPUS_DUPLICATE_LOCALE,
            message=msg,
            locale_code=locale_key,
        )

    @staticmethod
    def category_not_in_table(locale_key: str, category: str, known: tuple[str, ...]) -> Diagnostic:
        """Evaluator returned a category the table does not list for the locale.

        Args:
            locale_key: Table key consulted
            category: Category returned by the rule evaluator
            known: Categories the table lists for the locale

        Returns:
            Diagnostic for CATEGORY_NOT_IN_TABLE
        """
        msg = (
            f"Plural rule evaluator returned '{category}' for locale '{locale_key}', "
            f"but the table lists only {', '.join(known)}"
        )
        return Diagnostic(
            code=DiagnosticCode.CATEGORY_NOT_IN_TABLE,
            message=msg,
            hint="The rule evaluator and the plural rule corpus disagree; rebuild the table from the evaluator's CLDR data",
            locale_code=locale_key,
        )
