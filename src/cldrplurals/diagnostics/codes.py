"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
cldr-plurals exception.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale resolution errors (unknown locale, missing table key)
        2000-2999: Corpus errors (unreadable or malformed plural rule data)
        3000-3999: Integrity errors (evaluator and table disagree)
    """

    # Locale resolution errors (1000-1999)
    LOCALE_KEY_NOT_FOUND = 1001
    LOCALE_UNKNOWN = 1002

    # Corpus errors (2000-2999)
    CORPUS_UNREADABLE = 2001
    CORPUS_MALFORMED = 2002
    CORPUS_EMPTY = 2003
    CORPUS_UNKNOWN_CATEGORY = 2004
    CORPUS_DUPLICATE_CATEGORY = 2005
    CORPUS_TOO_MANY_FORMS = 2006
    CORPUS_DUPLICATE_LOCALE = 2007

    # Integrity errors (3000-3999)
    CATEGORY_NOT_IN_TABLE = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale the error concerns (None if not applicable)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic for display.

        Example output:
            error[LOCALE_KEY_NOT_FOUND]: Locale key 'xx' not found in plural rule table
              = locale: xx
              = help: Use a locale present in the CLDR plural rule corpus

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.locale_code is not None:
            lines.append(f"  = locale: {self.locale_code}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
