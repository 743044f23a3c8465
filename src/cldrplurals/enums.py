"""Enumerations for cldr-plurals type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the
category names Babel's plural rules return.

Python 3.11+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR cardinal plural category.

    Members are declared in CLDR document order.

    StrEnum provides automatic string conversion: str(PluralCategory.FEW) == "few"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class CorpusSource(StrEnum):
    """Where the plural rule corpus is read from.

    StrEnum provides automatic string conversion: str(CorpusSource.BABEL) == "babel"
    """

    BABEL = "babel"
    """CLDR data bundled with the installed Babel distribution"""

    JSON = "json"
    """CLDR-JSON plurals file on disk"""


__all__ = [
    "CorpusSource",
    "PluralCategory",
]
