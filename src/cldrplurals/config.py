"""Corpus configuration for the plural rule table.

Provides a single frozen dataclass selecting where the process-wide plural
rule table is built from.

Python 3.11+. Zero external dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from cldrplurals.constants import CORPUS_ENV_VAR
from cldrplurals.enums import CorpusSource

__all__ = ["CorpusConfig"]


@dataclass(frozen=True, slots=True)
class CorpusConfig:
    """Immutable configuration for plural rule table construction.

    Constructing ``CorpusConfig()`` with no arguments selects the CLDR data
    bundled with Babel.

    Attributes:
        source: Corpus provider (default: CorpusSource.BABEL).
        path: CLDR-JSON file to read. Required for CorpusSource.JSON,
            must be None for CorpusSource.BABEL.

    Example:
        >>> from cldrplurals.config import CorpusConfig
        >>> CorpusConfig().source
        <CorpusSource.BABEL: 'babel'>
        >>> config = CorpusConfig(source=CorpusSource.JSON, path=Path("plurals.json"))
        >>> config.path.name
        'plurals.json'
    """

    source: CorpusSource = CorpusSource.BABEL
    path: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If source is not a CorpusSource value, if a JSON source
                has no path, or if a Babel source is given a path.
        """
        try:
            source = CorpusSource(self.source)
        except ValueError:
            msg = f"source must be one of {', '.join(CorpusSource)}, got {self.source!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "source", source)

        if source is CorpusSource.JSON and self.path is None:
            msg = "path is required when source is 'json'"
            raise ValueError(msg)
        if source is CorpusSource.BABEL and self.path is not None:
            msg = "path is only valid when source is 'json'"
            raise ValueError(msg)
        if self.path is not None and not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @classmethod
    def from_env(cls) -> CorpusConfig:
        """Build configuration from the environment.

        Reads CLDRPLURALS_CORPUS. When set (non-empty), it names a CLDR-JSON
        plural corpus file; otherwise Babel's bundled CLDR data is used.

        Returns:
            CorpusConfig for the current environment
        """
        value = os.environ.get(CORPUS_ENV_VAR, "").strip()
        if value:
            return cls(source=CorpusSource.JSON, path=Path(value))
        return cls()
