"""bayesdict: frequency-weighted token dictionaries for corpus similarity scoring."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from bayesdict.dictionary import DictionaryConfig, TokenDictionary, TokenEntry
from bayesdict.errors import CorruptStateError

try:
    __version__ = version("bayesdict")
except PackageNotFoundError:  # pragma: no cover - runtime fallback
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CorruptStateError",
    "DictionaryConfig",
    "TokenDictionary",
    "TokenEntry",
]
