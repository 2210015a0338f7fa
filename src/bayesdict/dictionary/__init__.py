"""Token dictionary core: counting, weighting and matching."""

from bayesdict.dictionary.config import DictionaryConfig
from bayesdict.dictionary.dictionary import TokenDictionary
from bayesdict.dictionary.recount import EntryState, RecountResult, recount
from bayesdict.dictionary.tokens import TokenEntry, TokenMultiset

__all__ = [
    "DictionaryConfig",
    "EntryState",
    "RecountResult",
    "TokenDictionary",
    "TokenEntry",
    "TokenMultiset",
    "recount",
]
