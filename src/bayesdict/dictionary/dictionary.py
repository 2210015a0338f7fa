"""Frequency-weighted token dictionary."""

from __future__ import annotations

import math
from dataclasses import replace
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from bayesdict.dictionary.config import DictionaryConfig
from bayesdict.dictionary.recount import recount
from bayesdict.dictionary.state import DictionaryState, decode_state, encode_state
from bayesdict.dictionary.tokens import TokenEntry, TokenMultiset, nonzero_counts
from bayesdict.utils.logging import get_logger

logger = get_logger(__name__)


class TokenDictionary:
    """Cumulative token statistics over a set of training documents.

    Each ``add_tokens`` call ingests the token counts of one document and each
    ``remove_tokens`` call withdraws one. After every mutation the weights are
    rebuilt: a usable token's weight is its share of all usable occurrences.
    ``match`` scores a query by ``1 / (1 + prod(1 - weight))`` over the usable
    tokens it shares with the dictionary, so 0.5 means no overlap and values
    approach 1 as the query covers more of the corpus vocabulary.

    Not thread-safe; share an instance only behind a lock.
    """

    def __init__(self, config: Optional[DictionaryConfig] = None) -> None:
        self._config = config or DictionaryConfig()
        self._counts: Dict[str, int] = {}
        self._document_count = 0
        self._entries: Dict[str, TokenEntry] = {}
        self._token_count = 0
        self._usable_token_count = 0

    # -- mutation -----------------------------------------------------------

    def add_tokens(self, tokens: TokenMultiset) -> None:
        """Ingest one training document's token counts.

        Zero counts are skipped, so they never create an entry.
        """
        for token, count in nonzero_counts(tokens):
            self._counts[token] = self._counts.get(token, 0) + count
        self._document_count += 1
        self.recount()

    def remove_tokens(self, tokens: TokenMultiset) -> None:
        """Withdraw one training document's token counts.

        Unknown tokens are ignored and entries that drop to zero are deleted.
        The document count never goes below zero.
        """
        for token, count in nonzero_counts(tokens):
            if token not in self._counts:
                continue
            remaining = self._counts[token] - count
            if remaining <= 0:
                del self._counts[token]
            else:
                self._counts[token] = remaining
        if self._document_count > 0:
            self._document_count -= 1
        else:
            logger.warning("remove_tokens called with document_count already at 0; keeping 0")
        self.recount()

    def recount(self) -> None:
        """Rebuild weights, usable and total token counts from the raw counts."""
        result = recount(self._counts, self._config, self._document_count)
        self._entries = {
            token: TokenEntry(count=count, weight=result.weights[token]) for token, count in self._counts.items()
        }
        self._usable_token_count = result.usable_token_count
        self._token_count = result.token_count
        logger.debug(
            "Recounted %d entries: token_count=%d usable_token_count=%d documents=%d",
            len(self._entries),
            self._token_count,
            self._usable_token_count,
            self._document_count,
        )

    # -- queries ------------------------------------------------------------

    def match(self, tokens: TokenMultiset) -> float:
        """Probability that ``tokens`` resembles the trained corpus.

        Only token presence matters; query counts are ignored. Returns exactly
        0.5 when no usable token is shared with the dictionary, and 1.0 when a
        shared token carries the whole weight.
        """
        log_sum = 0.0
        for token in tokens:
            entry = self._entries.get(token)
            if entry is None or entry.weight == 0:
                continue
            if entry.weight >= 1.0:
                return 1.0
            log_sum += math.log1p(-entry.weight)
        return 1.0 / (1.0 + math.exp(log_sum))

    def weight(self, token: str) -> float:
        entry = self._entries.get(token)
        return entry.weight if entry is not None else 0.0

    def dump(self) -> Mapping[str, TokenEntry]:
        """Read-only snapshot of all entries."""
        return MappingProxyType(dict(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, token: object) -> bool:
        return token in self._entries

    def __repr__(self) -> str:
        return (
            f"TokenDictionary(entries={len(self._entries)}, documents={self._document_count}, "
            f"usable_token_count={self._usable_token_count})"
        )

    @property
    def token_count(self) -> int:
        return self._token_count

    @property
    def usable_token_count(self) -> int:
        return self._usable_token_count

    # -- persistence --------------------------------------------------------

    def serialize(self) -> bytes:
        state = DictionaryState(counts=dict(self._counts), document_count=self._document_count, config=self._config)
        return encode_state(state)

    @classmethod
    def deserialize(cls, blob: bytes) -> "TokenDictionary":
        dictionary = cls()
        dictionary.load_state(blob)
        return dictionary

    def load_state(self, blob: bytes) -> None:
        """Replace this dictionary's state with a serialized one.

        Raises CorruptStateError and leaves the dictionary untouched when the
        blob cannot be decoded.
        """
        state = decode_state(blob)
        self._counts = dict(state.counts)
        self._document_count = state.document_count
        self._config = state.config
        self.recount()

    # -- configuration ------------------------------------------------------
    # Every setter recounts so weights always reflect the active rules.

    @property
    def config(self) -> DictionaryConfig:
        return self._config

    @config.setter
    def config(self, value: DictionaryConfig) -> None:
        if not isinstance(value, DictionaryConfig):
            raise ValueError(f"Expected DictionaryConfig, got {type(value).__name__}")
        self._config = value
        self.recount()

    def _update_config(self, **changes: object) -> None:
        self.config = replace(self._config, **changes)

    @property
    def document_count(self) -> int:
        return self._document_count

    @document_count.setter
    def document_count(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"document_count must be a non-negative integer, got {value!r}")
        self._document_count = value
        self.recount()

    @property
    def minimal_frequency_in_documents(self) -> float:
        return self._config.minimal_frequency_in_documents

    @minimal_frequency_in_documents.setter
    def minimal_frequency_in_documents(self, value: float) -> None:
        self._update_config(minimal_frequency_in_documents=value)

    @property
    def use_document_frequency_filter(self) -> bool:
        return self._config.use_document_frequency_filter

    @use_document_frequency_filter.setter
    def use_document_frequency_filter(self, value: bool) -> None:
        self._update_config(use_document_frequency_filter=value)

    @property
    def minimal_token_length(self) -> int:
        return self._config.minimal_token_length

    @minimal_token_length.setter
    def minimal_token_length(self, value: int) -> None:
        self._update_config(minimal_token_length=value)

    @property
    def maximal_token_length(self) -> int:
        return self._config.maximal_token_length

    @maximal_token_length.setter
    def maximal_token_length(self, value: int) -> None:
        self._update_config(maximal_token_length=value)
