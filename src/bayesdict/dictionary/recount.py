"""Weight derivation for token dictionaries.

Weights are recomputed from scratch in two passes. The first pass tags every
token as filtered or pending and accumulates the normalization denominator;
the second turns pending tokens into their share of that denominator.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict

from bayesdict.dictionary.config import DictionaryConfig


class EntryState(enum.Enum):
    FILTERED = "filtered"
    PENDING = "pending"


@dataclass(frozen=True)
class RecountResult:
    weights: Dict[str, float]
    usable_token_count: int
    token_count: int


def classify(token: str, count: int, config: DictionaryConfig, document_count: int) -> EntryState:
    if config.use_document_frequency_filter and document_count > 0:
        if count / document_count < config.minimal_frequency_in_documents:
            return EntryState.FILTERED
    if not config.accepts_length(token):
        return EntryState.FILTERED
    return EntryState.PENDING


def recount(counts: Mapping[str, int], config: DictionaryConfig, document_count: int) -> RecountResult:
    states: Dict[str, EntryState] = {}
    usable = 0
    total = 0
    for token, count in counts.items():
        total += count
        state = classify(token, count, config, document_count)
        states[token] = state
        if state is EntryState.PENDING:
            usable += count

    weights: Dict[str, float] = {}
    for token, state in states.items():
        if state is EntryState.PENDING and usable > 0:
            weights[token] = counts[token] / usable
        else:
            weights[token] = 0.0

    return RecountResult(weights=weights, usable_token_count=usable, token_count=total)
