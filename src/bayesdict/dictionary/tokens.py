"""Token multisets and dictionary entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import List, Tuple

# Token -> occurrence count within one document or query.
TokenMultiset = Mapping[str, int]


@dataclass(frozen=True)
class TokenEntry:
    count: int
    weight: float = 0.0


def nonzero_counts(tokens: TokenMultiset) -> List[Tuple[str, int]]:
    """Return the non-zero (token, count) pairs of a multiset.

    Raises ValueError for negative or non-integer counts, so a bad multiset is
    rejected before any dictionary state changes.
    """
    pairs: List[Tuple[str, int]] = []
    for token, count in tokens.items():
        if not isinstance(token, str):
            raise ValueError(f"Token must be a string, got {type(token).__name__}")
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Count for token '{token}' must be an integer")
        if count < 0:
            raise ValueError(f"Negative count {count} for token '{token}'")
        if count:
            pairs.append((token, count))
    return pairs
