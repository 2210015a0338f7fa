"""Word counting for plain text."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from pathlib import Path

# Underscores split words too, so "foo_bar" counts as "foo" and "bar".
TOKEN_SPLIT_RE = re.compile(r"[\W_]+")


def split_words(text: str, lowercase: bool = True) -> Iterator[str]:
    for token in TOKEN_SPLIT_RE.split(text):
        if token:
            yield token.lower() if lowercase else token


def count_tokens(
    text: str,
    stopwords: Iterable[str] | None = None,
    lowercase: bool = True,
) -> Counter[str]:
    """Count the words of ``text`` into a token multiset.

    Stopwords are compared after lowercasing when ``lowercase`` is set.
    """
    stop = frozenset(stopwords or ())
    return Counter(token for token in split_words(text, lowercase=lowercase) if token not in stop)


def load_stopwords(path: Path) -> frozenset[str]:
    words: set[str] = set()
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            word = line.split("#", 1)[0].strip().lower()
            if word:
                words.add(word)
    return frozenset(words)
