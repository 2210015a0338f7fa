"""Plain-text tokenization producing token multisets."""

from bayesdict.tokenization.words import count_tokens, load_stopwords, split_words

__all__ = ["count_tokens", "load_stopwords", "split_words"]
