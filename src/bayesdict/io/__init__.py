"""Corpus readers and dictionary artifact storage."""

from bayesdict.io.data import iter_documents
from bayesdict.io.store import load_dictionary, save_dictionary

__all__ = ["iter_documents", "load_dictionary", "save_dictionary"]
