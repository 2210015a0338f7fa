"""Exceptions raised by bayesdict."""

from __future__ import annotations


class CorruptStateError(ValueError):
    """Persisted dictionary state cannot be decoded into the expected shape."""
