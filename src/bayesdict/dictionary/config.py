"""Filtering configuration for token dictionaries."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class DictionaryConfig:
    """Rules deciding which tokens take part in weight normalization.

    ``minimal_frequency_in_documents`` only applies when
    ``use_document_frequency_filter`` is set: with 0.1, a token whose total
    count is below one occurrence per ten ingested documents is ignored.
    Token length is measured in Unicode code points and both bounds are
    inclusive.
    """

    minimal_frequency_in_documents: float = 0.05
    use_document_frequency_filter: bool = False
    minimal_token_length: int = 3
    maximal_token_length: int = 16

    def __post_init__(self) -> None:
        if isinstance(self.minimal_token_length, bool) or not isinstance(self.minimal_token_length, int):
            raise ValueError("minimal_token_length must be an integer")
        if isinstance(self.maximal_token_length, bool) or not isinstance(self.maximal_token_length, int):
            raise ValueError("maximal_token_length must be an integer")
        if not isinstance(self.use_document_frequency_filter, bool):
            raise ValueError("use_document_frequency_filter must be a boolean")
        if isinstance(self.minimal_frequency_in_documents, bool) or not isinstance(
            self.minimal_frequency_in_documents, (int, float)
        ):
            raise ValueError("minimal_frequency_in_documents must be a number")
        if self.minimal_token_length < 0:
            raise ValueError("minimal_token_length must be >= 0")
        if self.maximal_token_length < self.minimal_token_length:
            raise ValueError(
                f"maximal_token_length ({self.maximal_token_length}) is below "
                f"minimal_token_length ({self.minimal_token_length})"
            )
        if not 0.0 <= self.minimal_frequency_in_documents <= 1.0:
            raise ValueError("minimal_frequency_in_documents must lie in [0, 1]")

    def accepts_length(self, token: str) -> bool:
        return self.minimal_token_length <= len(token) <= self.maximal_token_length

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "DictionaryConfig":
        known = {f.name for f in fields(DictionaryConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown dictionary config keys: {', '.join(unknown)}")
        return DictionaryConfig(**d)
