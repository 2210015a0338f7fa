"""Encoding of dictionary state into an opaque byte blob.

The blob is UTF-8 JSON. Weights are derived data and are not stored; the
loader always recounts. ``minimal_frequency_in_documents`` is optional on
input so blobs written before it was persisted still load.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict

from bayesdict.dictionary.config import DictionaryConfig
from bayesdict.errors import CorruptStateError
from bayesdict.utils.serialization import dumps_json

FORMAT_VERSION = 1

_REQUIRED_KEYS = (
    "entries",
    "document_count",
    "use_document_frequency_filter",
    "minimal_token_length",
    "maximal_token_length",
)


@dataclass(frozen=True)
class DictionaryState:
    counts: Dict[str, int]
    document_count: int
    config: DictionaryConfig


def encode_state(state: DictionaryState) -> bytes:
    payload = {
        "format_version": FORMAT_VERSION,
        "entries": dict(state.counts),
        "document_count": state.document_count,
        **state.config.to_dict(),
    }
    return dumps_json(payload).encode("utf-8")


def decode_state(blob: bytes) -> DictionaryState:
    if isinstance(blob, str):
        blob = blob.encode("utf-8")
    if not isinstance(blob, (bytes, bytearray)):
        raise CorruptStateError(f"Expected bytes, got {type(blob).__name__}")
    try:
        payload = json.loads(bytes(blob).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptStateError(f"Dictionary state is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise CorruptStateError("Dictionary state must be a JSON object")

    version = payload.get("format_version", FORMAT_VERSION)
    if isinstance(version, bool) or not isinstance(version, int) or version != FORMAT_VERSION:
        raise CorruptStateError(f"Unsupported dictionary format version: {version!r}")
    missing = [key for key in _REQUIRED_KEYS if key not in payload]
    if missing:
        raise CorruptStateError(f"Dictionary state is missing fields: {', '.join(missing)}")

    counts = _decode_entries(payload["entries"])
    document_count = payload["document_count"]
    if isinstance(document_count, bool) or not isinstance(document_count, int) or document_count < 0:
        raise CorruptStateError(f"Invalid document_count: {document_count!r}")

    config_values: Dict[str, Any] = {
        "use_document_frequency_filter": payload["use_document_frequency_filter"],
        "minimal_token_length": payload["minimal_token_length"],
        "maximal_token_length": payload["maximal_token_length"],
    }
    if "minimal_frequency_in_documents" in payload:
        config_values["minimal_frequency_in_documents"] = payload["minimal_frequency_in_documents"]
    try:
        config = DictionaryConfig.from_dict(config_values)
    except (TypeError, ValueError) as exc:
        raise CorruptStateError(f"Invalid dictionary configuration: {exc}") from exc

    return DictionaryState(counts=counts, document_count=document_count, config=config)


def _decode_entries(raw: Any) -> Dict[str, int]:
    if not isinstance(raw, dict):
        raise CorruptStateError("'entries' must be a mapping of token to count")
    counts: Dict[str, int] = {}
    for token, value in raw.items():
        # Older blobs stored {"count": n, "weight": w} per token.
        if isinstance(value, dict):
            value = value.get("count")
        if isinstance(value, bool) or not isinstance(value, int):
            raise CorruptStateError(f"Invalid count for token '{token}': {value!r}")
        if value <= 0:
            raise CorruptStateError(f"Non-positive count for token '{token}': {value}")
        counts[token] = value
    return counts
