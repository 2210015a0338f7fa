"""JSON helpers shared by the dictionary blob and the artifact store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def dumps_json(payload: dict[str, Any], *, indent: int | None = None) -> str:
    # ASCII escapes keep tokens with lone surrogates encodable as UTF-8.
    return json.dumps(payload, indent=indent, sort_keys=True, ensure_ascii=True)


def write_json(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(dumps_json(payload, indent=2) + "\n", encoding="utf-8")


def read_json(path: Path) -> dict[str, Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return payload
