from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator, Optional, Union

import pyarrow.parquet as pq

FORMATS = ("txt", "jsonl", "parquet")


def iter_documents(
    corpus_path: Union[str, Path],
    fmt: str = "txt",
    text_key: str = "text",
    max_samples: Optional[int] = None,
) -> Iterator[str]:
    """Yield document texts from a corpus file.

    txt holds one document per non-empty line. jsonl reads ``text_key`` from
    each object and falls back to the whole record. parquet reads the
    ``text_key`` column and skips nulls.
    """
    fmt = fmt.lower()
    if fmt == "txt":
        docs = _iter_txt(Path(corpus_path))
    elif fmt == "jsonl":
        docs = _iter_jsonl(Path(corpus_path), text_key)
    elif fmt == "parquet":
        docs = _iter_parquet(Path(corpus_path), text_key)
    else:
        raise ValueError(f"Unknown format: {fmt}. Use {'|'.join(FORMATS)}.")

    for n, doc in enumerate(docs, start=1):
        yield doc
        if max_samples and n >= max_samples:
            return


def _iter_txt(path: Path) -> Iterator[str]:
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            s = line.rstrip("\n")
            if s:
                yield s


def _iter_jsonl(path: Path, text_key: str) -> Iterator[str]:
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            obj = json.loads(line)
            if isinstance(obj, dict) and text_key in obj:
                yield str(obj[text_key])
            else:
                yield json.dumps(obj, ensure_ascii=False)


def _iter_parquet(path: Path, text_key: str) -> Iterator[str]:
    table = pq.read_table(path, columns=[text_key])
    for s in table.column(text_key).to_pylist():
        if s is not None:
            yield str(s)
