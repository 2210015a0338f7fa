from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Any, Iterator

import yaml
from tqdm import tqdm

from bayesdict.io.data import FORMATS, iter_documents
from bayesdict.tokenization import count_tokens, load_stopwords
from bayesdict.utils.logging import configure_logging


def add_logging_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., INFO, DEBUG). Also respects BAYESDICT_LOG_LEVEL env var.",
    )


def setup_logging_from_args(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)


def add_corpus_args(p: argparse.ArgumentParser, flag: str = "--corpus") -> None:
    p.add_argument(flag, required=True, help="Path to corpus file, one document per record.")
    p.add_argument("--format", default="txt", choices=list(FORMATS))
    p.add_argument("--text-key", default="text", help="Field key for jsonl/parquet.")
    p.add_argument("--max-samples", type=int, default=None)
    p.add_argument("--stopwords", default=None, help="Stopword file, one word per line.")
    p.add_argument("--progress", action="store_true", help="Show tqdm progress while reading.")


def iter_multisets(args: argparse.Namespace, path: str, desc: str) -> Iterator[Counter[str]]:
    stopwords = load_stopwords(Path(args.stopwords)) if args.stopwords else None
    documents = iter_documents(path, fmt=args.format, text_key=args.text_key, max_samples=args.max_samples)
    if args.progress:
        documents = tqdm(documents, desc=desc, unit="doc")
    for text in documents:
        yield count_tokens(text, stopwords=stopwords)


def load_config(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Dictionary config must be a mapping.")
    if "dictionary" in payload and isinstance(payload["dictionary"], dict):
        return payload["dictionary"]
    return payload
