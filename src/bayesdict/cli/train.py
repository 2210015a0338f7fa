"""Dictionary training and untraining commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from bayesdict.cli.common import (
    add_corpus_args,
    add_logging_args,
    iter_multisets,
    load_config,
    setup_logging_from_args,
)
from bayesdict.dictionary import DictionaryConfig, TokenDictionary
from bayesdict.io.store import load_dictionary, save_dictionary
from bayesdict.utils.logging import get_logger

logger = get_logger(__name__)


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("train", help="Build a dictionary artifact from a corpus.")
    add_corpus_args(parser)
    parser.add_argument("--output", required=True, help="Output artifact directory.")
    parser.add_argument("--config", help="Dictionary config YAML.")
    parser.add_argument("--min-token-length", type=int, default=None, help="Minimal token length.")
    parser.add_argument("--max-token-length", type=int, default=None, help="Maximal token length.")
    parser.add_argument(
        "--min-doc-frequency",
        type=float,
        default=None,
        help="Minimal occurrences per document for a token to count (with --doc-frequency-filter).",
    )
    parser.add_argument(
        "--doc-frequency-filter",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Ignore tokens rarer than --min-doc-frequency (--no-doc-frequency-filter turns it off).",
    )
    parser.add_argument(
        "--update",
        action="store_true",
        help="Extend the dictionary already stored in --output instead of starting empty.",
    )
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def add_untrain_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("untrain", help="Remove a corpus' documents from a dictionary artifact.")
    parser.add_argument("--dictionary", required=True, help="Dictionary artifact directory.")
    add_corpus_args(parser)
    add_logging_args(parser)
    parser.set_defaults(func=run_untrain)
    return parser


def build_config(args: argparse.Namespace, base: DictionaryConfig | None = None) -> DictionaryConfig:
    """Merge defaults, the YAML config file and CLI flags, later ones winning."""
    base = base or DictionaryConfig()
    overrides = {
        "minimal_frequency_in_documents": args.min_doc_frequency,
        "use_document_frequency_filter": args.doc_frequency_filter,
        "minimal_token_length": args.min_token_length,
        "maximal_token_length": args.max_token_length,
    }
    merged = {**base.to_dict(), **load_config(args.config)}
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return DictionaryConfig.from_dict(merged)


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    output_dir = Path(args.output)

    if args.update:
        dictionary, manifest = load_dictionary(output_dir)
        metadata = dict(manifest.get("metadata") or {})
    else:
        dictionary, metadata = TokenDictionary(), {}
    dictionary.config = build_config(args, base=dictionary.config)

    added = 0
    for tokens in iter_multisets(args, args.corpus, desc="Training"):
        dictionary.add_tokens(tokens)
        added += 1
    if added == 0 and not args.update:
        raise ValueError("Corpus is empty.")

    corpora = list(metadata.get("corpora") or [])
    corpora.append({"path": str(args.corpus), "documents": added})
    metadata["corpora"] = corpora
    save_dictionary(output_dir, dictionary, metadata=metadata)
    logger.info("Trained on %d documents from %s", added, args.corpus)
    print(f"documents={dictionary.document_count} entries={len(dictionary)}")
    return 0


def run_untrain(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    artifact_dir = Path(args.dictionary)
    dictionary, manifest = load_dictionary(artifact_dir)
    metadata = dict(manifest.get("metadata") or {})

    removed = 0
    for tokens in iter_multisets(args, args.corpus, desc="Untraining"):
        dictionary.remove_tokens(tokens)
        removed += 1

    removals = list(metadata.get("removed") or [])
    removals.append({"path": str(args.corpus), "documents": removed})
    metadata["removed"] = removals
    save_dictionary(artifact_dir, dictionary, metadata=metadata)
    logger.info("Removed %d documents from %s", removed, artifact_dir)
    print(f"documents={dictionary.document_count} entries={len(dictionary)}")
    return 0
