"""Dictionary inspection command."""

from __future__ import annotations

import argparse
from pathlib import Path

from bayesdict.cli.common import add_logging_args, setup_logging_from_args
from bayesdict.io.store import load_dictionary


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("dump", help="Print dictionary statistics and its heaviest tokens.")
    parser.add_argument("--dictionary", required=True, help="Dictionary artifact directory.")
    parser.add_argument("--top", type=int, default=20, help="Number of tokens to list (0 = all).")
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    dictionary, _manifest = load_dictionary(Path(args.dictionary))
    config = dictionary.config
    print(
        f"documents={dictionary.document_count} entries={len(dictionary)} "
        f"token_count={dictionary.token_count} usable_token_count={dictionary.usable_token_count}"
    )
    print(
        f"token_length=[{config.minimal_token_length}, {config.maximal_token_length}] "
        f"doc_frequency_filter={config.use_document_frequency_filter} "
        f"min_doc_frequency={config.minimal_frequency_in_documents}"
    )

    ranked = sorted(dictionary.dump().items(), key=lambda kv: (-kv[1].weight, -kv[1].count, kv[0]))
    if args.top:
        ranked = ranked[: args.top]
    for token, entry in ranked:
        print(f"{token}\t{entry.count}\t{entry.weight:.6f}")
    return 0
