"""Document scoring command."""

from __future__ import annotations

import argparse
from pathlib import Path

from bayesdict.cli.common import add_corpus_args, add_logging_args, iter_multisets, setup_logging_from_args
from bayesdict.io.store import load_dictionary


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("match", help="Score documents against a dictionary artifact.")
    parser.add_argument("--dictionary", required=True, help="Dictionary artifact directory.")
    add_corpus_args(parser, flag="--input")
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.5,
        help="Documents scoring above this are labelled 'match'.",
    )
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    dictionary, _manifest = load_dictionary(Path(args.dictionary))
    for tokens in iter_multisets(args, args.input, desc="Matching"):
        probability = dictionary.match(tokens)
        label = "match" if probability > args.threshold else "nomatch"
        print(f"{probability:.6f}\t{label}")
    return 0
