"""bayesdict command-line entrypoint."""

from __future__ import annotations

import argparse

from bayesdict.cli import dump, match, train


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bayesdict",
        description="Train token dictionaries and score documents against them.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    train.add_parser(subparsers)
    train.add_untrain_parser(subparsers)
    match.add_parser(subparsers)
    dump.add_parser(subparsers)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
