from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Sequence, Tuple

from . import ClitcError, ParamSchema, QuotedSplitter, WhitespaceSplitter, to_jsonable, visualize

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    options, tokens = _split_argv(sys.argv[1:] if argv is None else list(argv))
    args = _parse_args(options, tokens)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        schema = ParamSchema.from_path(args.schema)
    except (ClitcError, OSError) as exc:
        print(f"[schema error] {exc}", file=sys.stderr)
        return 1

    schema.set_sequential_processing(not args.location)
    logger.debug(
        "Loaded %d params from %s (sequential=%s)", len(schema), args.schema, schema.sequential
    )

    try:
        tokens = _collect_tokens(args, tokens)
    except ValueError as exc:
        print(f"[parse error] {exc}", file=sys.stderr)
        return 1

    result = schema.parse_vec(tokens)
    if not result:
        print("[parse error] Could not find a known command.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(to_jsonable(result), indent=2))
    else:
        print(visualize(result))
    return 0


def _split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    if "--" not in argv:
        return argv, []
    boundary = argv.index("--")
    return argv[:boundary], argv[boundary + 1 :]


def _collect_tokens(args: argparse.Namespace, tokens: List[str]) -> List[str]:
    if args.command is None:
        return tokens
    splitter = QuotedSplitter() if args.quoted else WhitespaceSplitter()
    return splitter(args.command)


def _parse_args(argv: Sequence[str], tokens: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse arguments against a declarative parameter schema.",
        epilog="Arguments after '--' are parsed when --command is not given.",
    )
    parser.add_argument(
        "--schema",
        required=True,
        help="JSON file describing the available options.",
    )
    parser.add_argument(
        "--command",
        type=str,
        default=None,
        help="Parse this command line instead of the trailing arguments.",
    )
    parser.add_argument(
        "--quoted",
        action="store_true",
        help="Keep quoted runs of --command together.",
    )
    parser.add_argument(
        "--location",
        action="store_true",
        help="Use location-based matching instead of sequential matching.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed values as JSON.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log matching diagnostics.",
    )
    args = parser.parse_args(argv)
    if args.command is not None and tokens:
        parser.error("--command cannot be combined with arguments after '--'")
    return args


if __name__ == "__main__":
    sys.exit(main())
