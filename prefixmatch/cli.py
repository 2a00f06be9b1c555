"""Command line front end: load lexicons and answer longest-prefix queries."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Iterable, TextIO

from prefixmatch.constants import DEFAULT_ENCODING, FIELD_SEPARATOR, LOGGER_NAME
from prefixmatch.exceptions import LexiconError
from prefixmatch.lexicon import load_lexicon
from prefixmatch.trie import PrefixTrie

log = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefixmatch",
        description="Look up the longest registered prefix of each query",
    )
    parser.add_argument("lexicons", nargs="+", metavar="LEXICON",
                        help="Word list file(s), one 'word<TAB>value' per line")
    parser.add_argument("-q", "--query", action="append", dest="queries", default=None,
                        help="Query string (repeatable); reads stdin lines when omitted")
    parser.add_argument("--sep", default=FIELD_SEPARATOR,
                        help="Separator between word and value (default: tab)")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING,
                        help="Lexicon file encoding")
    parser.add_argument("--int", action="store_true", dest="as_int",
                        help="Parse values as integers")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run_queries(trie: PrefixTrie[Any], queries: Iterable[str], out: TextIO) -> int:
    """Print one result line per query; return the number of misses."""
    misses = 0
    for query in queries:
        try:
            prefix, value = trie.longest_prefix_item(query)
        except KeyError:
            misses += 1
            log.debug("No match for %r", query)
            out.write(f"{query}\t\n")
            continue
        out.write(f"{query}\t{prefix}\t{value}\n")
    return misses


def _stdin_queries(stream: TextIO) -> Iterable[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    value_type = int if args.as_int else str
    trie: PrefixTrie[Any] = PrefixTrie()
    try:
        for path in args.lexicons:
            load_lexicon(path, trie, value_type=value_type,
                         separator=args.sep, encoding=args.encoding)
    except LexiconError as exc:
        log.error("%s", exc)
        return 2

    log.debug("Trie holds %d words", len(trie))
    queries = args.queries if args.queries is not None else _stdin_queries(sys.stdin)
    misses = run_queries(trie, queries, sys.stdout)
    return 1 if misses else 0


if __name__ == "__main__":
    sys.exit(main())
