"""Word lists on disk, loaded into a prefix trie."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, Iterator

from prefixmatch.constants import COMMENT_PREFIX, DEFAULT_ENCODING, FIELD_SEPARATOR, LOGGER_NAME
from prefixmatch.exceptions import LexiconError
from prefixmatch.trie import PrefixTrie

log = logging.getLogger(LOGGER_NAME)


def iter_entries(
    lines: Iterable[str], separator: str = FIELD_SEPARATOR
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(lineno, word, raw_value)`` for each entry line.

    Empty lines and ``#`` comments are skipped.  The word is split from its
    value on the first separator; a line with no separator is its own value.
    Everything except the line terminator is kept verbatim.
    """
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line or line.startswith(COMMENT_PREFIX):
            log.debug("Skipping line %d", lineno)
            continue
        word, sep, raw = line.partition(separator)
        yield lineno, word, (raw if sep else word)


def load_lexicon(
    path: str | os.PathLike[str],
    trie: PrefixTrie[Any] | None = None,
    value_type: Callable[[str], Any] = str,
    separator: str = FIELD_SEPARATOR,
    encoding: str = DEFAULT_ENCODING,
) -> PrefixTrie[Any]:
    """Register every entry of the lexicon at ``path`` and return the trie.

    Entries go into ``trie`` when one is given, so several files can be
    layered; later entries overwrite earlier ones.
    """
    if trie is None:
        trie = PrefixTrie()

    count = 0
    try:
        with open(path, "r", encoding=encoding) as f:
            for lineno, word, raw in iter_entries(f, separator):
                try:
                    value = value_type(raw)
                except (ValueError, TypeError) as exc:
                    raise LexiconError(f"bad value {raw!r}: {exc}", os.fspath(path), lineno) from exc
                trie.register(word, value)
                count += 1
    except OSError as exc:
        raise LexiconError(exc.strerror or str(exc), os.fspath(path)) from exc
    except UnicodeDecodeError as exc:
        raise LexiconError(f"not valid {encoding}: {exc.reason}", os.fspath(path)) from exc

    log.info("Loaded %s entries from %s", f"{count:,}", path)
    return trie
