"""prefixmatch — longest-prefix matching over Unicode code points."""

from prefixmatch.exceptions import LexiconError, PrefixMatchError
from prefixmatch.lexicon import iter_entries, load_lexicon
from prefixmatch.trie import NO_MATCH, NoMatch, PrefixTrie, TrieNode

__all__ = [
    "NO_MATCH",
    "LexiconError",
    "NoMatch",
    "PrefixMatchError",
    "PrefixTrie",
    "TrieNode",
    "iter_entries",
    "load_lexicon",
]
