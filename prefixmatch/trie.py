"""Prefix trie for longest-prefix lookups over code points."""

from __future__ import annotations

import enum
from typing import Any, Generic, Iterable, Iterator, Mapping, TypeVar

T = TypeVar("T")


class NoMatch(enum.Enum):
    """Result of a lookup that found no registered prefix."""

    NO_MATCH = "NO_MATCH"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch.NO_MATCH


class TrieNode(Generic[T]):
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "value")

    def __init__(self):
        self.children: dict[str, TrieNode[T]] = {}
        self.is_terminal: bool = False
        self.value: T | None = None


class PrefixTrie(Generic[T]):
    """Maps words to values and resolves the longest registered prefix of a string.

    Words are walked one code point (one ``str`` character) at a time, so an
    emoji outside the BMP is a single step.  A lookup that finds nothing
    returns :data:`NO_MATCH`, which never collides with a stored value such
    as ``None`` or ``0``.
    """

    def __init__(self, entries: Mapping[str, T] | Iterable[tuple[str, T]] | None = None):
        self.root: TrieNode[T] = TrieNode()
        self._size = 0
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for word, value in pairs:
                self.register(word, value)

    # core operations

    def register(self, word: str, value: T) -> None:
        """Associate ``value`` with ``word``; re-registering overwrites."""
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
        node.value = value

    def seek(self, text: str) -> T | NoMatch:
        """Value of the longest registered word that is a prefix of ``text``."""
        _, node = self._longest(text)
        if node is None:
            return NO_MATCH
        return node.value

    # mapping-style helpers

    def longest_prefix_item(self, text: str) -> tuple[str, T]:
        """Return ``(prefix, value)`` for the longest registered prefix of ``text``.

        Raises:
            KeyError: if no registered word is a prefix of ``text``.
        """
        depth, node = self._longest(text)
        if node is None:
            raise KeyError(text)
        return text[:depth], node.value

    def get(self, text: str, default: Any = None) -> Any:
        result = self.seek(text)
        return default if result is NO_MATCH else result

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __getitem__(self, word: str) -> T:
        node = self._walk(word)
        if node is None or not node.is_terminal:
            raise KeyError(word)
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for word, _ in self.items():
            yield word

    def items(self) -> Iterator[tuple[str, T]]:
        """Yield every registered ``(word, value)`` pair."""
        stack: list[tuple[str, TrieNode[T]]] = [("", self.root)]
        while stack:
            prefix, node = stack.pop()
            if node.is_terminal:
                yield prefix, node.value
            for ch, child in node.children.items():
                stack.append((prefix + ch, child))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} words)"

    # traversal

    def _walk(self, s: str) -> TrieNode[T] | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _longest(self, text: str) -> tuple[int, TrieNode[T] | None]:
        # (length of the match in code points, terminal node) or (0, None)
        node = self.root
        best = node if node.is_terminal else None
        best_depth = 0
        for depth, ch in enumerate(text, 1):
            node = node.children.get(ch)
            if node is None:
                break
            if node.is_terminal:
                best = node
                best_depth = depth
        return best_depth, best
