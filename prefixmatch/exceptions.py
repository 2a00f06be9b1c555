"""Errors raised by prefixmatch."""

from __future__ import annotations


class PrefixMatchError(Exception):
    """Base class for errors raised by this package."""


class LexiconError(PrefixMatchError, ValueError):
    """A lexicon file could not be read or contains a bad entry."""

    def __init__(self, message: str, path: str | None = None, lineno: int | None = None):
        self.path = path
        self.lineno = lineno
        if path is not None and lineno is not None:
            message = f"{path}:{lineno}: {message}"
        elif path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
