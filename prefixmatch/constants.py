"""Defaults shared by the loader and the command line."""

LOGGER_NAME = "prefixmatch"

DEFAULT_ENCODING = "utf-8"
FIELD_SEPARATOR = "\t"
COMMENT_PREFIX = "#"
