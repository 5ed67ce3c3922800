"""Conversion of raw text lines into shell-quotable path segments."""

_ESCAPES = str.maketrans({'"': '\\"', "'": "\\'", "$": "\\$"})


def sanitize_segment(raw_line: str) -> str:
    """
    Return *raw_line* as a segment safe to place inside double quotes.

    Copying stops at the first newline. Double quotes, single quotes and
    dollar signs are escaped with a backslash.
    """
    line, _, _ = raw_line.partition("\n")
    return line.translate(_ESCAPES)
