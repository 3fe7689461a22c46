"""
Truncation policy for property values.

Values are shown as single display rows: a multi-line value is clipped at
its first line, and the hard length ceiling still applies when the first
line itself is long.
"""

ELLIPSIS = "..."

_LINE_BREAKS = ("\r", "\n")


def first_line_break(text: str) -> int:
    """Index of the earliest carriage return or line feed, or -1."""
    found = [i for i in (text.find(ch) for ch in _LINE_BREAKS) if i != -1]
    return min(found) if found else -1


def truncate(text, max_length: int):
    if not text or len(text) <= max_length:
        return text

    cut = max_length
    index = first_line_break(text)
    if index != -1:
        cut = min(index, max_length)

    return text[:cut] + ELLIPSIS
