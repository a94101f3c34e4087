"""Digit grouping used by the counter button.

These functions describe the exact number contract shared by the server-side
markup and the client script: the label is written with ``format_grouped``
and each click runs the equivalent of ``increment_label`` in the browser.
"""

import re

__all__ = ["format_grouped", "separator_pattern", "parse_grouped", "increment_label"]

# Same rule as the client: a boundary followed by whole groups of three digits.
_GROUP_BOUNDARY = re.compile(r"\B(?=(\d{3})+(?!\d))")

# parseInt accepts leading whitespace and a sign, and stops at the first non-digit.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def format_grouped(value: int, separator: str = " ") -> str:
    """Format ``value`` with ``separator`` between groups of three digits.

    Example:
        >>> format_grouped(1234567)
        '1 234 567'
        >>> format_grouped(999, ",")
        '999'
        >>> format_grouped(1000, "")
        '1000'
    """
    return _GROUP_BOUNDARY.sub(lambda _: separator, str(int(value)))


def separator_pattern(separator: str) -> re.Pattern:
    """Regex matching every occurrence of the grouping separator.

    A single space also matches other whitespace, so labels that the browser
    reflowed with non-breaking spaces still parse. Any other separator is
    matched literally.
    """
    if separator == " ":
        return re.compile(r"\s")
    return re.compile(re.escape(separator))


def parse_grouped(text: str, separator: str = " ") -> int | None:
    """Strip the separator from ``text`` and parse the leading integer.

    Returns ``None`` where the browser would produce ``NaN``. Digit separators
    are not special-cased and give wrong results.
    """
    stripped = separator_pattern(separator).sub("", text)
    match = _LEADING_INT.match(stripped)
    if match is None:
        return None
    return int(match.group(1))


def increment_label(text: str, separator: str = " ") -> str:
    """One click of the counter: parse the label, add one, format again."""
    value = parse_grouped(text, separator)
    if value is None:
        return "NaN"
    return format_grouped(value + 1, separator)
