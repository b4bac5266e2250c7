# topmark:header:start
#
#   project      : SnapMark
#   file         : chars.py
#   file_relpath : src/snapmark/core/chars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Character classes used by the block splitter and the inline steps.

Whitespace and punctuation follow the ASCII (C locale) definitions used by
CommonMark: non-ASCII characters are never whitespace or punctuation, so e.g.
a no-break space is ordinary text. Index-based helpers treat positions outside
the string as "no character".
"""

from __future__ import annotations

from typing import Final

WHITESPACE_CHARS: Final[str] = " \t\n\v\f\r"

WHITESPACE: Final[frozenset[str]] = frozenset(WHITESPACE_CHARS)

ASCII_PUNCTUATION: Final[frozenset[str]] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

EMPHASIS_CHARS: Final[frozenset[str]] = frozenset("*_")

URL_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://", "mailto:")

# "Safe", "reserved" and extra characters allowed inside an auto-detected URL.
_URL_SYMBOLS: Final[frozenset[str]] = frozenset("$-_.+" ";/?:@&=" "~#[]!'()*,%")


def is_space(c: str) -> bool:
    """Return True if ``c`` is a single ASCII whitespace character."""
    return c in WHITESPACE


def is_punctuation(c: str) -> bool:
    """Return True if ``c`` is a single ASCII punctuation character."""
    return c in ASCII_PUNCTUATION


def is_blank(line: str) -> bool:
    """Return True if ``line`` is empty or consists of whitespace only."""
    return all(c in WHITESPACE for c in line)


def is_url_char(c: str) -> bool:
    """Return True if ``c`` may appear inside an auto-detected URL.

    ASCII letters and digits, the URL symbol set and any non-ASCII character
    qualify.
    """
    if ord(c) >= 0x80:
        return True
    return c.isalnum() or c in _URL_SYMBOLS


def char_at(text: str, index: int) -> str:
    """Return the character at ``index`` or ``""`` when out of range."""
    if 0 <= index < len(text):
        return text[index]
    return ""


def punctuation_at(text: str, index: int) -> bool:
    """Return True if there is a punctuation character at ``index``."""
    return is_punctuation(char_at(text, index))


def leading_spaces(line: str) -> int:
    """Count the literal space characters (not tabs) at the start of ``line``."""
    return len(line) - len(line.lstrip(" "))


def skip_space(text: str, index: int = 0) -> int:
    """Return the first index at or after ``index`` that is not whitespace."""
    while index < len(text) and text[index] in WHITESPACE:
        index += 1
    return index


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace in ``text`` into a single space.

    Leading and trailing runs are collapsed too, not removed.
    """
    out: list[str] = []
    previous_space = False
    for c in text:
        if c in WHITESPACE:
            if not previous_space:
                out.append(" ")
            previous_space = True
        else:
            out.append(c)
            previous_space = False
    return "".join(out)


def strip_collapse(text: str) -> str:
    """Strip leading/trailing whitespace and collapse internal runs to one space."""
    return " ".join(part for part in _split_space(text) if part)


def _split_space(text: str) -> list[str]:
    parts: list[str] = []
    start = 0
    for i, c in enumerate(text):
        if c in WHITESPACE:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts
