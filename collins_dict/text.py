#!/usr/bin/env python3
"""Text helpers: fragment normalization and terminal line wrapping.

Both helpers are pure so they can be unit-tested without a page or a
terminal. The wrapper yields lines one at a time; :func:`write_wrapped`
streams them to an output so arbitrarily long text never has to be joined
into one string.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional, TextIO

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_fragment(raw: Optional[str]) -> str:
    """Trim a text fragment and collapse internal whitespace runs to one space."""

    if not raw:
        return ""
    return _WHITESPACE_RE.sub(" ", raw).strip()


def _iter_words(text: str) -> Iterator[str]:
    for match in re.finditer(r"\S+", text):
        yield match.group(0)


def iter_wrapped(
    text: str,
    width: int,
    first_line_indent: int = 0,
    continuation_indent: int = 0,
) -> Iterator[str]:
    """Yield ``text`` re-flowed into lines no wider than ``width`` columns.

    ``first_line_indent`` is the number of columns the caller has already
    written on the current terminal line (a sense number, an arrow marker),
    so the first yielded line is not indented. Continuation lines start with
    ``continuation_indent`` spaces. A word wider than the remaining space is
    moved to the next line; a word wider than ``width`` itself is never split
    and occupies its own line.
    """

    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if first_line_indent < 0 or continuation_indent < 0:
        raise ValueError("indents cannot be negative")

    indent = " " * continuation_indent
    line = ""
    column = first_line_indent
    line_has_word = False

    for word in _iter_words(text):
        if line_has_word and column + 1 + len(word) > width:
            yield line
            line = indent
            column = continuation_indent
            line_has_word = False

        if line_has_word:
            line += " " + word
            column += len(word) + 1
        else:
            line += word
            column += len(word)
            line_has_word = True

    yield line


def write_wrapped(
    out: TextIO,
    text: str,
    width: int,
    first_line_indent: int = 0,
    continuation_indent: int = 0,
) -> None:
    """Write the wrapped lines of ``text`` to ``out``, each ending in a newline."""

    for line in iter_wrapped(text, width, first_line_indent, continuation_indent):
        out.write(line)
        out.write("\n")
