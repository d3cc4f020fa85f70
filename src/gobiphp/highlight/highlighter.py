"""Regex-pass syntax highlighter for PHP source.

The highlighter runs a fixed sequence of passes over the whole text. Each
pass tags every match of its pattern, overwriting whatever an earlier pass
assigned to the same offsets:

    1. line comments (``//`` and ``#``)
    2. block comments
    3. double-quoted strings
    4. single-quoted strings
    5. numbers
    6. variables
    7. keywords
    8. constants

Comment and string passes claim the offsets they tag. Passes 5-8 drop any
match touching a claimed offset, so ``"if"`` stays a string and
``// 42`` stays a comment. Keywords and constants also never match right
after a ``$`` sigil.

Every call starts from scratch; there is no state between calls.
"""

from __future__ import annotations

import re
from itertools import groupby
from typing import List, Pattern, Sequence, Tuple

from ..models.responses import HighlightSpan, TokenCategory
from .tokens import CONSTANTS, KEYWORDS


def _word_alternation(words: Sequence[str]) -> Pattern[str]:
    # Longest first so "include_once" is tried before "include"
    ordered = sorted(words, key=len, reverse=True)
    return re.compile(r"(?<!\$)\b(?:%s)\b" % "|".join(map(re.escape, ordered)))


_PASSES: Tuple[Tuple[Pattern[str], TokenCategory], ...] = (
    (re.compile(r"//[^\n]*"), TokenCategory.COMMENT),
    (re.compile(r"#[^\n]*"), TokenCategory.COMMENT),
    (re.compile(r"/\*.*?\*/", re.DOTALL), TokenCategory.COMMENT),
    (re.compile(r'"(?:[^"\\]|\\.)*"', re.DOTALL), TokenCategory.STRING),
    (re.compile(r"'(?:[^'\\]|\\.)*'", re.DOTALL), TokenCategory.STRING),
    (re.compile(r"\b[0-9]+(?:\.[0-9]+)?\b"), TokenCategory.NUMBER),
    (re.compile(r"\$[a-zA-Z_][a-zA-Z0-9_]*"), TokenCategory.VARIABLE),
    (_word_alternation(KEYWORDS), TokenCategory.KEYWORD),
    (_word_alternation(CONSTANTS), TokenCategory.CONSTANT),
)

_CLAIMING = frozenset({TokenCategory.COMMENT, TokenCategory.STRING})


def highlight(source_text: str, include_plain: bool = False) -> List[HighlightSpan]:
    """Compute highlight spans for PHP source text.

    Args:
        source_text: The full editor buffer
        include_plain: Also emit PLAIN spans for untagged gaps, so the spans
            tile the whole text

    Returns:
        Non-overlapping spans in offset order, one per surviving match
        fragment. Unterminated strings and comments are left untagged.
    """
    length = len(source_text)
    # owners[i] indexes into categories; 0 means untagged
    owners = [0] * length
    categories: List[TokenCategory] = [TokenCategory.PLAIN]
    claimed = bytearray(length)

    for pattern, category in _PASSES:
        claims = category in _CLAIMING
        for match in pattern.finditer(source_text):
            start, end = match.span()
            if start == end:
                continue
            if not claims and claimed.find(1, start, end) != -1:
                continue

            categories.append(category)
            owners[start:end] = [len(categories) - 1] * (end - start)
            if claims:
                claimed[start:end] = b"\x01" * (end - start)

    spans: List[HighlightSpan] = []
    position = 0
    for owner, run in groupby(owners):
        size = sum(1 for _ in run)
        if owner or include_plain:
            spans.append(HighlightSpan(position, position + size, categories[owner]))
        position += size

    return spans
