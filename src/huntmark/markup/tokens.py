"""Token matcher for huntmark markup.

Recognizes the fixed token set at a cursor position, in priority order:

1. ``{{handwritten}}...{{/handwritten}}`` / ``{{handwritten:STYLE}}...``
2. ``{{color:NAME}}...{{/color}}``
3. ``{{image:PATH}}``
4. paragraph break (``\\n\\n``)
5. line break (``\\n``)
6. ``**bold**``
7. ``*italic*`` (only tried after bold fails, so ``**`` is never split)

Every token reports the total number of characters it consumes, always at
least one. The parser relies on that to make progress on every iteration.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

HANDWRITTEN_OPEN = re.compile(r"\{\{handwritten(?::(\w+))?\}\}", re.ASCII)
HANDWRITTEN_CLOSE = "{{/handwritten}}"
COLOR_SPAN = re.compile(r"\{\{color:(\w+)\}\}(.*?)\{\{/color\}\}", re.ASCII | re.DOTALL)
IMAGE = re.compile(r"\{\{image:(.*?)\}\}")
BOLD = re.compile(r"\*\*(.+?)\*\*")
ITALIC = re.compile(r"\*(.+?)\*")

BLOCK_MARKER = "{{"
PARAGRAPH_BREAK = "\n\n"
LINE_BREAK = "\n"

# Anything a token can start with. "**" is covered by "*".
MARKERS = (BLOCK_MARKER, "*", LINE_BREAK)


class TokenKind(str, Enum):
    """Kinds of markup token."""

    HANDWRITTEN = "handwritten"
    COLORED = "colored"
    IMAGE = "image"
    PARAGRAPH_BREAK = "paragraph_break"
    LINE_BREAK = "linebreak"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True)
class Token:
    """A recognized markup token.

    Attributes:
        kind: Token kind
        length: Characters consumed, delimiters included (always >= 1)
        content: Inner text (span body, image path); empty for breaks
        value: Handwriting style or color name, when the token has one
    """

    kind: TokenKind
    length: int
    content: str = ""
    value: Optional[str] = None


def match_token(text: str, pos: int) -> Optional[Token]:
    """Try to recognize a token starting exactly at ``pos``.

    Args:
        text: Full input text
        pos: Cursor position

    Returns:
        The matched Token, or None if no token starts here

    Examples:
        >>> match_token("**hi** there", 0)
        Token(kind=<TokenKind.BOLD: 'bold'>, length=6, content='hi', value=None)
        >>> match_token("{{nope}}", 0) is None
        True
    """
    if text.startswith(BLOCK_MARKER, pos):
        return _match_block_token(text, pos)

    if text.startswith(PARAGRAPH_BREAK, pos):
        return Token(TokenKind.PARAGRAPH_BREAK, len(PARAGRAPH_BREAK))

    if text.startswith(LINE_BREAK, pos):
        return Token(TokenKind.LINE_BREAK, len(LINE_BREAK))

    if text.startswith("*", pos):
        return _match_emphasis(text, pos)

    return None


def next_marker(text: str, pos: int) -> int:
    """Return the earliest index >= pos where a token could begin.

    Returns ``len(text)`` if no marker follows.
    """
    earliest = len(text)
    for marker in MARKERS:
        index = text.find(marker, pos)
        if index != -1 and index < earliest:
            earliest = index
    return earliest


def find_handwritten_close(text: str, start: int) -> Optional[int]:
    """Find the close tag ending a handwritten span whose body starts at ``start``.

    Nested ``{{handwritten}}`` opens inside the body are balanced against
    close tags, so the outer span ends at its own close. If the opens are
    never balanced, the first close tag is used instead.

    Returns:
        Index of the closing ``{{/handwritten}}``, or None if there is none
    """
    depth = 0
    pos = start
    first_close = None

    while True:
        close = text.find(HANDWRITTEN_CLOSE, pos)
        if close == -1:
            return first_close
        if first_close is None:
            first_close = close

        opening = HANDWRITTEN_OPEN.search(text, pos, close)
        if opening is not None:
            depth += 1
            pos = opening.end()
            continue

        if depth == 0:
            return close
        depth -= 1
        pos = close + len(HANDWRITTEN_CLOSE)


def _match_block_token(text: str, pos: int) -> Optional[Token]:
    """Match a ``{{...}}`` token: handwritten, colored or image."""
    opening = HANDWRITTEN_OPEN.match(text, pos)
    if opening is not None:
        close = find_handwritten_close(text, opening.end())
        if close is not None:
            return Token(
                TokenKind.HANDWRITTEN,
                close + len(HANDWRITTEN_CLOSE) - pos,
                content=text[opening.end():close],
                value=opening.group(1) or "default",
            )

    colored = COLOR_SPAN.match(text, pos)
    if colored is not None:
        return Token(
            TokenKind.COLORED,
            colored.end() - pos,
            content=colored.group(2),
            value=colored.group(1),
        )

    image = IMAGE.match(text, pos)
    if image is not None:
        return Token(TokenKind.IMAGE, image.end() - pos, content=image.group(1))

    # Unrecognized {{ is plain text
    return None


def _match_emphasis(text: str, pos: int) -> Optional[Token]:
    """Match ``**bold**``, then ``*italic*``."""
    bold = BOLD.match(text, pos)
    if bold is not None:
        return Token(TokenKind.BOLD, bold.end() - pos, content=bold.group(1))

    italic = ITALIC.match(text, pos)
    if italic is not None:
        return Token(TokenKind.ITALIC, italic.end() - pos, content=italic.group(1))

    return None
