"""Parser for huntmark rich-text markup.

Turns author-written text (riddles, success text, puzzle prompts) into a
block tree. Parsing is total: malformed markup degrades to literal text and
no exception ever reaches the caller.

Supported syntax:
- ``{{handwritten}}text{{/handwritten}}`` - default handwriting
- ``{{handwritten:style}}text{{/handwritten}}`` - scrawl, elegant, graffiti
- ``{{color:name}}text{{/color}}`` - colored text
- ``{{image:/path}}`` - inline image
- ``**bold**`` and ``*italic*``
- ``\\n`` line break, ``\\n\\n`` paragraph break
- ``---PAGE---`` - legacy page marker, now a paragraph break
"""

import structlog

from huntmark.markup.blocks import (
    Block,
    BoldBlock,
    ColoredBlock,
    HandwritingStyle,
    HandwrittenBlock,
    ImageBlock,
    ItalicBlock,
    LineBreakBlock,
    Page,
    ParagraphBreakBlock,
    TextBlock,
)
from huntmark.markup.pages import split_into_pages
from huntmark.markup.tokens import Token, TokenKind, match_token, next_marker

logger = structlog.get_logger()

# Handwritten spans nest at most this deep; top-level text is depth 1
MAX_NESTING_DEPTH = 3

# Safety net only: every iteration advances the cursor, so this is never
# reached for inputs shorter than the limit
MAX_PARSE_ITERATIONS = 100_000


def parse_rich_text(text: str) -> list[Page]:
    """Parse markup text into pages of blocks.

    Args:
        text: Raw markup text

    Returns:
        List with exactly one Page (empty when the text is empty)

    Examples:
        >>> pages = parse_rich_text("Hello **world**!")
        >>> [block.type for block in pages[0].blocks]
        ['text', 'bold', 'text']
    """
    page_texts = split_into_pages(text or "")
    if not page_texts:
        return [Page()]
    return [Page(blocks=tuple(parse_blocks(page_text))) for page_text in page_texts]


def parse_blocks(
    text: str,
    depth: int = 1,
    *,
    max_iterations: int = MAX_PARSE_ITERATIONS,
) -> list[Block]:
    """Parse one page of markup into a block sequence.

    Scans left to right. At each position the token matcher is tried in
    priority order; plain runs between tokens become TextBlocks. A token
    prefix that does not complete a token (e.g. an unclosed ``**``) is
    emitted as a one-character TextBlock so the cursor always advances.

    Args:
        text: Markup for a single page
        depth: Nesting level of this text (1 = top level). Beyond
            MAX_NESTING_DEPTH the text is returned as one literal TextBlock.
        max_iterations: Iteration cap; when hit, the blocks parsed so far
            are returned and a warning is logged

    Returns:
        Parsed blocks in source order
    """
    if depth > MAX_NESTING_DEPTH:
        return [TextBlock(content=text)] if text else []

    blocks: list[Block] = []
    pos = 0
    iterations = 0

    while pos < len(text):
        iterations += 1
        if iterations > max_iterations:
            logger.warning(
                "parse_iteration_limit_reached",
                position=pos,
                text_length=len(text),
                depth=depth,
                blocks_parsed=len(blocks),
                max_iterations=max_iterations,
            )
            break

        token = match_token(text, pos)
        if token is not None:
            blocks.append(_block_from_token(token, depth))
            pos += token.length
            continue

        # Plain text up to the next possible token start
        marker = next_marker(text, pos)
        if marker > pos:
            blocks.append(TextBlock(content=text[pos:marker]))
            pos = marker
        else:
            # Marker prefix that is not a valid token: keep it as literal text
            blocks.append(TextBlock(content=text[pos]))
            pos += 1

    return blocks


def _block_from_token(token: Token, depth: int) -> Block:
    """Build the block for a matched token.

    Handwritten content is parsed recursively one level deeper; span
    content of colored text and image paths is whitespace-trimmed; bold and
    italic content is kept verbatim.
    """
    if token.kind is TokenKind.HANDWRITTEN:
        style = HandwritingStyle.from_name(token.value)
        if style.value != token.value:
            logger.debug("unknown_handwriting_style", style=token.value)
        children = parse_blocks(token.content.strip(), depth + 1)
        return HandwrittenBlock(style=style, children=tuple(children))

    if token.kind is TokenKind.COLORED:
        return ColoredBlock(content=token.content.strip(), color=token.value)

    if token.kind is TokenKind.IMAGE:
        return ImageBlock(content=token.content.strip())

    if token.kind is TokenKind.PARAGRAPH_BREAK:
        return ParagraphBreakBlock()

    if token.kind is TokenKind.LINE_BREAK:
        return LineBreakBlock()

    if token.kind is TokenKind.BOLD:
        return BoldBlock(content=token.content)

    return ItalicBlock(content=token.content)
