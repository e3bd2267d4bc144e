"""huntmark markup: parse rich-text markup and reveal it progressively.

Example:
    >>> from huntmark.markup import parse_rich_text, reveal
    >>> blocks = parse_rich_text("Look **under** the bench")[0].blocks
    >>> reveal(blocks, 7).revealed
    (TextBlock(type='text', content='Look '), BoldBlock(type='bold', content='un'))
"""

from huntmark.markup.blocks import (
    ATOMIC_TYPES,
    Block,
    BlockAdapter,
    BlockListAdapter,
    BoldBlock,
    ColoredBlock,
    DIVISIBLE_TYPES,
    HandwritingStyle,
    HandwrittenBlock,
    ImageBlock,
    ItalicBlock,
    LineBreakBlock,
    Page,
    ParagraphBreakBlock,
    TextBlock,
    is_atomic,
    is_divisible,
    leaf_text,
)
from huntmark.markup.metrics import total_text_length
from huntmark.markup.pages import PAGE_MARKER, split_into_pages
from huntmark.markup.parser import (
    MAX_NESTING_DEPTH,
    MAX_PARSE_ITERATIONS,
    parse_blocks,
    parse_rich_text,
)
from huntmark.markup.reveal import RevealResult, reveal, reveal_blocks

__all__ = [
    "ATOMIC_TYPES",
    "Block",
    "BlockAdapter",
    "BlockListAdapter",
    "BoldBlock",
    "ColoredBlock",
    "DIVISIBLE_TYPES",
    "HandwritingStyle",
    "HandwrittenBlock",
    "ImageBlock",
    "ItalicBlock",
    "LineBreakBlock",
    "MAX_NESTING_DEPTH",
    "MAX_PARSE_ITERATIONS",
    "PAGE_MARKER",
    "Page",
    "ParagraphBreakBlock",
    "RevealResult",
    "TextBlock",
    "is_atomic",
    "is_divisible",
    "leaf_text",
    "parse_blocks",
    "parse_rich_text",
    "reveal",
    "reveal_blocks",
    "split_into_pages",
    "total_text_length",
]
