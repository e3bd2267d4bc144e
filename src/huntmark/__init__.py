"""huntmark - rich-text markup for puzzle-hunt texts.

Parses author-written markup (riddles, success texts, puzzle prompts) into
a block tree and reveals it progressively for typewriter presentation.

Key features:
- Parse ``**bold**``, ``*italic*``, ``{{color:NAME}}``, ``{{image:PATH}}``
  and nested ``{{handwritten[:STYLE]}}`` spans into immutable blocks
- Never fail on malformed markup: it degrades to literal text
- Compute the visible prefix of a tree for any reveal budget
- Drive a typewriter reveal with asyncio, Rich or Textual

Example:
    >>> from huntmark import parse_rich_text, reveal, total_text_length
    >>> blocks = parse_rich_text("{{handwritten}}Secret{{/handwritten}}")[0].blocks
    >>> total_text_length(blocks)
    6
    >>> reveal(blocks, 5).revealed
    ()
"""

__version__ = "0.1.0"

from huntmark.markup import (
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
    RevealResult,
    TextBlock,
    parse_blocks,
    parse_rich_text,
    reveal,
    reveal_blocks,
    split_into_pages,
    total_text_length,
)
from huntmark.services.typewriter import Typewriter, TypewriterFrame

__all__ = [
    "Block",
    "BoldBlock",
    "ColoredBlock",
    "HandwritingStyle",
    "HandwrittenBlock",
    "ImageBlock",
    "ItalicBlock",
    "LineBreakBlock",
    "Page",
    "ParagraphBreakBlock",
    "RevealResult",
    "TextBlock",
    "Typewriter",
    "TypewriterFrame",
    "parse_blocks",
    "parse_rich_text",
    "reveal",
    "reveal_blocks",
    "split_into_pages",
    "total_text_length",
]
