"""Block tree models for huntmark markup.

A parsed text is a sequence of blocks. Leaf blocks (text, bold, italic,
colored) carry plain content that is never re-interpreted as markup.
Handwritten blocks nest: their inner markup is parsed into ``children``.
Images and breaks are atomic and carry no revealable text.

All models are frozen. The reveal engine never mutates a tree; it builds
shorter copies with ``model_copy``.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter


class HandwritingStyle(str, Enum):
    """Font family used for a handwritten span."""

    DEFAULT = "default"
    SCRAWL = "scrawl"
    ELEGANT = "elegant"
    GRAFFITI = "graffiti"

    @classmethod
    def from_name(cls, name: str | None) -> "HandwritingStyle":
        """Resolve a style name from markup, falling back to DEFAULT.

        Names match exactly; "SCRAWL" is not a known style.

        Examples:
            >>> HandwritingStyle.from_name("scrawl")
            <HandwritingStyle.SCRAWL: 'scrawl'>
            >>> HandwritingStyle.from_name("fancy")
            <HandwritingStyle.DEFAULT: 'default'>
            >>> HandwritingStyle.from_name("Scrawl")
            <HandwritingStyle.DEFAULT: 'default'>
        """
        if not name:
            return cls.DEFAULT
        try:
            return cls(name)
        except ValueError:
            return cls.DEFAULT


class TextBlock(BaseModel):
    """Plain run of characters."""

    type: Literal["text"] = "text"
    content: str

    model_config = {"frozen": True}


class BoldBlock(BaseModel):
    """Bold emphasis span (``**...**``)."""

    type: Literal["bold"] = "bold"
    content: str

    model_config = {"frozen": True}


class ItalicBlock(BaseModel):
    """Italic emphasis span (``*...*``)."""

    type: Literal["italic"] = "italic"
    content: str

    model_config = {"frozen": True}


class ColoredBlock(BaseModel):
    """Span rendered in a named color (``{{color:NAME}}...{{/color}}``)."""

    type: Literal["colored"] = "colored"
    content: str
    color: str = Field(..., description="Color name as written in the markup (e.g. 'red')")

    model_config = {"frozen": True}


class ImageBlock(BaseModel):
    """Inline image reference (``{{image:PATH}}``)."""

    type: Literal["image"] = "image"
    content: str = Field(..., description="Image path or URI")

    model_config = {"frozen": True}


class LineBreakBlock(BaseModel):
    """Single newline."""

    type: Literal["linebreak"] = "linebreak"

    model_config = {"frozen": True}


class ParagraphBreakBlock(BaseModel):
    """Double newline."""

    type: Literal["paragraph_break"] = "paragraph_break"

    model_config = {"frozen": True}


class HandwrittenBlock(BaseModel):
    """Handwritten region whose inner markup was parsed into children.

    Attributes:
        style: Handwriting font family
        children: Blocks parsed from the inner markup (one level deeper)
    """

    type: Literal["handwritten"] = "handwritten"
    style: HandwritingStyle = HandwritingStyle.DEFAULT
    children: tuple["Block", ...] = ()

    model_config = {"frozen": True}


Block = Annotated[
    Union[
        TextBlock,
        BoldBlock,
        ItalicBlock,
        ColoredBlock,
        HandwrittenBlock,
        ImageBlock,
        LineBreakBlock,
        ParagraphBreakBlock,
    ],
    Field(discriminator="type"),
]

# Resolve the recursive children annotation now that Block exists
HandwrittenBlock.model_rebuild()


class Page(BaseModel):
    """One page of parsed blocks.

    Multi-page splitting is vestigial; parse_rich_text always returns
    exactly one page.
    """

    blocks: tuple[Block, ...] = ()

    model_config = {"frozen": True}


BlockAdapter = TypeAdapter(Block)
BlockListAdapter = TypeAdapter(list[Block])

# Blocks whose content can be cut mid-reveal
DIVISIBLE_TYPES = (TextBlock, BoldBlock, ItalicBlock, ColoredBlock)

# Blocks shown whole or not at all
ATOMIC_TYPES = (HandwrittenBlock, ImageBlock, LineBreakBlock, ParagraphBreakBlock)


def is_divisible(block: Block) -> bool:
    """True for blocks that the reveal engine may truncate."""
    return isinstance(block, DIVISIBLE_TYPES)


def is_atomic(block: Block) -> bool:
    """True for blocks that are revealed all at once."""
    return isinstance(block, ATOMIC_TYPES)


def leaf_text(blocks) -> str:
    """Concatenate the content of all divisible leaves in tree order.

    Recurses into handwritten children. Images and breaks contribute nothing.

    Examples:
        >>> leaf_text([TextBlock(content="Hi "), BoldBlock(content="there")])
        'Hi there'
    """
    parts = []
    for block in blocks:
        if isinstance(block, DIVISIBLE_TYPES):
            parts.append(block.content)
        elif isinstance(block, HandwrittenBlock):
            parts.append(leaf_text(block.children))
    return "".join(parts)
