"""Text metrics over block trees."""

from huntmark.markup.blocks import DIVISIBLE_TYPES, HandwrittenBlock


def total_text_length(blocks) -> int:
    """Count the revealable characters in a block tree.

    Sums content length over text, bold, italic and colored leaves,
    recursing into handwritten children. Images and breaks count as zero.
    The typewriter uses this to size the animation and detect completion.

    Examples:
        >>> from huntmark.markup.blocks import TextBlock, ImageBlock
        >>> total_text_length([TextBlock(content="abc"), ImageBlock(content="/x.png")])
        3
    """
    total = 0
    for block in blocks:
        if isinstance(block, DIVISIBLE_TYPES):
            total += len(block.content)
        elif isinstance(block, HandwrittenBlock):
            total += total_text_length(block.children)
    return total
