"""Progressive disclosure of block trees.

Given a tree and a reveal budget (number of characters allowed on screen),
computes the visible prefix of the tree. Text, bold, italic and colored
blocks are revealed character by character. Handwritten blocks appear all
at once when their full text fits. Images and breaks cost nothing and
appear as soon as the reveal reaches them.

The projection is a pure function of ``(blocks, budget)``; a typewriter can
be stopped, restarted or skipped at any tick without cleanup.
"""

from dataclasses import dataclass

from huntmark.markup.blocks import Block, DIVISIBLE_TYPES, HandwrittenBlock
from huntmark.markup.metrics import total_text_length


@dataclass(frozen=True)
class RevealResult:
    """Visible part of a tree at a given budget.

    Attributes:
        revealed: Visible blocks; the last divisible block may be truncated
        consumed: Characters of text actually revealed (<= budget)
        total: Total revealable characters in the tree
    """

    revealed: tuple[Block, ...]
    consumed: int
    total: int

    @property
    def complete(self) -> bool:
        """True once every character of the tree is visible."""
        return self.consumed >= self.total


def reveal(blocks, budget: int) -> RevealResult:
    """Project the prefix of ``blocks`` visible at ``budget`` characters.

    Walks the tree in order. Stops when the budget is used up while text
    remains, when a handwritten block does not fit whole, or after
    truncating a divisible block. Once all text is revealed, trailing
    zero-cost blocks (images, breaks) are included too, so a budget of
    ``total_text_length(blocks)`` yields the full tree.

    Args:
        blocks: Parsed block sequence
        budget: Characters allowed on screen; negative values count as 0

    Returns:
        RevealResult with the visible blocks and characters consumed

    Examples:
        >>> from huntmark.markup.blocks import TextBlock, BoldBlock
        >>> result = reveal([TextBlock(content="Hello "), BoldBlock(content="world")], 8)
        >>> result.revealed[-1]
        BoldBlock(type='bold', content='wo')
        >>> result.consumed
        8
    """
    budget = max(budget, 0)
    total = total_text_length(blocks)
    revealed: list[Block] = []
    consumed = 0

    for block in blocks:
        if consumed >= budget and consumed < total:
            break

        if isinstance(block, HandwrittenBlock):
            length = total_text_length(block.children)
            if consumed + length > budget:
                break
            revealed.append(block)
            consumed += length
            continue

        if isinstance(block, DIVISIBLE_TYPES):
            remaining = budget - consumed
            length = len(block.content)
            if length <= remaining:
                revealed.append(block)
                consumed += length
                continue
            revealed.append(block.model_copy(update={"content": block.content[:remaining]}))
            consumed += remaining
            break

        # Images and breaks
        revealed.append(block)

    return RevealResult(revealed=tuple(revealed), consumed=consumed, total=total)


def reveal_blocks(blocks, budget: int) -> tuple[Block, ...]:
    """Shorthand for ``reveal(blocks, budget).revealed``."""
    return reveal(blocks, budget).revealed
