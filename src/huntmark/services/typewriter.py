"""Typewriter driver for progressive text reveal.

Ticks a reveal budget forward one character at a time and re-projects the
parsed tree on every tick. All state is ``(blocks, budget)``; each frame is
recomputed from scratch by the reveal engine, so the driver can be
cancelled at any tick without cleanup.

Example:
    ```python
    typewriter = Typewriter("Look **under** the bench", delay=0.01)

    async for frame in typewriter.frames():
        redraw(frame.blocks)
    ```
"""

import asyncio
from dataclasses import dataclass
from typing import AsyncIterator, Callable, Optional

import structlog

from huntmark.markup.blocks import Block, TextBlock
from huntmark.markup.metrics import total_text_length
from huntmark.markup.parser import parse_rich_text
from huntmark.markup.reveal import reveal
from huntmark.models.config import TypewriterConfig

logger = structlog.get_logger()

DEFAULT_CURSOR = "▊"


@dataclass(frozen=True)
class TypewriterFrame:
    """One rendered step of a typewriter reveal.

    Attributes:
        blocks: Visible blocks, with a trailing cursor block while animating
        budget: Characters revealed so far
        total: Total characters in the text
        complete: True once the whole text is visible
    """

    blocks: tuple[Block, ...]
    budget: int
    total: int
    complete: bool


class Typewriter:
    """Reveals parsed markup one character per tick.

    Re-parsing (``set_text``) always discards the previous tree and restarts
    the reveal; nothing is carried over between texts.
    """

    def __init__(
        self,
        text: str = "",
        *,
        delay: float = 0.003,
        skip_animation: bool = False,
        cursor: str = DEFAULT_CURSOR,
        on_complete: Optional[Callable[[], None]] = None,
    ):
        """Initialize the typewriter.

        Args:
            text: Markup text to reveal
            delay: Seconds between ticks
            skip_animation: Start every text fully revealed
            cursor: Glyph appended while animating ("" for none)
            on_complete: Called once per text when the reveal completes
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        self.delay = delay
        self.skip_animation = skip_animation
        self.cursor = cursor
        self.on_complete = on_complete

        self._text = ""
        self._blocks: tuple[Block, ...] = ()
        self._total = 0
        self._budget = 0
        self._completion_notified = False
        self.set_text(text)

    @classmethod
    def from_config(
        cls,
        text: str,
        config: TypewriterConfig,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> "Typewriter":
        """Build a typewriter from the [typewriter] config section."""
        return cls(
            text,
            delay=config.delay,
            skip_animation=config.skip_animation,
            cursor=config.cursor,
            on_complete=on_complete,
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Full parsed tree for the current text."""
        return self._blocks

    @property
    def total(self) -> int:
        return self._total

    @property
    def budget(self) -> int:
        return self._budget

    @property
    def complete(self) -> bool:
        return self._budget >= self._total

    def set_text(self, text: str) -> TypewriterFrame:
        """Replace the text and restart the reveal.

        The budget restarts at 0, or at the end in skip mode.

        Returns:
            The first frame of the new text
        """
        pages = parse_rich_text(text)
        self._text = text
        self._blocks = pages[0].blocks
        self._total = total_text_length(self._blocks)
        self._budget = self._total if self.skip_animation else 0
        self._completion_notified = False

        logger.debug(
            "typewriter_text_set",
            total=self._total,
            blocks=len(self._blocks),
            skip_animation=self.skip_animation,
        )
        return self.frame()

    def frame(self) -> TypewriterFrame:
        """Project the current budget into a frame."""
        result = reveal(self._blocks, self._budget)
        blocks = result.revealed
        complete = self.complete

        if not complete and self.cursor:
            blocks = blocks + (TextBlock(content=self.cursor),)

        return TypewriterFrame(
            blocks=blocks,
            budget=self._budget,
            total=self._total,
            complete=complete,
        )

    def advance(self, chars: int = 1) -> TypewriterFrame:
        """Reveal ``chars`` more characters (clamped to the end)."""
        if chars < 0:
            raise ValueError(f"Cannot advance by a negative amount: {chars}")
        self._budget = min(self._budget + chars, self._total)
        self._check_complete()
        return self.frame()

    def skip(self) -> TypewriterFrame:
        """Jump straight to the fully revealed text."""
        self._budget = self._total
        self._check_complete()
        return self.frame()

    async def frames(self) -> AsyncIterator[TypewriterFrame]:
        """Yield frames until the reveal completes.

        Yields the current frame first, then sleeps ``delay`` seconds per
        tick and reveals one more character. Cancel the consuming task to
        stop early.
        """
        self._check_complete()
        yield self.frame()

        while not self.complete:
            await asyncio.sleep(self.delay)
            yield self.advance()

    async def run(self, on_frame: Callable[[TypewriterFrame], None]) -> TypewriterFrame:
        """Drive the reveal to completion, passing every frame to ``on_frame``.

        Returns:
            The final frame
        """
        last = None
        async for frame in self.frames():
            on_frame(frame)
            last = frame
        return last

    def _check_complete(self) -> None:
        """Fire on_complete the first time the current text is fully shown."""
        if not self.complete or self._completion_notified:
            return
        self._completion_notified = True
        logger.debug("typewriter_complete", total=self._total)
        if self.on_complete is not None:
            self.on_complete()
