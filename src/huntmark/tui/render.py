"""Rich rendering for parsed huntmark blocks.

Maps each block type to terminal presentation. Used by the CLI ``render``
and ``type`` commands and by the Textual widgets.

- text: as-is
- bold / italic: Rich bold / italic styles
- colored: configured color style (unknown colors render unstyled)
- handwritten: children rendered with the handwriting style; shown as a
  framed note by ``render_page``
- image: dim ``[image: PATH]`` placeholder
- line / paragraph breaks: one / two newlines
"""

from typing import Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from huntmark.markup.blocks import (
    BoldBlock,
    ColoredBlock,
    HandwrittenBlock,
    ImageBlock,
    ItalicBlock,
    LineBreakBlock,
    ParagraphBreakBlock,
    TextBlock,
)
from huntmark.models.config import RenderConfig

NOTE_BORDER_STYLE = "#d4c5a9"


def render_blocks(blocks, config: Optional[RenderConfig] = None) -> Text:
    """
    Render blocks to a single Rich Text, handwritten spans inline.

    Args:
        blocks: Parsed (possibly partially revealed) blocks
        config: Render settings (default: RenderConfig())

    Returns:
        Rich Text object with styles applied
    """
    config = config or RenderConfig()
    text = Text()

    for block in blocks:
        if isinstance(block, TextBlock):
            text.append(block.content)
        elif isinstance(block, BoldBlock):
            text.append(block.content, style="bold")
        elif isinstance(block, ItalicBlock):
            text.append(block.content, style="italic")
        elif isinstance(block, ColoredBlock):
            text.append(block.content, style=color_style(block.color, config))
        elif isinstance(block, HandwrittenBlock):
            text.append_text(_render_handwritten(block, config))
        elif isinstance(block, ImageBlock):
            text.append(image_placeholder(block, config), style="dim")
        elif isinstance(block, LineBreakBlock):
            text.append("\n")
        elif isinstance(block, ParagraphBreakBlock):
            text.append("\n\n")

    return text


def render_page(blocks, config: Optional[RenderConfig] = None) -> Group:
    """
    Render blocks with each handwritten span as a framed note.

    Runs of inline blocks between notes become Text renderables.

    Args:
        blocks: Parsed (possibly partially revealed) blocks
        config: Render settings (default: RenderConfig())

    Returns:
        Rich Group of Text and Panel renderables
    """
    config = config or RenderConfig()
    renderables = []
    run = []

    for block in blocks:
        if isinstance(block, HandwrittenBlock):
            if run:
                renderables.append(render_blocks(run, config))
                run = []
            renderables.append(
                Panel(
                    _render_handwritten(block, config),
                    box=box.ROUNDED,
                    border_style=NOTE_BORDER_STYLE,
                    padding=(1, 4),
                    expand=False,
                )
            )
        else:
            run.append(block)

    if run:
        renderables.append(render_blocks(run, config))

    return Group(*renderables)


def color_style(color: str, config: RenderConfig) -> str:
    """Look up the Rich style for a markup color name ("" if unknown)."""
    return config.colors.get(color.lower(), "")


def image_placeholder(block: ImageBlock, config: RenderConfig) -> str:
    """Placeholder text shown for an image."""
    if config.show_image_paths and block.content:
        return f"[image: {block.content}]"
    return "[image]"


def _render_handwritten(block: HandwrittenBlock, config: RenderConfig) -> Text:
    """Render a handwritten block's children under its handwriting style."""
    inner = render_blocks(block.children, config)
    # Inner bold/italic/color spans take precedence over the handwriting style
    inner.stylize_before(config.handwriting_styles.get(block.style.value, ""))
    return inner
