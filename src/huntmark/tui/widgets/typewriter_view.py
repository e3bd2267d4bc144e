"""TypewriterView widget for revealing markup character by character.

Drives a Typewriter from a Textual interval timer and renders every frame
with the Rich renderer.
"""

from typing import Optional

from textual.message import Message
from textual.timer import Timer
from textual.widgets import Static

from huntmark.models.config import RenderConfig, TypewriterConfig
from huntmark.services.typewriter import Typewriter, TypewriterFrame
from huntmark.tui.render import render_page

# Textual timers need a positive interval
MIN_TICK_INTERVAL = 0.001


class TypewriterView(Static):
    """Widget that plays a typewriter reveal of huntmark text."""

    class Completed(Message):
        """Posted when the current text is fully revealed."""

        def __init__(self, view: "TypewriterView") -> None:
            self.view = view
            super().__init__()

    def __init__(
        self,
        text: str = "",
        *args,
        config: Optional[TypewriterConfig] = None,
        render_config: Optional[RenderConfig] = None,
        **kwargs
    ):
        """Initialize TypewriterView.

        Args:
            text: Markup text to reveal
            config: Typewriter settings (delay, cursor, skip mode)
            render_config: Render settings for colors and handwriting
        """
        super().__init__("", *args, **kwargs)
        self.render_config = render_config or RenderConfig()
        self.typewriter = Typewriter.from_config(
            text, config or TypewriterConfig(), on_complete=self._on_typewriter_complete
        )
        self._timer: Optional[Timer] = None

    def on_mount(self) -> None:
        """Start revealing when the widget is mounted."""
        self._start()

    @property
    def complete(self) -> bool:
        return self.typewriter.complete

    def show_text(self, text: str, animate: Optional[bool] = None) -> None:
        """Replace the text and restart the reveal.

        Args:
            text: New markup text
            animate: Force animation on or off for this and later texts
                (None keeps the configured behavior)
        """
        if animate is not None:
            self.typewriter.skip_animation = not animate
        self.typewriter.set_text(text)
        if self.is_mounted:
            self._start()

    def skip(self) -> None:
        """Reveal the rest of the text immediately."""
        self._stop_timer()
        self._show(self.typewriter.skip())

    def _start(self) -> None:
        self._stop_timer()
        if self.typewriter.complete:
            # Skip mode or empty text: still report completion once
            self._show(self.typewriter.skip())
            return
        self._show(self.typewriter.frame())
        self._timer = self.set_interval(
            max(self.typewriter.delay, MIN_TICK_INTERVAL), self._tick
        )

    def _tick(self) -> None:
        frame = self.typewriter.advance()
        self._show(frame)
        if frame.complete:
            self._stop_timer()

    def _show(self, frame: TypewriterFrame) -> None:
        self.update(render_page(frame.blocks, self.render_config))

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _on_typewriter_complete(self) -> None:
        self.post_message(self.Completed(self))
