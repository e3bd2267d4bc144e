"""huntmark editor TUI.

Raw markup on the left, live preview on the right. Formatting bindings wrap
the current selection (or insert a placeholder) the same way the formatting
helpers do, and the preview re-renders on every edit.
"""

from pathlib import Path
from typing import Optional

import structlog
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Static, TextArea

from huntmark.markup.formatting import FormatKind, apply_format
from huntmark.markup.metrics import total_text_length
from huntmark.markup.parser import parse_rich_text
from huntmark.models.config import Config
from huntmark.tui.widgets import TypewriterView

logger = structlog.get_logger()


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a TextArea ``(row, column)`` location to a string offset."""
    row, column = location
    lines = text.split("\n")
    row = min(row, len(lines) - 1)
    offset = sum(len(line) + 1 for line in lines[:row])
    return offset + min(column, len(lines[row]))


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a string offset to a TextArea ``(row, column)`` location."""
    before = text[:offset]
    row = before.count("\n")
    column = len(before) - (before.rfind("\n") + 1)
    return row, column


class EditorApp(App):
    """Markup editor with live preview."""

    CSS = """
    Screen {
        background: $surface;
    }

    #editor {
        width: 1fr;
        height: 100%;
    }

    #preview-pane {
        width: 1fr;
        height: 100%;
        border: solid $primary;
        padding: 0 1;
    }

    #stats {
        height: 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("ctrl+b", "format('bold')", "Bold", priority=True),
        Binding("ctrl+t", "format('italic')", "Italic", priority=True),
        Binding("ctrl+r", "format('handwritten', 'default')", "Handwritten", priority=True),
        Binding("ctrl+o", "format('color', 'red')", "Red", show=False, priority=True),
        Binding("ctrl+g", "format('image')", "Image", show=False, priority=True),
        Binding("ctrl+n", "format('paragraph')", "Paragraph", priority=True),
        Binding("ctrl+y", "play_preview", "Play", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        text: str = "",
        path: Optional[Path] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the editor.

        Args:
            text: Initial markup text
            path: File to save to (ctrl+s); None disables saving
            config: Application configuration
        """
        super().__init__()
        self.initial_text = text
        self.path = path
        self.config = config or Config()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield TextArea(self.initial_text, id="editor")
            with VerticalScroll(id="preview-pane"):
                yield Static("", id="stats")
                yield TypewriterView(
                    self.initial_text,
                    config=self.config.typewriter.model_copy(update={"skip_animation": True}),
                    render_config=self.config.render,
                    id="preview",
                )
        yield Footer()

    def on_mount(self) -> None:
        self.title = "huntmark"
        self.sub_title = str(self.path) if self.path else "unsaved"
        self._update_stats(self.initial_text)
        self.query_one("#editor", TextArea).focus()

    @property
    def text(self) -> str:
        return self.query_one("#editor", TextArea).text

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Re-render the preview for the edited text."""
        self._refresh_preview(event.text_area.text)

    def action_format(self, kind: str, value: Optional[str] = None) -> None:
        """Wrap the selection (or insert at the cursor) with markup."""
        editor = self.query_one("#editor", TextArea)
        text = editor.text
        start, end = sorted(
            (
                location_to_offset(text, editor.selection.start),
                location_to_offset(text, editor.selection.end),
            )
        )

        result = apply_format(text, start, end, FormatKind(kind), value)
        editor.text = result.text
        editor.move_cursor(offset_to_location(result.text, result.cursor))
        self._refresh_preview(result.text)
        logger.debug("editor_format_applied", kind=kind, value=value, start=start, end=end)

    def action_play_preview(self) -> None:
        """Replay the preview as an animated typewriter."""
        preview = self.query_one("#preview", TypewriterView)
        preview.show_text(self.text, animate=True)
        preview.typewriter.skip_animation = True

    def action_save(self) -> None:
        """Write the markup back to the file."""
        if self.path is None:
            self.notify("No file to save to", severity="warning")
            return
        try:
            self.path.write_text(self.text, encoding="utf-8")
        except OSError as e:
            logger.error("editor_save_failed", path=str(self.path), error=str(e))
            self.notify(f"Could not save: {e}", severity="error")
            return
        logger.info("editor_saved", path=str(self.path), length=len(self.text))
        self.notify(f"Saved {self.path}")

    def _refresh_preview(self, text: str) -> None:
        self.query_one("#preview", TypewriterView).show_text(text)
        self._update_stats(text)

    def _update_stats(self, text: str) -> None:
        pages = parse_rich_text(text)
        blocks = pages[0].blocks
        self.query_one("#stats", Static).update(
            f"{len(blocks)} blocks · {total_text_length(blocks)} characters"
        )
