"""Custom widgets for the huntmark TUI."""

from huntmark.tui.widgets.typewriter_view import TypewriterView

__all__ = ["TypewriterView"]
