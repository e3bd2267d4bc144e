"""Editor helpers for writing huntmark markup.

These back the formatting key bindings of the editor: wrapping a selection
in bold/italic/handwritten/color delimiters, or inserting an image, a
paragraph break or a legacy page break at the cursor.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from huntmark.markup.blocks import HandwritingStyle
from huntmark.markup.pages import PAGE_MARKER

PLACEHOLDER = "text"
DEFAULT_IMAGE_PATH = "/puzzle-images/your-image.jpg"
COLOR_NAMES = ("red", "blue", "green", "yellow", "orange", "purple")

_NAME_PATTERN = re.compile(r"\w+", re.ASCII)


class FormatKind(str, Enum):
    """Formatting actions available in the editor."""

    BOLD = "bold"
    ITALIC = "italic"
    HANDWRITTEN = "handwritten"
    COLOR = "color"
    IMAGE = "image"
    PARAGRAPH = "paragraph"
    PAGEBREAK = "pagebreak"


@dataclass(frozen=True)
class EditResult:
    """Text after a formatting action, with the new cursor position."""

    text: str
    cursor: int


def markup_for(kind: FormatKind, value: Optional[str] = None) -> tuple[str, str]:
    """Return the ``(before, after)`` delimiters for a formatting action.

    Insert-only actions (image, paragraph, page break) have an empty
    ``after``.

    Args:
        kind: Formatting action
        value: Handwriting style for HANDWRITTEN, color name for COLOR,
            image path for IMAGE

    Raises:
        ValueError: If the style or color name cannot be written in markup

    Examples:
        >>> markup_for(FormatKind.HANDWRITTEN, "scrawl")
        ('{{handwritten:scrawl}}', '{{/handwritten}}')
    """
    kind = FormatKind(kind)

    if kind is FormatKind.BOLD:
        return "**", "**"
    if kind is FormatKind.ITALIC:
        return "*", "*"
    if kind is FormatKind.HANDWRITTEN:
        if value is None or value == HandwritingStyle.DEFAULT.value:
            return "{{handwritten}}", "{{/handwritten}}"
        try:
            style = HandwritingStyle(value)
        except ValueError:
            raise ValueError(
                f"Unknown handwriting style: {value!r}. "
                f"Expected one of: {', '.join(s.value for s in HandwritingStyle)}"
            ) from None
        return f"{{{{handwritten:{style.value}}}}}", "{{/handwritten}}"
    if kind is FormatKind.COLOR:
        if not value or not _NAME_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid color name: {value!r}")
        return f"{{{{color:{value}}}}}", "{{/color}}"
    if kind is FormatKind.IMAGE:
        return f"{{{{image:{value or DEFAULT_IMAGE_PATH}}}}}", ""
    if kind is FormatKind.PARAGRAPH:
        return "\n\n", ""
    return f"\n\n{PAGE_MARKER}\n\n", ""


def apply_format(
    text: str,
    start: int,
    end: int,
    kind: FormatKind,
    value: Optional[str] = None,
) -> EditResult:
    """Apply a formatting action to the selection ``text[start:end]``.

    With a selection, the selected text is wrapped and the cursor lands
    after the closing delimiter. Without one, the delimiters are inserted
    around a ``text`` placeholder (for wrapping actions) and the cursor
    lands right after the opening delimiter.

    Raises:
        ValueError: If the selection is outside the text or reversed

    Examples:
        >>> apply_format("Find the key", 9, 12, FormatKind.BOLD)
        EditResult(text='Find the **key**', cursor=16)
        >>> apply_format("", 0, 0, FormatKind.ITALIC)
        EditResult(text='*text*', cursor=1)
    """
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Invalid selection {start}..{end} for text of length {len(text)}")

    before, after = markup_for(kind, value)
    selected = text[start:end]

    if selected:
        new_text = text[:start] + before + selected + after + text[end:]
        cursor = start + len(before) + len(selected) + len(after)
    else:
        placeholder = PLACEHOLDER if after else ""
        new_text = text[:start] + before + placeholder + after + text[start:]
        cursor = start + len(before)

    return EditResult(text=new_text, cursor=cursor)


def to_json_string(text: str) -> str:
    """Escape text as a JSON string literal for pasting into hunt JSON.

    Non-ASCII characters are kept as-is; quotes and newlines are escaped.
    """
    return json.dumps(text, ensure_ascii=False)
