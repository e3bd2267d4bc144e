"""Legacy page splitting.

Texts used to be split into pages on ``---PAGE---`` markers. Pages are now
shown as one continuous text, so the marker becomes a paragraph break and
the splitter always returns a single page. The list return type is kept for
callers that still iterate over pages.
"""

PAGE_MARKER = "---PAGE---"


def split_into_pages(text: str) -> list[str]:
    """Split text into pages (always at most one).

    Args:
        text: Raw markup text

    Returns:
        One-element list with the trimmed text, or an empty list when
        nothing but whitespace remains

    Examples:
        >>> split_into_pages("One---PAGE---Two")
        ['One\\n\\nTwo']
        >>> split_into_pages("   ")
        []
    """
    merged = text.replace(PAGE_MARKER, "\n\n").strip()
    if not merged:
        return []
    return [merged]
