"""Terminal rendering and Textual UI for huntmark."""
