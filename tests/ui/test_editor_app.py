"""Tests for the markup editor app."""

import pytest
from structlog.testing import capture_logs
from textual.widgets import TextArea
from textual.widgets.text_area import Selection

from huntmark.tui.app import EditorApp, location_to_offset, offset_to_location
from huntmark.tui.widgets import TypewriterView


class TestLocationConversion:
    """Tests for TextArea location <-> offset helpers."""

    @pytest.mark.parametrize(
        "location,offset",
        [((0, 0), 0), ((0, 3), 3), ((1, 0), 4), ((1, 2), 6), ((2, 0), 7)],
    )
    def test_round_trip(self, location, offset):
        text = "abc\nde\n"

        assert location_to_offset(text, location) == offset
        assert offset_to_location(text, offset) == location

    def test_clamps_out_of_range_location(self):
        assert location_to_offset("ab\ncd", (5, 9)) == 5


@pytest.fixture
def markup_file(tmp_path):
    path = tmp_path / "riddle.txt"
    path.write_text("Find the key", encoding="utf-8")
    return path


@pytest.mark.asyncio
async def test_bold_binding_wraps_selection(markup_file):
    """Test ctrl+b wraps the selected word in bold markup."""
    app = EditorApp(text="Find the key", path=markup_file)

    async with app.run_test() as pilot:
        await pilot.pause()
        editor = app.query_one("#editor", TextArea)
        editor.selection = Selection((0, 9), (0, 12))

        await pilot.press("ctrl+b")
        await pilot.pause()

        assert editor.text == "Find the **key**"
        assert editor.cursor_location == (0, 16)


@pytest.mark.asyncio
async def test_italic_binding_inserts_placeholder():
    """Test ctrl+t without a selection inserts *text*."""
    app = EditorApp(text="Go ")

    async with app.run_test() as pilot:
        await pilot.pause()
        editor = app.query_one("#editor", TextArea)
        editor.move_cursor((0, 3))

        await pilot.press("ctrl+t")
        await pilot.pause()

        assert editor.text == "Go *text*"
        assert editor.cursor_location == (0, 4)


@pytest.mark.asyncio
async def test_handwritten_binding_updates_preview():
    """Test the preview follows a formatting action."""
    app = EditorApp(text="secret")

    async with app.run_test() as pilot:
        await pilot.pause()
        editor = app.query_one("#editor", TextArea)
        editor.selection = Selection((0, 0), (0, 6))

        await pilot.press("ctrl+r")
        await pilot.pause()

        preview = app.query_one("#preview", TypewriterView)
        assert editor.text == "{{handwritten}}secret{{/handwritten}}"
        assert preview.typewriter.text == editor.text
        assert preview.typewriter.blocks[0].type == "handwritten"
        assert preview.complete


@pytest.mark.asyncio
async def test_save_writes_file(markup_file):
    """Test ctrl+s writes the edited markup back to disk."""
    app = EditorApp(text="Find the key", path=markup_file)

    async with app.run_test() as pilot:
        await pilot.pause()
        editor = app.query_one("#editor", TextArea)
        editor.selection = Selection((0, 0), (0, 4))
        await pilot.press("ctrl+b")
        await pilot.press("ctrl+s")
        await pilot.pause()

    assert markup_file.read_text(encoding="utf-8") == "**Find** the key"


@pytest.mark.asyncio
async def test_save_without_path_leaves_disk_alone(tmp_path):
    """Test saving an unnamed buffer does nothing."""
    app = EditorApp(text="draft")

    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()

    assert [path.name for path in tmp_path.iterdir()] == ["home"]


@pytest.mark.asyncio
async def test_save_into_missing_directory_keeps_editor_open(tmp_path):
    """Test a failed save is reported and the buffer survives."""
    path = tmp_path / "missing" / "riddle.txt"
    app = EditorApp(text="hello", path=path)

    with capture_logs() as logs:
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+s")
            await pilot.pause()

            assert app.is_running
            assert app.query_one("#editor", TextArea).text == "hello"

    assert not path.exists()
    assert any(
        log["event"] == "editor_save_failed" and log["log_level"] == "error" for log in logs
    )


@pytest.mark.asyncio
async def test_play_preview_animates_then_returns_to_instant():
    """Test ctrl+y replays the preview as an animation."""
    app = EditorApp(text="A short riddle")

    async with app.run_test() as pilot:
        await pilot.pause()
        preview = app.query_one("#preview", TypewriterView)

        await pilot.press("ctrl+y")
        await pilot.pause()

        assert preview.typewriter.text == "A short riddle"
        # Later edits render instantly again
        assert preview.typewriter.skip_animation is True
