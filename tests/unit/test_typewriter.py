"""Unit tests for the typewriter driver."""

import pytest

from huntmark.markup.blocks import HandwrittenBlock, TextBlock
from huntmark.models.config import TypewriterConfig
from huntmark.services.typewriter import Typewriter


class TestTypewriterState:
    """Tests for budget handling."""

    def test_starts_empty(self):
        typewriter = Typewriter("Hello", cursor="")
        frame = typewriter.frame()

        assert frame.blocks == ()
        assert frame.budget == 0
        assert frame.total == 5
        assert not frame.complete

    def test_cursor_appended_while_running(self):
        typewriter = Typewriter("Hello", cursor="_")

        assert typewriter.advance(2).blocks == (TextBlock(content="He"), TextBlock(content="_"))

    def test_no_cursor_when_complete(self):
        typewriter = Typewriter("Hi", cursor="_")

        assert typewriter.skip().blocks == (TextBlock(content="Hi"),)

    def test_advance_clamps_to_total(self):
        typewriter = Typewriter("Hi")
        frame = typewriter.advance(10)

        assert frame.budget == 2
        assert frame.complete

    def test_negative_advance_rejected(self):
        with pytest.raises(ValueError):
            Typewriter("Hi").advance(-1)

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Typewriter("Hi", delay=-0.1)

    def test_skip_animation_starts_complete(self):
        typewriter = Typewriter("Hello", skip_animation=True)

        assert typewriter.complete
        assert typewriter.frame().blocks == (TextBlock(content="Hello"),)

    def test_set_text_restarts(self):
        typewriter = Typewriter("Hello")
        typewriter.skip()

        frame = typewriter.set_text("Bye **now**")

        assert typewriter.text == "Bye **now**"
        assert typewriter.total == 7
        assert frame.budget == 0
        assert not typewriter.complete

    def test_handwriting_appears_whole(self):
        typewriter = Typewriter("{{handwritten}}abc{{/handwritten}}", cursor="")

        assert typewriter.advance(2).blocks == ()
        assert typewriter.advance(1).blocks == (
            HandwrittenBlock(children=(TextBlock(content="abc"),)),
        )

    def test_from_config(self):
        config = TypewriterConfig(delay=0.2, cursor="|", skip_animation=True)
        typewriter = Typewriter.from_config("x", config)

        assert typewriter.delay == 0.2
        assert typewriter.cursor == "|"
        assert typewriter.skip_animation is True


class TestCompletionCallback:
    """Tests for on_complete."""

    def test_fires_once(self):
        calls = []
        typewriter = Typewriter("ab", on_complete=lambda: calls.append(1))

        typewriter.advance()
        assert calls == []
        typewriter.advance()
        typewriter.advance()
        typewriter.skip()

        assert calls == [1]

    def test_fires_again_after_new_text(self):
        calls = []
        typewriter = Typewriter("ab", on_complete=lambda: calls.append(1))

        typewriter.skip()
        typewriter.set_text("cd")
        typewriter.skip()

        assert calls == [1, 1]


class TestAsyncFrames:
    """Tests for the asyncio frame iterator."""

    @pytest.mark.asyncio
    async def test_frames_reveal_one_character_per_tick(self):
        typewriter = Typewriter("ab **c**", delay=0, cursor="")

        frames = [frame async for frame in typewriter.frames()]

        assert [frame.budget for frame in frames] == [0, 1, 2, 3, 4]
        assert frames[-1].complete
        assert not any(frame.complete for frame in frames[:-1])

    @pytest.mark.asyncio
    async def test_empty_text_yields_one_complete_frame(self):
        calls = []
        typewriter = Typewriter("", delay=0, on_complete=lambda: calls.append(1))

        frames = [frame async for frame in typewriter.frames()]

        assert len(frames) == 1
        assert frames[0].complete
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_run_passes_every_frame(self):
        seen = []
        typewriter = Typewriter("abc", delay=0)

        last = await typewriter.run(seen.append)

        assert len(seen) == 4
        assert last is seen[-1]
        assert last.blocks == (TextBlock(content="abc"),)

    @pytest.mark.asyncio
    async def test_skip_mode_yields_final_frame_only(self):
        typewriter = Typewriter("abc", delay=0, skip_animation=True)

        frames = [frame async for frame in typewriter.frames()]

        assert len(frames) == 1
        assert frames[0].complete
