"""Unit tests for the markup token matcher."""

import pytest

from huntmark.markup.tokens import (
    Token,
    TokenKind,
    find_handwritten_close,
    match_token,
    next_marker,
)


class TestMatchToken:
    """Tests for match_token."""

    def test_plain_text_is_not_a_token(self):
        """Test that ordinary characters don't match."""
        assert match_token("hello", 0) is None

    def test_handwritten_default_style(self):
        """Test handwritten span without a style."""
        token = match_token("{{handwritten}}Secret{{/handwritten}} tail", 0)

        assert token == Token(TokenKind.HANDWRITTEN, 37, content="Secret", value="default")

    def test_handwritten_with_style(self):
        """Test handwritten span with an explicit style."""
        token = match_token("{{handwritten:graffiti}}Run{{/handwritten}}", 0)

        assert token.kind is TokenKind.HANDWRITTEN
        assert token.value == "graffiti"
        assert token.content == "Run"
        assert token.length == len("{{handwritten:graffiti}}Run{{/handwritten}}")

    def test_handwritten_without_close_is_not_a_token(self):
        """Test unterminated handwritten span."""
        assert match_token("{{handwritten}}no close", 0) is None

    def test_handwritten_spans_lines(self):
        """Test handwritten content may contain newlines."""
        token = match_token("{{handwritten}}a\nb{{/handwritten}}", 0)

        assert token.content == "a\nb"

    def test_colored_span(self):
        """Test colored span captures color and raw content."""
        token = match_token("{{color:red}} red door {{/color}}!", 0)

        assert token.kind is TokenKind.COLORED
        assert token.value == "red"
        assert token.content == " red door "
        assert token.length == len("{{color:red}} red door {{/color}}")

    def test_colored_span_is_lazy(self):
        """Test colored span ends at the first close tag."""
        token = match_token("{{color:blue}}a{{/color}}b{{/color}}", 0)

        assert token.content == "a"

    def test_image(self):
        """Test image token."""
        token = match_token("{{image:/img/map.png}}", 0)

        assert token == Token(TokenKind.IMAGE, 22, content="/img/map.png")

    def test_unknown_block_marker_is_not_a_token(self):
        """Test that unrecognized {{...}} falls through."""
        assert match_token("{{mystery}}", 0) is None

    def test_paragraph_break_beats_line_break(self):
        """Test that two newlines form one paragraph break."""
        token = match_token("\n\nNext", 0)

        assert token.kind is TokenKind.PARAGRAPH_BREAK
        assert token.length == 2

    def test_line_break(self):
        """Test single newline."""
        token = match_token("\nNext", 0)

        assert token.kind is TokenKind.LINE_BREAK
        assert token.length == 1

    def test_bold(self):
        """Test bold span."""
        token = match_token("**key** here", 0)

        assert token == Token(TokenKind.BOLD, 7, content="key")

    def test_bold_is_lazy(self):
        """Test bold ends at the first closing **."""
        token = match_token("**a** and **b**", 0)

        assert token.content == "a"

    def test_bold_checked_before_italic(self):
        """Test that ** is never split into italic delimiters."""
        token = match_token("**word**", 0)

        assert token.kind is TokenKind.BOLD

    def test_italic(self):
        """Test italic span."""
        token = match_token("*soft* words", 0)

        assert token == Token(TokenKind.ITALIC, 6, content="soft")

    def test_empty_emphasis_is_not_a_token(self):
        """Test that emphasis needs at least one character inside."""
        assert match_token("**", 0) is None
        assert match_token("*", 0) is None

    def test_emphasis_does_not_span_lines(self):
        """Test bold and italic stop at newlines."""
        assert match_token("*a\nb*", 0) is None

    def test_match_at_offset(self):
        """Test matching from a cursor inside the text."""
        token = match_token("Hello **world**", 6)

        assert token.kind is TokenKind.BOLD
        assert token.content == "world"

    @pytest.mark.parametrize(
        "text",
        [
            "{{handwritten}}x{{/handwritten}}",
            "{{color:red}}x{{/color}}",
            "{{image:}}",
            "\n",
            "\n\n",
            "**x**",
            "*x*",
        ],
    )
    def test_every_token_consumes_input(self, text):
        """Test that every token has a positive length."""
        assert match_token(text, 0).length >= 1


class TestNextMarker:
    """Tests for next_marker."""

    def test_no_marker_returns_length(self):
        """Test text without markers."""
        assert next_marker("plain text", 0) == 10

    def test_earliest_marker_wins(self):
        """Test the earliest of several markers is returned."""
        assert next_marker("ab\ncd*ef{{", 0) == 2
        assert next_marker("ab{{cd*ef\n", 0) == 2
        assert next_marker("abcd*ef{{\n", 0) == 4

    def test_marker_at_cursor(self):
        """Test a marker right at the cursor."""
        assert next_marker("x*y", 1) == 1

    def test_single_brace_is_not_a_marker(self):
        """Test that one brace doesn't start a token."""
        assert next_marker("{a}", 0) == 3


class TestFindHandwrittenClose:
    """Tests for find_handwritten_close."""

    def test_simple_close(self):
        """Test span without nesting."""
        text = "abc{{/handwritten}}"
        assert find_handwritten_close(text, 0) == 3

    def test_nested_span_is_balanced(self):
        """Test that a nested span's close doesn't end the outer span."""
        text = "A{{handwritten}}B{{/handwritten}}C{{/handwritten}}"

        assert find_handwritten_close(text, 0) == text.rindex("{{/handwritten}}")

    def test_unbalanced_falls_back_to_first_close(self):
        """Test that unbalanced opens use the first close tag."""
        text = "A{{handwritten:scrawl}}B{{/handwritten}}"

        assert find_handwritten_close(text, 0) == text.index("{{/handwritten}}")

    def test_no_close(self):
        """Test text without a close tag."""
        assert find_handwritten_close("never closed", 0) is None
