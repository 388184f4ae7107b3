"""Tests for the emphasis and size stacks."""

from column_press.markup.ir import Alignment, TextStyle
from column_press.markup.styles import StyleStack


class TestStyleStack:
    def test_defaults_when_empty(self):
        stack = StyleStack(default_size=8.0)

        assert stack.current_emphasis == TextStyle.NONE
        assert stack.current_size == 8.0
        assert stack.depth == 0

    def test_push_and_pop_emphasis(self):
        stack = StyleStack()
        stack.push_emphasis(TextStyle.BOLD)

        assert stack.current_emphasis == TextStyle.BOLD

        stack.pop_emphasis()
        assert stack.current_emphasis == TextStyle.NONE

    def test_top_emphasis_wins(self):
        stack = StyleStack()
        stack.push_emphasis(TextStyle.BOLD)
        stack.push_emphasis(TextStyle.ITALIC)

        assert stack.current_emphasis == TextStyle.ITALIC

        stack.pop_emphasis()
        assert stack.current_emphasis == TextStyle.BOLD

    def test_sizes_nest(self):
        stack = StyleStack(default_size=8.0)
        stack.push_size(12.0)
        stack.push_size(10.0)

        assert stack.current_size == 10.0
        stack.pop_size()
        assert stack.current_size == 12.0
        stack.pop_size()
        assert stack.current_size == 8.0

    def test_pop_empty_is_noop(self):
        stack = StyleStack(default_size=8.0)
        stack.pop_emphasis()
        stack.pop_size()

        assert stack.depth == 0
        assert stack.current_size == 8.0

    def test_stacks_are_independent(self):
        stack = StyleStack()
        stack.push_emphasis(TextStyle.BOLD)
        stack.pop_size()

        assert stack.current_emphasis == TextStyle.BOLD
        assert stack.depth == 1

    def test_snapshot(self):
        stack = StyleStack(default_size=8.0, alignment=Alignment.CENTER)
        stack.push_emphasis(TextStyle.ITALIC)
        stack.push_size(10.0)

        state = stack.snapshot()

        assert state.emphasis == TextStyle.ITALIC
        assert state.size == 10.0
        assert state.alignment == Alignment.CENTER
