"""Emphasis and font-size stacks used while building a document."""

from column_press.markup.ir import Alignment, StyleState, TextStyle


class StyleStack:
    """Track nested emphasis and font sizes.

    The emphasis in effect is the top entry only, so an inner <em>
    replaces an outer <strong> rather than combining with it. Popping
    an empty stack does nothing, which lets unbalanced markup through.
    """

    def __init__(
        self,
        default_emphasis: TextStyle = TextStyle.NONE,
        default_size: float = 8.0,
        alignment: Alignment = Alignment.LEFT,
    ) -> None:
        self.default_emphasis = default_emphasis
        self.default_size = default_size
        self.alignment = alignment
        self._emphasis: list[TextStyle] = []
        self._sizes: list[float] = []

    def push_emphasis(self, style: TextStyle) -> None:
        self._emphasis.append(style)

    def pop_emphasis(self) -> None:
        if self._emphasis:
            self._emphasis.pop()

    def push_size(self, size: float) -> None:
        self._sizes.append(size)

    def pop_size(self) -> None:
        if self._sizes:
            self._sizes.pop()

    @property
    def current_emphasis(self) -> TextStyle:
        return self._emphasis[-1] if self._emphasis else self.default_emphasis

    @property
    def current_size(self) -> float:
        return self._sizes[-1] if self._sizes else self.default_size

    @property
    def depth(self) -> int:
        """Combined depth of both stacks."""
        return len(self._emphasis) + len(self._sizes)

    def snapshot(self) -> StyleState:
        """Return the style that applies to text right now."""
        return StyleState(
            emphasis=self.current_emphasis,
            size=self.current_size,
            alignment=self.alignment,
        )
