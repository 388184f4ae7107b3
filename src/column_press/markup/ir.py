"""Intermediate Representation for styled markup.

This module defines the element tree that bridges parsed markup to
PDF rendering. The top level is a flat, ordered sequence of blocks
(paragraphs and lists); runs and anchors nest one level below.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Union


class TextStyle(Flag):
    """Text emphasis flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()


class Alignment(Enum):
    """Horizontal alignment of a paragraph."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class ParagraphKind(Enum):
    """Paragraph role, which decides spacing and default size."""

    BODY = "body"
    HEADER = "header"
    HEADER_MINOR = "header_minor"


@dataclass(frozen=True)
class StyleState:
    """Snapshot of the style in effect for a piece of text.

    Attributes:
        emphasis: Emphasis flags (BOLD, ITALIC or NONE)
        size: Font size in points
        alignment: Alignment of the enclosing block
    """

    emphasis: TextStyle = TextStyle.NONE
    size: float = 8.0
    alignment: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content (may contain "\\n" for hard line breaks)
        style: Style snapshot taken when the run was flushed
    """

    text: str
    style: StyleState = field(default_factory=StyleState)

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return TextStyle.BOLD in self.style.emphasis

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return TextStyle.ITALIC in self.style.emphasis

    def __str__(self) -> str:
        return self.text


@dataclass
class Anchor:
    """A hyperlink wrapping one or more runs.

    Attributes:
        href: Link target
        size: Font size inherited when the anchor was opened
        runs: Runs inside the link
        underline: Whether the link text is underlined
    """

    href: str
    size: float = 8.0
    runs: list[TextRun] = field(default_factory=list)
    underline: bool = True

    @property
    def plain_text(self) -> str:
        return "".join(run.text for run in self.runs)

    def append(self, run: TextRun) -> None:
        self.runs.append(run)


Inline = Union[TextRun, Anchor]


def _inline_text(children: list[Inline]) -> str:
    return "".join(
        child.plain_text if isinstance(child, Anchor) else child.text
        for child in children
    )


@dataclass
class Paragraph:
    """A block of text containing styled runs and anchors.

    Attributes:
        kind: Body, Header or HeaderMinor
        alignment: Horizontal alignment
        children: Ordered runs and anchors
    """

    kind: ParagraphKind = ParagraphKind.BODY
    alignment: Alignment = Alignment.LEFT
    children: list[Inline] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the visible text content without styling."""
        return _inline_text(self.children)

    @property
    def runs(self) -> list[TextRun]:
        """Direct text runs, excluding anchors."""
        return [c for c in self.children if isinstance(c, TextRun)]

    @property
    def anchors(self) -> list[Anchor]:
        return [c for c in self.children if isinstance(c, Anchor)]

    def append(self, child: Inline) -> None:
        self.children.append(child)

    def __str__(self) -> str:
        return self.plain_text


@dataclass
class ListItem:
    """One entry of a list."""

    children: list[Inline] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return _inline_text(self.children)

    def append(self, child: Inline) -> None:
        self.children.append(child)


@dataclass
class ListBlock:
    """An ordered or unordered list of items."""

    ordered: bool = False
    items: list[ListItem] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        return "\n".join(item.plain_text for item in self.items)

    def add_item(self, item: ListItem) -> None:
        self.items.append(item)


Element = Union[Paragraph, ListBlock]


@dataclass
class StyledDocument:
    """Complete element sequence ready for flowing.

    Attributes:
        elements: Top-level blocks in document order
        residual_depth: Style stack depth left over after the last token;
            non-zero means the markup was unbalanced
    """

    elements: list[Element] = field(default_factory=list)
    residual_depth: int = 0

    @property
    def plain_text(self) -> str:
        """Get all text content without styling."""
        return "\n\n".join(element.plain_text for element in self.elements)

    @property
    def paragraphs(self) -> list[Paragraph]:
        return [e for e in self.elements if isinstance(e, Paragraph)]

    @property
    def lists(self) -> list[ListBlock]:
        return [e for e in self.elements if isinstance(e, ListBlock)]

    def add_element(self, element: Element) -> None:
        """Add a block to the document."""
        self.elements.append(element)

    def __len__(self) -> int:
        return len(self.elements)
