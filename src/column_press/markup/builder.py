"""Build a styled element sequence from markup tokens."""

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

from column_press.markup.ir import (
    Alignment,
    Anchor,
    ListBlock,
    ListItem,
    Paragraph,
    ParagraphKind,
    StyledDocument,
    TextRun,
    TextStyle,
)
from column_press.markup.styles import StyleStack
from column_press.markup.tokenizer import TagClose, TagOpen, TextSpan, Tokenizer

logger = logging.getLogger(__name__)


class TagAction(Enum):
    """What an opening tag does to the document being built."""

    PUSH_EMPHASIS = auto()
    OPEN_BLOCK = auto()
    OPEN_LIST = auto()
    OPEN_LIST_ITEM = auto()
    OPEN_ANCHOR = auto()
    LINE_BREAK = auto()
    IGNORE = auto()


@dataclass(frozen=True)
class TagRule:
    action: TagAction
    emphasis: TextStyle = TextStyle.NONE
    kind: ParagraphKind = ParagraphKind.BODY
    ordered: bool = False


TAG_RULES: dict[str, TagRule] = {
    "strong": TagRule(TagAction.PUSH_EMPHASIS, emphasis=TextStyle.BOLD),
    "em": TagRule(TagAction.PUSH_EMPHASIS, emphasis=TextStyle.ITALIC),
    "a": TagRule(TagAction.OPEN_ANCHOR),
    "ul": TagRule(TagAction.OPEN_LIST, ordered=False),
    "ol": TagRule(TagAction.OPEN_LIST, ordered=True),
    "li": TagRule(TagAction.OPEN_LIST_ITEM),
    "br": TagRule(TagAction.LINE_BREAK),
    **{
        tag: TagRule(TagAction.OPEN_BLOCK, kind=ParagraphKind.HEADER)
        for tag in ("h1", "h2", "h3")
    },
    **{
        tag: TagRule(TagAction.OPEN_BLOCK, kind=ParagraphKind.HEADER_MINOR)
        for tag in ("h4", "h5", "h6")
    },
    **{
        tag: TagRule(TagAction.OPEN_BLOCK, kind=ParagraphKind.BODY)
        for tag in ("p", "pre", "address", "blockquote", "dl", "div")
    },
}

IGNORED = TagRule(TagAction.IGNORE)

HREF_PATTERN = re.compile(r'href="([^"]+)', re.IGNORECASE)


def cleanup_paragraph(text: str) -> str:
    """Replace line endings with spaces and collapse repeated spaces."""
    text = text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")

    while True:
        collapsed = text.replace("  ", " ")
        if collapsed == text:
            return text
        text = collapsed


@dataclass(frozen=True)
class InsertionPoint:
    """Where flushed text goes next.

    Text lands in the innermost open construct: anchor, then list
    item, then paragraph. With none of those open a new body paragraph
    is created.
    """

    paragraph: Optional[Paragraph] = None
    list_block: Optional[ListBlock] = None
    item: Optional[ListItem] = None
    anchor: Optional[Anchor] = None


class _Build:
    """Mutable state for a single build. Not shared between documents."""

    def __init__(self, stack: StyleStack) -> None:
        self.document = StyledDocument()
        self.stack = stack
        self.segments: list[str] = [""]

    def add_text(self, text: str) -> None:
        self.segments[-1] += text

    def add_break(self) -> None:
        self.segments.append("")

    def has_text(self) -> bool:
        return any(segment.strip() for segment in self.segments)

    def keep_breaks(self) -> None:
        """Discard pending whitespace but hold on to pending line breaks."""
        self.segments = [""] * len(self.segments)

    def drop_breaks(self) -> None:
        self.segments = [""]

    def take_text(self) -> str:
        cleaned = [cleanup_paragraph(self.segments[0])]
        cleaned.extend(cleanup_paragraph(s).lstrip(" ") for s in self.segments[1:])
        self.segments = [""]
        return "\n".join(cleaned)


class DocumentBuilder:
    """Convert markup into a StyledDocument.

    Each call to build() uses its own style stack and insertion point,
    so one builder can be reused across documents.
    """

    def __init__(
        self,
        body_size: float = 8.0,
        header_size: float = 12.0,
        header_minor_size: float = 10.0,
        alignment: Alignment = Alignment.LEFT,
    ) -> None:
        self.body_size = body_size
        self.header_size = header_size
        self.header_minor_size = header_minor_size
        self.alignment = alignment

    def build(self, markup: str) -> StyledDocument:
        """Parse markup and return the pruned element sequence.

        Args:
            markup: Markup text in the supported tag subset

        Returns:
            StyledDocument with top-level blocks in document order
        """
        state = _Build(StyleStack(default_size=self.body_size, alignment=self.alignment))
        point = InsertionPoint()

        for token in Tokenizer(markup):
            if isinstance(token, TextSpan):
                state.add_text(token.text)
            elif isinstance(token, TagOpen):
                point = self._flush(state, point)
                point = self._open(state, point, token)
            elif isinstance(token, TagClose):
                point = self._flush(state, point)
                point = self._close(state, point, token)

        self._flush(state, point)

        document = state.document
        document.residual_depth = state.stack.depth
        if document.residual_depth:
            logger.debug(
                "Markup left %d unclosed style tags", document.residual_depth
            )

        self._prune(document)
        return document

    def _block_size(self, kind: ParagraphKind) -> float:
        if kind is ParagraphKind.HEADER:
            return self.header_size
        if kind is ParagraphKind.HEADER_MINOR:
            return self.header_minor_size
        return self.body_size

    def _new_paragraph(self, state: _Build, kind: ParagraphKind) -> Paragraph:
        paragraph = Paragraph(kind=kind, alignment=self.alignment)
        state.document.add_element(paragraph)
        return paragraph

    def _flush(self, state: _Build, point: InsertionPoint) -> InsertionPoint:
        """Move pending free text into the insertion point as a run."""
        if not state.has_text():
            # Breaks carry over to the next visible text.
            state.keep_breaks()
            return point

        text = state.take_text()
        run = TextRun(text=text, style=state.stack.snapshot())

        if point.anchor is not None:
            point.anchor.append(run)
        elif point.item is not None:
            point.item.append(run)
        elif point.paragraph is not None:
            point.paragraph.append(run)
        else:
            paragraph = self._new_paragraph(state, ParagraphKind.BODY)
            paragraph.append(run)
            point = replace(point, paragraph=paragraph)

        return point

    def _open(
        self, state: _Build, point: InsertionPoint, tag: TagOpen
    ) -> InsertionPoint:
        rule = TAG_RULES.get(tag.name, IGNORED)
        action = rule.action

        if action is TagAction.PUSH_EMPHASIS:
            state.stack.push_emphasis(rule.emphasis)

        elif action is TagAction.OPEN_ANCHOR:
            match = HREF_PATTERN.search(tag.attributes)
            if match is None:
                # Inner text still flows as plain text.
                return point
            anchor = Anchor(href=match.group(1), size=state.stack.current_size)
            if point.item is not None:
                point.item.append(anchor)
            else:
                if point.paragraph is None:
                    point = replace(
                        point,
                        paragraph=self._new_paragraph(state, ParagraphKind.BODY),
                    )
                point.paragraph.append(anchor)
            return replace(point, anchor=anchor)

        elif action is TagAction.OPEN_LIST:
            state.drop_breaks()
            block = ListBlock(ordered=rule.ordered)
            state.document.add_element(block)
            return replace(point, paragraph=None, list_block=block, item=None)

        elif action is TagAction.OPEN_LIST_ITEM:
            state.drop_breaks()
            block = point.list_block
            if block is None:
                logger.debug("List item outside a list; opening an unordered list")
                block = ListBlock(ordered=False)
                state.document.add_element(block)
            item = ListItem()
            block.add_item(item)
            return replace(point, paragraph=None, list_block=block, item=item)

        elif action is TagAction.OPEN_BLOCK:
            state.drop_breaks()
            paragraph = self._new_paragraph(state, rule.kind)
            state.stack.push_size(self._block_size(rule.kind))
            return replace(point, paragraph=paragraph)

        elif action is TagAction.LINE_BREAK:
            state.add_break()

        elif tag.name not in TAG_RULES:
            logger.debug("Ignoring unsupported tag <%s>", tag.name)

        return point

    def _close(
        self, state: _Build, point: InsertionPoint, tag: TagClose
    ) -> InsertionPoint:
        rule = TAG_RULES.get(tag.name, IGNORED)
        action = rule.action

        if action is TagAction.PUSH_EMPHASIS:
            state.stack.pop_emphasis()
        elif action is TagAction.OPEN_BLOCK:
            # The paragraph stays open for text that follows.
            state.stack.pop_size()
        elif action is TagAction.OPEN_LIST_ITEM:
            return replace(point, item=None)
        elif action is TagAction.OPEN_LIST:
            return replace(point, list_block=None, item=None)
        elif action is TagAction.OPEN_ANCHOR:
            return replace(point, anchor=None)

        return point

    def _prune(self, document: StyledDocument) -> None:
        """Drop blocks with no visible text."""
        kept = []
        for element in document.elements:
            if isinstance(element, ListBlock):
                element.items = [
                    item for item in element.items if item.plain_text.strip()
                ]
                if not element.items:
                    continue
            elif not element.plain_text.strip():
                continue
            kept.append(element)
        document.elements = kept


def build_document(markup: str, **kwargs) -> StyledDocument:
    """Build a StyledDocument with a one-off DocumentBuilder."""
    return DocumentBuilder(**kwargs).build(markup)
