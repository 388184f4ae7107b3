"""Markup parsing: tokenizer, style stack and document builder."""

from column_press.markup.ir import (
    Alignment,
    Anchor,
    Element,
    ListBlock,
    ListItem,
    Paragraph,
    ParagraphKind,
    StyledDocument,
    StyleState,
    TextRun,
    TextStyle,
)
from column_press.markup.tokenizer import TagClose, TagOpen, TextSpan, Tokenizer, tokenize
from column_press.markup.styles import StyleStack
from column_press.markup.builder import DocumentBuilder, build_document, cleanup_paragraph

__all__ = [
    "Alignment",
    "Anchor",
    "Element",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "ParagraphKind",
    "StyledDocument",
    "StyleState",
    "TextRun",
    "TextStyle",
    "TagClose",
    "TagOpen",
    "TextSpan",
    "Tokenizer",
    "tokenize",
    "StyleStack",
    "DocumentBuilder",
    "build_document",
    "cleanup_paragraph",
]
