"""Tokenizer for the supported markup subset."""

import re
from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class TextSpan:
    """Literal text found between tags."""

    text: str


@dataclass(frozen=True)
class TagOpen:
    """An opening (or void) tag.

    Attributes:
        name: Lower-cased tag name
        attributes: Raw text after the tag name, up to the closing ">"
        void: True for tags that never get a matching close (br, img)
    """

    name: str
    attributes: str = ""
    void: bool = False


@dataclass(frozen=True)
class TagClose:
    """A closing tag."""

    name: str


Token = Union[TextSpan, TagOpen, TagClose]


class Tokenizer:
    """Split markup into text spans and tag events.

    Iterating a Tokenizer always starts from the beginning of the
    markup, so the same instance can be walked more than once.
    """

    TAG_PATTERN = re.compile(r"(</|<)\s*(\w+)([^>]*)>", re.IGNORECASE)

    VOID_TAGS = frozenset({"br", "img"})

    def __init__(self, markup: str) -> None:
        self.markup = markup or ""

    def __iter__(self) -> Iterator[Token]:
        last_index = 0

        for match in self.TAG_PATTERN.finditer(self.markup):
            if match.start() > last_index:
                yield TextSpan(self.markup[last_index : match.start()])

            name = match.group(2).lower()
            if match.group(1) == "</":
                yield TagClose(name)
            else:
                yield TagOpen(
                    name=name,
                    attributes=match.group(3),
                    void=name in self.VOID_TAGS,
                )

            last_index = match.end()

        if last_index < len(self.markup):
            yield TextSpan(self.markup[last_index:])


def tokenize(markup: str) -> list[Token]:
    """Tokenize markup eagerly."""
    return list(Tokenizer(markup))
