import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import NamedTuple

from hahen.constants import (
    ATTRIBUTE, CLOSE_TAG, COMMENT, OPEN_TAG, OPEN_TAG_END, TEXT, VOID_TAGS
)
from hahen.cursor import Cursor
from hahen.errors import (
    MalformedOpenTag, MismatchedCloseTag, NoProductionMatched, ParseError
)
from hahen.node import Comment, Element, Node, Text

logger = logging.getLogger(__name__)


def is_void_tag(tag: str) -> bool:
    return tag.casefold() in VOID_TAGS


@dataclass
class HTMLParser:
    """
    Strict parser for markup fragments.

    Each step tries the productions in a fixed order (open tag, comment,
    close tag, text) against the unconsumed input; the first one that
    matches wins. Open elements are kept on `unfinished` instead of the
    call stack, so nesting depth is not limited by the recursion limit.
    """

    body: str = ""
    root: Element = field(default_factory=Element)
    unfinished: list[Element] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cursor = Cursor(self.body)

    @property
    def current(self) -> Element:
        return self.unfinished[-1] if self.unfinished else self.root

    def parse(self) -> list[Node]:
        productions: list[Callable[[], bool]] = [
            self.open_tag,
            self.comment,
            self.close_tag,
            self.text,
        ]
        while not self.cursor.at_end:
            if not any(production() for production in productions):
                raise NoProductionMatched(self.body, self.cursor.pos)

        if self.unfinished:
            logger.debug(
                "input ended with unclosed tags: %s",
                ", ".join(node.tag for node in self.unfinished),
            )
        return self.root.children

    def open_tag(self) -> bool:
        captures = self.cursor.try_consume(OPEN_TAG)
        if captures is None:
            return False
        tag, = captures
        node = Element(tag=tag)
        self.current.children.append(node)
        self.parse_attributes(node)
        if not is_void_tag(tag):
            self.unfinished.append(node)
        return True

    def comment(self) -> bool:
        captures = self.cursor.try_consume(COMMENT)
        if captures is None:
            return False
        text, = captures
        self.current.children.append(Comment(text=text))
        return True

    def close_tag(self) -> bool:
        start = self.cursor.pos
        captures = self.cursor.try_consume(CLOSE_TAG)
        if captures is None:
            return False
        tag, = captures
        if not self.unfinished:
            raise MismatchedCloseTag(self.body, start, None, tag)
        node = self.unfinished[-1]
        if node.tag.casefold() != tag.casefold():
            raise MismatchedCloseTag(self.body, start, node.tag, tag)
        self.unfinished.pop()
        return True

    def text(self) -> bool:
        captures = self.cursor.try_consume(TEXT)
        if captures is None:
            return False
        text, = captures
        self.current.children.append(Text(text=text))
        return True

    def parse_attributes(self, node: Element) -> None:
        while (captures := self.cursor.try_consume(ATTRIBUTE)) is not None:
            name, value = captures
            node.attributes[name] = value

        if self.cursor.try_consume(OPEN_TAG_END) is None:
            raise MalformedOpenTag(self.body, self.cursor.pos, node.tag)


class ParseResult(NamedTuple):
    nodes: list[Node]
    error: ParseError | None = None

    @property
    def valid(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Node]:
        if self.error is not None:
            raise self.error
        return self.nodes


def parse(body: str) -> list[Node]:
    """Parse a markup fragment into its top-level nodes."""
    return HTMLParser(body=body).parse()


def try_parse(body: str) -> ParseResult:
    """Like `parse`, but returns the failure instead of raising it."""
    try:
        return ParseResult(nodes=parse(body))
    except ParseError as e:
        return ParseResult(nodes=[], error=e)
