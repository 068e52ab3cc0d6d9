from hahen.errors import (
    MalformedOpenTag, MismatchedCloseTag, NoProductionMatched, ParseError
)
from hahen.node import Comment, Element, Node, Text
from hahen.parser import ParseResult, parse, try_parse

__all__ = [
    "Comment", "Element", "Node", "Text",
    "ParseError", "MalformedOpenTag", "MismatchedCloseTag",
    "NoProductionMatched",
    "ParseResult", "parse", "try_parse",
]
