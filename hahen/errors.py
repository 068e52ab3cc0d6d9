from hahen.cursor import line_col


class ParseError(Exception):
    """
    Fatal parse failure at a given offset of the source.

    The message reads ``"<line>:<col> parse error: <reason>"``.
    """

    def __init__(self, source: str, offset: int, reason: str):
        self.offset = offset
        self.line, self.col = line_col(source, offset)
        self.reason = reason
        self.msg = f"{self.line}:{self.col} parse error: {reason}"
        super().__init__(self.msg)


class MismatchedCloseTag(ParseError):
    def __init__(self, source: str, offset: int, expected: str | None, found: str):
        self.expected = expected
        self.found = found
        if expected is None:
            reason = f"closing tag </{found}> doesn't match any open tag"
        else:
            reason = f"closing tag </{found}> doesn't match <{expected}>"
        super().__init__(source, offset, reason)


class MalformedOpenTag(ParseError):
    def __init__(self, source: str, offset: int, tag: str):
        self.tag = tag
        super().__init__(source, offset, f"malformed open tag <{tag}>")


class NoProductionMatched(ParseError):
    def __init__(self, source: str, offset: int):
        snippet = source[offset:offset + 10]
        super().__init__(source, offset, f"no rules matched at {snippet!r}")
