from dataclasses import dataclass
from re import Pattern


def match_at(
    source: str, pos: int, pattern: Pattern[str]
) -> tuple[tuple[str, ...], int] | None:
    """
    Match `pattern` anchored at `pos` only, never searching ahead.

    Returns the captured groups and the offset just past the match.
    """
    match = pattern.match(source, pos)
    if match is None:
        return None
    return match.groups(), match.end()


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Determines the 1-based line and column of an offset."""
    line = source.count("\n", 0, offset) + 1
    col = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, col


@dataclass
class Cursor:
    source: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> str:
        return self.source[self.pos:]

    def try_consume(self, pattern: Pattern[str]) -> tuple[str, ...] | None:
        result = match_at(self.source, self.pos, pattern)
        if result is None:
            return None
        captures, self.pos = result
        return captures
