"""
Structural comparison of parsed nodes against expected partial trees.

Expected trees are plain dicts in the shape produced by `to_dict`, where
any key may be left out:

    {"tag": "a", "attributes": {"href": "/"}, "children": [{"text": "home"}]}

`tag`, `text` and `comment` must be equal (a missing key only matches a
node that has no such field). Attributes listed in the expected node must be
present with the same value; extra ones are ignored. Leaving out `children`
means the node must have none.
"""
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from hahen.node import Comment, Element, Node, Text


def _fields(node: Node) -> dict[str, str | None]:
    return {
        "tag": node.tag if isinstance(node, Element) else None,
        "text": node.text if isinstance(node, Text) else None,
        "comment": node.text if isinstance(node, Comment) else None,
    }


def mismatches(
    actual: Sequence[Node],
    expected: Sequence[Mapping[str, Any]],
    path: str = "",
) -> Iterator[tuple[str, str]]:
    """Yield ``(path, reason)`` for every difference between the trees."""
    if len(actual) != len(expected):
        yield path or "/", f"expected {len(expected)} nodes, got {len(actual)}"
        return

    for i, (node, ex) in enumerate(zip(actual, expected)):
        here = f"{path}/{i}"

        fields = _fields(node)
        differing = [
            key for key, value in fields.items() if ex.get(key) != value
        ]
        if differing:
            for key in differing:
                yield here, f"{key}: expected {ex.get(key)!r}, got {fields[key]!r}"
            continue

        attributes = node.attributes if isinstance(node, Element) else {}
        for name, value in (ex.get("attributes") or {}).items():
            if attributes.get(name) != value:
                yield here, (
                    f"attribute {name}: expected {value!r}, "
                    f"got {attributes.get(name)!r}"
                )

        children = node.children if isinstance(node, Element) else []
        if ex.get("children") is not None:
            yield from mismatches(children, ex["children"], here)
        elif children:
            yield here, f"expected no children, got {len(children)}"


def matches(actual: Sequence[Node], expected: Sequence[Mapping[str, Any]]) -> bool:
    return next(mismatches(actual, expected), None) is None
