import json
from dataclasses import dataclass, field
from typing import Any, TypeAlias, Union


@dataclass
class Element:
    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list['Node'] = field(default_factory=list)

    def __repr__(self) -> str:
        if not self.attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self.attribute_str}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            attrs.append(f'{key}="{value}"')
        return " ".join(attrs)


@dataclass
class Text:
    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)


@dataclass
class Comment:
    text: str = ""

    def __repr__(self) -> str:
        return f"<!--{self.text}-->"


Node: TypeAlias = Union[Element, Text, Comment]


def print_tree(node: Node, indent: int = 0) -> None:
    stack: list[tuple[Node, int]] = [(node, indent)]
    while stack:
        node, indent = stack.pop()
        print(" " * indent, node)
        if isinstance(node, Element):
            stack.extend((child, indent + 2) for child in reversed(node.children))


def _shallow_dict(node: Node) -> dict[str, Any]:
    match node:
        case Element(tag=tag, attributes=attributes):
            return {"tag": tag, "attributes": dict(attributes), "children": []}
        case Text(text=text):
            return {"text": text}
        case Comment(text=text):
            return {"comment": text}
    raise TypeError(f"not a node: {node!r}")


def to_dict(node: Node) -> dict[str, Any]:
    """
    Convert a node into plain dicts and lists.

    Elements become ``{"tag", "attributes", "children"}``, text runs
    ``{"text"}`` and comments ``{"comment"}``.
    """
    result = _shallow_dict(node)
    stack = [(node, result)]
    while stack:
        node, out = stack.pop()
        if isinstance(node, Element):
            for child in node.children:
                child_dict = _shallow_dict(child)
                out["children"].append(child_dict)
                stack.append((child, child_dict))
    return result


def dumps_tree(nodes: list[Node], indent: int = 2) -> str:
    """
    Serialize nodes as a JSON array of `to_dict` objects.

    Unlike ``json.dumps`` this walks the tree with an explicit stack, so any
    tree the parser accepts can be written out.
    """
    def pad(level: int) -> str:
        return "\n" + " " * (indent * level)

    out: list[str] = []
    # strings are emitted as is, (node, level) pairs are expanded
    stack: list[str | tuple[Node, int]] = []

    def push_array(items: list[Node], level: int) -> None:
        if not items:
            stack.append("[]")
            return
        stack.append(pad(level) + "]")
        for i, item in enumerate(reversed(items)):
            stack.append((item, level + 1))
            stack.append(pad(level + 1) if i == len(items) - 1 else "," + pad(level + 1))
        stack.append("[")

    push_array(nodes, 0)
    while stack:
        top = stack.pop()
        if isinstance(top, str):
            out.append(top)
            continue

        node, level = top
        if not isinstance(node, Element):
            out.append(json.dumps(_shallow_dict(node)))
            continue
        out.append(
            "{" + pad(level + 1) + '"tag": ' + json.dumps(node.tag) + ","
            + pad(level + 1) + '"attributes": ' + json.dumps(node.attributes) + ","
            + pad(level + 1) + '"children": '
        )
        stack.append(pad(level) + "}")
        push_array(node.children, level + 1)
    return "".join(out)
