import argparse
import logging
import sys

from hahen.errors import ParseError
from hahen.node import dumps_tree, print_tree
from hahen.parser import parse

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="hahen",
        description="Parse a markup fragment and print its node tree."
    )
    argparser.add_argument("file", nargs="?", help="file to parse (defaults to stdin)")
    argparser.add_argument("--json", action="store_true")
    argparser.add_argument("--indent", type=int, default=2)
    argparser.add_argument("-v", "--verbose", action="store_true")
    return argparser


def read_body(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    name = args.file or "<stdin>"

    try:
        body = read_body(args.file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s: %s", name, e)
        return 1

    try:
        nodes = parse(body)
    except ParseError as e:
        logger.error("%s: %s", name, e)
        return 1

    if args.json:
        print(dumps_tree(nodes, indent=args.indent))
    else:
        for node in nodes:
            print_tree(node)
    return 0
