import re


# List from: https://riptutorial.com/html/example/4736/void-elements
VOID_TAGS = frozenset([
    'area', 'base', 'br', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'command', 'keygen', 'source',
])

TAG_NAME = r'[a-zA-Z][a-zA-Z0-9\-]*'

# ECMAScript WhiteSpace and LineTerminator; Python's \s also matches
# \x1c-\x1f and \x85 and misses \ufeff
WHITESPACE = (
    r'[\t\n\v\f\r \u00a0\u1680\u2000-\u200a'
    r'\u2028\u2029\u202f\u205f\u3000\ufeff]'
)

OPEN_TAG = re.compile(rf'<({TAG_NAME})')
# "-->" ends the comment; a lone "-" inside is fine
COMMENT = re.compile(r'<!--((?:[^-]|-(?!->))*)-->')
CLOSE_TAG = re.compile(rf'</({TAG_NAME})>')
TEXT = re.compile(r'([^<]+)')

# attribute names are at least two characters long
ATTRIBUTE = re.compile(rf'{WHITESPACE}+([a-zA-Z][a-zA-Z0-9\-]+)="([^"]*)"')
OPEN_TAG_END = re.compile(rf'{WHITESPACE}*>')
