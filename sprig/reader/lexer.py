"""
  Sprig Lexer

- Streaming: tokens are produced lazily from a generator
- Emits (token_type, token_value) tuples:

    - "("              -> ("lparen", "(")
    - ")"              -> ("rparen", ")")
    - "text"           -> ("string", 'text')    extended dialect only
    - anything else    -> ("atom", text)        symbols, numbers, #t / #f
    - 'datum           -> ("lparen", "("), ("atom", "quote"), <datum>, ("rparen", ")")
    - ; comment        -> dropped
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from sprig.config import is_extended_dialect
from sprig.errors import SprigParseError

logger = logging.getLogger(__name__)


Token = tuple[str, str]

OPEN_PAREN = "lparen"
CLOSE_PAREN = "rparen"
STRING = "string"
NON_PAREN = "atom"

_WHITESPACE_RE = re.compile(r"\s*")

EXTENDED_TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # quote shorthand
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # opening quote with no closing quote
    r"|(?P<atom>[^\s()';\"]+)",  # fallback: symbols and numbers
    re.DOTALL,
)

BASIC_TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<atom>[^\s()';]+)",
)

_ESCAPE_RE = re.compile(r'\\(["\\])')


def _unescape(body: str) -> str:
    """Resolve \\" and \\\\ inside a string body; other backslashes are kept."""
    return _ESCAPE_RE.sub(r"\1", body)


def tokenize(source: str, extended: Optional[bool] = None) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples.

    A quote shorthand opens a synthesized (quote ...) list that is closed as
    soon as the next datum is complete. Pending quotes are kept on their own
    stack of paren depths, so nested quoted lists and stacked quotes close
    at the right place independent of the surrounding parens.
    """
    if extended is None:
        extended = is_extended_dialect()
    token_re = EXTENDED_TOKEN_RE if extended else BASIC_TOKEN_RE

    pos = 0
    n = len(source)
    depth = 0
    pending_quotes: list[int] = []

    while True:
        pos = _WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            break
        match = token_re.match(source, pos)
        if not match:
            raise SprigParseError(f"Unexpected char at {pos}: {source[pos]!r}")
        kind = match.lastgroup
        text = match.group(kind)
        pos = match.end()

        if kind == "comment":
            continue
        logger.debug("Token %s %r at %d", kind, text, match.start())
        if kind == "unterminated":
            raise SprigParseError(f"Unterminated string starting at {match.start()}")
        if kind == "quote":
            yield OPEN_PAREN, "("
            yield NON_PAREN, "quote"
            pending_quotes.append(depth)
            continue
        if kind == "lparen":
            depth += 1
            yield OPEN_PAREN, "("
            continue

        if kind == "rparen":
            depth -= 1
            yield CLOSE_PAREN, ")"
        elif kind == "string":
            yield STRING, _unescape(text[1:-1])
        else:
            yield NON_PAREN, text

        # A datum just ended at `depth`: close every quote waiting on it
        while pending_quotes and pending_quotes[-1] == depth:
            pending_quotes.pop()
            yield CLOSE_PAREN, ")"
